"""Command-line interface for the texttools normalization toolkit."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .casing import CaseStyle, convert
from .casing import slug as make_slug
from .charset import cp1258_to_utf8
from .charset import transliterate as fold_to_ascii
from .config import TextToolsConfig, ensure_config
from .logging import configure_logging
from .markup import html_to_text as strip_html
from .markup import markdown_to_text as render_markdown
from .markup import sanitize_text
from .secure import random_string
from .shorten import shorten as make_preview

app = typer.Typer(help="Normalize text into slugs, case styles, previews and plain text.")
console = Console()

TEXT_HELP = "Input text, or '-' to read standard input"


def _read_text(text: str) -> str:
    if text == "-":
        return sys.stdin.read()
    return text


def _emit(value: str) -> None:
    typer.echo(value)


def _resolve_config(
    ctx: typer.Context,
    *,
    max_length: Optional[int] = None,
    suffix: Optional[str] = None,
    random_length: Optional[int] = None,
) -> TextToolsConfig:
    config_path: Optional[Path] = ctx.obj.get("config_path")
    try:
        return ensure_config(
            max_length=max_length,
            suffix=suffix,
            random_length=random_length,
            config_path=config_path,
        )
    except RuntimeError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a configuration TOML file",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    configure_logging(verbose=verbose)
    ctx.obj = {"config_path": config_path}


@app.command()
def slug(text: str = typer.Argument(..., help=TEXT_HELP)) -> None:
    """Print a URL slug built from TEXT."""

    _emit(make_slug(_read_text(text)))


@app.command()
def case(
    text: str = typer.Argument(..., help=TEXT_HELP),
    style: CaseStyle = typer.Option(CaseStyle.SNAKE, "--style", "-s", help="Target case style"),
) -> None:
    """Convert TEXT to a single case style."""

    _emit(convert(_read_text(text), style))


@app.command()
def styles(text: str = typer.Argument(..., help=TEXT_HELP)) -> None:
    """Show TEXT in every supported case style."""

    value = _read_text(text)
    table = Table(title="Case Styles")
    table.add_column("Style")
    table.add_column("Result")
    for style in CaseStyle:
        table.add_row(style.value, convert(value, style))
    table.add_row("slug", make_slug(value))
    console.print(table)


@app.command()
def transliterate(text: str = typer.Argument(..., help=TEXT_HELP)) -> None:
    """Replace accented Latin letters in TEXT with ASCII."""

    _emit(fold_to_ascii(_read_text(text)))


@app.command()
def shorten(
    ctx: typer.Context,
    text: str = typer.Argument(..., help=TEXT_HELP),
    max_length: Optional[int] = typer.Option(
        None,
        "--max-length",
        "-n",
        help="Maximum preview length in bytes (defaults to configuration)",
    ),
    suffix: Optional[str] = typer.Option(
        None,
        "--suffix",
        help="Marker appended when TEXT is truncated (defaults to configuration)",
    ),
) -> None:
    """Print a word-aware preview of TEXT."""

    config = _resolve_config(ctx, max_length=max_length, suffix=suffix)
    _emit(make_preview(_read_text(text), config.shorten.max_length, config.shorten.suffix))


@app.command("html-to-text")
def html_to_text(text: str = typer.Argument(..., help=TEXT_HELP)) -> None:
    """Strip HTML tags from TEXT."""

    _emit(strip_html(_read_text(text)))


@app.command()
def sanitize(text: str = typer.Argument(..., help=TEXT_HELP)) -> None:
    """Strip HTML tags from TEXT and undo backslash escaping."""

    _emit(sanitize_text(_read_text(text)))


@app.command("markdown-to-text")
def markdown_to_text(text: str = typer.Argument(..., help=TEXT_HELP)) -> None:
    """Render Markdown TEXT and print its plain text."""

    _emit(render_markdown(_read_text(text)))


@app.command()
def decode(
    source: Path = typer.Argument(..., help="CP1258 encoded file, or '-' to read standard input"),
) -> None:
    """Decode a Windows-1258 file and print it as UTF-8."""

    if str(source) == "-":
        data = sys.stdin.buffer.read()
    else:
        if not source.is_file():
            raise typer.BadParameter(f"{source} is not a readable file")
        data = source.read_bytes()
    typer.echo(cp1258_to_utf8(data), nl=False)


@app.command()
def random(
    ctx: typer.Context,
    length: Optional[int] = typer.Option(
        None,
        "--length",
        "-n",
        help="Characters per string (defaults to configuration)",
    ),
    count: int = typer.Option(1, "--count", "-k", min=1, help="Number of strings to generate"),
) -> None:
    """Generate cryptographically secure random strings."""

    config = _resolve_config(ctx, random_length=length)
    for _ in range(count):
        _emit(random_string(config.random.length))


def run() -> None:
    """Entry point for console scripts."""

    app()


if __name__ == "__main__":  # pragma: no cover
    run()
