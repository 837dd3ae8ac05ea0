"""CLI tests: every command invoked through typer's test runner."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from texttools.cli import app
from texttools.secure import ALPHABET

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(no_config: Path) -> None:
    return None


class TestCaseCommands:
    def test_slug(self) -> None:
        result = runner.invoke(app, ["slug", "inviteYourCustomersAddInvites"])

        assert result.exit_code == 0, result.output
        assert result.output == "invite-your-customers-add-invites\n"

    def test_slug_reads_stdin(self) -> None:
        result = runner.invoke(app, ["slug", "-"], input="æøåäò")

        assert result.exit_code == 0, result.output
        assert result.output == "aeoaao\n"

    @pytest.mark.parametrize(
        ("style", "expected"),
        [
            ("snake", "foo_bar_baz"),
            ("kebab", "foo-bar-baz"),
            ("camel", "fooBarBaz"),
            ("pascal", "FooBarBaz"),
            ("human", "Foo bar baz"),
        ],
    )
    def test_case_styles(self, style: str, expected: str) -> None:
        result = runner.invoke(app, ["case", "FOO:BAR$BAZ", "--style", style])

        assert result.exit_code == 0, result.output
        assert result.output == f"{expected}\n"

    def test_unknown_style_is_rejected(self) -> None:
        result = runner.invoke(app, ["case", "foo", "--style", "screaming"])

        assert result.exit_code != 0

    def test_styles_table_lists_every_style(self) -> None:
        result = runner.invoke(app, ["styles", "sample 2 Text"])

        assert result.exit_code == 0, result.output
        for expected in ("sample_2_text", "sample-2-text", "sample2Text", "Sample2Text", "Sample 2 text"):
            assert expected in result.output

    def test_transliterate(self) -> None:
        result = runner.invoke(app, ["transliterate", "Crème [brûlée]"])

        assert result.exit_code == 0, result.output
        assert result.output == "Creme [brulee]\n"


class TestShortenCommand:
    def test_explicit_options(self) -> None:
        result = runner.invoke(
            app,
            ["shorten", "sample text that? I don't know...", "--max-length", "20", "--suffix", "..."],
        )

        assert result.exit_code == 0, result.output
        assert result.output == "sample text that?..\n"

    def test_defaults_come_from_config_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text('[shorten]\nmax_length = 20\nsuffix = "..."\n', encoding="utf-8")

        result = runner.invoke(
            app, ["--config", str(config_file), "shorten", "sampleTextThatIsTooLongWithNoSpaces"]
        )

        assert result.exit_code == 0, result.output
        assert result.output == "sampleTextThatIsT...\n"

    def test_budget_smaller_than_suffix_is_a_usage_error(self) -> None:
        result = runner.invoke(app, ["shorten", "some text", "--max-length", "2"])

        assert result.exit_code == 2


class TestMarkupCommands:
    def test_sanitize(self) -> None:
        result = runner.invoke(app, ["sanitize", "Text <b>with</b> a half char: ½"])

        assert result.exit_code == 0, result.output
        assert result.output == "Text with a half char: 1/2\n"

    def test_html_to_text(self) -> None:
        result = runner.invoke(app, ["html-to-text", '<a href="/shop/cms-9.html">Reparation</a>'])

        assert result.exit_code == 0, result.output
        assert result.output == "Reparation\n"

    def test_markdown_to_text(self) -> None:
        result = runner.invoke(app, ["markdown-to-text", "Some **bold** text"])

        assert result.exit_code == 0, result.output
        assert result.output == "Some bold text\n"


class TestDecodeCommand:
    def test_decodes_file(self, tmp_path: Path) -> None:
        source = tmp_path / "legacy.txt"
        source.write_bytes(bytes([0x80, 0xE9, 0xE6, 0xF8, 0xE5]))

        result = runner.invoke(app, ["decode", str(source)])

        assert result.exit_code == 0, result.output
        assert result.output == "€éæøå"

    def test_missing_file_is_a_usage_error(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["decode", str(tmp_path / "absent.txt")])

        assert result.exit_code == 2


class TestRandomCommand:
    def test_length_and_count(self) -> None:
        result = runner.invoke(app, ["random", "--length", "12", "--count", "3"])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert len(lines) == 3
        for line in lines:
            assert len(line) == 12
            assert set(line) <= set(ALPHABET)

    def test_length_defaults_to_configuration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEXTTOOLS_RANDOM_LENGTH", "7")

        result = runner.invoke(app, ["random"])

        assert result.exit_code == 0, result.output
        assert len(result.output.strip()) == 7


class TestRawOutput:
    """
    REQUIREMENT: Commands print exactly the string the library returns.

    WHO: Shell pipelines feeding texttools output into other tools
    WHAT: Tabs and carriage returns in results reach stdout unchanged
    WHY: Expanding tabs or dropping control characters corrupts the data
    """

    def test_transliterate_keeps_tab_and_carriage_return(self) -> None:
        result = runner.invoke(app, ["transliterate", "Crème\tbrûlée\rdone"])

        assert result.exit_code == 0, result.output
        assert result.output == "Creme\tbrulee\rdone\n", f"got {result.output!r}"

    def test_html_to_text_keeps_lone_carriage_return(self) -> None:
        result = runner.invoke(app, ["html-to-text", "line1\rline2"])

        assert result.exit_code == 0, result.output
        assert result.output == "line1\rline2\n", f"got {result.output!r}"

    def test_markdown_code_block_keeps_tabs(self) -> None:
        result = runner.invoke(app, ["markdown-to-text", "```\nkey\tvalue\n```"])

        assert result.exit_code == 0, result.output
        assert result.output == "key\tvalue\n", f"got {result.output!r}"
