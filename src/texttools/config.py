"""Configuration helpers for texttools."""

from __future__ import annotations

import dataclasses
import os
import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from texttools.logging import logger


class ShortenDefaults(BaseModel):
    """Default parameters for the ``shorten`` operation."""

    max_length: int = Field(80, description="Maximum preview length in UTF-8 bytes")
    suffix: str = Field("...", description="Marker appended to truncated previews")

    @model_validator(mode="after")
    def _check_room_for_suffix(self) -> "ShortenDefaults":
        if self.max_length <= len(self.suffix.encode("utf-8")):
            raise ValueError("max_length must be larger than the byte length of suffix")
        return self


class RandomDefaults(BaseModel):
    """Default parameters for random string generation."""

    length: int = Field(16, ge=0, description="Number of characters per random string")


class TextToolsConfig(BaseModel):
    """Aggregate configuration for the library's command-line interface."""

    shorten: ShortenDefaults = Field(default_factory=ShortenDefaults)
    random: RandomDefaults = Field(default_factory=RandomDefaults)


ENV_PREFIX = "TEXTTOOLS"
DEFAULT_CONFIG_PATHS = (
    Path.cwd() / "texttools.toml",
    Path.home() / ".config" / "texttools" / "config.toml",
)


@dataclasses.dataclass
class ConfigSource:
    """Result of attempting to resolve configuration data."""

    config: Optional[TextToolsConfig]
    path: Optional[Path]
    error: Optional[Exception]


def _load_from_env() -> dict[str, object]:
    """Return a dictionary with configuration values extracted from environment variables."""

    def _get(name: str) -> Optional[str]:
        return os.getenv(f"{ENV_PREFIX}_{name}")

    env_data: dict[str, object] = {}
    shorten: dict[str, str] = {}
    for key in ("MAX_LENGTH", "SUFFIX"):
        value = _get(f"SHORTEN_{key}")
        if value is not None:
            shorten[key.lower()] = value
    if shorten:
        env_data["shorten"] = shorten

    length = _get("RANDOM_LENGTH")
    if length is not None:
        env_data["random"] = {"length": length}

    return env_data


def _load_toml(path: Path) -> Optional[dict]:
    if not path.exists():
        return None

    with path.open("rb") as handle:
        return tomllib.load(handle)


def resolve_config(explicit_path: Optional[Path] = None) -> ConfigSource:
    """Discover configuration using the first available source.

    The priority order is:
    1. Explicit path provided via CLI argument.
    2. Default configuration files in the working directory or the user's config directory.
    3. Environment variables with the `TEXTTOOLS_` prefix.
    """

    errors: list[Exception] = []
    sources: list[tuple[Optional[Path], dict]] = []

    if explicit_path:
        try:
            data = _load_toml(explicit_path)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            errors.append(exc)
        else:
            if data is None:
                errors.append(FileNotFoundError(f"Configuration file {explicit_path} does not exist"))
            else:
                sources.append((explicit_path, data))

    if not sources and not errors:
        for path in DEFAULT_CONFIG_PATHS:
            try:
                data = _load_toml(path)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                errors.append(exc)
                continue
            if data is not None:
                sources.append((path, data))
                break

    if not sources and not errors:
        env_data = _load_from_env()
        if env_data:
            sources.append((None, env_data))

    for path, data in sources:
        try:
            config = TextToolsConfig.model_validate(data)
        except ValidationError as exc:
            errors.append(exc)
            continue
        logger.debug("Loaded configuration from %s", path or "environment")
        return ConfigSource(config=config, path=path, error=None)

    error = errors[0] if errors else None
    return ConfigSource(config=None, path=None, error=error)


def ensure_config(
    *,
    max_length: Optional[int] = None,
    suffix: Optional[str] = None,
    random_length: Optional[int] = None,
    config_path: Optional[Path] = None,
) -> TextToolsConfig:
    """Resolve configuration from precedence order and apply explicit CLI options on top."""

    source = resolve_config(config_path)

    if source.error is not None:
        where = f" from {config_path}" if config_path else ""
        raise RuntimeError(f"Invalid texttools configuration{where}: {source.error}") from source.error

    if source.config:
        config = source.config.model_copy(deep=True)
    else:
        logger.debug("No configuration found, using built-in defaults")
        config = TextToolsConfig()

    overrides = config.shorten.model_dump()
    if max_length is not None:
        overrides["max_length"] = max_length
    if suffix is not None:
        overrides["suffix"] = suffix
    try:
        config.shorten = ShortenDefaults.model_validate(overrides)
        if random_length is not None:
            config.random = RandomDefaults(length=random_length)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid texttools option: {exc}") from exc

    return config
