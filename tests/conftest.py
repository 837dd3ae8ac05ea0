"""Shared fixtures for the texttools test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from texttools import config as config_module


@pytest.fixture
def no_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Ensure no configuration file or environment variable leaks into a test."""
    monkeypatch.setattr(
        config_module,
        "DEFAULT_CONFIG_PATHS",
        (tmp_path / "texttools.toml", tmp_path / "user" / "config.toml"),
    )
    for name in ("SHORTEN_MAX_LENGTH", "SHORTEN_SUFFIX", "RANDOM_LENGTH"):
        monkeypatch.delenv(f"TEXTTOOLS_{name}", raising=False)
    return tmp_path
