# topmark:header:start
#
#   project      : FlowText
#   file         : test_settings.py
#   file_relpath : tests/config/test_settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading ``flowtext.toml`` settings."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from flowtext.config.logging import TRACE_LEVEL
from flowtext.config.settings import Settings, load_settings, settings_from_dict
from flowtext.ipfix.errors import ConfigurationNotFoundError, ConfigurationParseError


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "flowtext.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_settings_reads_known_keys(tmp_path: Path) -> None:
    """Both tables are read; a relative dir resolves against the file."""
    path = write_config(
        tmp_path,
        '[elements]\ndir = "conf"\n\n[logging]\nlevel = "trace"\n',
    )
    settings = load_settings(path)
    assert settings.elements_dir == tmp_path / "conf"
    assert settings.log_level == TRACE_LEVEL
    assert settings.source == path


def test_absolute_dir_is_kept(tmp_path: Path) -> None:
    """Absolute paths are used as given."""
    target = tmp_path / "abs"
    settings = load_settings(write_config(tmp_path, f"[elements]\ndir = '{target}'\n"))
    assert settings.elements_dir == target


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """Nothing configured means nothing overridden."""
    settings = load_settings(write_config(tmp_path, ""))
    assert settings.elements_dir is None
    assert settings.log_level is None


def test_numeric_level(tmp_path: Path) -> None:
    """Levels may be given as numbers."""
    settings = load_settings(write_config(tmp_path, "[logging]\nlevel = 20\n"))
    assert settings.log_level == logging.INFO


def test_unknown_keys_are_warned_about(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Unknown tables and keys are ignored with a warning."""
    caplog.set_level(logging.WARNING)
    path = write_config(tmp_path, "[extra]\nx = 1\n\n[elements]\nfoo = 2\n")
    settings = load_settings(path)
    assert settings.elements_dir is None
    messages = [record.getMessage() for record in caplog.records]
    assert any("[extra]" in m for m in messages)
    assert any("elements.foo" in m for m in messages)


def test_missing_file(tmp_path: Path) -> None:
    """A missing configuration file is a not-found error."""
    with pytest.raises(ConfigurationNotFoundError):
        load_settings(tmp_path / "flowtext.toml")


@pytest.mark.parametrize(
    "text",
    [
        "[elements\n",
        "elements = 5\n",
        "[elements]\ndir = 5\n",
        '[elements]\ndir = ""\n',
        '[logging]\nlevel = "LOUD"\n',
    ],
)
def test_invalid_files(tmp_path: Path, text: str) -> None:
    """Bad TOML and wrongly typed values are parse errors."""
    with pytest.raises(ConfigurationParseError):
        load_settings(write_config(tmp_path, text))


def test_settings_from_dict_without_file() -> None:
    """Documents can be validated without touching the filesystem."""
    settings = settings_from_dict({"logging": {"level": "DEBUG"}}, source=Path("x/flowtext.toml"))
    assert settings.log_level == logging.DEBUG


def test_with_overrides() -> None:
    """Given values win; None keeps what was configured."""
    base = Settings(elements_dir=Path("/a"), log_level=logging.INFO)
    assert base.with_overrides(log_level=logging.DEBUG) == Settings(
        elements_dir=Path("/a"), log_level=logging.DEBUG
    )
    assert base.with_overrides(elements_dir=Path("/b")).elements_dir == Path("/b")
    assert base.with_overrides() == base
