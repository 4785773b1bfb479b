# topmark:header:start
#
#   project      : FlowText
#   file         : settings.py
#   file_relpath : src/flowtext/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load FlowText settings from ``flowtext.toml``.

Recognized keys:

    ```toml
    [elements]
    dir = "/etc/flowtext"   # directory holding ipfix.elements

    [logging]
    level = "INFO"          # TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL or a number
    ```

Relative ``elements.dir`` paths are resolved against the directory of the
configuration file. Unknown tables and keys are ignored with a warning.

Parsing is done with `tomlkit` and returned as a frozen
[`Settings`][flowtext.config.settings.Settings] value.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Final

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from flowtext.config.logging import FlowtextLogger, get_logger, parse_log_level
from flowtext.ipfix.errors import ConfigurationNotFoundError, ConfigurationParseError

logger: FlowtextLogger = get_logger(__name__)

SECTION_ELEMENTS: Final[str] = "elements"
SECTION_LOGGING: Final[str] = "logging"
KEY_DIR: Final[str] = "dir"
KEY_LEVEL: Final[str] = "level"

_KNOWN_KEYS: Final[dict[str, frozenset[str]]] = {
    SECTION_ELEMENTS: frozenset({KEY_DIR}),
    SECTION_LOGGING: frozenset({KEY_LEVEL}),
}


@dataclass(frozen=True)
class Settings:
    """Resolved FlowText settings.

    Attributes:
        elements_dir: Directory holding ``ipfix.elements``; ``None`` keeps the
            built-in information model.
        log_level: Numeric logging level, or ``None`` when not configured.
        source: The file the settings were read from, if any.
    """

    elements_dir: Path | None = None
    log_level: int | None = None
    source: Path | None = None

    def with_overrides(
        self,
        *,
        elements_dir: Path | None = None,
        log_level: int | None = None,
    ) -> Settings:
        """Return a copy where the given non-``None`` values win."""
        return replace(
            self,
            elements_dir=elements_dir if elements_dir is not None else self.elements_dir,
            log_level=log_level if log_level is not None else self.log_level,
        )


def _table(doc: dict[str, Any], name: str, source: Path) -> dict[str, Any]:
    value = doc.get(name, {})
    if not isinstance(value, dict):
        raise ConfigurationParseError(f"{source}: [{name}] must be a table")
    for key in value:
        if key not in _KNOWN_KEYS[name]:
            logger.warning("Ignoring unknown key '%s.%s' in %s", name, key, source)
    return value


def settings_from_dict(doc: dict[str, Any], *, source: Path) -> Settings:
    """Validate a parsed TOML document and build settings from it.

    Args:
        doc (dict[str, Any]): The parsed document.
        source (Path): The file the document was read from.

    Returns:
        Settings: The resolved settings.

    Raises:
        ConfigurationParseError: If a known key has a value of the wrong type.
    """
    for name in doc:
        if name not in _KNOWN_KEYS:
            logger.warning("Ignoring unknown table [%s] in %s", name, source)

    elements = _table(doc, SECTION_ELEMENTS, source)
    elements_dir: Path | None = None
    raw_dir = elements.get(KEY_DIR)
    if raw_dir is not None:
        if not isinstance(raw_dir, str) or not raw_dir:
            raise ConfigurationParseError(f"{source}: elements.dir must be a non-empty string")
        elements_dir = Path(raw_dir)
        if not elements_dir.is_absolute():
            elements_dir = source.parent / elements_dir

    log_cfg = _table(doc, SECTION_LOGGING, source)
    log_level: int | None = None
    raw_level = log_cfg.get(KEY_LEVEL)
    if raw_level is not None:
        log_level = parse_log_level(raw_level)
        if log_level is None:
            raise ConfigurationParseError(f"{source}: invalid logging.level {raw_level!r}")

    return Settings(elements_dir=elements_dir, log_level=log_level, source=source)


def load_settings(path: Path) -> Settings:
    """Load and validate a ``flowtext.toml`` file.

    Args:
        path (Path): Path to the TOML document.

    Returns:
        Settings: The resolved settings.

    Raises:
        ConfigurationNotFoundError: If ``path`` does not exist.
        ConfigurationParseError: If the file is not valid TOML or has invalid values.
    """
    if not path.is_file():
        raise ConfigurationNotFoundError(f"Configuration file not found: {path}")
    try:
        text: str = path.read_text(encoding="utf-8")
        data_any: Any = tomlkit.parse(text).unwrap()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationParseError(f"Cannot read {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise ConfigurationParseError(f"Error decoding TOML from {path}: {exc}") from exc

    settings = settings_from_dict(data_any, source=path)
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings
