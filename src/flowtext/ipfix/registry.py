# topmark:header:start
#
#   project      : FlowText
#   file         : registry.py
#   file_relpath : src/flowtext/ipfix/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Information model: names and types of IPFIX information elements.

An [`InformationModel`][flowtext.ipfix.registry.InformationModel] is an
immutable mapping from [`FieldIdentity`][flowtext.ipfix.identity.FieldIdentity]
to [`RegistryEntry`][flowtext.ipfix.registry.RegistryEntry]. Models are plain
values: build one with
[`load_extensions`][flowtext.ipfix.registry.load_extensions] or
[`default_information_model`][flowtext.ipfix.registry.default_information_model]
and hand it to whatever needs it.

For deployments that load definitions once at startup, this module also keeps
a process-wide model:

    ```python
    from flowtext.ipfix.registry import get_information_model, use_extensions

    use_extensions("/etc/flowtext")  # before any worker starts
    entry = get_information_model().lookup(identity)
    ```

Warning:
    ``use_extensions()`` **replaces** the process-wide model, built-in IANA
    elements included; it does not overlay the extension file on the defaults.
    Load once before concurrent decoding begins. Swaps are atomic and readers
    always see a complete model, but a reload while workers run means records of
    one capture may be typed by two different models.

Extension file format (``ipfix.elements``, YAML)::

    9999:
      1: [customField, unsigned32]
      2: [otherField, ipv4OrString]

Entries with fewer than two items are skipped; items after the type name are
ignored; unrecognized type names map to ``ScalarType.UNKNOWN``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from threading import RLock
from types import MappingProxyType
from typing import Any

import yaml

from flowtext.config.logging import FlowtextLogger, get_logger
from flowtext.constants import EXTENSION_ELEMENTS_FILENAME
from flowtext.ipfix.builtins import IANA_ELEMENTS
from flowtext.ipfix.errors import ConfigurationNotFoundError, ConfigurationParseError
from flowtext.ipfix.identity import (
    MAX_ELEMENT_ID,
    MAX_ENTERPRISE_NUMBER,
    FieldIdentity,
    ScalarType,
)

logger: FlowtextLogger = get_logger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
    """Declared name and type of one information element."""

    field_id: int
    name: str
    type: ScalarType


class InformationModel(Mapping[FieldIdentity, RegistryEntry]):
    """Immutable mapping of field identities to registry entries."""

    __slots__ = ("_entries",)

    def __init__(
        self,
        entries: Mapping[FieldIdentity, RegistryEntry]
        | Iterable[tuple[FieldIdentity, RegistryEntry]] = (),
    ) -> None:
        self._entries: Mapping[FieldIdentity, RegistryEntry] = MappingProxyType(dict(entries))

    def __getitem__(self, identity: FieldIdentity) -> RegistryEntry:
        return self._entries[identity]

    def __iter__(self) -> Iterator[FieldIdentity]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} entries)"

    def lookup(self, identity: FieldIdentity) -> RegistryEntry | None:
        """Return the entry for ``identity``.

        A multi-type variant without an entry of its own resolves to the entry of
        its primary occurrence.

        Args:
            identity (FieldIdentity): The field to resolve.

        Returns:
            RegistryEntry | None: The entry, or ``None`` if the field is unknown.
        """
        entry = self._entries.get(identity)
        if entry is None and identity.multi_type != 0:
            entry = self._entries.get(identity.base)
        return entry

    def enterprise_numbers(self) -> tuple[int, ...]:
        """Return the distinct enterprise numbers present in the model (sorted)."""
        return tuple(sorted({identity.enterprise_number for identity in self._entries}))


@lru_cache(maxsize=1)
def default_information_model() -> InformationModel:
    """Return the built-in model of IANA information elements.

    Returns:
        InformationModel: The defaults; the same instance on every call.
    """
    return InformationModel(
        (
            FieldIdentity(0, element_id),
            RegistryEntry(field_id=element_id, name=name, type=ScalarType.from_name(type_name)),
        )
        for element_id, name, type_name in IANA_ELEMENTS
    )


# --- Extension file parsing ---


def _coerce_key(raw: object, upper: int, what: str, source: str) -> int:
    """Turn a YAML mapping key into a bounded unsigned integer."""
    if isinstance(raw, bool):
        raise ConfigurationParseError(f"{source}: {what} must be an integer, got {raw!r}")
    # Decimal digits only; int() rejects superscripts
    if isinstance(raw, str) and raw.strip().isdecimal():
        raw = int(raw.strip())
    if not isinstance(raw, int):
        raise ConfigurationParseError(f"{source}: {what} must be an integer, got {raw!r}")
    if not 0 <= raw <= upper:
        raise ConfigurationParseError(f"{source}: {what} out of range [0, {upper}]: {raw}")
    return raw


def parse_extension_elements(text: str, *, source: str = "<string>") -> InformationModel:
    """Parse the text of an ``ipfix.elements`` file into a model.

    Args:
        text (str): YAML text: enterprise number -> element ID -> ``[name, typeName, ...]``.
        source (str): Name used in error and log messages.

    Returns:
        InformationModel: One entry per element declaring at least a name and a type.

    Raises:
        ConfigurationParseError: If the text is not YAML or does not have the
            expected nested-mapping shape.
    """
    try:
        document: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationParseError(f"{source}: invalid YAML: {exc}") from exc

    if document is None:
        logger.warning("Extension file %s is empty", source)
        return InformationModel()
    if not isinstance(document, dict):
        raise ConfigurationParseError(
            f"{source}: expected a mapping of enterprise numbers, got {type(document).__name__}"
        )

    entries: dict[FieldIdentity, RegistryEntry] = {}
    for raw_pen, elements in document.items():
        pen = _coerce_key(raw_pen, MAX_ENTERPRISE_NUMBER, "enterprise number", source)
        if elements is None:
            continue
        if not isinstance(elements, dict):
            raise ConfigurationParseError(
                f"{source}: enterprise {pen}: expected a mapping of element IDs, "
                f"got {type(elements).__name__}"
            )
        for raw_id, props in elements.items():
            element_id = _coerce_key(raw_id, MAX_ELEMENT_ID, "element ID", source)
            if not isinstance(props, list):
                raise ConfigurationParseError(
                    f"{source}: element {pen}/{element_id}: expected a list, "
                    f"got {type(props).__name__}"
                )
            if len(props) < 2:
                logger.debug(
                    "Skipping element %d/%d in %s: needs a name and a type", pen, element_id, source
                )
                continue
            # Items after the type name are never inspected
            name, type_name = props[0], props[1]
            if not isinstance(name, str) or not isinstance(type_name, str):
                raise ConfigurationParseError(
                    f"{source}: element {pen}/{element_id}: name and type must be strings"
                )
            field_type = ScalarType.from_name(type_name)
            if field_type is ScalarType.UNKNOWN:
                logger.warning(
                    "Unknown type %r for element %d/%d (%s) in %s",
                    type_name,
                    pen,
                    element_id,
                    name,
                    source,
                )
            entries[FieldIdentity(pen, element_id)] = RegistryEntry(
                field_id=element_id, name=name, type=field_type
            )
    return InformationModel(entries)


def load_extensions(directory: str | Path) -> InformationModel:
    """Load the ``ipfix.elements`` file of ``directory``.

    This does not touch the process-wide model; see
    [`use_extensions`][flowtext.ipfix.registry.use_extensions].

    Args:
        directory (str | Path): Directory expected to contain ``ipfix.elements``.

    Returns:
        InformationModel: A fresh model holding only the file's elements.

    Raises:
        ConfigurationNotFoundError: If the file does not exist.
        ConfigurationParseError: If the file cannot be read or parsed.
    """
    path: Path = Path(directory) / EXTENSION_ELEMENTS_FILENAME
    if not path.is_file():
        raise ConfigurationNotFoundError(f"Extension elements file not found: {path}")
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationParseError(f"Cannot read {path}: {exc}") from exc

    model = parse_extension_elements(text, source=str(path))
    logger.info("Loaded %d information elements from %s", len(model), path)
    return model


# --- Process-wide model ---

_lock = RLock()
_current: InformationModel | None = None


def get_information_model() -> InformationModel:
    """Return the process-wide model (the built-in defaults until replaced)."""
    with _lock:
        return _current if _current is not None else default_information_model()


def set_information_model(model: InformationModel) -> None:
    """Install ``model`` as the process-wide model.

    Notes:
        Mutates process-global state. Call before decoding starts.
    """
    global _current
    with _lock:
        _current = model


def use_extensions(directory: str | Path) -> InformationModel:
    """Load ``ipfix.elements`` from ``directory`` and install it process-wide.

    The loaded model replaces the current one wholesale; built-in elements are
    not kept.

    Args:
        directory (str | Path): Directory expected to contain ``ipfix.elements``.

    Returns:
        InformationModel: The newly installed model.

    Raises:
        ConfigurationNotFoundError: If the file does not exist.
        ConfigurationParseError: If the file cannot be parsed. The current model
            is left untouched.
    """
    model = load_extensions(directory)
    set_information_model(model)
    return model


def reset_information_model() -> None:
    """Restore the built-in defaults as the process-wide model."""
    global _current
    with _lock:
        _current = None
