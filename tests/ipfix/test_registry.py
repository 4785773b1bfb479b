# topmark:header:start
#
#   project      : FlowText
#   file         : test_registry.py
#   file_relpath : tests/ipfix/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the information model: defaults, extension loading, process-wide state."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from flowtext.ipfix.errors import ConfigurationNotFoundError, ConfigurationParseError
from flowtext.ipfix.identity import FieldIdentity, ScalarType
from flowtext.ipfix.registry import (
    InformationModel,
    RegistryEntry,
    default_information_model,
    get_information_model,
    load_extensions,
    parse_extension_elements,
    reset_information_model,
    use_extensions,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_cover_common_iana_elements() -> None:
    """The built-in model knows the IANA elements the encoder cares about."""
    model = default_information_model()
    assert model[FieldIdentity(0, 4)] == RegistryEntry(4, "protocolIdentifier", ScalarType.UNSIGNED8)
    assert model[FieldIdentity(0, 8)].type is ScalarType.IPV4_ADDRESS
    assert model[FieldIdentity(0, 176)].name == "icmpTypeIPv4"
    assert model[FieldIdentity(0, 177)].name == "icmpCodeIPv4"
    assert model.enterprise_numbers() == (0,)
    assert all(entry.type is not ScalarType.UNKNOWN for entry in model.values())


def test_defaults_are_the_initial_process_wide_model() -> None:
    """Until extensions are loaded, the process-wide model is the defaults."""
    assert get_information_model() is default_information_model()


def test_load_extensions_builds_entries(elements_dir: Path) -> None:
    """A two-item entry becomes a registry entry keyed with discriminant 0."""
    model = load_extensions(elements_dir)
    assert model[FieldIdentity(9999, 1, 0)] == RegistryEntry(1, "customField", ScalarType.UNSIGNED32)
    assert model[FieldIdentity(9999, 2)].type is ScalarType.IPV4_OR_STRING


def test_load_extensions_skips_single_item_entries(elements_dir: Path) -> None:
    """An entry with only a name is skipped silently."""
    model = load_extensions(elements_dir)
    assert FieldIdentity(9999, 3) not in model
    assert len(model) == 4


def test_load_extensions_maps_unknown_types(
    elements_dir: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """An unrecognized type name resolves to UNKNOWN and is logged."""
    caplog.set_level("WARNING")
    model = load_extensions(elements_dir)
    assert model[FieldIdentity(9999, 4)].type is ScalarType.UNKNOWN
    assert any("bogusType" in record.getMessage() for record in caplog.records)


def test_load_extensions_ignores_extra_items(elements_dir: Path) -> None:
    """Items after the type name do not matter, whatever their YAML type."""
    model = load_extensions(elements_dir)
    assert model[FieldIdentity(9999, 5)] == RegistryEntry(5, "withExtras", ScalarType.STRING)


def test_load_extensions_missing_file(tmp_path: Path) -> None:
    """A directory without ipfix.elements is a not-found error."""
    with pytest.raises(ConfigurationNotFoundError):
        load_extensions(tmp_path)
    # Also catchable as the builtin
    with pytest.raises(FileNotFoundError):
        load_extensions(tmp_path / "nope")


@pytest.mark.parametrize(
    "text",
    [
        "9999: [\n",  # YAML syntax error
        "- a\n- b\n",  # top level is a list
        "9999: [customField, unsigned32]\n",  # element level is a list
        "9999:\n  1: customField\n",  # properties are not a list
        "9999:\n  1: [customField, 32]\n",  # non-string type name
        "9999:\n  1: [~, unsigned32]\n",  # non-string name
        "\"\u00b2\":\n  1: [customField, unsigned32]\n",  # superscript enterprise
        "9999:\n  \"\u00b2\": [customField, unsigned32]\n",  # superscript element ID
        "abc:\n  1: [customField, unsigned32]\n",  # non-integer enterprise
        "9999:\n  70000: [customField, unsigned32]\n",  # element ID beyond 16 bits
        "4294967296:\n  1: [customField, unsigned32]\n",  # enterprise beyond 32 bits
    ],
)
def test_parse_rejects_malformed_sources(text: str) -> None:
    """Anything not shaped enterprise -> element -> [name, type, ...] is a parse error."""
    with pytest.raises(ConfigurationParseError):
        parse_extension_elements(text)


def test_parse_accepts_string_keys_and_empty_documents() -> None:
    """Quoted numeric keys are accepted; an empty document is an empty model."""
    model = parse_extension_elements('"9999":\n  "7": [quoted, string]\n')
    assert model[FieldIdentity(9999, 7)].name == "quoted"
    assert len(parse_extension_elements("")) == 0


def test_use_extensions_replaces_defaults(elements_dir: Path) -> None:
    """Loading extensions discards the built-in IANA elements."""
    installed = use_extensions(elements_dir)
    current = get_information_model()
    assert current is installed
    assert FieldIdentity(9999, 1) in current
    assert FieldIdentity(0, 4) not in current

    reset_information_model()
    assert FieldIdentity(0, 4) in get_information_model()


def test_failed_load_keeps_current_model(tmp_path: Path) -> None:
    """A parse error leaves the process-wide model untouched."""
    (tmp_path / "ipfix.elements").write_text("9999: [\n", encoding="utf-8")
    before = get_information_model()
    with pytest.raises(ConfigurationParseError):
        use_extensions(tmp_path)
    assert get_information_model() is before


def test_lookup_falls_back_to_primary_occurrence() -> None:
    """A multi-type variant shares the entry of its primary occurrence."""
    entry = RegistryEntry(2, "hostOrAddress", ScalarType.IPV4_OR_STRING)
    model = InformationModel({FieldIdentity(9999, 2): entry})
    assert model.lookup(FieldIdentity(9999, 2, 1)) is entry
    assert model.lookup(FieldIdentity(9999, 3)) is None
    with pytest.raises(KeyError):
        model[FieldIdentity(9999, 2, 1)]


def test_model_is_read_only() -> None:
    """Models expose no mutation."""
    model = default_information_model()
    with pytest.raises(TypeError):
        model[FieldIdentity(0, 4)] = RegistryEntry(4, "x", ScalarType.STRING)  # type: ignore[index]


@pytest.mark.parametrize("extra", ["42", "~", "{note: x}", "[a, b]", "true"])
def test_parse_never_inspects_items_after_the_type(extra: str) -> None:
    """Trailing items of any YAML type are ignored."""
    model = parse_extension_elements(f"9999:\n  1: [customField, unsigned32, {extra}]\n")
    assert model[FieldIdentity(9999, 1)] == RegistryEntry(1, "customField", ScalarType.UNSIGNED32)
