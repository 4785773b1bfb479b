# topmark:header:start
#
#   project      : FlowText
#   file         : test_identity.py
#   file_relpath : tests/ipfix/test_identity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for field identities and scalar types."""

from __future__ import annotations

import pytest

from flowtext.ipfix.identity import FIELD_TYPES, FieldIdentity, ScalarType


@pytest.mark.parametrize(
    ("identity", "expected"),
    [
        (FieldIdentity(0, 4), "0_4"),
        (FieldIdentity(9999, 1), "9999_1"),
        (FieldIdentity(9999, 1, 0), "9999_1"),
        (FieldIdentity(9999, 1, 1), "9999_1_1"),
        (FieldIdentity(4294967295, 65535, 255), "4294967295_65535_255"),
    ],
)
def test_key_appends_discriminant_only_when_nonzero(identity: FieldIdentity, expected: str) -> None:
    """The rendered key carries the discriminant suffix only for alternates."""
    assert identity.key == expected
    assert str(identity) == expected


def test_identity_equality_is_structural() -> None:
    """Identities compare and hash by all three components."""
    assert FieldIdentity(0, 4) == FieldIdentity(0, 4, 0)
    assert FieldIdentity(0, 4) != FieldIdentity(0, 4, 1)
    assert FieldIdentity(1, 4) != FieldIdentity(0, 4)
    mapping = {FieldIdentity(0, 4): "a", FieldIdentity(0, 4, 1): "b"}
    assert mapping[FieldIdentity(0, 4)] == "a"
    assert len(mapping) == 2


def test_identity_is_immutable() -> None:
    """Identities are frozen after creation."""
    identity = FieldIdentity(0, 4)
    with pytest.raises(AttributeError):
        identity.element_id = 5  # type: ignore[misc]


@pytest.mark.parametrize(
    "args",
    [(-1, 4), (2**32, 4), (0, 2**16), (0, -1), (0, 4, 256)],
)
def test_identity_rejects_out_of_range_components(args: tuple[int, ...]) -> None:
    """Components outside their unsigned widths are rejected."""
    with pytest.raises(ValueError):
        FieldIdentity(*args)


def test_identity_rejects_non_integers() -> None:
    """Booleans and strings are not identity components."""
    with pytest.raises(TypeError):
        FieldIdentity(True, 4)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        FieldIdentity(0, "4")  # type: ignore[arg-type]


def test_base_drops_the_discriminant() -> None:
    """`base` names the primary occurrence; enterprise flag follows the number."""
    variant = FieldIdentity(9999, 2, 1)
    assert variant.base == FieldIdentity(9999, 2)
    assert FieldIdentity(0, 4).base is not None
    assert variant.is_enterprise
    assert not FieldIdentity(0, 4).is_enterprise


def test_variable_length_types() -> None:
    """Only string, octetArray and ipv4OrString are variable-length."""
    variable = {t for t in ScalarType if t.is_variable_length}
    assert variable == {ScalarType.STRING, ScalarType.OCTET_ARRAY, ScalarType.IPV4_OR_STRING}


def test_type_names_table() -> None:
    """Every recognized type name maps back to its member; others are UNKNOWN."""
    assert len(FIELD_TYPES) == 21
    for name, member in FIELD_TYPES.items():
        assert ScalarType.from_name(name) is member
        assert member.type_name == name
    assert ScalarType.from_name("unsigned128") is ScalarType.UNKNOWN
    assert ScalarType.from_name("unknown") is ScalarType.UNKNOWN


@pytest.mark.parametrize(
    ("length", "expected"),
    [
        (4, (ScalarType.IPV4_ADDRESS, 1)),
        (0, (ScalarType.STRING, 0)),
        (3, (ScalarType.STRING, 0)),
        (16, (ScalarType.STRING, 0)),
    ],
)
def test_ipv4_or_string_resolves_by_length(length: int, expected: tuple[ScalarType, int]) -> None:
    """The composite type is an address only for 4-byte occurrences."""
    assert ScalarType.IPV4_OR_STRING.resolve_variant(length) == expected


def test_other_types_resolve_to_themselves() -> None:
    """Non-composite types never pick an alternate discriminant."""
    assert ScalarType.UNSIGNED32.resolve_variant(4) == (ScalarType.UNSIGNED32, 0)
    assert ScalarType.STRING.resolve_variant(4) == (ScalarType.STRING, 0)
