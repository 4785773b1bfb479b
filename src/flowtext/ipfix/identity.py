# topmark:header:start
#
#   project      : FlowText
#   file         : identity.py
#   file_relpath : src/flowtext/ipfix/identity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field identities and IPFIX abstract data types.

A field specifier is identified by its enterprise number (0 for IANA elements)
and element ID. A third component, the multi-type discriminant, separates
occurrences of one field specifier that decode to different concrete types;
0 is the primary type and non-zero values name alternates.

Abstract data types follow RFC 5102 section 3.1, plus the ``ipv4OrString``
composite type which resolves per occurrence (see
[`ScalarType.resolve_variant`][flowtext.ipfix.identity.ScalarType.resolve_variant]).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Final

MAX_ENTERPRISE_NUMBER: Final[int] = 0xFFFFFFFF
MAX_ELEMENT_ID: Final[int] = 0xFFFF
MAX_MULTI_TYPE: Final[int] = 0xFF


@dataclass(frozen=True, order=True)
class FieldIdentity:
    """Composite key of a field specifier.

    Attributes:
        enterprise_number: Private enterprise number; 0 denotes an IANA element.
        element_id: Information element identifier.
        multi_type: Discriminant for alternate concrete types; 0 is the primary type.
    """

    enterprise_number: int
    element_id: int
    multi_type: int = 0

    def __post_init__(self) -> None:
        _check_range("enterprise_number", self.enterprise_number, MAX_ENTERPRISE_NUMBER)
        _check_range("element_id", self.element_id, MAX_ELEMENT_ID)
        _check_range("multi_type", self.multi_type, MAX_MULTI_TYPE)

    @property
    def key(self) -> str:
        """Textual key used in rendered output.

        ``"<enterprise_number>_<element_id>"``, with ``"_<multi_type>"`` appended
        only when the discriminant is non-zero.
        """
        key = f"{self.enterprise_number}_{self.element_id}"
        if self.multi_type != 0:
            key = f"{key}_{self.multi_type}"
        return key

    @property
    def is_enterprise(self) -> bool:
        """True for vendor-specific (non-IANA) elements."""
        return self.enterprise_number != 0

    @property
    def base(self) -> FieldIdentity:
        """The identity of the primary occurrence (discriminant 0)."""
        if self.multi_type == 0:
            return self
        return replace(self, multi_type=0)

    def __str__(self) -> str:
        return self.key


def _check_range(name: str, value: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= upper:
        raise ValueError(f"{name} out of range [0, {upper}]: {value}")


class ScalarType(Enum):
    """IPFIX abstract data types (RFC 5102 section 3.1).

    Each member's value is its IANA type name, as used in element definition
    files. ``UNKNOWN`` stands for any type name FlowText does not recognize.
    """

    UNKNOWN = "unknown"
    UNSIGNED8 = "unsigned8"
    UNSIGNED16 = "unsigned16"
    UNSIGNED32 = "unsigned32"
    UNSIGNED64 = "unsigned64"
    SIGNED8 = "signed8"
    SIGNED16 = "signed16"
    SIGNED32 = "signed32"
    SIGNED64 = "signed64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOLEAN = "boolean"
    MAC_ADDRESS = "macAddress"
    OCTET_ARRAY = "octetArray"
    STRING = "string"
    DATE_TIME_SECONDS = "dateTimeSeconds"
    DATE_TIME_MILLISECONDS = "dateTimeMilliseconds"
    DATE_TIME_MICROSECONDS = "dateTimeMicroseconds"
    DATE_TIME_NANOSECONDS = "dateTimeNanoseconds"
    IPV4_ADDRESS = "ipv4Address"
    IPV6_ADDRESS = "ipv6Address"
    # Either an IPv4 address (4-byte occurrence, discriminant 1) or a string
    IPV4_OR_STRING = "ipv4OrString"

    @property
    def type_name(self) -> str:
        """The IANA type name of this type."""
        return self.value

    @property
    def is_variable_length(self) -> bool:
        """True for types encoded with a variable length on the wire."""
        return self in _VARIABLE_LENGTH

    @classmethod
    def from_name(cls, name: str) -> ScalarType:
        """Return the type for an IANA type name; unrecognized names map to ``UNKNOWN``."""
        return FIELD_TYPES.get(name, cls.UNKNOWN)

    def resolve_variant(self, length: int) -> tuple[ScalarType, int]:
        """Resolve the concrete type and discriminant of one occurrence.

        Only ``IPV4_OR_STRING`` varies: a 4-byte occurrence is an IPv4 address
        (discriminant 1), anything else is a string (discriminant 0). Every other
        type resolves to itself with discriminant 0.

        Args:
            length (int): Length in bytes of the occurrence on the wire.

        Returns:
            tuple[ScalarType, int]: The concrete type and its multi-type discriminant.
        """
        if self is ScalarType.IPV4_OR_STRING:
            if length == 4:
                return ScalarType.IPV4_ADDRESS, 1
            return ScalarType.STRING, 0
        return self, 0


_VARIABLE_LENGTH: Final[frozenset[ScalarType]] = frozenset(
    {ScalarType.STRING, ScalarType.OCTET_ARRAY, ScalarType.IPV4_OR_STRING}
)

# Recognized type names of element definition files
FIELD_TYPES: Final[dict[str, ScalarType]] = {
    t.value: t for t in ScalarType if t is not ScalarType.UNKNOWN
}
