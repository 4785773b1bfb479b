# topmark:header:start
#
#   project      : FlowText
#   file         : message.py
#   file_relpath : src/flowtext/ipfix/message.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory model of a decoded IPFIX message.

A decoder produces a [`Message`][flowtext.ipfix.message.Message] per export
packet: a header, the exporting agent and an ordered list of data sets. Each
data set maps a [`FieldIdentity`][flowtext.ipfix.identity.FieldIdentity] to the
ordered list of values seen for it; more than one value means the field was
repeated in the record.

Values are [`Field`][flowtext.ipfix.message.Field] instances: a Python value
tagged with the [`ScalarType`][flowtext.ipfix.identity.ScalarType] it was
decoded as. The tag decides how the value is rendered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from flowtext.ipfix.identity import FieldIdentity

if TYPE_CHECKING:
    from flowtext.ipfix.identity import ScalarType

MAC_ADDRESS_LENGTH = 6


@dataclass(frozen=True)
class MacAddress:
    """A 6-octet hardware address."""

    octets: bytes

    def __post_init__(self) -> None:
        if len(self.octets) != MAC_ADDRESS_LENGTH:
            raise ValueError(
                f"MAC address must be {MAC_ADDRESS_LENGTH} octets, got {len(self.octets)}"
            )

    @classmethod
    def parse(cls, text: str) -> MacAddress:
        """Parse ``aa:bb:cc:dd:ee:ff`` (``-`` separators are accepted too).

        Raises:
            ValueError: If ``text`` is not six hex octets.
        """
        parts = text.strip().replace("-", ":").split(":")
        if len(parts) != MAC_ADDRESS_LENGTH or any(len(p) != 2 for p in parts):
            raise ValueError(f"Invalid MAC address: {text!r}")
        return cls(bytes.fromhex("".join(parts)))

    def __str__(self) -> str:
        return ":".join(f"{b:02x}" for b in self.octets)


@dataclass(frozen=True)
class Field:
    """A decoded value tagged with its scalar type.

    Attributes:
        kind: The scalar type the value was decoded as.
        value: The Python value: ``int``, ``float``, ``str``, ``bytes``,
            ``ipaddress.IPv4Address``/``IPv6Address`` or ``MacAddress``.
    """

    kind: ScalarType
    value: object


DataSet = dict[FieldIdentity, list[Field]]


@dataclass(frozen=True)
class MessageHeader:
    """IPFIX message header (RFC 7011 section 3.1)."""

    version: int
    length: int
    export_time: int
    sequence_number: int
    domain_id: int


@dataclass
class Message:
    """A decoded IPFIX message.

    Attributes:
        agent_id: Identifier of the exporting agent, usually its IP address.
        header: The message header.
        data_sets: Decoded data records, in message order.
    """

    agent_id: str
    header: MessageHeader
    data_sets: list[DataSet] = field(default_factory=list)

