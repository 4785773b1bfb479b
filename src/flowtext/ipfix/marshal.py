# topmark:header:start
#
#   project      : FlowText
#   file         : marshal.py
#   file_relpath : src/flowtext/ipfix/marshal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render one data set of a decoded IPFIX message as compact JSON text.

Output shape (no whitespace)::

    {"AgentID":"192.0.2.1",
     "Header":{"Version":10,"Length":64,"ExportTime":1483228800,"SequenceNo":7,"DomainID":0},
     "Data":{"0_4":6,"0_8":"10.0.0.1","9999_1_1":["a","b"]}}

Data keys are ``"<enterprise>_<element>"`` with ``"_<discriminant>"`` appended
for non-primary multi-type occurrences. A field with one value renders as that
value, a repeated field as an array from which empty strings are dropped. Data
keys follow the data set's own order.

Before rendering, the ICMP type and code fields (IANA elements 176 and 177) are
removed from the data set unless the protocol identifier (element 4) is 1. The
removal happens **in place**: the caller's data set no longer holds those
fields once ``encode()`` returns.

Values are rendered by their [`ScalarType`][flowtext.ipfix.identity.ScalarType]
tag; a value without a formatting rule makes the whole call fail with
[`UnsupportedValueTypeError`][flowtext.ipfix.errors.UnsupportedValueTypeError]
and no text is returned.
"""

from __future__ import annotations

import json
import math
import struct
from collections.abc import Iterator
from ipaddress import IPv4Address, IPv6Address
from typing import TYPE_CHECKING, Final

from flowtext.config.logging import FlowtextLogger, get_logger
from flowtext.ipfix.errors import TextEncodingError, UnsupportedValueTypeError
from flowtext.ipfix.identity import FieldIdentity, ScalarType
from flowtext.ipfix.message import MacAddress

if TYPE_CHECKING:
    from flowtext.ipfix.message import DataSet, Field, Message, MessageHeader

logger: FlowtextLogger = get_logger(__name__)

PROTOCOL_IDENTIFIER: Final[FieldIdentity] = FieldIdentity(0, 4)
ICMP_TYPE_IPV4: Final[FieldIdentity] = FieldIdentity(0, 176)
ICMP_CODE_IPV4: Final[FieldIdentity] = FieldIdentity(0, 177)
PROTOCOL_ICMP: Final[str] = "1"

# Inclusive value range per integer kind
_INT_RANGES: Final[dict[ScalarType, tuple[int, int]]] = {
    ScalarType.UNSIGNED8: (0, 2**8 - 1),
    ScalarType.UNSIGNED16: (0, 2**16 - 1),
    ScalarType.UNSIGNED32: (0, 2**32 - 1),
    ScalarType.UNSIGNED64: (0, 2**64 - 1),
    ScalarType.SIGNED8: (-(2**7), 2**7 - 1),
    ScalarType.SIGNED16: (-(2**15), 2**15 - 1),
    ScalarType.SIGNED32: (-(2**31), 2**31 - 1),
    ScalarType.SIGNED64: (-(2**63), 2**63 - 1),
    ScalarType.DATE_TIME_SECONDS: (0, 2**32 - 1),
    ScalarType.DATE_TIME_MILLISECONDS: (0, 2**64 - 1),
    ScalarType.DATE_TIME_MICROSECONDS: (0, 2**64 - 1),
    ScalarType.DATE_TIME_NANOSECONDS: (0, 2**64 - 1),
}


def encode(message: Message, index: int) -> str:
    """Render data set ``index`` of ``message`` as one JSON object.

    Args:
        message (Message): The decoded message.
        index (int): Position of the data set to render.

    Returns:
        str: The JSON text.

    Raises:
        IndexError: If ``index`` does not select a data set.
        UnsupportedValueTypeError: If a value has no formatting rule.
        TextEncodingError: If a string cannot be rendered as a JSON literal.
    """
    if not 0 <= index < len(message.data_sets):
        raise IndexError(
            f"data set index {index} out of range ({len(message.data_sets)} data sets)"
        )

    parts: list[str] = ["{"]
    parts.append(f'"AgentID":{_format_text(message.agent_id)},')
    parts.append(_encode_header(message.header))
    parts.append(_encode_data_set(message.data_sets[index]))
    parts.append("}")
    return "".join(parts)


def iter_encoded(message: Message) -> Iterator[str]:
    """Yield the JSON text of every data set of ``message``, in order."""
    for index in range(len(message.data_sets)):
        yield encode(message, index)


def format_key(identity: FieldIdentity) -> str:
    """Return the data key of ``identity`` as it appears in output."""
    return identity.key


def _encode_header(header: MessageHeader) -> str:
    return (
        f'"Header":{{"Version":{header.version:d}'
        f',"Length":{header.length:d}'
        f',"ExportTime":{header.export_time:d}'
        f',"SequenceNo":{header.sequence_number:d}'
        f',"DomainID":{header.domain_id:d}}},'
    )


def drop_unused_icmp_fields(data_set: DataSet) -> bool:
    """Remove ICMP type/code fields from a non-ICMP data set, in place.

    The fields are kept only when the protocol identifier is present and its
    first value renders as ``1``. Removing fields that are already gone is a no-op.

    Args:
        data_set (DataSet): The data set to filter.

    Returns:
        bool: True if the protocol identifier marks the record as ICMP.
    """
    protocol = data_set.get(PROTOCOL_IDENTIFIER)
    is_icmp = bool(protocol) and format_value(protocol[0]) == PROTOCOL_ICMP
    if not is_icmp:
        for identity in (ICMP_TYPE_IPV4, ICMP_CODE_IPV4):
            if data_set.pop(identity, None) is not None:
                logger.trace("Dropped %s from non-ICMP record", identity.key)
    return is_icmp


def _encode_data_set(data_set: DataSet) -> str:
    drop_unused_icmp_fields(data_set)

    entries: list[str] = []
    for identity, fields in data_set.items():
        if len(fields) == 1:
            rendered = format_value(fields[0])
        else:
            # Empty strings are dropped from arrays only
            values = [
                format_value(f)
                for f in fields
                if not (f.kind is ScalarType.STRING and f.value == "")
            ]
            rendered = "[" + ",".join(values) + "]"
        entries.append(f'"{format_key(identity)}":{rendered}')
    return '"Data":{' + ",".join(entries) + "}"


# --- Value formatting ---


def format_value(field: Field) -> str:
    """Render one value as a JSON literal according to its kind.

    Args:
        field (Field): The tagged value.

    Returns:
        str: The literal text.

    Raises:
        UnsupportedValueTypeError: If the kind has no formatting rule, or the
            value does not match its kind.
        TextEncodingError: If a string value cannot be encoded as UTF-8.
    """
    kind, value = field.kind, field.value
    match kind:
        case ScalarType.FLOAT32 | ScalarType.FLOAT64:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise _mismatch(field)
            return format_float(float(value), single=kind is ScalarType.FLOAT32)
        case ScalarType.STRING:
            if not isinstance(value, str):
                raise _mismatch(field)
            return _format_text(value)
        case ScalarType.IPV4_ADDRESS if isinstance(value, IPv4Address):
            return f'"{value}"'
        case ScalarType.IPV6_ADDRESS if isinstance(value, IPv6Address):
            return f'"{value}"'
        case ScalarType.MAC_ADDRESS if isinstance(value, MacAddress):
            return f'"{value}"'
        case ScalarType.OCTET_ARRAY if isinstance(value, (bytes, bytearray)):
            return f'"0x{bytes(value).hex()}"'
        case _ if kind in _INT_RANGES:
            if isinstance(value, bool) or not isinstance(value, int):
                raise _mismatch(field)
            low, high = _INT_RANGES[kind]
            if not low <= value <= high:
                raise UnsupportedValueTypeError(
                    f"value {value} out of range for {kind.type_name}"
                )
            return str(value)
        case _:
            raise _mismatch(field)


def _mismatch(field: Field) -> UnsupportedValueTypeError:
    return UnsupportedValueTypeError(
        f"unknown data type to marshal: {field.kind.type_name} "
        f"value of type {type(field.value).__name__}"
    )


def _format_text(value: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise TextEncodingError(f"cannot encode string as UTF-8: {exc.reason}") from exc
    return json.dumps(value, ensure_ascii=False)


def to_float32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float.

    Raises:
        OverflowError: If ``value`` is finite but beyond the float32 range.
    """
    return struct.unpack("<f", struct.pack("<f", value))[0]


def format_float(value: float, *, single: bool = False) -> str:
    """Render a float in scientific notation with the fewest round-trip digits.

    The mantissa holds the shortest digit string that parses back to the same
    float at the given precision; the exponent marker is ``E`` with a sign and
    at least two digits (``1.5E+00``, ``-2E-07``). Infinities and NaN render as
    ``+Inf``, ``-Inf`` and ``NaN``.

    Args:
        value (float): The value to render.
        single (bool): Round-trip at single (True) or double (False) precision.

    Returns:
        str: The rendered number.

    Raises:
        UnsupportedValueTypeError: If ``single`` and ``value`` does not fit a float32.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    if single:
        try:
            value = to_float32(value)
        except OverflowError as exc:
            raise UnsupportedValueTypeError(f"value {value!r} out of range for float32") from exc
        max_precision = 9
    else:
        max_precision = 17

    text = f"{value:.{max_precision - 1}e}"
    for precision in range(max_precision):
        candidate = f"{value:.{precision}e}"
        if _round_trips(candidate, value, single=single):
            text = candidate
            break
    return text.upper()


def _round_trips(candidate: str, value: float, *, single: bool) -> bool:
    parsed = float(candidate)
    if not single:
        return parsed == value
    try:
        return to_float32(parsed) == value
    except OverflowError:
        # Rounded past the float32 range (digits of FLT_MAX)
        return False
