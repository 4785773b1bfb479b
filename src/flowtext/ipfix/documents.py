# topmark:header:start
#
#   project      : FlowText
#   file         : documents.py
#   file_relpath : src/flowtext/ipfix/documents.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON message documents.

A message document describes a decoded IPFIX message in plain JSON so that it
can be stored, replayed and fed to the encoder without an exporter:

    ```json
    {
      "agent_id": "192.0.2.1",
      "header": {"version": 10, "length": 64, "export_time": 1483228800,
                 "sequence_number": 7, "domain_id": 0},
      "data_sets": [
        [
          {"element": 4, "values": [1]},
          {"element": 8, "values": ["10.0.0.1"]},
          {"enterprise": 9999, "element": 1, "values": [{"type": "unsigned32", "value": 5}]}
        ]
      ]
    }
    ```

Bare values are typed through the information model, the same way a decoder
types wire values; ``{"type": ..., "value": ...}`` objects carry an explicit
type name. Fields typed ``ipv4OrString`` resolve per occurrence: dotted IPv4
text becomes an address under discriminant 1, anything else a string.
"""

from __future__ import annotations

import json
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import TYPE_CHECKING, Any, Final

from flowtext.config.logging import FlowtextLogger, get_logger
from flowtext.ipfix.errors import MessageDocumentError
from flowtext.ipfix.identity import FieldIdentity, ScalarType
from flowtext.ipfix.marshal import to_float32
from flowtext.ipfix.message import Field, MacAddress, Message, MessageHeader

if TYPE_CHECKING:
    from pathlib import Path

    from flowtext.ipfix.message import DataSet
    from flowtext.ipfix.registry import InformationModel

logger: FlowtextLogger = get_logger(__name__)

_HEADER_KEYS: Final[tuple[str, ...]] = (
    "version",
    "length",
    "export_time",
    "sequence_number",
    "domain_id",
)

_INTEGER_KINDS: Final[frozenset[ScalarType]] = frozenset(
    {
        ScalarType.UNSIGNED8,
        ScalarType.UNSIGNED16,
        ScalarType.UNSIGNED32,
        ScalarType.UNSIGNED64,
        ScalarType.SIGNED8,
        ScalarType.SIGNED16,
        ScalarType.SIGNED32,
        ScalarType.SIGNED64,
        ScalarType.DATE_TIME_SECONDS,
        ScalarType.DATE_TIME_MILLISECONDS,
        ScalarType.DATE_TIME_MICROSECONDS,
        ScalarType.DATE_TIME_NANOSECONDS,
    }
)


def _require_int(raw: object, what: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise MessageDocumentError(f"{what} must be an integer, got {raw!r}")
    return raw


def _hex_bytes(raw: object, what: str) -> bytes:
    if not isinstance(raw, str):
        raise MessageDocumentError(f"{what} must be a hex string, got {raw!r}")
    text = raw[2:] if raw[:2].lower() == "0x" else raw
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise MessageDocumentError(f"{what}: invalid hex string {raw!r}") from exc


def coerce_value(kind: ScalarType, raw: object, *, what: str = "value") -> Field:
    """Build a tagged value of ``kind`` from a JSON value.

    Args:
        kind (ScalarType): The declared type of the value.
        raw (object): The JSON value.
        what (str): Description of the value used in error messages.

    Returns:
        Field: The tagged value. Values of ``UNKNOWN`` type are kept as raw
        octets (``OCTET_ARRAY``); ``IPV4_OR_STRING`` values resolve to an address
        or a string.

    Raises:
        MessageDocumentError: If ``raw`` cannot represent a value of ``kind``.
    """
    if kind in _INTEGER_KINDS:
        return Field(kind, _require_int(raw, what))

    match kind:
        case ScalarType.FLOAT32 | ScalarType.FLOAT64:
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise MessageDocumentError(f"{what} must be a number, got {raw!r}")
            number = float(raw)
            if kind is ScalarType.FLOAT32:
                try:
                    number = to_float32(number)
                except OverflowError as exc:
                    raise MessageDocumentError(f"{what}: {raw!r} does not fit a float32") from exc
            return Field(kind, number)
        case ScalarType.BOOLEAN:
            if not isinstance(raw, bool):
                raise MessageDocumentError(f"{what} must be a boolean, got {raw!r}")
            return Field(kind, raw)
        case ScalarType.STRING:
            if not isinstance(raw, str):
                raise MessageDocumentError(f"{what} must be a string, got {raw!r}")
            return Field(kind, raw)
        case ScalarType.OCTET_ARRAY | ScalarType.UNKNOWN:
            return Field(ScalarType.OCTET_ARRAY, _hex_bytes(raw, what))
        case ScalarType.MAC_ADDRESS:
            try:
                return Field(kind, MacAddress.parse(str(raw)))
            except ValueError as exc:
                raise MessageDocumentError(f"{what}: {exc}") from exc
        case ScalarType.IPV4_ADDRESS | ScalarType.IPV6_ADDRESS:
            address_type = IPv4Address if kind is ScalarType.IPV4_ADDRESS else IPv6Address
            try:
                return Field(kind, address_type(str(raw)))
            except ValueError as exc:
                raise MessageDocumentError(f"{what}: {exc}") from exc
        case ScalarType.IPV4_OR_STRING:
            concrete, _ = resolve_ipv4_or_string(raw, what)
            return coerce_value(concrete, raw, what=what)
        case _:
            raise MessageDocumentError(f"{what}: unsupported type {kind.type_name}")


def resolve_ipv4_or_string(raw: object, what: str = "value") -> tuple[ScalarType, int]:
    """Resolve an ``ipv4OrString`` JSON value to its concrete type and discriminant.

    Dotted IPv4 text stands for a 4-byte wire occurrence; any other text is a
    string, even when its UTF-8 form happens to be 4 bytes long.
    """
    if not isinstance(raw, str):
        raise MessageDocumentError(f"{what} must be a string, got {raw!r}")
    if _is_ipv4(raw):
        return ScalarType.IPV4_OR_STRING.resolve_variant(4)
    return ScalarType.STRING, 0


def _is_ipv4(raw: str) -> bool:
    try:
        return isinstance(ip_address(raw), IPv4Address)
    except ValueError:
        return False


def _parse_value(
    raw: object,
    identity: FieldIdentity,
    model: InformationModel,
) -> tuple[FieldIdentity, Field]:
    what = f"field {identity.key}"
    if isinstance(raw, dict):
        if "type" not in raw or "value" not in raw:
            raise MessageDocumentError(f"{what}: typed values need 'type' and 'value'")
        type_name = raw["type"]
        if not isinstance(type_name, str):
            raise MessageDocumentError(f"{what}: type must be a string, got {type_name!r}")
        kind = ScalarType.from_name(type_name)
        if kind is ScalarType.UNKNOWN:
            raise MessageDocumentError(f"{what}: unknown type name {type_name!r}")
        raw = raw["value"]
    else:
        entry = model.lookup(identity)
        if entry is None:
            raise MessageDocumentError(
                f"{what} is not in the information model; give its value an explicit type"
            )
        kind = entry.type

    if kind is ScalarType.IPV4_OR_STRING and identity.multi_type == 0:
        concrete, variant = resolve_ipv4_or_string(raw, what)
        return FieldIdentity(identity.enterprise_number, identity.element_id, variant), (
            coerce_value(concrete, raw, what=what)
        )
    return identity, coerce_value(kind, raw, what=what)


def _parse_data_set(raw: object, position: int, model: InformationModel) -> DataSet:
    if not isinstance(raw, list):
        raise MessageDocumentError(f"data set {position} must be a list of fields")
    data_set: DataSet = {}
    for item in raw:
        if not isinstance(item, dict):
            raise MessageDocumentError(f"data set {position}: fields must be objects")
        try:
            identity = FieldIdentity(
                _require_int(item.get("enterprise", 0), "enterprise"),
                _require_int(item.get("element"), "element"),
                _require_int(item.get("variant", 0), "variant"),
            )
        except (TypeError, ValueError) as exc:
            raise MessageDocumentError(f"data set {position}: {exc}") from exc
        values = item.get("values")
        if not isinstance(values, list):
            raise MessageDocumentError(f"data set {position}: field {identity.key} needs 'values'")
        if not values:
            data_set.setdefault(identity, [])
        for value in values:
            key, field = _parse_value(value, identity, model)
            data_set.setdefault(key, []).append(field)
    return data_set


def message_from_dict(document: Any, model: InformationModel) -> Message:
    """Build a [`Message`][flowtext.ipfix.message.Message] from a parsed document.

    Args:
        document (Any): The parsed JSON document.
        model (InformationModel): Model used to type bare values.

    Returns:
        Message: The message.

    Raises:
        MessageDocumentError: If the document is malformed.
    """
    if not isinstance(document, dict):
        raise MessageDocumentError("message document must be a JSON object")

    agent_id = document.get("agent_id", "")
    if not isinstance(agent_id, str):
        raise MessageDocumentError(f"agent_id must be a string, got {agent_id!r}")

    raw_header = document.get("header")
    if not isinstance(raw_header, dict):
        raise MessageDocumentError("message document needs a 'header' object")
    header = MessageHeader(*(_require_int(raw_header.get(k), f"header.{k}") for k in _HEADER_KEYS))

    raw_data_sets = document.get("data_sets", [])
    if not isinstance(raw_data_sets, list):
        raise MessageDocumentError("data_sets must be a list")

    data_sets = [_parse_data_set(raw, i, model) for i, raw in enumerate(raw_data_sets)]
    logger.debug("Parsed message from %s with %d data sets", agent_id or "?", len(data_sets))
    return Message(agent_id=agent_id, header=header, data_sets=data_sets)


def loads_message(text: str, model: InformationModel) -> Message:
    """Parse a message document from JSON text.

    Raises:
        MessageDocumentError: If the text is not JSON or not a valid document.
    """
    try:
        document: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MessageDocumentError(f"invalid JSON: {exc}") from exc
    return message_from_dict(document, model)


def load_message(path: Path, model: InformationModel) -> Message:
    """Read and parse the message document at ``path``.

    Raises:
        OSError: If the file cannot be read.
        MessageDocumentError: If the file is not a valid document.
    """
    return loads_message(path.read_text(encoding="utf-8"), model)
