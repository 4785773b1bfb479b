# topmark:header:start
#
#   project      : FlowText
#   file         : __init__.py
#   file_relpath : src/flowtext/ipfix/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IPFIX record rendering and information model.

Typical usage:
    ```python
    from flowtext.ipfix import FieldIdentity, Field, Message, MessageHeader, ScalarType, encode

    message = Message(
        agent_id="192.0.2.1",
        header=MessageHeader(10, 64, 1483228800, 7, 0),
        data_sets=[{FieldIdentity(0, 4): [Field(ScalarType.UNSIGNED8, 6)]}],
    )
    text = encode(message, 0)
    ```
"""

from __future__ import annotations

from flowtext.ipfix.errors import (
    ConfigurationNotFoundError,
    ConfigurationParseError,
    FlowtextError,
    MessageDocumentError,
    TextEncodingError,
    UnsupportedValueTypeError,
)
from flowtext.ipfix.identity import FIELD_TYPES, FieldIdentity, ScalarType
from flowtext.ipfix.marshal import encode, format_value, iter_encoded
from flowtext.ipfix.message import DataSet, Field, MacAddress, Message, MessageHeader
from flowtext.ipfix.registry import (
    InformationModel,
    RegistryEntry,
    default_information_model,
    get_information_model,
    load_extensions,
    reset_information_model,
    use_extensions,
)

__all__ = [
    "FIELD_TYPES",
    "ConfigurationNotFoundError",
    "ConfigurationParseError",
    "DataSet",
    "Field",
    "FieldIdentity",
    "FlowtextError",
    "InformationModel",
    "MacAddress",
    "Message",
    "MessageDocumentError",
    "MessageHeader",
    "RegistryEntry",
    "ScalarType",
    "TextEncodingError",
    "UnsupportedValueTypeError",
    "default_information_model",
    "encode",
    "format_value",
    "get_information_model",
    "iter_encoded",
    "load_extensions",
    "reset_information_model",
    "use_extensions",
]
