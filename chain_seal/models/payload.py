"""
Payload variants accepted by a create request.

Each variant knows how to serialize itself to the bytes that get sealed.
"""

import json
from dataclasses import dataclass
from typing import Any

from chain_seal.exceptions import ConfigurationError, UnsupportedDataError


@dataclass(frozen=True, slots=True)
class TextPayload:
    text: str

    def to_bytes(self) -> bytes:
        return self.text.encode("utf-8")


@dataclass(frozen=True, slots=True)
class BinaryPayload:
    data: bytes

    def to_bytes(self) -> bytes:
        return self.data


@dataclass(frozen=True, slots=True)
class JsonPayload:
    """Structured data, serialized as compact JSON with sorted keys."""

    obj: dict[str, Any] | list[Any]

    def to_bytes(self) -> bytes:
        try:
            return json.dumps(self.obj, separators=(",", ":"), sort_keys=True).encode("utf-8")
        except (TypeError, ValueError) as e:
            msg = f"Object is not JSON serializable: {e}"
            raise UnsupportedDataError(msg) from e


Payload = TextPayload | BinaryPayload | JsonPayload


def payload_from(data: Any) -> Payload:
    """
    Wrap raw data in its payload variant.

    Args:
        data: str, bytes-like, dict or list; an existing payload is returned as is.

    Raises:
        ConfigurationError: If data is missing or empty.
        UnsupportedDataError: If data has no serialization.
    """
    if isinstance(data, (TextPayload, BinaryPayload, JsonPayload)):
        return data
    if data is None or (isinstance(data, (str, bytes, bytearray, memoryview)) and len(data) == 0):
        msg = "Missing required parameter: data"
        raise ConfigurationError(msg)

    match data:
        case str():
            return TextPayload(data)
        case bytes() | bytearray() | memoryview():
            return BinaryPayload(bytes(data))
        case dict() | list():
            return JsonPayload(data)
        case _:
            msg = "Parameter 'data' can be one of the following types: str, bytes, dict, list"
            raise UnsupportedDataError(msg, type=type(data).__name__)
