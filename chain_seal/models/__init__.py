"""
Domain models for Chain Seal.

These are immutable (frozen) dataclasses representing the core domain concepts.
"""

from chain_seal.models.payload import (
    BinaryPayload,
    JsonPayload,
    Payload,
    TextPayload,
    payload_from,
)
from chain_seal.models.request import RequestState, Share

__all__ = [
    # Payload
    "Payload",
    "TextPayload",
    "BinaryPayload",
    "JsonPayload",
    "payload_from",
    # Request
    "RequestState",
    "Share",
]
