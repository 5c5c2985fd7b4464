"""
Request lifecycle models.
"""

from dataclasses import dataclass
from enum import StrEnum


class RequestState(StrEnum):
    """Lifecycle of a create request. EXECUTED is terminal."""

    CONFIGURING = "configuring"
    BUILT = "built"
    EXECUTED = "executed"


@dataclass(frozen=True, kw_only=True)
class Share:
    """
    A recipient's access to a private record.

    Attributes:
        recipient_key: Compressed public key of the recipient, hex.
        encrypted_symmetric_key: The record's key, encrypted for the recipient.
        storage_key: Where the encrypted key is stored; derived from the
            recipient and the content address.
    """

    recipient_key: str
    encrypted_symmetric_key: bytes
    storage_key: str

    def __repr__(self) -> str:
        return f"Share(recipient_key={self.recipient_key!r}, storage_key={self.storage_key!r})"
