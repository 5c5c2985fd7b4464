"""
Content addressing.

Stored bytes are keyed by their digest, and each share is keyed by a digest
of its recipient and the content address, so the same content shared with
the same recipient always lands in the same place.
"""

import hashlib

_DEFAULT_ALGORITHM = "sha256"


class ContentAddresser:
    """Derives storage keys from bytes."""

    def __init__(self, algorithm: str = _DEFAULT_ALGORITHM) -> None:
        """
        Args:
            algorithm: A fixed-length hash name accepted by ``hashlib.new``.

        Raises:
            ValueError: If the algorithm is not available or has no fixed
                digest size.
        """
        if hashlib.new(algorithm).digest_size == 0:
            msg = f"Variable-length digest not supported: {algorithm}"
            raise ValueError(msg)
        self._algorithm = algorithm

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def address_of(self, value: bytes) -> str:
        """Hex digest of exactly the bytes that will be stored."""
        return hashlib.new(self._algorithm, value).hexdigest()

    def share_key_for(self, recipient_key: bytes, content_address: str) -> str:
        """
        Storage key of a recipient's share of some content.

        Args:
            recipient_key: Compressed public key of the recipient.
            content_address: Hex address of the shared content.
        """
        digest = hashlib.new(self._algorithm)
        digest.update(recipient_key)
        digest.update(bytes.fromhex(content_address))
        return digest.hexdigest()
