"""
Chain Seal exception hierarchy.

All exceptions inherit from ChainSealError for easy catching.
"""

from typing import Any


class ChainSealError(Exception):
    """Base exception for all chain_seal errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class ConfigurationError(ChainSealError):
    """Missing or invalid option, data or key."""


class UnknownNetworkError(ConfigurationError):
    """Network name not present in the parameter table."""

    def __init__(self, message: str, *, network_name: str) -> None:
        super().__init__(message, network_name=network_name)
        self.network_name = network_name


class InvalidKeyError(ConfigurationError):
    """Public key is malformed for the configured network."""


class UnsupportedDataError(ConfigurationError):
    """Payload type cannot be serialized."""


class StateError(ChainSealError):
    """Operation is not valid in the request's current state."""


class AlreadyBuiltError(StateError):
    """Request was already built (or a build is in progress)."""

    def __init__(self, message: str = "already built or building") -> None:
        super().__init__(message)


class InvalidStateError(StateError):
    """Mutation or operation attempted in the wrong lifecycle state."""


class NoRecipientsError(StateError):
    """Private request has no recipients to share with."""

    def __init__(self, message: str = "no recipients") -> None:
        super().__init__(message)


class CryptoError(ChainSealError):
    """Cryptographic operation failed."""


class EntropyError(CryptoError):
    """Secure random source failed."""


class EncryptionError(CryptoError):
    """Encryption of a payload or key failed."""


class DecryptionError(CryptoError):
    """Decryption or authentication of a ciphertext failed."""


class StorageWriteError(ChainSealError):
    """Keeper rejected a write."""

    def __init__(self, message: str, *, key: str) -> None:
        super().__init__(message, key=key)
        self.key = key
