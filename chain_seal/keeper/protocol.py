"""
Keeper protocol definition.

The keeper is the key-value store that receives ciphertext and shares.
Only writes are needed to seal a payload, so that is all the protocol asks for.
"""

from typing import Protocol, runtime_checkable

from chain_seal.exceptions import StorageWriteError


@runtime_checkable
class Keeper(Protocol):
    """Write-only view of a key-value store."""

    async def put(self, key: str, value: bytes) -> None:
        """
        Store a value under a key, overwriting any previous value.

        Args:
            key: Hex storage key.
            value: Bytes to store.

        Raises:
            StorageWriteError: If the store rejects the write.
        """
        ...


async def write_to(keeper: Keeper, key: str, value: bytes) -> None:
    """
    Put a value, normalizing every keeper failure to StorageWriteError.

    Raises:
        StorageWriteError: If the write fails for any reason.
    """
    try:
        await keeper.put(key, value)
    except StorageWriteError:
        raise
    except Exception as e:
        msg = f"Keeper write failed: {e}"
        raise StorageWriteError(msg, key=key) from e
