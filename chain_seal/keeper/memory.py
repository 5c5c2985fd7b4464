"""In-process keeper backed by a dict."""

import asyncio

import structlog

from chain_seal.exceptions import StorageWriteError

logger = structlog.get_logger(__name__)


class MemoryKeeper:
    """
    Keeper that stores values in memory and records every write.

    Useful for tests and for staging records before they are pushed elsewhere.

    Example:
        keeper = MemoryKeeper()
        await keeper.put("ab12", b"value")
        assert keeper.get("ab12") == b"value"
    """

    def __init__(self, *, fail_on: set[str] | None = None) -> None:
        """
        Args:
            fail_on: Keys whose writes are rejected with StorageWriteError.
        """
        self._store: dict[str, bytes] = {}
        self._fail_on = set(fail_on or ())
        self.writes: list[tuple[str, bytes]] = []

    async def put(self, key: str, value: bytes) -> None:
        # Yield so concurrent writers interleave like they would against real I/O
        await asyncio.sleep(0)
        if key in self._fail_on:
            msg = "Write rejected"
            raise StorageWriteError(msg, key=key)
        self._store[key] = bytes(value)
        self.writes.append((key, bytes(value)))
        logger.debug("Value stored", key=key, size=len(value))

    def get(self, key: str) -> bytes | None:
        return self._store.get(key)

    def fail_on(self, *keys: str) -> None:
        self._fail_on.update(keys)

    def recover(self, *keys: str) -> None:
        self._fail_on.difference_update(keys)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: str) -> bool:
        return key in self._store
