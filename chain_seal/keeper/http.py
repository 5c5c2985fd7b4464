"""
Keeper backed by a remote HTTP service.

Values are written with ``PUT {url}/{key}`` and the raw bytes as body.
"""

import asyncio
from typing import Any, Self

import httpx
import structlog

from chain_seal.config import KeeperConfig
from chain_seal.exceptions import StorageWriteError

logger = structlog.get_logger(__name__)


class HttpKeeper:
    """
    Async keeper talking to a remote key-value service.

    Example:
        async with HttpKeeper(KeeperConfig(url="https://keeper.example")) as keeper:
            await keeper.put(key, value)
    """

    def __init__(
        self,
        config: KeeperConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Keeper configuration.
            transport: Optional transport for testing (mock transport).
        """
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    async def __aenter__(self) -> Self:
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    base_url=self._config.url.rstrip("/"),
                    timeout=self._config.timeout,
                    transport=self._transport,
                    headers={"User-Agent": self._config.user_agent},
                )
        return self._client

    async def aclose(self) -> None:
        """Close the underlying HTTP client. Idempotent."""
        async with self._client_lock:
            if self._client is None:
                return
            await self._client.aclose()
            self._client = None
            logger.debug("Keeper client closed")

    async def put(self, key: str, value: bytes) -> None:
        """
        Store a value under a key.

        Raises:
            StorageWriteError: On transport failure or a non-2xx response.
        """
        client = await self._ensure_client()
        try:
            response = await client.put(
                f"/{key}",
                content=value,
                headers={"Content-Type": "application/octet-stream"},
            )
        except httpx.HTTPError as e:
            msg = f"Keeper unreachable: {e}"
            raise StorageWriteError(msg, key=key) from e

        if not response.is_success:
            msg = f"Keeper rejected write with status {response.status_code}"
            raise StorageWriteError(msg, key=key)

        logger.debug("Value stored", key=key, size=len(value))
