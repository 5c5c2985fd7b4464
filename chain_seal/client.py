"""
Chain Seal client facade.

Holds one set of options and hands out requests bound to them.
"""

from collections.abc import Mapping
from typing import Any, Self

import structlog

from chain_seal.config import RequestOptions
from chain_seal.crypto.addressing import ContentAddresser
from chain_seal.crypto.symmetric import SymmetricCipher
from chain_seal.requests.create import CreateRequest
from chain_seal.requests.share import ShareRequest

logger = structlog.get_logger(__name__)


class ChainSealClient:
    """
    Entry point for sealing payloads.

    Example:
        ```python
        async with ChainSealClient(options) as client:
            built = await client.create().data(b"report").share_with(pub_key).build()
            await built.execute()
        ```

    Args:
        options: Request options, or a mapping with the same fields.
        cipher: Symmetric cipher used by private requests.
        addresser: Content addresser shared by every request.
    """

    def __init__(
        self,
        options: RequestOptions | Mapping[str, Any],
        *,
        cipher: SymmetricCipher | None = None,
        addresser: ContentAddresser | None = None,
    ) -> None:
        if not isinstance(options, RequestOptions):
            options = RequestOptions.from_mapping(options)
        self._options = options
        self._cipher = cipher or SymmetricCipher()
        self._addresser = addresser or ContentAddresser()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        await self.close()

    @property
    def options(self) -> RequestOptions:
        return self._options

    def create(self) -> CreateRequest:
        """Start a new create request."""
        return CreateRequest(self._options, cipher=self._cipher, addresser=self._addresser)

    def share(self) -> ShareRequest:
        """Start a standalone share of an existing record."""
        return ShareRequest(self._options, addresser=self._addresser)

    async def close(self) -> None:
        """Close the keeper if it holds resources."""
        aclose = getattr(self._options.keeper, "aclose", None)
        if aclose is not None:
            await aclose()
            logger.debug("Client closed")
