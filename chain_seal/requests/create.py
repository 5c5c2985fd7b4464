"""
Create requests.

A create request seals one payload: it encrypts the payload with a fresh
symmetric key (unless public), addresses the stored bytes by their digest,
shares the key with every recipient and, on execute, writes everything to
the keeper.

Lifecycle: CONFIGURING -> BUILT -> EXECUTED.
"""

import asyncio
from collections.abc import Iterable, Mapping
from typing import Any, Self

import structlog

from chain_seal.config import RequestOptions
from chain_seal.crypto.addressing import ContentAddresser
from chain_seal.crypto.secure_bytes import SecureBytes
from chain_seal.crypto.symmetric import SymmetricCipher
from chain_seal.exceptions import (
    AlreadyBuiltError,
    ConfigurationError,
    InvalidStateError,
    NoRecipientsError,
)
from chain_seal.keeper.protocol import write_to
from chain_seal.models.payload import payload_from
from chain_seal.models.request import RequestState, Share
from chain_seal.requests.share import PendingShare, ShareRequest

logger = structlog.get_logger(__name__)


class BuiltRequest:
    """
    Result of building a create request.

    Attributes:
        key: Content address of ``value``.
        value: Bytes stored under ``key``; ciphertext unless the request is public.
        is_public: Whether the value is stored in the clear.
        chain: Whether the record should be anchored on chain right away.
    """

    def __init__(
        self,
        owner: "CreateRequest",
        *,
        key: str,
        value: bytes,
        pending_shares: tuple[PendingShare, ...] | None,
        is_public: bool,
        chain: bool,
    ) -> None:
        self._owner = owner
        self.key = key
        self.value = value
        self.is_public = is_public
        self.chain = chain
        self._pending_shares = pending_shares
        self._executed = False

    @property
    def shares(self) -> tuple[Share, ...] | None:
        """Shares in recipient order, or None for a public request."""
        if self._pending_shares is None:
            return None
        return tuple(pending.share for pending in self._pending_shares)

    @property
    def pending_shares(self) -> tuple[PendingShare, ...]:
        return self._pending_shares or ()

    @property
    def is_executed(self) -> bool:
        return self._executed

    async def execute(self) -> "BuiltRequest":
        """Write the record and its shares. No-op once executed."""
        if self._executed:
            return self
        return await self._owner.execute(self)

    def _retire(self) -> None:
        self._executed = True

    def __repr__(self) -> str:
        shares = "public" if self._pending_shares is None else f"{len(self._pending_shares)} shares"
        state = "executed" if self._executed else "pending"
        return f"BuiltRequest(key={self.key!r}, {shares}, {state})"


class CreateRequest:
    """
    Builder for a sealed storage record.

    Example:
        ```python
        request = CreateRequest(options)
        built = await request.data({"a": 1}).share_with([alice, bob]).build()
        await built.execute()
        ```

    Configuration setters return the request and fail with InvalidStateError
    once a build has started.
    """

    def __init__(
        self,
        options: RequestOptions | Mapping[str, Any],
        *,
        cipher: SymmetricCipher | None = None,
        addresser: ContentAddresser | None = None,
    ) -> None:
        """
        Args:
            options: Validated options, or a mapping with the same fields.
            cipher: Symmetric cipher for private payloads.
            addresser: Derives content addresses and share keys.

        Raises:
            ConfigurationError: If an option is missing or invalid.
        """
        if not isinstance(options, RequestOptions):
            options = RequestOptions.from_mapping(options)
        self._options = options
        self._network = options.network
        self._cipher = cipher or SymmetricCipher()
        self._addresser = addresser or ContentAddresser()

        self._data_bytes: bytes | None = None
        self._recipients: list[bytes] = []
        self._public = False
        self._chain = False

        self._state = RequestState.CONFIGURING
        self._building = False
        self._built: BuiltRequest | None = None
        self._lock = asyncio.Lock()

    @property
    def options(self) -> RequestOptions:
        return self._options

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def is_public(self) -> bool:
        return self._public

    @property
    def recipient_keys(self) -> tuple[str, ...]:
        """Deduplicated recipients as compressed hex keys."""
        return tuple(key.hex() for key in self._recipients)

    @property
    def value(self) -> bytes | None:
        return self._built.value if self._built else None

    @property
    def key(self) -> str | None:
        return self._built.key if self._built else None

    @property
    def permission_cost(self) -> int:
        """Fee estimate for granting access; public records grant none."""
        if self._public:
            return 0
        return self._network.permission_cost

    def data(self, data: Any) -> Self:
        """
        Set the payload.

        Args:
            data: str, bytes, dict or list.

        Raises:
            ConfigurationError: If data is missing.
            UnsupportedDataError: If data cannot be serialized.
        """
        self._ensure_configuring()
        payload = payload_from(data)
        self._data_bytes = payload.to_bytes()
        return self

    def recipients(self, pub_keys: str | bytes | Iterable[str | bytes]) -> Self:
        """
        Set who the payload is shared with, replacing earlier recipients.

        Duplicates collapse to one, keeping first-seen order.

        Raises:
            InvalidKeyError: If a key is malformed for the network.
        """
        self._ensure_configuring()
        if isinstance(pub_keys, (str, bytes, bytearray)):
            pub_keys = [pub_keys]
        recipients: list[bytes] = []
        for pub_key in pub_keys:
            normalized = self._network.parse_public_key(pub_key)
            if normalized not in recipients:
                recipients.append(normalized)
        self._recipients = recipients
        return self

    share_with = recipients

    def set_public(self, is_public: bool) -> Self:
        """
        Store the payload in the clear, without encryption or shares.

        Raises:
            ConfigurationError: If is_public is not a bool.
        """
        self._ensure_configuring()
        if not isinstance(is_public, bool):
            msg = "is_public must be a bool"
            raise ConfigurationError(msg, is_public=is_public)
        self._public = is_public
        return self

    def chain(self, chain: bool) -> Self:
        """Flag the record for immediate anchoring on chain."""
        self._ensure_configuring()
        self._chain = bool(chain)
        return self

    async def build(self) -> BuiltRequest:
        """
        Encrypt, address and share the payload. Nothing is written yet.

        Returns:
            BuiltRequest whose ``execute()`` performs the writes.

        Raises:
            AlreadyBuiltError: If the request was already built.
            InvalidStateError: If no data was set.
            NoRecipientsError: If a private request has no recipients.
            CryptoError: If key generation or encryption fails.
        """
        async with self._lock:
            return await self._build()

    async def execute(self, built: BuiltRequest | None = None) -> BuiltRequest:
        """
        Write the record, then every share, building first if needed.

        Calls are serialized; once executed, further calls return the same
        result without writing again. A failed write leaves the request built
        and earlier writes in place, so calling again is a safe retry.

        Raises:
            InvalidStateError: If ``built`` belongs to another request.
            StorageWriteError: If any write fails.
        """
        if built is not None and built._owner is not self:
            msg = "Built request belongs to a different create request"
            raise InvalidStateError(msg, key=built.key)

        async with self._lock:
            if self._state is RequestState.EXECUTED:
                logger.debug("Request already executed", key=self._built.key)
                return self._built
            if self._state is RequestState.CONFIGURING:
                await self._build()

            built = self._built
            logger.debug("Storing value", key=built.key, size=len(built.value))
            await write_to(self._options.keeper, built.key, built.value)
            if not built.is_public:
                await _gather_all(share.execute() for share in built.pending_shares)

            self._state = RequestState.EXECUTED
            built._retire()

        logger.info(
            "Request executed",
            key=built.key,
            public=built.is_public,
            shares=len(built.pending_shares),
        )
        return built

    async def _build(self) -> BuiltRequest:
        if self._state is not RequestState.CONFIGURING or self._building:
            raise AlreadyBuiltError()
        if self._data_bytes is None:
            msg = "Missing required parameter: data"
            raise InvalidStateError(msg)
        if not self._public and not self._recipients:
            raise NoRecipientsError()

        self._building = True
        symmetric_key: SecureBytes | None = None
        try:
            if self._public:
                value = self._data_bytes
            else:
                symmetric_key = self._cipher.generate_key()
                value = await asyncio.to_thread(self._cipher.encrypt, self._data_bytes, symmetric_key)

            logger.debug(
                "Calculating content address",
                visibility="public" if self._public else "private",
            )
            key = self._addresser.address_of(value)

            pending_shares = None
            if symmetric_key is not None:
                share_requests = [
                    self._share_request(recipient, key, symmetric_key)
                    for recipient in self._recipients
                ]
                pending_shares = tuple(
                    await _gather_all(request.build() for request in share_requests)
                )
                logger.debug("Shares built", key=key, count=len(pending_shares))
        finally:
            # Nothing has been written yet, so a failed build can start over
            self._building = False
            if symmetric_key is not None:
                symmetric_key.clear()

        self._built = BuiltRequest(
            self,
            key=key,
            value=value,
            pending_shares=pending_shares,
            is_public=self._public,
            chain=self._chain,
        )
        self._state = RequestState.BUILT
        return self._built

    def _share_request(self, recipient: bytes, key: str, symmetric_key: SecureBytes) -> ShareRequest:
        return (
            ShareRequest(self._options, addresser=self._addresser)
            .share_access_to(key, symmetric_key)
            .share_access_with(recipient)
        )

    def _ensure_configuring(self) -> None:
        if self._state is not RequestState.CONFIGURING or self._building:
            msg = "Request can no longer be modified"
            raise InvalidStateError(msg, state=str(self._state))


async def _gather_all(aws: Iterable[Any]) -> list[Any]:
    """Wait for every awaitable, then raise the first failure if any."""
    results = await asyncio.gather(*aws, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results
