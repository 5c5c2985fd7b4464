"""
Share requests.

A share gives one recipient durable access to a private record: the record's
symmetric key is encrypted for the recipient's public key and written to the
keeper under a key derived from the recipient and the content address.
"""

import asyncio
from typing import Self

import structlog

from chain_seal.config import RequestOptions
from chain_seal.crypto.addressing import ContentAddresser
from chain_seal.crypto.asymmetric import encrypt_for
from chain_seal.crypto.secure_bytes import SecureBytes
from chain_seal.exceptions import AlreadyBuiltError, ConfigurationError, InvalidStateError
from chain_seal.keeper.protocol import write_to
from chain_seal.models.request import Share

logger = structlog.get_logger(__name__)


class PendingShare:
    """A built share that has not necessarily been written yet."""

    def __init__(self, share: Share, options: RequestOptions) -> None:
        self._share = share
        self._keeper = options.keeper
        self._executed = False
        self._lock = asyncio.Lock()

    @property
    def share(self) -> Share:
        return self._share

    @property
    def is_executed(self) -> bool:
        return self._executed

    async def execute(self) -> Share:
        """
        Write the encrypted key to the keeper. Safe to call more than once.

        Raises:
            StorageWriteError: If the keeper rejects the write. Not retried here.
        """
        async with self._lock:
            if self._executed:
                return self._share
            await write_to(self._keeper, self._share.storage_key, self._share.encrypted_symmetric_key)
            self._executed = True
        logger.debug(
            "Share stored",
            recipient=self._share.recipient_key,
            storage_key=self._share.storage_key,
        )
        return self._share


class ShareRequest:
    """
    Builds one recipient's share of a record.

    Example:
        pending = await (
            ShareRequest(options)
            .share_access_to(content_address, symmetric_key)
            .share_access_with(recipient_public_key)
            .build()
        )
        await pending.execute()
    """

    def __init__(
        self,
        options: RequestOptions,
        *,
        addresser: ContentAddresser | None = None,
    ) -> None:
        """
        Args:
            options: Request options (keeper and network are used).
            addresser: Derives the share's storage key.
        """
        self._options = options
        self._network = options.network
        self._addresser = addresser or ContentAddresser()

        self._content_address: str | None = None
        self._symmetric_key: SecureBytes | None = None
        self._recipient_key: bytes | None = None
        self._built = False

    def share_access_to(self, content_address: str, symmetric_key: SecureBytes | bytes) -> Self:
        """
        Bind the share to a record and the key guarding it.

        Raises:
            ConfigurationError: If the content address is not hex.
            InvalidStateError: If already bound to a different content address,
                or the share was already built.
        """
        self._ensure_not_built()
        try:
            bytes.fromhex(content_address)
        except (TypeError, ValueError) as e:
            msg = "Content address is not valid hex"
            raise ConfigurationError(msg, content_address=content_address) from e
        if self._content_address is not None and self._content_address != content_address:
            msg = "Share is already bound to a different content address"
            raise InvalidStateError(msg, bound=self._content_address, requested=content_address)
        if self._symmetric_key is not None:
            self._symmetric_key.clear()
        self._content_address = content_address
        self._symmetric_key = SecureBytes(bytes(symmetric_key))
        return self

    def share_access_with(self, recipient_public_key: str | bytes) -> Self:
        """
        Set the recipient.

        Raises:
            InvalidKeyError: If the key is malformed for the configured network.
        """
        self._ensure_not_built()
        self._recipient_key = self._network.parse_public_key(recipient_public_key)
        return self

    async def build(self) -> PendingShare:
        """
        Encrypt the symmetric key for the recipient and derive the share's storage key.

        The bound key copy is wiped once encrypted.

        Raises:
            InvalidStateError: If the share is not bound or has no recipient.
            AlreadyBuiltError: If the share was already built.
            EncryptionError: If encryption for the recipient fails.
        """
        self._ensure_not_built()
        if self._content_address is None or self._symmetric_key is None:
            msg = "Share is not bound to any content, call share_access_to() first"
            raise InvalidStateError(msg)
        if self._recipient_key is None:
            msg = "Share has no recipient, call share_access_with() first"
            raise InvalidStateError(msg)

        self._built = True
        public_key = self._network.load_public_key(self._recipient_key)
        try:
            encrypted_key = await asyncio.to_thread(
                encrypt_for, public_key, bytes(self._symmetric_key)
            )
        finally:
            self._symmetric_key.clear()

        share = Share(
            recipient_key=self._recipient_key.hex(),
            encrypted_symmetric_key=encrypted_key,
            storage_key=self._addresser.share_key_for(self._recipient_key, self._content_address),
        )
        logger.debug("Share built", recipient=share.recipient_key, storage_key=share.storage_key)
        return PendingShare(share, self._options)

    def _ensure_not_built(self) -> None:
        if self._built:
            msg = "share already built"
            raise AlreadyBuiltError(msg)
