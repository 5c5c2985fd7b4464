"""
Chain Seal.

Content-addressed, confidentially shared storage records: a payload is
encrypted once, stored under the digest of its ciphertext, and its key is
shared with each recipient's public key.

Example:
    ```python
    from chain_seal import ChainSealClient, MemoryKeeper

    options = {
        "wallet": wallet,
        "keeper": MemoryKeeper(),
        "network_name": "testnet",
        "min_conf": 1,
        "prefix": "tradle",
    }
    async with ChainSealClient(options) as client:
        built = await client.create().data({"a": 1}).share_with([alice, bob]).build()
        await built.execute()
        print(built.key)
    ```
"""

from chain_seal.client import ChainSealClient
from chain_seal.config import KeeperConfig, RequestOptions
from chain_seal.exceptions import (
    AlreadyBuiltError,
    ChainSealError,
    ConfigurationError,
    CryptoError,
    DecryptionError,
    EncryptionError,
    EntropyError,
    InvalidKeyError,
    InvalidStateError,
    NoRecipientsError,
    StateError,
    StorageWriteError,
    UnknownNetworkError,
    UnsupportedDataError,
)
from chain_seal.keeper.http import HttpKeeper
from chain_seal.keeper.memory import MemoryKeeper
from chain_seal.keeper.protocol import Keeper
from chain_seal.models.request import RequestState, Share
from chain_seal.networks import params_for, permission_cost
from chain_seal.requests.create import BuiltRequest, CreateRequest
from chain_seal.requests.share import PendingShare, ShareRequest

__version__ = "0.1.0"

__all__ = [
    # Main client
    "ChainSealClient",
    "RequestOptions",
    "KeeperConfig",
    # Requests
    "CreateRequest",
    "BuiltRequest",
    "ShareRequest",
    "PendingShare",
    "RequestState",
    "Share",
    # Keepers
    "Keeper",
    "MemoryKeeper",
    "HttpKeeper",
    # Networks
    "params_for",
    "permission_cost",
    # Exceptions
    "ChainSealError",
    "ConfigurationError",
    "UnknownNetworkError",
    "InvalidKeyError",
    "UnsupportedDataError",
    "StateError",
    "AlreadyBuiltError",
    "InvalidStateError",
    "NoRecipientsError",
    "CryptoError",
    "EntropyError",
    "EncryptionError",
    "DecryptionError",
    "StorageWriteError",
]
