"""
Chain Seal configuration.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Self

from chain_seal.exceptions import ConfigurationError
from chain_seal.keeper.protocol import Keeper
from chain_seal.networks import NetworkParams, params_for


@dataclass(frozen=True, kw_only=True)
class RequestOptions:
    """
    Options shared by every request built against one keeper and network.

    Attributes:
        wallet: Wallet handle used when anchoring on chain.
        keeper: Storage the request writes ciphertext and shares to.
        network_name: Name of the network in the parameter table.
        min_conf: Minimum confirmations before an anchor is considered final.
        prefix: Marker prepended to on-chain anchors.
    """

    wallet: Any
    keeper: Keeper
    network_name: str
    min_conf: int
    prefix: str

    def __post_init__(self) -> None:
        if self.wallet is None:
            msg = "wallet is required"
            raise ConfigurationError(msg)
        if not isinstance(self.keeper, Keeper):
            msg = "keeper must provide an async put(key, value)"
            raise ConfigurationError(msg, keeper=type(self.keeper).__name__)
        if not isinstance(self.network_name, str):
            msg = "network_name must be a string"
            raise ConfigurationError(msg)
        # Unknown names fail here rather than at first use
        params_for(self.network_name)
        if isinstance(self.min_conf, bool) or not isinstance(self.min_conf, int):
            msg = "min_conf must be an integer"
            raise ConfigurationError(msg)
        if self.min_conf < 0:
            msg = "min_conf must be non-negative"
            raise ConfigurationError(msg, min_conf=self.min_conf)
        if not isinstance(self.prefix, str) or not self.prefix:
            msg = "prefix must be a non-empty string"
            raise ConfigurationError(msg)

    @property
    def network(self) -> NetworkParams:
        return params_for(self.network_name)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> Self:
        """
        Build options from a plain mapping, rejecting missing or unknown names.

        Raises:
            ConfigurationError: If a required option is missing or an unknown one is given.
        """
        names = [f.name for f in fields(cls)]
        missing = [name for name in names if name not in options]
        if missing:
            msg = f"Missing required option(s): {', '.join(missing)}"
            raise ConfigurationError(msg)
        unknown = sorted(set(options) - set(names))
        if unknown:
            msg = f"Unknown option(s): {', '.join(unknown)}"
            raise ConfigurationError(msg)
        return cls(**options)


@dataclass(frozen=True, kw_only=True)
class KeeperConfig:
    """
    Attributes:
        url: Base URL of the keeper service.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
    """

    url: str
    timeout: float = 30.0
    user_agent: str = "ChainSeal-Python/0.1"

    def __post_init__(self) -> None:
        if not self.url:
            msg = "url is required"
            raise ConfigurationError(msg)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ConfigurationError(msg, timeout=self.timeout)
