from collections.abc import Callable
from unittest.mock import Mock

import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from chain_seal.config import RequestOptions
from chain_seal.keeper.memory import MemoryKeeper
from chain_seal.tests.utils.helpers import RecordingCipher, public_hex

NETWORK_NAME = "testnet"
PREFIX = "tradle"


@pytest.fixture
def keeper() -> MemoryKeeper:
    return MemoryKeeper()


@pytest.fixture
def make_options(keeper: MemoryKeeper) -> Callable[..., RequestOptions]:
    def _make(**overrides: object) -> RequestOptions:
        fields = {
            "wallet": Mock(),
            "keeper": keeper,
            "network_name": NETWORK_NAME,
            "min_conf": 1,
            "prefix": PREFIX,
        }
        fields.update(overrides)
        return RequestOptions(**fields)

    return _make


@pytest.fixture
def options(make_options: Callable[..., RequestOptions]) -> RequestOptions:
    return make_options()


@pytest.fixture
def make_recipient() -> Callable[[], tuple[ec.EllipticCurvePrivateKey, str]]:
    def _make() -> tuple[ec.EllipticCurvePrivateKey, str]:
        private_key = ec.generate_private_key(ec.SECP256K1())
        return private_key, public_hex(private_key)

    return _make


@pytest.fixture
def cipher() -> RecordingCipher:
    return RecordingCipher()
