"""
Network parameter table.

Only the parts the sealing protocol needs: the curve public keys live on
and the figures used to price a permission.
"""

from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from chain_seal.exceptions import InvalidKeyError, UnknownNetworkError

_COMPRESSED_KEY_SIZE = 33
_UNCOMPRESSED_KEY_SIZE = 65


@dataclass(frozen=True, kw_only=True)
class NetworkParams:
    """
    Attributes:
        name: Network name as used in options.
        curve: Elliptic curve of recipient public keys.
        dust_threshold: Smallest spendable output, in satoshis.
        fee_per_kb: Default relay fee per kilobyte, in satoshis.
    """

    name: str
    curve: ec.EllipticCurve
    dust_threshold: int
    fee_per_kb: int

    @property
    def permission_cost(self) -> int:
        return self.dust_threshold + self.fee_per_kb

    def load_public_key(self, key: str | bytes) -> ec.EllipticCurvePublicKey:
        """
        Parse a SEC1-encoded public key (hex string or raw bytes).

        Raises:
            InvalidKeyError: If the key is not a valid point on this network's curve.
        """
        raw = _decode_key(key)
        if len(raw) not in (_COMPRESSED_KEY_SIZE, _UNCOMPRESSED_KEY_SIZE):
            msg = f"Public key must be {_COMPRESSED_KEY_SIZE} or {_UNCOMPRESSED_KEY_SIZE} bytes, got {len(raw)}"
            raise InvalidKeyError(msg, network=self.name)
        try:
            return ec.EllipticCurvePublicKey.from_encoded_point(self.curve, raw)
        except ValueError as e:
            msg = f"Public key is not a point on {self.curve.name}"
            raise InvalidKeyError(msg, network=self.name) from e

    def parse_public_key(self, key: str | bytes) -> bytes:
        """Validate a public key and return its compressed SEC1 encoding."""
        public_key = self.load_public_key(key)
        return public_key.public_bytes(Encoding.X962, PublicFormat.CompressedPoint)


def _decode_key(key: str | bytes) -> bytes:
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    if isinstance(key, str):
        try:
            return bytes.fromhex(key)
        except ValueError as e:
            msg = "Public key is not valid hex"
            raise InvalidKeyError(msg) from e
    msg = f"Public key must be str or bytes, got {type(key).__name__}"
    raise InvalidKeyError(msg)


NETWORKS: dict[str, NetworkParams] = {
    "bitcoin": NetworkParams(
        name="bitcoin",
        curve=ec.SECP256K1(),
        dust_threshold=546,
        fee_per_kb=10000,
    ),
    "testnet": NetworkParams(
        name="testnet",
        curve=ec.SECP256K1(),
        dust_threshold=546,
        fee_per_kb=10000,
    ),
}


def params_for(network_name: str) -> NetworkParams:
    """
    Look up the parameters of a network.

    Raises:
        UnknownNetworkError: If the network is not in the table.
    """
    try:
        return NETWORKS[network_name]
    except KeyError:
        msg = f"Unknown network: {network_name}"
        raise UnknownNetworkError(msg, network_name=network_name) from None


def permission_cost(network_name: str) -> int:
    """Fee estimate, in satoshis, for granting access on a network."""
    return params_for(network_name).permission_cost
