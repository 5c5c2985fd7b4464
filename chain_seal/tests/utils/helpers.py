"""Shared helpers for the test suite."""

from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from chain_seal.crypto.secure_bytes import SecureBytes
from chain_seal.crypto.symmetric import SymmetricCipher


class RecordingCipher(SymmetricCipher):
    """Cipher that remembers every key it hands out."""

    def __init__(self) -> None:
        self.keys: list[bytes] = []

    def generate_key(self) -> SecureBytes:
        key = super().generate_key()
        self.keys.append(bytes(key))
        return key


def public_hex(private_key: ec.EllipticCurvePrivateKey, *, compressed: bool = True) -> str:
    fmt = PublicFormat.CompressedPoint if compressed else PublicFormat.UncompressedPoint
    return private_key.public_key().public_bytes(Encoding.X962, fmt).hex()
