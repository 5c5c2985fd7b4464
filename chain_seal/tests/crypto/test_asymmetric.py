import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from chain_seal.crypto.asymmetric import decrypt_with, encrypt_for
from chain_seal.exceptions import DecryptionError


@pytest.fixture
def private_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256K1())


def test_recipient_recovers_plaintext(private_key: ec.EllipticCurvePrivateKey) -> None:
    secret = b"\x42" * 32

    encrypted = encrypt_for(private_key.public_key(), secret)

    assert secret not in encrypted
    assert decrypt_with(private_key, encrypted) == secret


def test_each_encryption_uses_a_new_ephemeral_key(private_key: ec.EllipticCurvePrivateKey) -> None:
    first = encrypt_for(private_key.public_key(), b"secret")
    second = encrypt_for(private_key.public_key(), b"secret")

    assert first[:33] != second[:33]
    assert first[0] in (0x02, 0x03)


def test_other_private_key_cannot_decrypt(private_key: ec.EllipticCurvePrivateKey) -> None:
    encrypted = encrypt_for(private_key.public_key(), b"secret")
    stranger = ec.generate_private_key(ec.SECP256K1())

    with pytest.raises(DecryptionError, match="not addressed to this private key"):
        decrypt_with(stranger, encrypted)


def test_decrypt_rejects_short_blob(private_key: ec.EllipticCurvePrivateKey) -> None:
    with pytest.raises(DecryptionError, match="too short"):
        decrypt_with(private_key, b"\x02" * 20)


def test_decrypt_rejects_invalid_ephemeral_point(private_key: ec.EllipticCurvePrivateKey) -> None:
    blob = b"\x05" + b"\x00" * 32 + b"\x00" * 12 + b"\x00" * 32

    with pytest.raises(DecryptionError):
        decrypt_with(private_key, blob)
