"""
ECIES encryption of symmetric keys for a recipient's public key.

An ephemeral key pair on the recipient's curve agrees a secret with the
recipient (ECDH), HKDF-SHA256 stretches it into an AES-256-GCM key, and the
ephemeral public key travels with the ciphertext:

    ephemeral_pubkey(33, compressed) || nonce(12) || ciphertext || tag(16)
"""

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from chain_seal.exceptions import DecryptionError, EncryptionError

_HKDF_INFO = b"chain-seal-share-v1"
_EPHEMERAL_KEY_SIZE = 33
_NONCE_SIZE = 12
_TAG_SIZE = 16


def encrypt_for(public_key: ec.EllipticCurvePublicKey, plaintext: bytes) -> bytes:
    """
    Encrypt bytes so only the holder of the matching private key can read them.

    Raises:
        EncryptionError: If key agreement or encryption fails.
    """
    try:
        ephemeral = ec.generate_private_key(public_key.curve)
        shared_secret = ephemeral.exchange(ec.ECDH(), public_key)
        ephemeral_bytes = ephemeral.public_key().public_bytes(
            Encoding.X962, PublicFormat.CompressedPoint
        )
        key = _derive_key(shared_secret, ephemeral_bytes)
        nonce = os.urandom(_NONCE_SIZE)
        return ephemeral_bytes + nonce + AESGCM(key).encrypt(nonce, plaintext, None)
    except (ValueError, OSError) as e:
        msg = f"Failed to encrypt for recipient: {e}"
        raise EncryptionError(msg) from e


def decrypt_with(private_key: ec.EllipticCurvePrivateKey, ciphertext: bytes) -> bytes:
    """
    Decrypt bytes produced by ``encrypt_for``.

    Raises:
        DecryptionError: If the blob is malformed or was not encrypted for this key.
    """
    if len(ciphertext) < _EPHEMERAL_KEY_SIZE + _NONCE_SIZE + _TAG_SIZE:
        msg = f"Encrypted key too short: {len(ciphertext)} bytes"
        raise DecryptionError(msg)

    ephemeral_bytes = ciphertext[:_EPHEMERAL_KEY_SIZE]
    nonce = ciphertext[_EPHEMERAL_KEY_SIZE : _EPHEMERAL_KEY_SIZE + _NONCE_SIZE]
    body = ciphertext[_EPHEMERAL_KEY_SIZE + _NONCE_SIZE :]

    try:
        ephemeral = ec.EllipticCurvePublicKey.from_encoded_point(
            private_key.curve, ephemeral_bytes
        )
        shared_secret = private_key.exchange(ec.ECDH(), ephemeral)
        key = _derive_key(shared_secret, ephemeral_bytes)
        return AESGCM(key).decrypt(nonce, body, None)
    except InvalidTag as e:
        msg = "Encrypted key was not addressed to this private key"
        raise DecryptionError(msg) from e
    except ValueError as e:
        msg = f"Failed to decrypt key: {e}"
        raise DecryptionError(msg) from e


def _derive_key(shared_secret: bytes, ephemeral_bytes: bytes) -> bytes:
    # Binding the ephemeral key into the salt ties the derived key to this message
    return HKDF(
        algorithm=hashes.SHA256(),
        length=32,
        salt=ephemeral_bytes,
        info=_HKDF_INFO,
    ).derive(shared_secret)
