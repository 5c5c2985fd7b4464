"""
Symmetric encryption of payloads.

AES-256-GCM; every ciphertext carries its own random nonce:
``nonce(12) || ciphertext || tag(16)``.
"""

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from chain_seal.crypto.secure_bytes import SecureBytes
from chain_seal.exceptions import DecryptionError, EncryptionError, EntropyError

KEY_SIZE = 32
NONCE_SIZE = 12
_TAG_SIZE = 16


class SymmetricCipher:
    """Generates one-time keys and encrypts payloads with them."""

    @staticmethod
    def generate_key() -> SecureBytes:
        """
        Generate a fresh random key.

        Raises:
            EntropyError: If the system random source is unavailable.
        """
        try:
            return SecureBytes(os.urandom(KEY_SIZE))
        except (OSError, NotImplementedError) as e:
            msg = f"Secure random source failed: {e}"
            raise EntropyError(msg) from e

    @staticmethod
    def encrypt(plaintext: bytes, key: SecureBytes | bytes) -> bytes:
        """
        Encrypt a payload.

        Raises:
            EncryptionError: If the key is unusable.
            EntropyError: If no nonce can be drawn.
        """
        try:
            nonce = os.urandom(NONCE_SIZE)
        except (OSError, NotImplementedError) as e:
            msg = f"Secure random source failed: {e}"
            raise EntropyError(msg) from e
        try:
            return nonce + AESGCM(bytes(key)).encrypt(nonce, plaintext, None)
        except (ValueError, RuntimeError) as e:
            msg = f"Encryption failed: {e}"
            raise EncryptionError(msg) from e

    @staticmethod
    def decrypt(ciphertext: bytes, key: SecureBytes | bytes) -> bytes:
        """
        Decrypt and authenticate a payload.

        Raises:
            DecryptionError: If the ciphertext is truncated, tampered with or
                the key is wrong.
        """
        if len(ciphertext) < NONCE_SIZE + _TAG_SIZE:
            msg = f"Ciphertext too short: {len(ciphertext)} bytes"
            raise DecryptionError(msg)
        nonce, body = ciphertext[:NONCE_SIZE], ciphertext[NONCE_SIZE:]
        try:
            return AESGCM(bytes(key)).decrypt(nonce, body, None)
        except InvalidTag as e:
            msg = "Authentication failed, wrong key or tampered ciphertext"
            raise DecryptionError(msg) from e
        except ValueError as e:
            msg = f"Decryption failed: {e}"
            raise DecryptionError(msg) from e
