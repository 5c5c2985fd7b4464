"""
Cryptographic operations for Chain Seal.

This module provides:
- Content addressing of stored bytes and shares
- AES-256-GCM payload encryption with one-time keys
- ECIES encryption of those keys for recipients
- Zeroable key containers
"""

from chain_seal.crypto.addressing import ContentAddresser
from chain_seal.crypto.asymmetric import decrypt_with, encrypt_for
from chain_seal.crypto.secure_bytes import SecureBytes
from chain_seal.crypto.symmetric import SymmetricCipher

__all__ = [
    "ContentAddresser",
    "SecureBytes",
    "SymmetricCipher",
    "decrypt_with",
    "encrypt_for",
]
