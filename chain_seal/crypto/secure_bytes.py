"""Zeroable container for symmetric key material."""

import ctypes
import hmac
from typing import Self


def _secure_zero(data: bytearray) -> None:
    if len(data) == 0:
        return
    buffer = (ctypes.c_char * len(data)).from_buffer(data)
    ctypes.memset(ctypes.addressof(buffer), 0, len(data))


class SecureBytes:
    """
    Bytes that can be wiped once they are no longer needed.

    A request holds its symmetric key in one of these and clears it as soon
    as every share has been derived. Use as context manager for guaranteed cleanup.
    """

    __slots__ = ("_data", "_cleared")

    def __init__(self, data: bytes | bytearray) -> None:
        self._data = bytearray(data)
        self._cleared = False

    def __del__(self) -> None:
        self.clear()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *_: object) -> None:
        self.clear()

    def clear(self) -> None:
        """Zero memory. Idempotent."""
        if self._cleared:
            return
        _secure_zero(self._data)
        self._cleared = True

    def __bytes__(self) -> bytes:
        """Warning: creates a copy that is not wiped."""
        self._check_cleared()
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return not self._cleared and len(self._data) > 0

    def __repr__(self) -> str:
        if self._cleared:
            return "SecureBytes(<cleared>)"
        return f"SecureBytes(<{len(self._data)} bytes>)"

    def __eq__(self, other: object) -> bool:
        """Constant-time comparison."""
        if isinstance(other, SecureBytes):
            if self._cleared or other._cleared:
                return False
            return hmac.compare_digest(self._data, other._data)
        if isinstance(other, (bytes, bytearray)):
            if self._cleared:
                return False
            return hmac.compare_digest(self._data, other)
        return NotImplemented

    def __hash__(self) -> int:
        raise TypeError("SecureBytes is not hashable")

    @property
    def is_cleared(self) -> bool:
        return self._cleared

    def _check_cleared(self) -> None:
        if self._cleared:
            raise RuntimeError("SecureBytes has been cleared")
