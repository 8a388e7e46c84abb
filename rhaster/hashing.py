"""Stable 64-bit FNV-1a hashing and the UID identifier built on it."""

from __future__ import annotations

import functools

FNV_OFFSET_BASIS_64 = 0xCBF29CE484222325
FNV_PRIME_64 = 0x100000001B3
_MASK_64 = 0xFFFFFFFFFFFFFFFF


def _fnv1a(values) -> int:
    result = FNV_OFFSET_BASIS_64
    for value in values:
        result ^= value
        result = (result * FNV_PRIME_64) & _MASK_64
    return result


def hash_int(value: int) -> int:
    """Hash the eight little-endian bytes of an unsigned 64-bit integer."""
    value &= _MASK_64
    return _fnv1a((value >> (i * 8)) & 0xFF for i in range(8))


def hash_str(text: str) -> int:
    """Hash the UTF-8 bytes of a string.

    Bytes above 0x7F are sign-extended, as a signed ``char`` would be.
    """
    return _fnv1a(
        byte if byte < 0x80 else (byte - 0x100) & _MASK_64
        for byte in text.encode("utf-8")
    )


def type_name(cls: type) -> str:
    """Return a qualified, stable name for a type."""
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def type_hash(cls: type) -> int:
    """Return the hash of a type's qualified name."""
    return hash_str(type_name(cls))


@functools.total_ordering
class UID:
    """Immutable identifier holding a 64-bit hash of a string or integer."""

    __slots__ = ("_uid",)

    def __init__(self, value: "int | str | UID") -> None:
        if isinstance(value, UID):
            uid = value.uid
        elif isinstance(value, str):
            uid = hash_str(value)
        elif isinstance(value, int):
            uid = hash_int(value)
        else:
            raise TypeError(f"cannot build a UID from {type(value).__name__}")
        object.__setattr__(self, "_uid", uid)

    def __setattr__(self, name, value):
        raise AttributeError("UID is immutable")

    @property
    def uid(self) -> int:
        return self._uid

    def __int__(self) -> int:
        return self._uid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UID):
            return NotImplemented
        return self._uid == other._uid

    def __lt__(self, other: "UID") -> bool:
        if not isinstance(other, UID):
            return NotImplemented
        return self._uid < other._uid

    def __hash__(self) -> int:
        return hash(self._uid)

    def __repr__(self) -> str:
        return f"UID({self._uid:#018x})"


NULL_UID = UID("0")