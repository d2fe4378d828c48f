"""Deterministic test-file content and chunk splitting."""

from __future__ import annotations

import hashlib
from collections.abc import Iterator

ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


def generate_pattern(n: int) -> bytes:
    """Return ``n`` bytes where byte ``i`` is ``ALPHABET[i % len(ALPHABET)]``."""
    if n < 0:
        raise ValueError(f"pattern length must not be negative, got {n}")
    full, rest = divmod(n, len(ALPHABET))
    return ALPHABET * full + ALPHABET[:rest]


def pattern_md5(n: int) -> str:
    """Return the hex MD5 digest of the ``n``-byte pattern."""
    return hashlib.md5(generate_pattern(n)).hexdigest()


def split_chunks(data: bytes, chunk_size: int) -> Iterator[bytes]:
    """Yield consecutive pieces of ``data`` of ``chunk_size`` bytes; the last may be shorter."""
    if chunk_size <= 0:
        raise ValueError(f"chunk size must be positive, got {chunk_size}")
    view = memoryview(data)
    for start in range(0, len(view), chunk_size):
        yield bytes(view[start:start + chunk_size])