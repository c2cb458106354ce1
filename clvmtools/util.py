"""Small numeric and string helpers shared across the compiler."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")


def number_from_u8(data: bytes) -> int:
    """Interpret bytes as a big-endian two's complement integer; empty is zero."""
    if not data:
        return 0
    return int.from_bytes(data, "big", signed=True)


def u8_from_number(value: int) -> bytes:
    """Encode an integer as minimal big-endian two's complement bytes.

    Zero encodes as a single zero byte.
    """
    magnitude = value if value >= 0 else ~value
    length = magnitude.bit_length() // 8 + 1
    return value.to_bytes(length, "big", signed=True)


def index_of_match(predicate: Callable[[T], bool], haystack: Sequence[T]) -> int:
    """Return the index of the first item satisfying predicate, or -1."""
    return next((i for i, item in enumerate(haystack) if predicate(item)), -1)


def skip_leading(s: str, dash: str) -> str:
    """Strip every leading repetition of ``dash`` from ``s``."""
    if not dash:
        return s
    while s.startswith(dash):
        s = s[len(dash):]
    return s