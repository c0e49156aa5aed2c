"""Scratch buffers that never outlive the call that filled them."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from .policy import ERASE_PATTERN


def erase(buffer: bytearray) -> None:
    buffer[:] = bytes([ERASE_PATTERN]) * len(buffer)


@contextmanager
def scratch(size: int) -> Iterator[bytearray]:
    """Yield a zero-filled buffer of *size* bytes and erase it on every exit path."""

    buffer = bytearray(size)
    try:
        yield buffer
    finally:
        erase(buffer)


__all__ = ["erase", "scratch"]
