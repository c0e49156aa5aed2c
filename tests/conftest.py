"""Test configuration helpers."""
from __future__ import annotations

import itertools
import os
import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()


class ScriptedEntropy:
    """Entropy source that replays a fixed byte sequence in a cycle."""

    def __init__(self, data: bytes) -> None:
        self._stream = itertools.cycle(data)
        self.requests: list[int] = []

    def fill(self, buffer: bytearray) -> None:
        self.requests.append(len(buffer))
        for i in range(len(buffer)):
            buffer[i] = next(self._stream)


class FailingEntropy:
    """Entropy source that succeeds *budget* times, then raises ``OSError``."""

    def __init__(self, budget: int = 0) -> None:
        self.budget = budget

    def fill(self, buffer: bytearray) -> None:
        if self.budget <= 0:
            raise OSError("entropy pool exhausted")
        self.budget -= 1
        buffer[:] = os.urandom(len(buffer))


@pytest.fixture
def random_secret():
    def make(size: int = 32) -> bytes:
        return os.urandom(size)

    return make


@pytest.fixture
def scripted_entropy():
    return ScriptedEntropy


@pytest.fixture
def failing_entropy():
    return FailingEntropy
