"""Sharing limits and runtime tunables.

The hard limits come from the share layout: one index byte per share, so at
most 255 distinct non-zero x coordinates, and secrets capped so that a share
never exceeds 65535 bytes. The only tunable is the shortest accepted secret,
which can be raised through ``TSS_MIN_SECRET_BYTES`` for deployments that
only ever share keys of a known size.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

MIN_SHARES = 2
MAX_SHARES = 255
MIN_THRESHOLD = 2
MAX_SECRET_BYTES = 65534
MAX_SHARE_BYTES = MAX_SECRET_BYTES + 1
ERASE_PATTERN = 0xFF


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class SharingPolicy:
    """Holds the configurable limits applied by split and recover."""

    min_secret_bytes: int = 1

    @property
    def min_share_bytes(self) -> int:
        return self.min_secret_bytes + 1


def load_policy() -> SharingPolicy:
    """Load the sharing policy considering environment overrides."""

    min_secret = _load_int("TSS_MIN_SECRET_BYTES", 1)
    return SharingPolicy(min_secret_bytes=min(max(min_secret, 1), MAX_SECRET_BYTES))


policy = load_policy()


__all__ = [
    "MIN_SHARES",
    "MAX_SHARES",
    "MIN_THRESHOLD",
    "MAX_SECRET_BYTES",
    "MAX_SHARE_BYTES",
    "ERASE_PATTERN",
    "SharingPolicy",
    "load_policy",
    "policy",
]
