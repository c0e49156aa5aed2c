"""Random byte sources used to draw polynomial coefficients."""

from __future__ import annotations

import logging
import secrets
from typing import Protocol

from .errors import EntropySourceError

_logger = logging.getLogger(__name__)


class EntropySource(Protocol):
    def fill(self, buffer: bytearray) -> None:
        """Overwrite every byte of *buffer* with unpredictable data or raise."""


class SystemEntropySource:
    """Operating system CSPRNG exposed through :mod:`secrets`."""

    def fill(self, buffer: bytearray) -> None:
        buffer[:] = secrets.token_bytes(len(buffer))


system_entropy = SystemEntropySource()


def fill_random(source: EntropySource, buffer: bytearray) -> None:
    """Fill *buffer* from *source*, reporting any failure as :class:`EntropySourceError`."""

    expected = len(buffer)
    try:
        source.fill(buffer)
    except EntropySourceError:
        raise
    except Exception as exc:
        _logger.warning("entropy source %r failed: %s", source, exc)
        raise EntropySourceError(f"random source failure: {exc}") from exc
    if len(buffer) != expected:
        _logger.warning(
            "entropy source %r resized buffer from %d to %d bytes",
            source,
            expected,
            len(buffer),
        )
        raise EntropySourceError(
            f"random source returned {len(buffer)} bytes, expected {expected}"
        )


__all__ = ["EntropySource", "SystemEntropySource", "system_entropy", "fill_random"]
