"""Share generation.

Every byte of the secret gets its own random polynomial of degree
``threshold - 1`` whose constant term is that byte. Share ``i`` stores the
evaluations of all those polynomials at ``x = i``, prefixed by ``i`` itself::

    share = [index][p_0(index)][p_1(index)] ... [p_{n-1}(index)]

Any ``threshold`` shares pin down each polynomial, fewer leave every value of
the constant term equally likely.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .buffers import erase, scratch
from .entropy import EntropySource, fill_random, system_entropy
from .errors import EntropySourceError
from .field import evaluate
from .policy import SharingPolicy
from .policy import policy as default_policy
from .validation import check_split_args

_logger = logging.getLogger(__name__)

Share = bytes
ShareSet = List[Share]


def share_index(share: bytes) -> int:
    """Return the public x coordinate of *share*."""
    return share[0]


def share_payload(share: bytes) -> bytes:
    return bytes(share[1:])


def split_secret(
    secret: bytes,
    shares_count: int,
    threshold: int,
    *,
    entropy: Optional[EntropySource] = None,
    policy: Optional[SharingPolicy] = None,
) -> ShareSet:
    """Split *secret* into *shares_count* shares, any *threshold* of which recover it.

    Raises a :class:`tss.errors.ValidationError` subclass for malformed
    arguments and :class:`tss.errors.EntropySourceError` when the random
    source fails, in which case no shares are returned.
    """

    if policy is None:
        policy = default_policy
    source = system_entropy if entropy is None else entropy
    secret_size = len(secret)
    check_split_args(secret_size, shares_count, threshold, policy)

    buffers = [bytearray(secret_size + 1) for _ in range(shares_count)]
    for i, buffer in enumerate(buffers):
        buffer[0] = i + 1

    try:
        with scratch(threshold) as coefficients:
            for offset in range(secret_size):
                fill_random(source, coefficients)
                coefficients[0] = secret[offset]
                for buffer in buffers:
                    buffer[offset + 1] = evaluate(coefficients, buffer[0])
        shares = [bytes(buffer) for buffer in buffers]
    except EntropySourceError:
        _logger.warning("split of %d byte secret aborted", secret_size)
        raise
    finally:
        for buffer in buffers:
            erase(buffer)

    _logger.debug(
        "split %d byte secret into %d shares, threshold %d",
        secret_size,
        shares_count,
        threshold,
    )
    return shares


__all__ = ["Share", "ShareSet", "share_index", "share_payload", "split_secret"]
