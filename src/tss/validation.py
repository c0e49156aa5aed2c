"""Input checks shared by split and recover.

Checks run in a fixed order and the first failure wins. They only look at
lengths, counts and index bytes, never at secret material.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .errors import (
    InvalidShareError,
    InvalidThresholdError,
    SecretRequiredError,
    SecretTooLargeError,
    SecretTooShortError,
    TooFewSharesError,
    TooManySharesError,
)
from .policy import (
    MAX_SECRET_BYTES,
    MAX_SHARE_BYTES,
    MAX_SHARES,
    MIN_SHARES,
    MIN_THRESHOLD,
    SharingPolicy,
)

_logger = logging.getLogger(__name__)


def check_split_args(
    secret_size: int,
    shares_count: int,
    threshold: int,
    policy: SharingPolicy,
) -> None:
    """Validate the arguments of :func:`tss.sharing.split_secret`."""

    if secret_size == 0:
        _logger.debug("split rejected: empty secret")
        raise SecretRequiredError()
    if secret_size < policy.min_secret_bytes:
        _logger.debug("split rejected: secret of %d bytes", secret_size)
        raise SecretTooShortError(secret_size, policy.min_secret_bytes)
    if secret_size > MAX_SECRET_BYTES:
        _logger.debug("split rejected: secret of %d bytes", secret_size)
        raise SecretTooLargeError(secret_size, MAX_SECRET_BYTES)
    check_share_count(shares_count)
    if threshold > shares_count or threshold < MIN_THRESHOLD:
        _logger.debug("split rejected: threshold %d of %d", threshold, shares_count)
        raise InvalidThresholdError(threshold, shares_count)


def check_share_count(count: int) -> None:
    if count < MIN_SHARES:
        _logger.debug("rejected share count %d", count)
        raise TooFewSharesError(count, MIN_SHARES)
    if count > MAX_SHARES:
        _logger.debug("rejected share count %d", count)
        raise TooManySharesError(count, MAX_SHARES)


def check_share_set(shares: Sequence[bytes], policy: SharingPolicy) -> int:
    """Validate a share set for recovery and return the common share size.

    Every share must be as long as the first one, which itself must lie within
    the policy bounds. Index bytes must be non-zero and pairwise distinct: a
    repeated x coordinate would otherwise hit the field's zero-divisor rule
    and silently produce a wrong secret.
    """

    check_share_count(len(shares))
    share_size = len(shares[0])
    if share_size < policy.min_share_bytes or share_size > MAX_SHARE_BYTES:
        _logger.debug("recover rejected: first share is %d bytes", share_size)
        raise InvalidShareError(
            f"invalid share: size {share_size} outside "
            f"[{policy.min_share_bytes}, {MAX_SHARE_BYTES}]"
        )
    for position, share in enumerate(shares):
        if len(share) != share_size:
            _logger.debug(
                "recover rejected: share %d is %d bytes, expected %d",
                position,
                len(share),
                share_size,
            )
            raise InvalidShareError(
                f"invalid share: share {position} has size {len(share)}, expected {share_size}"
            )
    seen: set[int] = set()
    for position, share in enumerate(shares):
        index = share[0]
        if index == 0:
            _logger.debug("recover rejected: share %d has index 0", position)
            raise InvalidShareError(f"invalid share: share {position} has index 0")
        if index in seen:
            _logger.debug("recover rejected: duplicate index %d", index)
            raise InvalidShareError(f"invalid share: duplicate index {index}")
        seen.add(index)
    return share_size


__all__ = ["check_split_args", "check_share_count", "check_share_set"]
