"""Threshold secret sharing over GF(256).

Based on draft-mcgrew-tss-03: byte-wise Shamir sharing in the AES field
instead of big-integer arithmetic modulo a prime. At most 255 shares, secrets
up to 65534 bytes.

``split_secret``
    Split a byte string into ``shares_count`` shares, any ``threshold`` of
    which recover it.

``recover_secret``
    Rebuild the byte string from shares produced by :func:`split_secret`.
"""

from __future__ import annotations

from .errors import (
    EntropySourceError,
    InvalidShareError,
    InvalidThresholdError,
    SecretRequiredError,
    SecretTooLargeError,
    SecretTooShortError,
    TooFewSharesError,
    TooManySharesError,
    TSSError,
    ValidationError,
)
from .policy import SharingPolicy, load_policy
from .recovery import recover_secret
from .sharing import Share, ShareSet, share_index, share_payload, split_secret

__version__ = "0.1.0"

__all__ = [
    "split_secret",
    "recover_secret",
    "share_index",
    "share_payload",
    "Share",
    "ShareSet",
    "SharingPolicy",
    "load_policy",
    "TSSError",
    "ValidationError",
    "SecretRequiredError",
    "SecretTooShortError",
    "SecretTooLargeError",
    "TooFewSharesError",
    "TooManySharesError",
    "InvalidThresholdError",
    "InvalidShareError",
    "EntropySourceError",
]
