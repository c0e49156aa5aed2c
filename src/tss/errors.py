"""Exceptions raised by share generation and secret recovery."""

from __future__ import annotations


class TSSError(Exception):
    """Base class for every error reported by this package."""


class ValidationError(TSSError, ValueError):
    """Raised when the inputs of an operation have the wrong shape."""


class SecretRequiredError(ValidationError):
    def __init__(self) -> None:
        super().__init__("some secret is required")


class SecretTooShortError(ValidationError):
    def __init__(self, size: int, minimum: int) -> None:
        super().__init__(f"secret too short: {size} bytes, minimum is {minimum}")


class SecretTooLargeError(ValidationError):
    def __init__(self, size: int, maximum: int) -> None:
        super().__init__(f"secret too large: {size} bytes, maximum is {maximum}")


class TooFewSharesError(ValidationError):
    def __init__(self, count: int, minimum: int) -> None:
        super().__init__(f"too few shares: {count}, minimum is {minimum}")


class TooManySharesError(ValidationError):
    def __init__(self, count: int, maximum: int) -> None:
        super().__init__(f"too many shares: {count}, maximum is {maximum}")


class InvalidThresholdError(ValidationError):
    def __init__(self, threshold: int, shares_count: int) -> None:
        super().__init__(f"invalid threshold {threshold} for {shares_count} shares")


class InvalidShareError(ValidationError):
    """Raised when a share set is structurally unusable."""


class EntropySourceError(TSSError, RuntimeError):
    """Raised when the random source cannot deliver the requested bytes."""


__all__ = [
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
