"""Secret recovery by Lagrange interpolation at zero."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .buffers import erase, scratch
from .field import add, div, mul
from .policy import SharingPolicy
from .policy import policy as default_policy
from .validation import check_share_set

_logger = logging.getLogger(__name__)


def lagrange_basis_at_zero(i: int, u: Sequence[int]) -> int:
    """Return the ``i``-th Lagrange basis polynomial for points *u*, evaluated at zero.

    ``0 - u[i]`` equals ``u[i]`` in characteristic two, so each factor is
    ``u[k] / (u[k] + u[i])``.
    """

    result = 1
    for k, x in enumerate(u):
        if k != i:
            result = mul(result, div(x, add(x, u[i])))
    return result


def interpolate(
    u: Sequence[int],
    v: Sequence[int],
    basis: Optional[Sequence[int]] = None,
) -> int:
    """Evaluate at zero the polynomial through the points ``(u[i], v[i])``.

    *basis* holds ``lagrange_basis_at_zero(i, u)`` for every ``i``; callers
    interpolating many value vectors over the same *u* pass it to skip
    recomputing it.
    """

    if basis is None:
        basis = [lagrange_basis_at_zero(i, u) for i in range(len(u))]
    result = 0
    for weight, y in zip(basis, v):
        result = add(result, mul(weight, y))
    return result


def recover_secret(
    shares: Sequence[bytes],
    *,
    policy: Optional[SharingPolicy] = None,
) -> bytes:
    """Reconstruct the secret from a set of shares.

    The first share fixes the expected size and every other share must match
    it. The result is only the original secret when at least ``threshold``
    shares of the same split are supplied; fewer shares yield unrelated bytes
    rather than an error.
    """

    if policy is None:
        policy = default_policy
    share_size = check_share_set(shares, policy)
    shares_count = len(shares)
    secret_size = share_size - 1

    with scratch(shares_count) as u, scratch(shares_count) as basis, scratch(shares_count) as v:
        for i, share in enumerate(shares):
            u[i] = share[0]
        # the basis only depends on the x coordinates
        for i in range(shares_count):
            basis[i] = lagrange_basis_at_zero(i, u)

        secret = bytearray(secret_size)
        try:
            for j in range(secret_size):
                for i, share in enumerate(shares):
                    v[i] = share[j + 1]
                secret[j] = interpolate(u, v, basis)
            result = bytes(secret)
        finally:
            erase(secret)

    _logger.debug("recovered %d byte secret from %d shares", secret_size, shares_count)
    return result


__all__ = ["lagrange_basis_at_zero", "interpolate", "recover_secret"]
