from __future__ import annotations

import itertools
import os

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tss import (
    InvalidShareError,
    SharingPolicy,
    TooFewSharesError,
    TooManySharesError,
    recover_secret,
    split_secret,
)
from tss.policy import MAX_SHARE_BYTES, MAX_SHARES
from tss.recovery import interpolate, lagrange_basis_at_zero


def test_known_answer_short_secret():
    shares = [
        bytes.fromhex("01b9fa07e185"),
        bytes.fromhex("02f5409b4511"),
    ]
    assert recover_secret(shares) == b"test\x00"
    assert recover_secret(list(reversed(shares))) == b"test\x00"


def test_known_answer_32_byte_secret():
    secret = bytes.fromhex("a217525ab5cab096e455acba00a4032c0cc1a1ef7ccd280642d994cdee7694ca")
    shares = [
        bytes.fromhex("016fbb11a9264bdf4188e3911827ea30e27a283cbea177d7c421524fb448bbfedc"),
        bytes.fromhex("022354d4a788d36e233c22d6e54e3865abe008804ddda2cd9984d4393fb9f740e6"),
    ]
    assert recover_secret(shares) == secret


def test_readme_scenario():
    secret = bytes.fromhex("05cd605252528ab7302ca970c56ef99897cb6c4230e1cebf24516b4f7a9248c1")
    shares = split_secret(secret, 5, 3)
    assert recover_secret([shares[0], shares[1], shares[4]]) == secret


@pytest.mark.parametrize("shares_count", [3, 5, 8, 10])
@pytest.mark.parametrize("threshold", [2, 3])
def test_every_subset_recovers(shares_count, threshold):
    secret = os.urandom(32)
    shares = split_secret(secret, shares_count, threshold)
    for size in range(threshold, shares_count + 1):
        for subset in itertools.combinations(shares, size):
            assert recover_secret(list(subset)) == secret


@pytest.mark.parametrize("shares_count", [2, 79, 156, 233])
def test_shares_count_and_threshold_grid(shares_count):
    for threshold in range(2, min(shares_count, 5) + 1):
        secret = os.urandom(32)
        shares = split_secret(secret, shares_count, threshold)
        assert recover_secret(shares[-threshold:]) == secret


@settings(max_examples=50, deadline=None)
@given(data=st.data())
def test_round_trip_property(data):
    secret = data.draw(st.binary(min_size=1, max_size=64), label="secret")
    shares_count = data.draw(st.integers(min_value=2, max_value=12), label="shares_count")
    threshold = data.draw(st.integers(min_value=2, max_value=shares_count), label="threshold")
    shares = split_secret(secret, shares_count, threshold)
    subset = data.draw(
        st.permutations(shares).map(lambda p: p[:threshold]),
        label="subset",
    )
    assert recover_secret(subset) == secret


def test_below_threshold_does_not_recover():
    secret = os.urandom(32)
    shares = split_secret(secret, 5, 3)
    assert recover_secret(shares[:2]) != secret


@pytest.mark.timeout(120)
def test_maximum_share_count():
    secret = os.urandom(32)
    shares = split_secret(secret, MAX_SHARES, MAX_SHARES // 2)
    assert recover_secret(shares) == secret
    assert recover_secret(shares[100 : 100 + MAX_SHARES // 2]) == secret


def test_recover_is_idempotent_and_leaves_shares_intact():
    secret = os.urandom(24)
    shares = split_secret(secret, 4, 2)
    mutable = [bytearray(s) for s in shares]
    snapshot = [bytes(s) for s in mutable]
    first = recover_secret(mutable)
    second = recover_secret(mutable)
    assert first == second == secret
    assert [bytes(s) for s in mutable] == snapshot


def _random_shares(count: int, size: int) -> list[bytes]:
    return [bytes([i % 255 + 1]) + os.urandom(size - 1) for i in range(count)]


def test_recover_errors():
    shares = split_secret(os.urandom(32), 10, 2)
    with pytest.raises(TooFewSharesError):
        recover_secret([shares[0]])
    with pytest.raises(TooFewSharesError):
        recover_secret([])
    with pytest.raises(InvalidShareError):
        recover_secret([shares[0], os.urandom(32)])
    with pytest.raises(InvalidShareError):
        recover_secret([shares[0], shares[1][:-1]])
    with pytest.raises(InvalidShareError):
        recover_secret(_random_shares(2, MAX_SHARE_BYTES + 1))
    with pytest.raises(InvalidShareError):
        recover_secret([b"\x01", b"\x02"])
    with pytest.raises(TooManySharesError):
        recover_secret(_random_shares(MAX_SHARES + 1, 32))


def test_share_size_follows_policy():
    strict = SharingPolicy(min_secret_bytes=32)
    with pytest.raises(InvalidShareError):
        recover_secret(_random_shares(2, 32), policy=strict)
    secret = os.urandom(32)
    shares = split_secret(secret, 3, 2, policy=strict)
    assert recover_secret(shares, policy=strict) == secret


def test_duplicate_index_is_rejected():
    shares = split_secret(os.urandom(16), 4, 2)
    with pytest.raises(InvalidShareError, match="duplicate index 2"):
        recover_secret([shares[0], shares[1], shares[1]])


def test_zero_index_is_rejected():
    shares = split_secret(os.urandom(16), 3, 2)
    forged = b"\x00" + shares[0][1:]
    with pytest.raises(InvalidShareError, match="index 0"):
        recover_secret([forged, shares[1]])


def test_lagrange_basis_sums_to_one():
    u = [1, 2, 3, 7, 200]
    total = 0
    for i in range(len(u)):
        total ^= lagrange_basis_at_zero(i, u)
    assert total == 1


def test_interpolate_two_points():
    # line through (1, 0xb9) and (2, 0xf5) crosses zero at 0x74
    assert interpolate([1, 2], [0xB9, 0xF5]) == 0x74
    assert interpolate([2, 1], [0xF5, 0xB9]) == 0x74


def test_interpolate_with_precomputed_basis():
    u = [3, 9, 27]
    basis = [lagrange_basis_at_zero(i, u) for i in range(len(u))]
    v = [0x10, 0x20, 0x30]
    assert interpolate(u, v, basis) == interpolate(u, v)
