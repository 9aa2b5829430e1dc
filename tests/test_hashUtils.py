import numpy as np
import pytest

from hashUtils import NONCE_BOUND, commitHash, encodeCommitted, encodeInt, randomNonce, shuffled


def test_commit_hash_is_deterministic():
    assert commitHash(5, 123) == commitHash(5, 123)
    assert commitHash([1, 2, 3], 7) == commitHash((1, 2, 3), 7)


def test_numpy_and_python_ints_hash_alike():
    assert commitHash(np.int64(5), 123) == commitHash(5, 123)
    assert commitHash(np.arange(1, 10), 9) == commitHash(list(range(1, 10)), 9)


def test_encoding_has_no_ambiguous_joins():
    # "1,23" vs "12,3" and "1:23" vs "12:3" style collisions
    assert encodeCommitted([1, 23], 4) != encodeCommitted([12, 3], 4)
    assert encodeCommitted(1, 23) != encodeCommitted(12, 3)
    assert encodeCommitted(5, 7) != encodeCommitted([5], 7)
    assert encodeCommitted([], 7) != encodeCommitted([7], 0)


def test_encode_int_is_length_prefixed():
    assert encodeInt(0) == b"\x00\x00\x00\x01\x00"
    assert encodeInt(255) == b"\x00\x00\x00\x02\x00\xff"
    assert encodeInt(-1) != encodeInt(255)


def test_rejects_non_integers():
    with pytest.raises(TypeError):
        commitHash(1.5, 3)
    with pytest.raises(TypeError):
        commitHash(3, "nonce")


def test_no_collisions_over_many_commitments():
    seen = set()
    pairs = [(v, n) for v in range(1, 10) for n in range(2000)]
    for v, n in pairs:
        seen.add(commitHash(v, n))
    assert len(seen) == len(pairs)


def test_random_nonces_are_in_range():
    nonces = [randomNonce() for _ in range(1000)]
    assert all(0 <= n < NONCE_BOUND for n in nonces)
    assert len(set(nonces)) == len(nonces)


def test_shuffled_returns_a_permutation_copy():
    items = list(range(1, 10))
    out = shuffled(items)
    assert sorted(out) == items
    assert items == list(range(1, 10))
