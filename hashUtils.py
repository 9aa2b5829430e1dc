""" Hash and randomness helpers for the commitments.

Every integer is encoded with a length prefix so the byte encoding of
(value, nonce) is injective, for scalars as well as for sequences.
"""

import operator
import secrets
from hashlib import sha3_256

# Nonces are drawn from [0, NONCE_BOUND).
NONCE_BOUND = 2**47

_random = secrets.SystemRandom()


def encodeInt(x):
    " Length-prefixed two's-complement big-endian bytes. "
    x = operator.index(x)
    body = x.to_bytes(x.bit_length() // 8 + 1, "big", signed=True)
    return len(body).to_bytes(4, "big") + body


def encodeCommitted(value, nonce):
    " Canonical bytes of an integer or a sequence of integers, followed by the nonce. "
    try:
        data = b"I" + encodeInt(value)
    except TypeError:
        items = list(value)
        data = b"S" + len(items).to_bytes(4, "big") + b"".join(encodeInt(v) for v in items)
    return data + encodeInt(nonce)


def hashBytes(data):
    return sha3_256(data).hexdigest()


def commitHash(value, nonce):
    return hashBytes(encodeCommitted(value, nonce))


def randomNonce():
    return secrets.randbelow(NONCE_BOUND)


def randomBelow(n):
    return secrets.randbelow(n)


def shuffled(items):
    " Fisher-Yates shuffle of a copy, driven by the OS CSPRNG. "
    items = list(items)
    _random.shuffle(items)
    return items
