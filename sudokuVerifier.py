""" Verifier side: check an opening against the commitments and the Sudoku rules. """

import logging
import numbers

from hashUtils import commitHash
from sudokuChallenges import RevealMapping
from sudokuProver import MappingResponse, ValuesResponse

log = logging.getLogger(__name__)

# Bits 1 to 9 set.
ALL_DIGITS_MASK = 0b1111111110


def isInteger(x):
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def hasNumbers1To9(values):
    " True when values are exactly the digits 1 to 9, each once, in any order. "
    try:
        values = list(values)
    except TypeError:
        return False
    if len(values) != 9:
        return False
    if not all(isInteger(v) and 1 <= v <= 9 for v in values):
        return False

    validation = 0
    for v in values:
        validation |= 1 << int(v)
    return validation == ALL_DIGITS_MASK


def _asTuple(field):
    " The field as a tuple, or None when it is not a sequence. "
    try:
        return tuple(field)
    except TypeError:
        return None


def _opens(value, nonce, expectedHash):
    return isInteger(nonce) and commitHash(value, nonce) == expectedHash


def verify(request, response, commitment):
    """
    Check one round. `commitment` may be the prover's full Commitment or
    the PublicCommitment, only the hashes are read.

    A malformed response counts as a dishonest prover and is rejected.
    """
    if isinstance(request, RevealMapping):
        # The verifier asked for the mapping, but got something else
        if not isinstance(response, MappingResponse):
            log.debug("Expected the mapping, got %s", type(response).__name__)
            return False

        mapping = _asTuple(response.mapping)
        # The mapping is not a valid bijection of 1-9
        if mapping is None or not hasNumbers1To9(mapping):
            return False

        # The mapping does not match the commitment
        return _opens(mapping, response.nonce, commitment.mappingHash)

    # The verifier asked for cells, but got the mapping
    if not isinstance(response, ValuesResponse):
        log.debug("Expected cell values, got %s", type(response).__name__)
        return False

    indices = request.indices
    values, nonces = _asTuple(response.values), _asTuple(response.nonces)
    if values is None or nonces is None:
        return False
    if not len(values) == len(nonces) == len(indices):
        return False

    # The revealed cells violate the rules of Sudoku
    if not hasNumbers1To9(values):
        return False

    # The revealed cells do not match the commitment
    for value, nonce, i in zip(values, nonces, indices):
        if not _opens(value, nonce, commitment.gridHashes[i]):
            return False

    return True
