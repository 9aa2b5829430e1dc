""" Prover side of the interactive Sudoku proof.

Each round the prover hides the solution behind a fresh random mapping
of digits, commits to every cell of the hidden grid and to the mapping,
then opens only what the verifier asks for.
"""

from collections import namedtuple

import numpy as np

from hashUtils import commitHash, randomNonce, shuffled
from sudokuChallenges import RevealMapping
from sudokuGrids import digits, toGrid


Permutation = namedtuple("Permutation", "mapping grid")

PublicCommitment = namedtuple("PublicCommitment", "gridHashes mappingHash")

MappingResponse = namedtuple("MappingResponse", "mapping nonce")
ValuesResponse = namedtuple("ValuesResponse", "values nonces")


class Commitment(namedtuple("Commitment", "gridHashes gridNonces mappingHash mappingNonce")):
    __slots__ = ()

    def public(self):
        " The part that can be sent to the verifier: hashes only. "
        return PublicCommitment(self.gridHashes, self.mappingHash)


#%% Permute

def permute(solution):
    grid = toGrid(solution)
    # Pick a random mapping of digits
    mapping = np.array(shuffled(digits))
    # Encrypt the grid
    encrypted = mapping[grid - 1]
    mapping.flags.writeable = False
    encrypted.flags.writeable = False
    return Permutation(mapping, encrypted)


#%% Commit

def commit(permutation):
    gridNonces = tuple(randomNonce() for _ in range(len(permutation.grid)))
    gridHashes = tuple(commitHash(x, n) for x, n in zip(permutation.grid, gridNonces))

    mappingNonce = randomNonce()
    mappingHash = commitHash(permutation.mapping, mappingNonce)

    return Commitment(gridHashes, gridNonces, mappingHash, mappingNonce)


#%% Reveal

def reveal(permutation, commitment, request):
    if isinstance(request, RevealMapping):
        return MappingResponse(
            tuple(int(v) for v in permutation.mapping),
            commitment.mappingNonce)

    return ValuesResponse(
        tuple(int(permutation.grid[i]) for i in request.indices),
        tuple(commitment.gridNonces[i] for i in request.indices))


class ProverRound(object):
    " One round: commitments first, then a single opening. "

    def __init__(self, permutation, commitment):
        self._permutation = permutation
        self._commitment = commitment
        self.publicCommitment = commitment.public()

    def reveal(self, request):
        if self._permutation is None:
            raise RuntimeError("This round was already opened")
        response = reveal(self._permutation, self._commitment, request)
        # Forget the secrets, the round is over.
        self._permutation = self._commitment = None
        return response


class Prover(object):
    " Honest prover who knows a solution. "

    def __init__(self, solution):
        self.solution = toGrid(solution)

    def startRound(self):
        permutation = permute(self.solution)
        return ProverRound(permutation, commit(permutation))
