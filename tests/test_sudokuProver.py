import numpy as np
import pytest

from hashUtils import NONCE_BOUND, commitHash
from sudokuChallenges import REVEAL_MAPPING, buildCatalogue
from sudokuGrids import assertIsSudoku, solution
from sudokuProver import (MappingResponse, Prover, PublicCommitment, ValuesResponse,
                          commit, permute, reveal)


def test_permutation_is_a_bijection_applied_to_the_solution():
    for _ in range(200):
        permutation = permute(solution)
        mapping, grid = permutation
        assert sorted(mapping) == list(range(1, 10))
        assert all(grid[i] == mapping[solution[i] - 1] for i in range(81))
        assertIsSudoku(grid)


def test_permutations_vary():
    mappings = {tuple(permute(solution).mapping) for _ in range(50)}
    assert len(mappings) > 1


def test_permutation_is_read_only():
    permutation = permute(solution)
    with pytest.raises(ValueError):
        permutation.grid[0] = 1
    with pytest.raises(ValueError):
        permutation.mapping[0] = 1


def test_permute_rejects_malformed_solution():
    with pytest.raises(ValueError):
        permute(solution[:80])


def test_commitment_binds_each_cell_and_the_mapping():
    permutation = permute(solution)
    commitment = commit(permutation)
    assert len(commitment.gridHashes) == len(commitment.gridNonces) == 81
    assert all(0 <= n < NONCE_BOUND for n in commitment.gridNonces)
    assert len(set(commitment.gridNonces)) == 81
    for value, nonce, h in zip(permutation.grid, commitment.gridNonces, commitment.gridHashes):
        assert commitHash(int(value), nonce) == h
    assert commitHash(list(permutation.mapping), commitment.mappingNonce) == commitment.mappingHash


def test_public_commitment_holds_no_nonces():
    commitment = commit(permute(solution))
    public = commitment.public()
    assert isinstance(public, PublicCommitment)
    assert public == (commitment.gridHashes, commitment.mappingHash)


def test_reveal_row_0():
    permutation = permute(solution)
    commitment = commit(permutation)
    response = reveal(permutation, commitment, buildCatalogue()[0])
    assert isinstance(response, ValuesResponse)
    assert response.values == tuple(int(v) for v in permutation.grid[0:9])
    assert response.nonces == commitment.gridNonces[0:9]


def test_reveal_mapping():
    permutation = permute(solution)
    commitment = commit(permutation)
    response = reveal(permutation, commitment, REVEAL_MAPPING)
    assert isinstance(response, MappingResponse)
    assert response.mapping == tuple(int(v) for v in permutation.mapping)
    assert response.nonce == commitment.mappingNonce


def test_unopened_nonces_never_leak():
    permutation = permute(solution)
    commitment = commit(permutation)
    for request in buildCatalogue():
        response = reveal(permutation, commitment, request)
        if isinstance(response, MappingResponse):
            assert response.nonce not in commitment.gridNonces
            continue
        hidden = {commitment.gridNonces[i] for i in range(81) if i not in request.indices}
        assert hidden.isdisjoint(response.nonces)
        assert commitment.mappingNonce not in response.nonces


def test_prover_round_opens_once():
    proverRound = Prover(solution).startRound()
    assert isinstance(proverRound.publicCommitment, PublicCommitment)
    proverRound.reveal(REVEAL_MAPPING)
    with pytest.raises(RuntimeError):
        proverRound.reveal(REVEAL_MAPPING)


def test_rounds_are_independent():
    prover = Prover(solution)
    a, b = prover.startRound(), prover.startRound()
    assert a.publicCommitment.mappingHash != b.publicCommitment.mappingHash
    assert not np.intersect1d(a.publicCommitment.gridHashes, b.publicCommitment.gridHashes).size
