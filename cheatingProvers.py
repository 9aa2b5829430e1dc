""" Dishonest provers, to show the verifier catching them.

Neither knows a valid solution they can open consistently, so each round
at least one of the 28 challenges exposes them.
"""

import numpy as np

from sudokuProver import Permutation, Prover, ProverRound, commit, permute


def swappedCellsGrid(grid, a=0, b=1):
    " Swap two cells. Rows stay valid when both are in the same row, columns and boxes do not. "
    fake = np.array(grid).flatten()
    fake[a], fake[b] = fake[b], fake[a]
    return fake


class FakeGridProver(Prover):
    " Runs the honest protocol on a grid that is not a valid Sudoku. "


class TamperingProver(Prover):
    """
    Commits to a changed value at `cell`, then opens the real value with
    the nonce of the changed one.
    """

    def __init__(self, solution, cell=0):
        super(TamperingProver, self).__init__(solution)
        self.cell = cell

    def startRound(self):
        permutation = permute(self.solution)
        tampered = np.array(permutation.grid)
        tampered[self.cell] = tampered[self.cell] % 9 + 1
        commitment = commit(Permutation(permutation.mapping, tampered))
        return ProverRound(permutation, commitment)
