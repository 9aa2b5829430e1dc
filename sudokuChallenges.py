""" Challenges the verifier may ask for, and how to pick one.

A challenge opens either 9 cells of the permuted grid (a row, a column
or a 3x3 box), or the mapping back to the original digits.
"""

from collections import namedtuple

from hashUtils import randomBelow
from sudokuGrids import idGrid


class RevealMapping(object):
    " Ask for the digit mapping of the round. "
    kind = "mapping"

    def __repr__(self):
        return "REVEAL_MAPPING"


REVEAL_MAPPING = RevealMapping()


class IndexSequence(namedtuple("IndexSequence", "kind index indices")):
    " Ask for the cells at `indices`, in that order. "
    __slots__ = ()

    def __new__(cls, kind, index, indices):
        indices = tuple(int(i) for i in indices)
        if not indices:
            raise ValueError("A challenge must open at least one cell")
        if min(indices) < 0 or max(indices) >= idGrid.size:
            raise ValueError("Challenge indices must be in [0, %i): %r" % (idGrid.size, indices))
        return super(IndexSequence, cls).__new__(cls, kind, index, indices)


def rowChallenge(i):
    return IndexSequence("row", i, idGrid[i, :])

def columnChallenge(i):
    return IndexSequence("column", i, idGrid[:, i])

def boxChallenge(i):
    y = (i // 3) * 3
    x = (i % 3) * 3
    return IndexSequence("box", i, idGrid[y:y+3, x:x+3].flatten())


def buildCatalogue():
    " The 28 possible challenges: 9 rows, 9 columns, 9 boxes and the mapping. "
    return tuple(
        [rowChallenge(i) for i in range(9)] +
        [columnChallenge(i) for i in range(9)] +
        [boxChallenge(i) for i in range(9)] +
        [REVEAL_MAPPING])


def nextChallenge(catalogue):
    return catalogue[randomBelow(len(catalogue))]


def describeRequest(request):
    if isinstance(request, RevealMapping):
        return "mapping"
    return "%s %i" % (request.kind, request.index)
