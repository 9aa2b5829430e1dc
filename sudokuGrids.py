# ZK Sudoku intro: http://blog.computationalcomplexity.org/2006/08/zero-knowledge-sudoku.html

#%% The puzzle and its secret solution

import numpy as np

digits = np.arange(1, 10)

# Map of grid positions to flat indices
idGrid = np.arange(9 * 9).reshape(9, 9)

_ = 0

# The problem. Both parties know this.
puzzle = np.array([
    7, 4, _,  3, _, 5,  2, 1, _,
    _, _, _,  7, _, _,  5, 6, _,
    _, _, _,  _, 8, 1,  _, 7, _,

    _, 1, _,  _, 2, 8,  _, _, 7,
    2, _, _,  _, 4, _,  _, _, 6,
    9, _, _,  6, 3, _,  _, 5, _,

    _, 6, _,  8, 5, _,  _, _, _,
    _, 3, 1,  _, _, 2,  _, _, _,
    _, 7, 2,  9, _, 6,  _, 8, 3,
])

# The solution. Only the prover knows this.
solution = np.array([
    7, 4, 8,  3, 6, 5,  2, 1, 9,
    1, 2, 3,  7, 9, 4,  5, 6, 8,
    6, 9, 5,  2, 8, 1,  3, 7, 4,

    3, 1, 6,  5, 2, 8,  9, 4, 7,
    2, 5, 7,  1, 4, 9,  8, 3, 6,
    9, 8, 4,  6, 3, 7,  1, 5, 2,

    4, 6, 9,  8, 5, 3,  7, 2, 1,
    8, 3, 1,  4, 7, 2,  6, 9, 5,
    5, 7, 2,  9, 1, 6,  4, 8, 3,
])

puzzle.flags.writeable = False
solution.flags.writeable = False


def toGrid(values, allowBlank=False):
    """
    Convert values to a flat array of 81 digits.

    Raises ValueError for anything that is not a 9x9 grid of digits,
    since that is a bug in the caller rather than a dishonest prover.
    """
    grid = np.asarray(values)
    if grid.size != 81 or not np.issubdtype(grid.dtype, np.integer):
        raise ValueError("A grid must hold 81 integers, got %r" % (grid.shape,))
    grid = grid.reshape(81)
    low = 0 if allowBlank else 1
    if grid.min() < low or grid.max() > 9:
        raise ValueError("Grid values must be between %i and 9" % low)
    return grid


def checkDigits(block):
    return np.all(np.sort(np.asarray(block).flatten()) == digits)


def assertIsSudoku(grid):
    grid = np.asarray(grid).reshape(9, 9)
    for i in range(9):
        assert checkDigits(grid[i,:])
        assert checkDigits(grid[:,i])
    for i in range(3):
        for j in range(3):
            assert checkDigits(grid[3*i:3*i+3, 3*j:3*j+3])


def assertSolvesPuzzle(grid, puzzle):
    " Every given cell of the puzzle must keep its value in the grid. "
    grid, puzzle = np.asarray(grid).flatten(), np.asarray(puzzle).flatten()
    given = puzzle != 0
    assert np.all(grid[given] == puzzle[given])


assertIsSudoku(solution)
assertSolvesPuzzle(solution, puzzle)


def formatGrid(grid):
    " Rows of 3 triples, blanks shown as dots. "
    grid = np.asarray(grid).reshape(9, 9)
    lines = []
    for line in range(9):
        triples = ["".join(str(v) if v else "." for v in grid[line, triple:triple+3])
                   for triple in range(0, 9, 3)]
        lines.append("  ".join(triples))
        if line in (2, 5):
            lines.append("")
    return "\n".join(lines)
