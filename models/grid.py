import numpy as np


GRID_SIZE = 9
BOX_SIZE = 3


def new_grid():
    """Return an empty 9x9 grid (all blanks)"""
    return np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)


def get_fixed(grid):
    """Mask of the given cells: True wherever the grid holds a digit"""
    return np.asarray(grid) > 0


def is_cell_valid(grid, row, col):
    """Check that no other cell in the row, column or box holds grid[row, col]"""
    num = grid[row, col]

    # Check row first, it is the cheapest in row major order
    if np.count_nonzero(grid[row, :] == num) > 1:
        return False

    # Check column
    if np.count_nonzero(grid[:, col] == num) > 1:
        return False

    # Check 3x3 box
    start_row = (row // BOX_SIZE) * BOX_SIZE
    start_col = (col // BOX_SIZE) * BOX_SIZE
    box = grid[start_row:start_row + BOX_SIZE, start_col:start_col + BOX_SIZE]
    if np.count_nonzero(box == num) > 1:
        return False

    return True


def is_valid_sudoku(grid):
    """Check if every placed digit of the grid is valid"""
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            if grid[i, j] != 0 and not is_cell_valid(grid, i, j):
                return False
    return True


def is_solved(grid):
    """A grid is solved when no blanks are left"""
    return bool(np.all(np.asarray(grid) != 0))
