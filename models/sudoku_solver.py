import sys
import time
from enum import Enum

import numpy as np

from models.cursor import BACKWARD, FORWARD, OUT_OF_BOUNDS, first_cell, step
from models.grid import get_fixed, is_cell_valid, is_solved, is_valid_sudoku


class SolveStatus(Enum):
    SOLVED = "solved"
    INCONSISTENT = "inconsistent"
    UNSOLVABLE = "unsolvable"
    INVALID_GIVENS = "invalid givens"


class SolveResult:
    """Outcome of a single solve.

    ``original`` is the untouched input grid, ``grid`` is the working copy
    after the search stopped. ``errors`` lists what the final check found
    wrong with a grid the search claimed to have solved.
    """

    def __init__(self, status, original, grid, errors=None, steps=0, elapsed=0.0):
        self.status = status
        self.original = original
        self.grid = grid
        self.errors = errors or []
        self.steps = steps
        self.elapsed = elapsed

    @property
    def solved(self):
        return self.status is SolveStatus.SOLVED

    def __repr__(self):
        return (f"SolveResult(status={self.status.name}, steps={self.steps}, "
                f"errors={self.errors})")


class SudokuSolver:
    def __init__(self, verbose=False):
        self.verbose = verbose

    def solve(self, grid):
        """Solve Sudoku using backtracking"""
        # The original is kept untouched for error messages
        original = np.array(grid, dtype=np.int8)
        original.flags.writeable = False
        solution = original.copy()

        start = time.perf_counter()

        if not is_valid_sudoku(solution):
            self._log("Givens contain duplicates, not searching")
            return SolveResult(SolveStatus.INVALID_GIVENS, original, solution,
                               elapsed=time.perf_counter() - start)

        found, steps = self._search(solution)
        elapsed = time.perf_counter() - start

        if not found:
            self._log(f"Search exhausted after {steps} steps")
            return SolveResult(SolveStatus.UNSOLVABLE, original, solution,
                               steps=steps, elapsed=elapsed)

        errors = []
        if not is_valid_sudoku(solution):
            errors.append("not valid")
        if not is_solved(solution):
            errors.append("not solved")

        status = SolveStatus.INCONSISTENT if errors else SolveStatus.SOLVED
        self._log(f"Search finished after {steps} steps")
        return SolveResult(status, original, solution, errors=errors,
                           steps=steps, elapsed=elapsed)

    def _search(self, grid):
        """Walk the free cells in row major order, counting each cell upwards.

        Returns (found, steps). The grid is modified in place; on success it
        holds the solution, on failure every free cell is back to 0.
        """
        fixed = get_fixed(grid)
        cursor = first_cell(fixed)
        steps = 0

        while cursor is not OUT_OF_BOUNDS:
            row, col = cursor
            value = grid[row, col] + 1
            steps += 1

            if value > 9:
                grid[row, col] = 0
                cursor = step(fixed, row, col, BACKWARD)
                if cursor is OUT_OF_BOUNDS:
                    return False, steps
                continue

            grid[row, col] = value
            if is_cell_valid(grid, row, col):
                cursor = step(fixed, row, col, FORWARD)

        # Ran off the end going forward
        return True, steps

    def _log(self, message):
        if self.verbose:
            print(message, file=sys.stderr)
