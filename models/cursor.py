"""Row major cursor over the non-fixed cells of a grid.

Stepping either lands on the next free cell (``Advanced``) or runs off the
grid (``OUT_OF_BOUNDS``). Whether running off means "solved" or "exhausted"
depends on the direction the caller stepped in.
"""
from typing import NamedTuple, Union

from models.grid import GRID_SIZE


FORWARD = 1
BACKWARD = -1


class Advanced(NamedTuple):
    row: int
    col: int


class OutOfBounds:
    def __repr__(self):
        return "OUT_OF_BOUNDS"


OUT_OF_BOUNDS = OutOfBounds()

StepResult = Union[Advanced, OutOfBounds]


def step(fixed, row: int, col: int, direction: int) -> StepResult:
    """Move from (row, col) to the next non-fixed cell in the given direction"""
    if direction not in (FORWARD, BACKWARD):
        raise ValueError(f"direction must be {FORWARD} or {BACKWARD}, got {direction!r}")

    while True:
        col += direction
        if col < 0:
            col = GRID_SIZE - 1
            row -= 1
        elif col >= GRID_SIZE:
            col = 0
            row += 1

        if row < 0 or row >= GRID_SIZE:
            return OUT_OF_BOUNDS

        if not fixed[row, col]:
            return Advanced(row, col)


def first_cell(fixed) -> StepResult:
    # (0, -1) sits just before the first cell
    return step(fixed, 0, -1, FORWARD)
