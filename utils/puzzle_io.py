import sys

import numpy as np

from models.grid import BOX_SIZE, GRID_SIZE, new_grid


DIGITS = "0123456789"
BLANK = "."


class PuzzleFileError(ValueError):
    """A puzzle file is missing or does not hold a 9x9 grid"""


def parse_row(line):
    """Strip all whitespace from a line and map '.' to 0"""
    return "".join(line.split()).replace(BLANK, "0")


def read_puzzle(path):
    """Read a puzzle from a text file.

    Blank lines and lines starting with '#' are skipped. Every other line is
    one row of exactly 9 digits, with '.' allowed for a blank. Line numbers in
    error messages count every line of the file.
    """
    grid = new_grid()
    row = 0

    try:
        with open(path, "rb") as f:
            for line_num, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8").rstrip("\r\n")
                except UnicodeDecodeError as e:
                    raise PuzzleFileError(
                        f'Line #{line_num} of "{path}" is not valid text: {e}') from e
                stripped = line.strip()
                if not stripped or stripped.startswith("#"):
                    continue

                digits = parse_row(stripped)
                if len(digits) != GRID_SIZE:
                    raise PuzzleFileError(
                        f'Line #{line_num} of "{path}" does not have 9 digits: {line}')
                if any(c not in DIGITS for c in digits):
                    raise PuzzleFileError(
                        f'Line #{line_num} of "{path}" has characters other than digits and ".": {line}')
                if row >= GRID_SIZE:
                    raise PuzzleFileError(
                        f'Line #{line_num} of "{path}" is past the 9th row: {line}')

                grid[row, :] = [int(c) for c in digits]
                row += 1
    except OSError as e:
        raise PuzzleFileError(f"Unable to open {path} for read: {e}") from e

    if row != GRID_SIZE:
        raise PuzzleFileError(f'"{path}" has {row} rows, expected {GRID_SIZE}')

    return grid


def format_grid(grid):
    """Grid as text: three groups of three per row, '.' for blanks"""
    lines = []
    for i, row in enumerate(np.asarray(grid)):
        if i % BOX_SIZE == 0 and i != 0:
            lines.append("")

        row_str = "".join(str(cell) if cell != 0 else BLANK for cell in row)
        lines.append(" ".join(row_str[j:j + BOX_SIZE]
                              for j in range(0, GRID_SIZE, BOX_SIZE)))
    return "\n".join(lines)


def print_grid(grid, file=None):
    print(format_grid(grid), file=file or sys.stdout)
