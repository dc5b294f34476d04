import numpy as np
import pytest


PUZZLE_ROWS = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]

SOLUTION_ROWS = [
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
]

SOLUTION_TEXT = (
    "534 678 912\n"
    "672 195 348\n"
    "198 342 567\n"
    "\n"
    "859 761 423\n"
    "426 853 791\n"
    "713 924 856\n"
    "\n"
    "961 537 284\n"
    "287 419 635\n"
    "345 286 179"
)


def to_grid(rows):
    return np.array([[0 if c == "." else int(c) for c in row] for row in rows], dtype=np.int8)


@pytest.fixture
def puzzle():
    return to_grid(PUZZLE_ROWS)


@pytest.fixture
def solution():
    return to_grid(SOLUTION_ROWS)


@pytest.fixture
def write_puzzle(tmp_path):
    def _write(lines, name="puzzle.sud"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return str(path)
    return _write
