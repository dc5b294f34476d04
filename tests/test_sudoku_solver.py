import numpy as np

from models.grid import get_fixed, is_solved, is_valid_sudoku
from models.sudoku_solver import SolveStatus, SudokuSolver


def test_solves_reference_puzzle(puzzle, solution):
    before = puzzle.copy()
    result = SudokuSolver().solve(puzzle)

    assert result.status is SolveStatus.SOLVED
    assert result.solved
    assert result.errors == []
    assert np.array_equal(result.grid, solution)
    assert is_valid_sudoku(result.grid) and is_solved(result.grid)

    fixed = get_fixed(before)
    assert np.array_equal(result.grid[fixed], before[fixed])
    # The caller's grid is left alone
    assert np.array_equal(puzzle, before)
    assert np.array_equal(result.original, before)
    assert result.steps > 0


def test_accepts_nested_lists(puzzle, solution):
    result = SudokuSolver().solve(puzzle.tolist())
    assert result.solved
    assert np.array_equal(result.grid, solution)


def test_full_grid_solves_without_search(solution):
    result = SudokuSolver().solve(solution)
    assert result.solved
    assert result.steps == 0
    assert np.array_equal(result.grid, solution)


def test_duplicate_givens_are_not_searched(puzzle):
    puzzle[0, 2] = 5
    result = SudokuSolver().solve(puzzle)
    assert result.status is SolveStatus.INVALID_GIVENS
    assert not result.solved
    assert result.steps == 0
    assert np.array_equal(result.original, puzzle)


def test_exhausted_search_is_unsolvable():
    grid = np.zeros((9, 9), dtype=np.int8)
    grid[0, :8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1, 8] = 9
    result = SudokuSolver().solve(grid)

    assert result.status is SolveStatus.UNSOLVABLE
    # (0, 8) tries 1 through 9, then overflows and backs off the start
    assert result.steps == 10
    assert np.array_equal(result.original, grid)
    assert result.grid[0, 8] == 0


def test_original_is_read_only(puzzle):
    result = SudokuSolver().solve(puzzle)
    assert not result.original.flags.writeable


def test_inconsistent_result_is_reported(monkeypatch, puzzle):
    monkeypatch.setattr("models.sudoku_solver.is_solved", lambda grid: False)
    result = SudokuSolver().solve(puzzle)
    assert result.status is SolveStatus.INCONSISTENT
    assert result.errors == ["not solved"]
    assert not result.solved


def test_verbose_prints_progress(capsys, puzzle):
    SudokuSolver(verbose=True).solve(puzzle)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Search finished after" in captured.err


def test_quiet_by_default(capsys, puzzle):
    SudokuSolver().solve(puzzle)
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""
