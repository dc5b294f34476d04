import argparse
import os
import sys

from models.sudoku_solver import SolveStatus, SudokuSolver
from utils.image_processing import save_grid_image
from utils.puzzle_io import PuzzleFileError, print_grid, read_puzzle


USAGE = (
    "sudoku-solver [-v] [--render DIR] puzzle1.sud [puzzle2.sud ...]\n"
    "  -h  This help message"
)


class SudokuApp:
    def __init__(self, render_dir=None, verbose=False):
        self.sudoku_solver = SudokuSolver(verbose=verbose)
        self.render_dir = render_dir
        self.verbose = verbose
        self.current_grid = None
        self.current_path = None

    def run(self, paths):
        """Solve every puzzle in order, stopping at the first failure.

        A path repeated right after itself reuses the grid already loaded.
        Returns the process exit status.
        """
        for index, path in enumerate(paths, start=1):
            if index > 1:
                print()

            if path != self.current_path:
                self.current_grid = read_puzzle(path)
                self.current_path = path

            if not self.process_puzzle(path, index):
                return 1
        return 0

    def process_puzzle(self, path, index):
        """Solve one grid and report it, True if it was solved"""
        result = self.sudoku_solver.solve(self.current_grid)

        if self.verbose:
            print(f"{path}: {result.status.value} in {result.steps} steps "
                  f"({result.elapsed:.3f}s)", file=sys.stderr)

        if result.status in (SolveStatus.UNSOLVABLE, SolveStatus.INVALID_GIVENS):
            print("Could not find a solution for:", file=sys.stderr)
            print_grid(result.original)
            if result.status is SolveStatus.INVALID_GIVENS:
                print("The puzzle contains invalid numbers (duplicates in row/column/box).",
                      file=sys.stderr)
            return False

        if result.errors:
            print(f"Found an invalid solution ({', '.join(result.errors)}):", file=sys.stderr)
        print_grid(result.grid)

        if self.render_dir and result.solved:
            self.save_solution_image(path, index, result)

        return result.solved

    def save_solution_image(self, path, index, result):
        stem = os.path.splitext(os.path.basename(path))[0]
        filename = os.path.join(self.render_dir, f"{index}_{stem}.png")
        save_grid_image(filename, result.original, result.grid)
        if self.verbose:
            print(f"Saved solution image to {filename}", file=sys.stderr)


class UsageParser(argparse.ArgumentParser):
    """Report bad arguments with the same two-line usage as -h"""

    def error(self, message):
        print(USAGE, file=sys.stderr)
        self.exit(2, f"Error: {message}\n")


def build_parser():
    parser = UsageParser(prog="sudoku-solver", add_help=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--render", metavar="DIR", default=None)
    parser.add_argument("paths", nargs="*")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.help or not args.paths:
        print(USAGE)
        return 0

    app = SudokuApp(render_dir=args.render, verbose=args.verbose)
    try:
        return app.run(args.paths)
    except (PuzzleFileError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
