"""Backtracking N-queens solver for a board given with one fixed queen."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field


def find_n(text: str) -> int:
    """Return the number of digits on the first line of ``text``."""
    count = 0
    for char in text:
        if not char.isprintable():
            break
        if char.isdigit():
            count += 1
    return count


@dataclass
class Board:
    """An N x N board of ``'0'`` and ``'1'`` cells with one given queen."""

    cells: list[list[str]]
    initial: tuple[int, int]
    _rows: set[int] = field(default_factory=set, repr=False)
    _cols: set[int] = field(default_factory=set, repr=False)
    _pos_diags: set[int] = field(default_factory=set, repr=False)
    _neg_diags: set[int] = field(default_factory=set, repr=False)

    def __post_init__(self) -> None:
        row, col = self.initial
        self._occupy(row, col)

    @classmethod
    def from_csv(cls, text: str) -> Board:
        """Read a board from comma-separated 0s and 1s; N comes from line one."""
        n = find_n(text)
        if n == 0:
            raise ValueError("the board has no cells")
        marks = (char for char in text if char in "01")
        cells: list[list[str]] = []
        queens: list[tuple[int, int]] = []
        for row in range(n):
            line: list[str] = []
            for col in range(n):
                mark = next(marks, None)
                if mark is None:
                    raise ValueError(f"expected {n * n} cells for a {n} by {n} board")
                if mark == "1":
                    queens.append((row, col))
                line.append(mark)
            cells.append(line)
        if len(queens) != 1:
            raise ValueError("exactly one initial queen must be present")
        return cls(cells, queens[0])

    @property
    def size(self) -> int:
        """Return N, the number of rows."""
        return len(self.cells)

    def _safe(self, row: int, col: int) -> bool:
        return (
            row not in self._rows
            and col not in self._cols
            and row - col not in self._neg_diags
            and row + col not in self._pos_diags
        )

    def _occupy(self, row: int, col: int) -> None:
        self._rows.add(row)
        self._cols.add(col)
        self._neg_diags.add(row - col)
        self._pos_diags.add(row + col)

    def _vacate(self, row: int, col: int) -> None:
        self._rows.discard(row)
        self._cols.discard(col)
        self._neg_diags.discard(row - col)
        self._pos_diags.discard(row + col)

    def _place_from(self, row: int) -> bool:
        if row == self.size:
            return True
        for col in range(len(self.cells[row])):
            if (row, col) == self.initial and self._place_from(row + 1):
                return True
            if self._safe(row, col):
                self.cells[row][col] = "1"
                self._occupy(row, col)
                if self._place_from(row + 1):
                    return True
                self.cells[row][col] = "0"
                self._vacate(row, col)
        return False

    def solve(self) -> bool:
        """Place the remaining queens; return whether a solution was found."""
        return self._place_from(0)

    def render(self) -> str:
        """Return the board as space-separated rows followed by a blank line."""
        rows = "".join("".join(f"{cell} " for cell in row) + "\n" for row in self.cells)
        return rows + "\n"

    def to_csv(self) -> str:
        """Return the board as comma-separated rows."""
        return "".join(",".join(row) + "\n" for row in self.cells)


def main(argv: list[str] | None = None) -> int:
    """Solve the board in the input file and write the solution file."""
    parser = argparse.ArgumentParser(description="Solve N-queens around one given queen.")
    parser.add_argument("input", nargs="?", default="input.csv", help="board to solve")
    parser.add_argument("-o", "--output", default="solution.csv", help="where to write the solution")
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8") as stream:
            text = stream.read()
    except OSError:
        print("Input file could not be opened", file=sys.stderr)
        return 1

    try:
        board = Board.from_csv(text)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print("\ninput file -->\n")
    sys.stdout.write(board.render())

    n = board.size
    row, col = board.initial
    where = f"the given {n} by {n} chess board, with an initial queen at ({row}, {col})"
    if not board.solve():
        print(f"No solution found for {where}\n")
        return 0

    try:
        with open(args.output, "w", encoding="utf-8") as stream:
            stream.write(board.to_csv())
    except OSError:
        print(f"Solution found for {where} -->\n")
        sys.stdout.write(board.render())
    else:
        print(f"Solution found for {where} --> '{args.output}'\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())