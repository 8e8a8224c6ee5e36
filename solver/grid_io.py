"""Text I/O for grids: parse the nine-line digit format (0 = blank) and render the boxed display block."""

# grid_io.py
# Input format, one row per line, no separators:
#   000000706
#   080900020
#   ...
from __future__ import annotations

from typing import Iterable, TextIO

from types_sudoku import Grid

RULE = "-" * 30


class GridFormatError(ValueError):
    """Input text is not a 9x9 block of digits. `row`/`col` are 1-based when known."""

    def __init__(self, message: str, row: int | None = None, col: int | None = None):
        if col is not None:
            message = f"(row {row}, column {col}): {message}"
        elif row is not None:
            message = f"(row {row}): {message}"
        super().__init__(message)
        self.row = row
        self.col = col


def parse_grid(lines: Iterable[str]) -> Grid:
    rows = [line.rstrip() for line in lines]
    rows = [line for line in rows if line]
    if len(rows) != 9:
        raise GridFormatError("A Sudoku grid must contain 9 rows.")
    grid = []
    for r, line in enumerate(rows, 1):
        if len(line) != 9:
            raise GridFormatError("A Sudoku grid must contain 9 columns.", row=r)
        row = []
        for c, ch in enumerate(line, 1):
            if ch not in "0123456789":
                raise GridFormatError(
                    "Each cell in a Sudoku grid must contain an integer from 0 to 9.", row=r, col=c
                )
            row.append(int(ch))
        grid.append(row)
    return grid


def read_grid(stream: TextIO) -> Grid:
    """Read nine rows from `stream`; anything after the ninth row is left unread."""
    lines = []
    while len(lines) < 9:
        line = stream.readline()
        if not line:
            break
        if line.strip():
            lines.append(line)
    return parse_grid(lines)


def format_grid(grid: Grid) -> str:
    out = []
    for r, row in enumerate(grid):
        if r % 3 == 0:
            out.append(RULE)
        parts = []
        for c, v in enumerate(row):
            if c % 3 == 0:
                parts.append("|")
            parts.append(f"{v:>3}")
        parts.append("|")
        out.append("".join(parts))
    out.append(RULE)
    return "\n".join(out) + "\n"
