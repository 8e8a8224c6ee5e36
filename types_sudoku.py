# types_sudoku.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Cell = tuple[int, int]
"""(row, col), both 1-based."""

CandidateMap = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


@dataclass(frozen=True)
class Fixed:
    """A cell that already holds a digit."""

    digit: int


@dataclass(frozen=True)
class Candidates:
    """An unresolved cell and the digits still legal for it, ascending."""

    digits: tuple[int, ...]


CandidateEntry = Union[Fixed, Candidates]
CandidateGrid = list[list[CandidateEntry]]
"""9x9 rows of entries built by solver_core.compute_candidates; never persisted."""
