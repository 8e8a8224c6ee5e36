"""Core Sudoku utilities used by the search: index math, house values, and the single-pass candidate calculator."""

# solver_core.py
# - index helpers (1-based rows/cols, boxes numbered 1..9 left->right, top->bottom)
# - candidate computation (one constraint pass, no propagation to closure)
# Grid is 9x9 list of lists of ints (0..9). 0 = blank.
from __future__ import annotations

import logging

from types_sudoku import CandidateGrid, CandidateMap, Candidates, Cell, Fixed, Grid

log = logging.getLogger(__name__)

DIGITS = tuple(range(1, 10))


def rc_to_key(r: int, c: int) -> str:
    return f"r{r}c{c}"


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def which_box(r: int, c: int) -> int:
    return 3 * ((r - 1) // 3) + ((c - 1) // 3) + 1


def unit_cells_box(b: int) -> list[Cell]:
    br = (b - 1) // 3
    bc = (b - 1) % 3
    r0 = 3 * br + 1
    c0 = 3 * bc + 1
    return [(r0 + i, c0 + j) for i in range(3) for j in range(3)]


def row_values(grid: Grid, r: int) -> set:
    return set(grid[r - 1]) - {0}


def col_values(grid: Grid, c: int) -> set:
    return {grid[i][c - 1] for i in range(9)} - {0}


def box_values(grid: Grid, b: int) -> set:
    return {grid[r - 1][c - 1] for r, c in unit_cells_box(b)} - {0}


def duplicates_in_unit(vals) -> set:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def unit_labels_and_cells():
    """Yield (label, cells) for all 27 houses: rows r1..r9, cols c1..c9, boxes b1..b9."""
    for r in range(1, 10):
        yield f"r{r}", [(r, c) for c in range(1, 10)]
    for c in range(1, 10):
        yield f"c{c}", [(r, c) for r in range(1, 10)]
    for b in range(1, 10):
        yield f"b{b}", unit_cells_box(b)


def has_conflicts(grid: Grid) -> bool:
    """True if any row, column or box repeats a nonzero digit."""
    for _, cells in unit_labels_and_cells():
        if duplicates_in_unit(grid[r - 1][c - 1] for r, c in cells):
            return True
    return False


def compute_candidates(grid: Grid) -> tuple[CandidateGrid, bool]:
    """Build the candidate grid for `grid` in a single pass.

    Every nonzero cell becomes ``Fixed(value)``; every blank becomes
    ``Candidates(digits)`` with the digits unused in its row, column and box,
    ascending. The used-digit sets are taken from the input grid only, so
    resolving one blank never narrows another within the same call.

    Returns ``(candidate_grid, ok)``. ``ok`` is False as soon as a blank with no
    legal digit is met; the rows built so far are returned but are incomplete.
    """
    used_row = [row_values(grid, r) for r in range(1, 10)]
    used_col = [col_values(grid, c) for c in range(1, 10)]
    used_box = [box_values(grid, b) for b in range(1, 10)]

    cand: CandidateGrid = []
    for r in range(1, 10):
        row = []
        cand.append(row)
        for c in range(1, 10):
            v = grid[r - 1][c - 1]
            if v != 0:
                row.append(Fixed(v))
                continue
            used = used_row[r - 1] | used_col[c - 1] | used_box[which_box(r, c) - 1]
            opts = tuple(d for d in DIGITS if d not in used)
            if not opts:
                log.debug("dead end: no candidate for %s", rc_to_key(r, c))
                return cand, False
            row.append(Candidates(opts))
    return cand, True


def first_unresolved(cand: CandidateGrid) -> Cell | None:
    """First cell in row-major order whose entry is still a candidate set."""
    for r in range(1, 10):
        for c in range(1, 10):
            if isinstance(cand[r - 1][c - 1], Candidates):
                return (r, c)
    return None


def resolved_grid(cand: CandidateGrid) -> Grid:
    """Back to a plain grid: fixed digits kept, candidate sets become blanks."""
    return [[e.digit if isinstance(e, Fixed) else 0 for e in row] for row in cand]


def candidate_map(cand: CandidateGrid) -> CandidateMap:
    """Key view of the blank cells, e.g. {'r1c2': [1, 2, 5], ...}."""
    out = {}
    for r, row in enumerate(cand, 1):
        for c, e in enumerate(row, 1):
            if isinstance(e, Candidates):
                out[rc_to_key(r, c)] = list(e.digits)
    return out
