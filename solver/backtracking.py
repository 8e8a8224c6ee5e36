"""Depth-first backtracking search over the candidate grid. Branches on the first unresolved cell in row-major order and tries its digits ascending; the first completion wins."""

# backtracking.py
# Each recursion level recomputes candidates from scratch on its own grid copy,
# so sibling branches never see each other's trial digits.
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from types_sudoku import Grid

from .solver_core import (
    clone_grid,
    compute_candidates,
    first_unresolved,
    has_conflicts,
    rc_to_key,
    resolved_grid,
)

log = logging.getLogger(__name__)


@dataclass
class SolveStats:
    nodes: int = 0  # search calls, root included
    dead_ends: int = 0
    max_depth: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


def _search(grid: Grid, stats: SolveStats, depth: int) -> Grid | None:
    stats.nodes += 1
    stats.max_depth = max(stats.max_depth, depth)

    cand, ok = compute_candidates(grid)
    if not ok:
        stats.dead_ends += 1
        return None

    cell = first_unresolved(cand)
    if cell is None:
        return resolved_grid(cand)

    r, c = cell
    digits = cand[r - 1][c - 1].digits
    if not digits:
        stats.dead_ends += 1
        return None

    base = resolved_grid(cand)
    for d in digits:
        log.debug("depth %d: try %s = %d", depth, rc_to_key(r, c), d)
        trial = clone_grid(base)
        trial[r - 1][c - 1] = d
        result = _search(trial, stats, depth + 1)
        if result is not None:
            return result

    stats.dead_ends += 1
    return None


def search(grid: Grid, stats: SolveStats | None = None) -> Grid | None:
    """Run the backtracking search on a copy of `grid` without checking the givens first."""
    if stats is None:
        stats = SolveStats()
    solution = _search(clone_grid(grid), stats, 0)
    log.info(
        "search %s: nodes=%d dead_ends=%d max_depth=%d",
        "solved" if solution is not None else "exhausted",
        stats.nodes,
        stats.dead_ends,
        stats.max_depth,
    )
    return solution


def solve_grid(grid: Grid, stats: SolveStats | None = None) -> Grid | None:
    """Return a solved copy of `grid`, or None when no assignment exists.

    `grid` itself is not modified. Grids that already repeat a digit in a row,
    column or box are rejected without searching.
    """
    if has_conflicts(grid):
        log.info("grid has conflicting givens; not searching")
        return None
    return search(grid, stats)


def solve(grid: Grid, stats: SolveStats | None = None) -> bool:
    """Solve `grid` in place. On failure the grid is left untouched."""
    solution = solve_grid(grid, stats)
    if solution is None:
        return False
    for r in range(9):
        for c in range(9):
            grid[r][c] = solution[r][c]
    return True
