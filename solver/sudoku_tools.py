"""Tool-friendly wrappers over the solver: sanity report, candidate map, and a solve call returning a JSON-ready payload. Used by the CLI and the optional HTTP API."""

# sudoku_tools.py
from __future__ import annotations

from types_sudoku import Grid

from .backtracking import SolveStats, search
from .solver_core import (
    candidate_map,
    clone_grid,
    compute_candidates,
    duplicates_in_unit,
    has_conflicts,
    rc_to_key,
    unit_labels_and_cells,
)


def sanity_check(original: Grid, current: Grid) -> dict:
    issues = []
    for r in range(1, 10):
        for c in range(1, 10):
            if original[r - 1][c - 1] != 0 and current[r - 1][c - 1] not in (0, original[r - 1][c - 1]):
                issues.append(
                    {
                        "type": "given_overwritten",
                        "cell": rc_to_key(r, c),
                        "given": original[r - 1][c - 1],
                        "found": current[r - 1][c - 1],
                    }
                )
    for label, cells in unit_labels_and_cells():
        vals = [current[r - 1][c - 1] for r, c in cells]
        dups = duplicates_in_unit(vals)
        if dups:
            bad = [rc_to_key(r, c) for (r, c), v in zip(cells, vals) if v in dups]
            issues.append({"type": "duplicate", "unit": label, "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def is_solved(grid: Grid) -> bool:
    """Every cell filled and no house repeats a digit."""
    return all(v != 0 for row in grid for v in row) and not has_conflicts(grid)


def compute_candidates_tool(current: Grid) -> dict:
    """Candidate digits for each empty cell. Returns {'ok': bool, 'candidates': {'r1c2': [1, 2, 5], ...}}.

    On a dead end only the cells scanned before it are listed.
    """
    cand, ok = compute_candidates(current)
    return {"ok": ok, "candidates": candidate_map(cand)}


def solve_tool(grid: Grid) -> dict:
    stats = SolveStats()
    if has_conflicts(grid):
        return {"ok": False, "reason": "conflict", "grid": clone_grid(grid), "stats": stats.as_dict()}
    solution = search(grid, stats)
    if solution is None:
        return {"ok": False, "reason": "unsatisfiable", "grid": clone_grid(grid), "stats": stats.as_dict()}
    return {"ok": True, "reason": "solved", "grid": solution, "stats": stats.as_dict()}
