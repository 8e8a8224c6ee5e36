from __future__ import annotations

"""Command-line solver. Reads a 9-line digit grid (0 = blank) from a file or stdin, prints the original and the solution (or 'There is no solution.'), and optionally writes a JSON payload and a PNG board."""


# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli --input puzzle.txt
#   python -m apps.cli.solve_cli --config solve.yaml --png out/solution.png --json out/solution.json
#   cat puzzle.txt | python -m apps.cli.solve_cli
#
# Exit status: 0 solved, 1 malformed or unreadable input (or bad config), 2 no solution.
import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from solver.grid_io import GridFormatError, format_grid, read_grid
from solver.sudoku_tools import solve_tool

from .config import build_config
from .grid_renderer import render_grid_png

PROMPT = "Enter Sudoku grid (no spaces between numbers, '0' for blanks, one line for each row):"

EXIT_SOLVED = 0
EXIT_BAD_INPUT = 1
EXIT_NO_SOLUTION = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Brute-force Sudoku solver.")
    ap.add_argument("--input", type=str, default=None, help="Grid file (default: stdin)")
    ap.add_argument("--config", type=str, default=None, help="YAML file with defaults for these options")
    ap.add_argument("--json", type=str, default=None, help="Write the solve payload here")
    ap.add_argument("--png", type=str, default=None, help="Render the board to this PNG")
    ap.add_argument("--cell_size", type=int, default=None, help="PNG cell size in pixels")
    ap.add_argument("--log-level", dest="log_level", type=str.upper, choices=LOG_LEVELS, default=None)
    return ap


def load_input(path: str | None):
    if path:
        with open(path, "r", encoding="utf-8") as f:
            return read_grid(f)
    if sys.stdin.isatty():
        print(PROMPT)
    return read_grid(sys.stdin)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = build_config(
            args.config,
            input=args.input,
            json=args.json,
            png=args.png,
            cell_size=args.cell_size,
            log_level=args.log_level,
        )
    except (OSError, yaml.YAMLError) as e:
        print(f"ERROR config: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    level = str(cfg.log_level).upper()
    if level not in LOG_LEVELS:
        print(f"ERROR config: unknown log_level {cfg.log_level!r} (expected one of {', '.join(LOG_LEVELS)})", file=sys.stderr)
        return EXIT_BAD_INPUT
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        grid = load_input(cfg.input)
    except GridFormatError as e:
        print(f"ERROR {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except UnicodeDecodeError as e:
        print(f"ERROR input is not UTF-8 text: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except OSError as e:
        print(f"ERROR cannot read input: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    result = solve_tool(grid)

    print("Original grid:")
    print(format_grid(grid), end="")
    if result["ok"]:
        print("Solution:")
        print(format_grid(result["grid"]), end="")
    else:
        print("There is no solution.")

    if cfg.json:
        Path(cfg.json).parent.mkdir(parents=True, exist_ok=True)
        payload = {"original": grid, **result}
        Path(cfg.json).write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"[json] wrote {cfg.json}")
    if cfg.png:
        Path(cfg.png).parent.mkdir(parents=True, exist_ok=True)
        render_grid_png(grid, result["grid"] if result["ok"] else None, cfg.png, cell=int(cfg.cell_size))
        print(f"[png] wrote {cfg.png}")

    return EXIT_SOLVED if result["ok"] else EXIT_NO_SOLUTION


if __name__ == "__main__":
    sys.exit(main())
