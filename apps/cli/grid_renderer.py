from __future__ import annotations

from types_sudoku import Grid

"""Render a board to PNG: givens in black, digits filled in by the solver in green."""


# grid_renderer.py
from PIL import Image, ImageDraw, ImageFont

MARGIN = 10


def load_font(size):
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default(size)


def cell_rect(r, c, cell, pad=0):
    x0 = MARGIN + (c - 1) * cell + pad
    y0 = MARGIN + (r - 1) * cell + pad
    x1 = MARGIN + c * cell - pad
    y1 = MARGIN + r * cell - pad
    return (x0, y0, x1, y1)


def render_grid_png(original: Grid, solved: Grid | None, out_path: str, cell: int = 60) -> str:
    """Draw `solved` (or `original` when None) with box lines; cells blank in `original` are shown green."""
    board = solved if solved is not None else original
    side = 9 * cell + 2 * MARGIN
    im = Image.new("RGB", (side, side), (255, 255, 255))
    d = ImageDraw.Draw(im)

    for i in range(10):
        width = 4 if i % 3 == 0 else 1
        pos = MARGIN + i * cell
        d.line((MARGIN, pos, MARGIN + 9 * cell, pos), fill=(0, 0, 0), width=width)
        d.line((pos, MARGIN, pos, MARGIN + 9 * cell), fill=(0, 0, 0), width=width)

    f = load_font(int(cell * 0.6))
    for r in range(1, 10):
        for c in range(1, 10):
            v = board[r - 1][c - 1]
            if v == 0:
                continue
            x0, y0, x1, y1 = cell_rect(r, c, cell)
            color = (0, 0, 0) if original[r - 1][c - 1] != 0 else (0, 128, 0)
            d.text(((x0 + x1) // 2, (y0 + y1) // 2), str(v), fill=color, font=f, anchor="mm")

    im.save(out_path)
    return out_path
