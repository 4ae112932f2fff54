# crucible/viz.py
from __future__ import annotations
import os
from typing import Optional, Set
from PIL import Image, ImageDraw

from .types import Coord
from .grid import Grid

def _shade(cost: int) -> tuple:
    # 0 -> near white, 9 -> dark
    v = 245 - min(cost, 9) * 22
    return (v, v, v)

def draw_grid_png(grid: Grid,
                  expanded: Optional[Set[Coord]],
                  out_png: str,
                  cell: int = 10,
                  start: Optional[Coord] = None,
                  goal: Optional[Coord] = None) -> None:
    W, H = grid.cols * cell, grid.rows * cell
    img = Image.new("RGB", (W, H), (255, 255, 255))
    drw = ImageDraw.Draw(img)

    # cost field
    for r in range(grid.rows):
        for c in range(grid.cols):
            x0, y0 = c * cell, r * cell
            x1, y1 = x0 + cell - 1, y0 + cell - 1
            cost = grid.get((r, c))
            if cost is None:
                drw.rectangle((x0, y0, x1, y1), fill=(0, 0, 0))
            else:
                drw.rectangle((x0, y0, x1, y1), fill=_shade(cost))

    # finalized cells, tinted over their cost shade
    if expanded:
        for (r, c) in expanded:
            cost = grid.get((r, c))
            if cost is None:
                continue
            g = _shade(cost)[0]
            x0, y0 = c * cell, r * cell
            drw.rectangle((x0, y0, x0 + cell - 1, y0 + cell - 1), fill=(255, g * 200 // 255, g * 200 // 255))

    sr, sc = start if start is not None else grid.start
    gr, gc = goal if goal is not None else grid.goal
    drw.rectangle((sc*cell, sr*cell, sc*cell+cell-1, sr*cell+cell-1), fill=(100, 220, 120))
    drw.rectangle((gc*cell, gr*cell, gc*cell+cell-1, gr*cell+cell-1), fill=(255, 170, 80))

    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
