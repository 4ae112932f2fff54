# crucible/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import random, os
from .types import Coord

BLOCKED = "#"

@dataclass(frozen=True)
class Grid:
    """
    Read-only cost field. Cells hold the cost of entering them;
    None marks a blocked cell. start/goal are only the file's defaults,
    the search takes its endpoints explicitly.
    """
    rows: int
    cols: int
    cells: Tuple[Optional[int], ...]  # row-major
    start: Coord
    goal: Coord

    def __post_init__(self) -> None:
        if len(self.cells) != self.rows * self.cols:
            raise ValueError(f"expected {self.rows}x{self.cols} cells, got {len(self.cells)}")

    @staticmethod
    def from_rows(rows: Sequence[Sequence[Optional[int]]],
                  start: Optional[Coord] = None,
                  goal: Optional[Coord] = None) -> "Grid":
        n_rows = len(rows)
        n_cols = len(rows[0]) if rows else 0
        for row in rows:
            if len(row) != n_cols:
                raise ValueError(f"ragged grid: row of length {len(row)}, expected {n_cols}")
        cells = tuple(v for row in rows for v in row)
        if start is None:
            start = (0, 0)
        if goal is None:
            goal = (n_rows - 1, n_cols - 1)
        return Grid(n_rows, n_cols, cells, start, goal)

    @staticmethod
    def parse(text: str) -> "Grid":
        lines = [line.strip() for line in text.splitlines() if line.strip()]
        if not lines:
            raise ValueError("empty grid")

        start = goal = None
        header = lines[0].split()
        if header and header[0] == "GRID":
            if len(header) != 5:
                raise ValueError(f"bad header: {lines[0]!r}")
            sr, sc, gr, gc = map(int, header[1:])
            start, goal = (sr, sc), (gr, gc)
            lines = lines[1:]

        rows: List[List[Optional[int]]] = []
        for line in lines:
            row: List[Optional[int]] = []
            for ch in line:
                if ch == BLOCKED:
                    row.append(None)
                elif ch.isdigit():
                    row.append(int(ch))
                else:
                    raise ValueError(f"unexpected character {ch!r} in row {line!r}")
            rows.append(row)
        return Grid.from_rows(rows, start, goal)

    @staticmethod
    def load(path: str) -> "Grid":
        with open(path, "r") as f:
            return Grid.parse(f.read())

    @staticmethod
    def random(rows: int = 13, cols: int = 13, p_blocked: float = 0.0,
               seed: Optional[int] = None) -> "Grid":
        if rows < 1 or cols < 1:
            raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
        rng = random.Random(seed)
        data: List[List[Optional[int]]] = [
            [None if rng.random() < p_blocked else rng.randint(1, 9) for _ in range(cols)]
            for _ in range(rows)
        ]
        start, goal = (0, 0), (rows - 1, cols - 1)
        data[start[0]][start[1]] = rng.randint(1, 9)
        data[goal[0]][goal[1]] = rng.randint(1, 9)
        return Grid.from_rows(data, start, goal)

    def save(self, path: str) -> None:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w") as f:
            f.write(self.dumps())

    def dumps(self) -> str:
        out = [f"GRID {self.start[0]} {self.start[1]} {self.goal[0]} {self.goal[1]}"]
        for r in range(self.rows):
            row = self.cells[r * self.cols:(r + 1) * self.cols]
            if any(v is not None and not 0 <= v <= 9 for v in row):
                raise ValueError(f"row {r} has a cost outside 0-9")
            out.append("".join(BLOCKED if v is None else str(v) for v in row))
        return "\n".join(out) + "\n"

    def in_bounds(self, s: Coord) -> bool:
        r, c = s
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_blocked(self, s: Coord) -> bool:
        # off-grid counts as blocked
        if not self.in_bounds(s):
            return True
        r, c = s
        return self.cells[r * self.cols + c] is None

    def get(self, s: Coord) -> Optional[int]:
        if not self.in_bounds(s):
            return None
        r, c = s
        return self.cells[r * self.cols + c]
