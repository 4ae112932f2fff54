# crucible/search.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Set, Tuple, Union
import math
import time

from .types import Coord, Heading
from .grid import Grid
from .frontier import Frontier, State, VisitedSet

UNREACHABLE = math.inf

class ConfigurationError(ValueError):
    """Bad search parameters: endpoints off the grid or inconsistent run bounds."""

@dataclass(frozen=True)
class RunLimits:
    min_run: int
    max_run: int

    def validate(self) -> None:
        if self.min_run < 1:
            raise ConfigurationError(f"min_run must be >= 1, got {self.min_run}")
        if self.max_run < self.min_run:
            raise ConfigurationError(f"max_run ({self.max_run}) must be >= min_run ({self.min_run})")

CRUCIBLE = RunLimits(1, 3)
ULTRA_CRUCIBLE = RunLimits(4, 10)
VARIANTS: List[Tuple[str, RunLimits]] = [("crucible", CRUCIBLE), ("ultra", ULTRA_CRUCIBLE)]

@dataclass
class SearchResult:
    cost: Union[int, float]  # int, or UNREACHABLE
    expanded: Set[Coord]
    pops: int
    pushes: int
    elapsed_sec: float

    @property
    def reached(self) -> bool:
        return self.cost != UNREACHABLE

@dataclass
class SearchContext:
    grid: Grid
    frontier: Frontier = field(default_factory=Frontier)
    visited: VisitedSet = field(default_factory=VisitedSet)

def _check_endpoint(grid: Grid, name: str, s: Coord) -> None:
    if not grid.in_bounds(s):
        raise ConfigurationError(f"{name} {s} is outside the {grid.rows}x{grid.cols} grid")

def successors(grid: Grid, s: State, limits: RunLimits) -> Iterator[State]:
    if s.heading is None:
        headings = list(Heading)
    elif s.run_length < limits.min_run:
        headings = [s.heading]
    else:
        headings = [h for h in Heading if h is not s.heading.reverse]

    for h in headings:
        run = s.run_length + 1 if h is s.heading else 1
        if run > limits.max_run:
            continue
        nb = h.step(s.position)
        cost = grid.get(nb)
        if cost is None:
            continue
        yield State(s.cost + cost, nb, h, run)

def search(grid: Grid, start: Coord, goal: Coord, min_run: int, max_run: int) -> SearchResult:
    """
    Dijkstra over (position, heading, run_length).
    The first goal pop whose run satisfies min_run is optimal, since
    costs are non-negative and states pop in non-decreasing cost order.
    """
    limits = RunLimits(min_run, max_run)
    limits.validate()
    _check_endpoint(grid, "start", start)
    _check_endpoint(grid, "goal", goal)
    if grid.is_blocked(start):
        raise ConfigurationError(f"start {start} is a blocked cell")

    ctx = SearchContext(grid)
    ctx.frontier.push(State(0, start, None, 0))
    pops = 0
    pushes = 1
    t0 = time.perf_counter()

    while ctx.frontier:
        s = ctx.frontier.pop()
        pops += 1
        if not ctx.visited.add(s):
            continue

        if s.position == goal and (s.heading is None or s.run_length >= limits.min_run):
            return SearchResult(s.cost, ctx.visited.positions(), pops, pushes, time.perf_counter() - t0)

        for nxt in successors(grid, s, limits):
            ctx.frontier.push(nxt)
            pushes += 1

    return SearchResult(UNREACHABLE, ctx.visited.positions(), pops, pushes, time.perf_counter() - t0)

def find_min_cost(grid: Grid, start: Coord, goal: Coord, min_run: int, max_run: int) -> Union[int, float]:
    return search(grid, start, goal, min_run, max_run).cost
