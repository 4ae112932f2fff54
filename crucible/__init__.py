# crucible/__init__.py
from .types import Coord, Heading, add
from .grid import Grid
from .frontier import State, Frontier, VisitedSet
from .search import (
    UNREACHABLE, ConfigurationError, RunLimits, CRUCIBLE, ULTRA_CRUCIBLE, VARIANTS,
    SearchContext, SearchResult, search, find_min_cost,
)
from .viz import draw_grid_png

__all__ = [
    "Coord", "Heading", "add", "Grid",
    "State", "Frontier", "VisitedSet",
    "UNREACHABLE", "ConfigurationError", "RunLimits", "CRUCIBLE", "ULTRA_CRUCIBLE", "VARIANTS",
    "SearchContext", "SearchResult", "search", "find_min_cost",
    "draw_grid_png",
]
