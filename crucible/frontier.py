# crucible/frontier.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple
import heapq
from .types import Coord, Heading

StateKey = Tuple[Coord, Optional[Heading], int]

@dataclass(frozen=True)
class State:
    cost: int
    position: Coord
    heading: Optional[Heading]  # None only for the start state
    run_length: int

    @property
    def key(self) -> StateKey:
        return (self.position, self.heading, self.run_length)

class Frontier:
    """
    Min-heap of pending states keyed by cost.
    Equal costs pop in insertion order. Several entries for the same
    key may be pending at once; the caller drops the stale ones.
    """
    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, State]] = []
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, state: State) -> None:
        heapq.heappush(self._heap, (state.cost, self._counter, state))
        self._counter += 1

    def pop(self) -> State:
        # IndexError when empty, same as heapq
        return heapq.heappop(self._heap)[2]

class VisitedSet:
    def __init__(self) -> None:
        self._keys: Set[StateKey] = set()

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, state: State) -> bool:
        return state.key in self._keys

    def add(self, state: State) -> bool:
        """Finalize state; False if its key was already finalized."""
        key = state.key
        if key in self._keys:
            return False
        self._keys.add(key)
        return True

    def positions(self) -> Set[Coord]:
        return {pos for pos, _, _ in self._keys}
