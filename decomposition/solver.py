# solver.py

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional

from .dancing_links import DancingLinks

logger = logging.getLogger(__name__)


class SearchState(Enum):
    SEARCHING = "searching"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"


@dataclass
class SearchStats:
    nodes: int = 0
    backtracks: int = 0
    solutions: int = 0
    elapsed: float = 0.0


class Solver:
    """
    Knuth's Algorithm X over a DancingLinks matrix.

    The search is depth-first with an explicit stack of chosen row nodes;
    each entry's column is the column it was chosen for. Whatever the
    outcome, every open cover is undone before returning, so the matrix
    is left exactly as it was handed in.
    """

    def __init__(
        self,
        matrix: DancingLinks,
        max_solutions: int = 1,
        should_stop: Optional[Callable[[], bool]] = None,
        time_limit: Optional[float] = None,
    ) -> None:
        if max_solutions < 1:
            raise ValueError("max_solutions must be at least 1")
        self.matrix = matrix
        self.max_solutions = max_solutions
        self.should_stop = should_stop
        self.time_limit = time_limit

        self.state = SearchState.SEARCHING
        self.stats = SearchStats()
        self.solutions_found = 0
        self.first_solution: Optional[List[Any]] = None

        self._stack: List[int] = []
        self._deadline: Optional[float] = None

    # --------------------------
    # Public API
    # --------------------------

    def solve_one(self) -> Optional[List[Any]]:
        self._run()
        return self.first_solution

    def solve_count(self) -> int:
        self._run()
        return self.solutions_found

    # --------------------------
    # Search
    # --------------------------

    def _cancelled(self) -> bool:
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return True
        return self.should_stop is not None and self.should_stop()

    def _select(self, r: int) -> None:
        """Push r and cover every other column of its row."""
        m = self.matrix
        self._stack.append(r)
        j = m.right[r]
        while j != r:
            m.cover(m.column[j])
            j = m.right[j]

    def _deselect(self) -> int:
        """Pop the top row and uncover its other columns in reverse."""
        m = self.matrix
        r = self._stack.pop()
        j = m.left[r]
        while j != r:
            m.uncover(m.column[j])
            j = m.left[j]
        return r

    def _backtrack(self) -> bool:
        """
        Advance to the next untried row at the deepest open level.
        Returns False when no level has a row left.
        """
        m = self.matrix
        self.stats.backtracks += 1
        while self._stack:
            r = self._deselect()
            c = m.column[r]
            nxt = m.down[r]
            if nxt != c:
                self._select(nxt)
                return True
            m.uncover(c)
        return False

    def _unwind(self) -> None:
        m = self.matrix
        while self._stack:
            r = self._deselect()
            m.uncover(m.column[r])

    def _record_solution(self) -> None:
        m = self.matrix
        self.solutions_found += 1
        self.stats.solutions = self.solutions_found
        if self.first_solution is None:
            self.first_solution = [m.label_of(r) for r in self._stack]
        logger.debug(
            "Solution %d found at depth %d", self.solutions_found, len(self._stack)
        )

    def _run(self) -> SearchState:
        if self.state is not SearchState.SEARCHING:
            return self.state

        m = self.matrix
        started = time.monotonic()
        if self.time_limit is not None:
            self._deadline = started + self.time_limit

        while True:
            if self._cancelled():
                logger.info("Search cancelled after %d nodes", self.stats.nodes)
                self.state = SearchState.CANCELLED
                break

            self.stats.nodes += 1
            c = m.choose_column()
            if c is None:
                self._record_solution()
                if self.solutions_found >= self.max_solutions:
                    self.state = SearchState.SOLVED
                    break
                advanced = self._backtrack()
            elif m.size[c] == 0:
                advanced = self._backtrack()
            else:
                m.cover(c)
                self._select(m.down[c])
                continue

            if not advanced:
                self.state = (
                    SearchState.SOLVED
                    if self.solutions_found
                    else SearchState.EXHAUSTED
                )
                break

        self._unwind()
        self.stats.elapsed = time.monotonic() - started
        logger.debug(
            "Search %s: %d nodes, %d backtracks, %d solution(s) in %.3fs",
            self.state.value,
            self.stats.nodes,
            self.stats.backtracks,
            self.stats.solutions,
            self.stats.elapsed,
        )
        return self.state
