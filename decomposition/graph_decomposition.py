from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Set

from .combinations import combinations
from .encoder import (
    Block,
    Edge,
    block_edges,
    covered_edges,
    encode,
    validate_block,
    validate_parameters,
)
from .exceptions import MalformedRequiredBlock, NoSolution
from .solver import SearchState, Solver

logger = logging.getLogger(__name__)


# --------------------------
# Core decomposition
# --------------------------


@dataclass
class GraphDecomposition:
    """
    Decomposition of the complete graph K_order into edge-disjoint copies
    of K_decomp_order.

    required_blocks are pinned into every solution. blocks holds the
    blocks found by solve(), in the order the search selected them, and
    is None until the decomposition is solved.
    """

    order: int = 13
    decomp_order: int = 4
    required_blocks: List[Block] = field(default_factory=list)
    blocks: Optional[List[Block]] = None

    # internal
    _status: Optional[SearchState] = field(default=None, init=False, repr=False)
    _valid: bool = field(default=True, init=False, repr=False)

    def __post_init__(self) -> None:
        validate_parameters(self.order, self.decomp_order)
        # raises on malformed or conflicting required blocks
        covered_edges(self.required_blocks, self.order, self.decomp_order)
        self.required_blocks = [tuple(b) for b in self.required_blocks]
        if self.blocks is not None:
            self.blocks = [
                tuple(b) if isinstance(b, (list, tuple)) else b
                for b in self.blocks
            ]
            # caller-supplied blocks only count as solved once they check out
            self._valid = self.validate()
            self._status = SearchState.SOLVED if self._valid else None

    # --------------------------
    # Public API
    # --------------------------

    def solve(
        self,
        assert_solvable: bool = False,
        time_limit: Optional[float] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> Optional["GraphDecomposition"]:
        """
        Search for a decomposition containing the required blocks.

        Returns a new, solved GraphDecomposition, or None when the search
        is exhausted or cancelled (raises NoSolution instead if
        assert_solvable=True and the search was exhausted).
        """
        matrix = encode(self.order, self.decomp_order, self.required_blocks)
        solver = Solver(matrix, time_limit=time_limit, should_stop=should_stop)
        found = solver.solve_one()

        if found is None:
            self._status = solver.state
            if solver.state is SearchState.EXHAUSTED:
                logger.info(
                    "No K%d decomposition of K%d with %d required block(s)",
                    self.decomp_order,
                    self.order,
                    len(self.required_blocks),
                )
                if assert_solvable:
                    raise NoSolution(
                        f"K{self.order} has no K{self.decomp_order} "
                        f"decomposition containing the required blocks"
                    )
            return None

        logger.info(
            "Found K%d decomposition of K%d: %d block(s) after %d nodes",
            self.decomp_order,
            self.order,
            len(self.required_blocks) + len(found),
            solver.stats.nodes,
        )
        solved = copy.copy(self)
        solved.required_blocks = list(self.required_blocks)
        solved.blocks = list(found)
        solved._status = SearchState.SOLVED
        solved._valid = True
        return solved

    def has_multiple_solutions(self) -> bool:
        """
        Returns True if more than one decomposition contains the
        required blocks.
        """
        matrix = encode(self.order, self.decomp_order, self.required_blocks)
        solver = Solver(matrix, max_solutions=2)
        return solver.solve_count() >= 2

    def is_admissible(self) -> bool:
        """
        Classical necessary conditions for a K_m decomposition of K_n:
        m-1 divides n-1 and m(m-1) divides n(n-1).
        """
        n, m = self.order, self.decomp_order
        return (n - 1) % (m - 1) == 0 and (n * (n - 1)) % (m * (m - 1)) == 0

    def is_solved(self) -> bool:
        return self.blocks is not None

    def all_blocks(self) -> List[Block]:
        """Required blocks in caller order, then the discovered blocks."""
        return list(self.required_blocks) + list(self.blocks or [])

    def validate(self) -> bool:
        """
        Check that the blocks cover every edge of K_order exactly once and
        that each block has decomp_order distinct vertices in range.
        """
        if self.blocks is None:
            return False
        seen: Set[Edge] = set()
        for block in self.all_blocks():
            try:
                validate_block(block, self.order, self.decomp_order)
            except MalformedRequiredBlock:
                return False
            for edge in block_edges(block):
                if edge in seen:
                    return False
                seen.add(edge)
        return seen == set(combinations(self.order, 2))

    def show(self) -> None:
        """
        Prints the decomposition, one block per line, or a short note when
        there is nothing to show.
        """
        if not self._valid:
            print("Invalid decomposition")
            return
        if self.blocks is None:
            if self._status is SearchState.CANCELLED:
                print("Search cancelled")
            else:
                print("No solutions found")
            return
        print("Solution 1:")
        print(self.format_blocks())

    # --------------------------
    # Internals / helpers
    # --------------------------

    def format_blocks(self) -> str:
        return "\n".join(format_block(b) for b in self.all_blocks())

    def __str__(self) -> str:
        if not self._valid:
            d = "INVALID DECOMPOSITION"
        elif self._status is None:
            d = "UNSOLVED"
        elif self._status is SearchState.SOLVED:
            d = "SOLVED"
        elif self._status is SearchState.CANCELLED:
            d = "CANCELLED"
        else:
            d = "NO SOLUTION"
        body = self.format_blocks() if self.is_solved() and self._valid else ""
        return (
            f"\n---------------------------\n"
            f"K{self.order} -> K{self.decomp_order} DECOMPOSITION\n"
            f"Required blocks: {len(self.required_blocks)}\n"
            f"Status: {d}\n"
            f"---------------------------\n"
            f"{body}\n"
        )


def format_block(block: Sequence[int]) -> str:
    return " ".join(str(v) for v in block)
