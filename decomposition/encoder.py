# encoder.py

import collections.abc
import logging
from typing import Dict, List, Sequence, Set, Tuple

from .combinations import combinations
from .dancing_links import DancingLinks
from .exceptions import (
    ConflictingRequiredBlocks,
    InvalidParameters,
    MalformedRequiredBlock,
)

logger = logging.getLogger(__name__)

Vertex = int
Edge = Tuple[Vertex, Vertex]
Block = Tuple[Vertex, ...]


def canonical_edge(u: Vertex, v: Vertex) -> Edge:
    return (u, v) if u < v else (v, u)


def block_edges(block: Sequence[Vertex]) -> List[Edge]:
    """All C(m,2) edges inside a block, pairs taken in block order."""
    return [
        canonical_edge(block[i], block[j])
        for i in range(len(block) - 1)
        for j in range(i + 1, len(block))
    ]


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_parameters(order: int, decomp_order: int) -> None:
    if not _is_int(order) or not _is_int(decomp_order):
        raise InvalidParameters(
            f"order and decomp_order must be integers, "
            f"got {order!r} and {decomp_order!r}"
        )
    if decomp_order < 2:
        raise InvalidParameters(
            f"decomp_order must be at least 2, got {decomp_order}"
        )
    if decomp_order > order:
        raise InvalidParameters(
            f"decomp_order ({decomp_order}) cannot exceed order ({order})"
        )


def validate_block(block: Sequence[Vertex], order: int, decomp_order: int) -> None:
    if isinstance(block, (str, bytes)) or not isinstance(
        block, collections.abc.Sequence
    ):
        raise MalformedRequiredBlock(block, "not a sequence of vertices")
    if len(block) != decomp_order:
        raise MalformedRequiredBlock(
            block, f"expected {decomp_order} vertices, got {len(block)}"
        )
    for v in block:
        if not _is_int(v):
            raise MalformedRequiredBlock(block, f"vertex {v!r} is not an integer")
        if not 1 <= v <= order:
            raise MalformedRequiredBlock(
                block, f"vertex {v} is outside 1..{order}"
            )
    if len(set(block)) != len(block):
        raise MalformedRequiredBlock(block, "duplicate vertex")


def covered_edges(
    required_blocks: Sequence[Sequence[Vertex]],
    order: int,
    decomp_order: int,
) -> Set[Edge]:
    """
    Edges already used by the required blocks.

    Every block is checked before any edge is collected. Two blocks
    sharing an edge raise ConflictingRequiredBlocks; sharing a vertex
    is fine.
    """
    for block in required_blocks:
        validate_block(block, order, decomp_order)

    owner: Dict[Edge, Sequence[Vertex]] = {}
    for block in required_blocks:
        for edge in block_edges(block):
            if edge in owner:
                raise ConflictingRequiredBlocks(owner[edge], block, edge)
            owner[edge] = block
    return set(owner)


def build_columns(
    matrix: DancingLinks, order: int, covered: Set[Edge]
) -> Dict[Edge, int]:
    """One column per edge of K_order that is not yet covered."""
    columns: Dict[Edge, int] = {}
    for edge in combinations(order, 2):
        if edge in covered:
            continue
        columns[edge] = matrix.add_column(f"{edge[0]} {edge[1]}")
    return columns


def build_rows(
    matrix: DancingLinks,
    order: int,
    decomp_order: int,
    required_blocks: Sequence[Sequence[Vertex]],
    covered: Set[Edge],
    columns: Dict[Edge, int],
) -> int:
    """
    One row per candidate block whose every edge is still uncovered.
    Candidates touching a covered edge are dropped whole.
    """
    required = {frozenset(b) for b in required_blocks}
    added = 0
    for block in combinations(order, decomp_order):
        if frozenset(block) in required:
            continue
        edges = block_edges(block)
        if any(e in covered or e not in columns for e in edges):
            continue
        matrix.add_row(block, [columns[e] for e in edges])
        added += 1
    return added


def encode(
    order: int,
    decomp_order: int,
    required_blocks: Sequence[Sequence[Vertex]] = (),
) -> DancingLinks:
    """
    Build the exact cover matrix for decomposing K_order into K_decomp_order
    blocks around the given required blocks.
    """
    validate_parameters(order, decomp_order)
    covered = covered_edges(required_blocks, order, decomp_order)

    matrix = DancingLinks()
    columns = build_columns(matrix, order, covered)
    rows = build_rows(
        matrix, order, decomp_order, required_blocks, covered, columns
    )
    logger.debug(
        "Encoded K%d -> K%d: %d covered edges, %d columns, %d rows",
        order,
        decomp_order,
        len(covered),
        len(columns),
        rows,
    )
    return matrix
