from decomposition.combinations import combinations
from decomposition.dancing_links import DancingLinks
from decomposition.encoder import encode
from decomposition.exceptions import (
    ConflictingRequiredBlocks,
    DecompositionError,
    InvalidParameters,
    MalformedRequiredBlock,
    NoSolution,
)
from decomposition.graph_decomposition import GraphDecomposition
from decomposition.solver import SearchState, Solver
from decomposition.variations import K4Decomposition, TriangleDecomposition

__all__ = [
    "combinations",
    "encode",
    "DancingLinks",
    "Solver",
    "SearchState",
    "GraphDecomposition",
    "TriangleDecomposition",
    "K4Decomposition",
    "DecompositionError",
    "InvalidParameters",
    "MalformedRequiredBlock",
    "ConflictingRequiredBlocks",
    "NoSolution",
]
