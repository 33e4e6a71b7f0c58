from .triangle_decomposition import TriangleDecomposition
from .k4_decomposition import K4Decomposition

__all__ = [
    "TriangleDecomposition",
    "K4Decomposition",
]
