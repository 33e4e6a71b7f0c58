# triangle_decomposition.py

from typing import List, Optional, Sequence

from ..encoder import Block
from ..graph_decomposition import GraphDecomposition


class TriangleDecomposition(GraphDecomposition):
    """
    K_n split into triangles, i.e. a Steiner triple system of order n.
    Exists exactly when n is 1 or 3 mod 6.
    """

    def __init__(
        self,
        order: int = 7,
        required_blocks: Optional[Sequence[Sequence[int]]] = None,
        blocks: Optional[List[Block]] = None,
    ) -> None:
        super().__init__(
            order=order,
            decomp_order=3,
            required_blocks=list(required_blocks or []),
            blocks=blocks,
        )

    def is_admissible(self) -> bool:
        return self.order % 6 in (1, 3)
