# k4_decomposition.py

from typing import List, Optional, Sequence

from ..encoder import Block
from ..graph_decomposition import GraphDecomposition


class K4Decomposition(GraphDecomposition):
    """
    K_n split into copies of K_4. The necessary condition
    n = 1 or 4 mod 12 is also sufficient.
    """

    def __init__(
        self,
        order: int = 13,
        required_blocks: Optional[Sequence[Sequence[int]]] = None,
        blocks: Optional[List[Block]] = None,
    ) -> None:
        super().__init__(
            order=order,
            decomp_order=4,
            required_blocks=list(required_blocks or []),
            blocks=blocks,
        )

    def is_admissible(self) -> bool:
        return self.order % 12 in (1, 4)
