from typing import Sequence, Tuple


class DecompositionError(ValueError):
    """Structural problem with the decomposition request."""


class InvalidParameters(DecompositionError):
    pass


class MalformedRequiredBlock(DecompositionError):
    def __init__(self, block: Sequence[int], reason: str) -> None:
        super().__init__(f"Malformed required block {block!r}: {reason}")
        self.block = tuple(block) if isinstance(block, (list, tuple)) else block
        self.reason = reason


class ConflictingRequiredBlocks(DecompositionError):
    def __init__(
        self,
        first: Sequence[int],
        second: Sequence[int],
        edge: Tuple[int, int],
    ) -> None:
        super().__init__(
            f"Required blocks {list(first)} and {list(second)} "
            f"share edge {edge[0]}-{edge[1]}"
        )
        self.first = tuple(first)
        self.second = tuple(second)
        self.edge = edge


class NoSolution(Exception):
    """Search exhausted without finding a decomposition."""
