"""Command line entry point: decompose K_n into K_m blocks."""

import argparse
import logging
from typing import List, Optional, Sequence

from decomposition.exceptions import DecompositionError
from decomposition.graph_decomposition import GraphDecomposition

logger = logging.getLogger(__name__)

# Run with no arguments: the projective plane of order 3 around one line.
DEFAULT_ORDER = 13
DEFAULT_DECOMP_ORDER = 4
DEFAULT_BLOCKS = [[1, 2, 3, 4]]

EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decompose",
        description=(
            "Decompose the complete graph K_n into edge-disjoint K_m blocks "
            "using Dancing Links."
        ),
    )
    parser.add_argument(
        "order", type=int, nargs="?", help=f"n (default {DEFAULT_ORDER})"
    )
    parser.add_argument(
        "decomp_order",
        type=int,
        nargs="?",
        help=f"m (default {DEFAULT_DECOMP_ORDER})",
    )
    parser.add_argument(
        "-b",
        "--block",
        dest="blocks",
        type=int,
        nargs="+",
        action="append",
        metavar="V",
        help="required block, repeat for several",
    )
    parser.add_argument(
        "--time-limit",
        type=float,
        default=None,
        metavar="SECONDS",
        help="give up after this many seconds",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="stop early when the divisibility conditions rule out a solution",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="-v for progress, -vv for search statistics",
    )
    return parser


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    order = args.order if args.order is not None else DEFAULT_ORDER
    decomp_order = (
        args.decomp_order if args.decomp_order is not None else DEFAULT_DECOMP_ORDER
    )
    blocks: List[List[int]] = args.blocks or []
    if args.order is None and args.blocks is None:
        blocks = DEFAULT_BLOCKS

    try:
        problem = GraphDecomposition(order, decomp_order, blocks)
    except DecompositionError as exc:
        logger.error("%s", exc)
        return EXIT_BAD_INPUT

    if args.check and not problem.is_admissible():
        logger.info(
            "K%d cannot be split into K%d blocks (divisibility)", order, decomp_order
        )
        problem.show()
        return EXIT_NO_SOLUTION

    solved = problem.solve(time_limit=args.time_limit)
    if solved is None:
        problem.show()
        return EXIT_NO_SOLUTION

    solved.show()
    return EXIT_OK
