"""
Encode an image as a quad tree small enough for a tweet.

Usage:
    png2tweet <filename> [minimumCellSize] [--seed N] [--debug]

The image is read as greyscale, padded to a power-of-two square and partitioned
into a quad tree of black, grey and white cells. Uniform quadrants are
collapsed, then random merges trade detail for size until the encoding fits
MAXIMUM_ENCODED_SIZE units. The encoding is written to stdout; progress goes to
the log on stderr.
"""

import argparse
import logging
import random
import sys
from collections.abc import Sequence
from typing import NoReturn, TextIO

from constants import DEFAULT_MINIMUM_CELL_SIZE, MAXIMUM_ENCODED_SIZE
from errors import Png2TweetError, UsageError
from localtypes import RandomSource
from quad_tree import build_quadtree, merge_leaves, serialize, simplify
from utils.display import display_summary
from utils.grid import Grid, make_square
from utils.loader import load_grid

logger = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """Reports bad usage as a UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{message}\n{self.format_usage().strip()}")


def cell_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise UsageError(f"invalid cell size: {value!r}") from None
    if size < 1:
        raise UsageError(f"cell size must be a positive integer, got {size}")
    return size


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="png2tweet",
        description=f"Encode an image as a quad tree of at most {MAXIMUM_ENCODED_SIZE} units",
    )
    parser.add_argument("filename", help="Image to encode")
    parser.add_argument(
        "minimum_cell_size",
        nargs="?",
        type=cell_size,
        default=DEFAULT_MINIMUM_CELL_SIZE,
        metavar="cell size",
        help=f"Smallest cell side, in pixels (default: {DEFAULT_MINIMUM_CELL_SIZE})",
    )
    parser.add_argument("--seed", type=int, help="Seed of the random merge search")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def encode_grid(
    grid: Grid,
    minimum_cell_size: int = DEFAULT_MINIMUM_CELL_SIZE,
    rng: RandomSource | None = None,
) -> str:
    """Runs the whole pipeline on a decoded grid and returns the encoding."""
    logger.info("Making grid square")
    square = make_square(grid)

    logger.info(f"Building quadtree over {square.width}x{square.height}")
    root = build_quadtree(square, minimum_cell_size)
    display_summary(root, "Built")

    logger.info("Merging leaves")
    merge_leaves(root)
    display_summary(root, "Merged")

    logger.info("Simplifying")
    simplify(root, rng)
    display_summary(root, "Simplified")

    return serialize(root)


def main(argv: Sequence[str] | None = None, stdout: TextIO | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s | %(message)s",
    )
    stdout = stdout if stdout is not None else sys.stdout

    try:
        args = build_parser().parse_args(argv)
        if args.debug:
            logging.getLogger().setLevel(logging.DEBUG)
        logger.info(f"Reading {args.filename}")
        grid = load_grid(args.filename)
        encoding = encode_grid(grid, args.minimum_cell_size, random.Random(args.seed))
    except Png2TweetError as error:
        logger.error(str(error))
        return 1

    stdout.write(encoding + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
