from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import ALGORITHMS, load_config
from .exceptions import ConfigError
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _seed(value: str) -> int:
    return int(value, 0)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="randomness",
        description="Draw pseudorandom numbers from a seeded generator",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--algorithm",
        default=None,
        help=f"Generator to use ({', '.join(ALGORITHMS)})",
    )
    parser.add_argument("--seed", type=_seed, default=None, help="Generator seed (decimal or 0x hex)")
    parser.add_argument(
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="Path to a YAML file with generator settings",
    )
    parser.add_argument("-n", "--count", type=int, default=10, help="How many values to print")
    parser.add_argument("--low", type=float, default=None, help="Lower bound (or upper bound if alone)")
    parser.add_argument("--high", type=float, default=None, help="Upper bound, exclusive")
    parser.add_argument("--int", dest="integers", action="store_true", help="Draw integers instead of floats")
    parser.add_argument("--averaged", type=int, default=None, help="Average K draws per value")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    configure_logging(level=level, stream=sys.stderr)

    if args.high is not None and args.low is None:
        print("error: --high requires --low", file=sys.stderr)
        return 2
    try:
        config = load_config(
            args.config_path,
            algorithm=args.algorithm,
            seed=args.seed,
            averaged=args.averaged,
        )
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    rand = config.build()
    logger.debug("Sampling %d values from %r", args.count, rand)
    draw = rand.random_int if args.integers else rand.random
    for _ in range(max(args.count, 0)):
        print(draw(args.low, args.high))
    return 0
