"""
Command-line sampling of discrete distributions.

Usage::

    python -m pysatl_discrete "BINOMIAL; 30, 0.5" --count 10 --seed 42
    python -m pysatl_discrete "POISSON; 2.5" --display
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import argparse
import logging
import sys
from typing import TYPE_CHECKING

import numpy as np

from pysatl_discrete.families.descriptor import parse_descriptor

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger("pysatl_discrete")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m pysatl_discrete",
        description="Sample from a discrete distribution given as 'TYPE; p1, p2, ...'.",
    )
    parser.add_argument("descriptor", help='distribution descriptor, e.g. "BINOMIAL; 5, 0.2"')
    parser.add_argument("-n", "--count", type=int, default=1, help="number of samples (default: 1)")
    parser.add_argument(
        "--seed", type=int, default=None, help="random seed (default: PYSATL_DISCRETE_SEED)"
    )
    parser.add_argument(
        "--display",
        action="store_true",
        help="print the pmf/cdf table over the effective range instead of sampling",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.count < 0:
        parser.error("--count must be non-negative")

    try:
        dist = parse_descriptor(args.descriptor)
    except ValueError as exc:
        parser.error(str(exc))

    if args.display:
        sys.stdout.write(dist.display())
        return 0

    rng = None if args.seed is None else np.random.default_rng(args.seed)
    sample = dist.sample(args.count, rng)
    log.debug("Drew %d values from %r.", len(sample), dist)

    sys.stdout.writelines(f"{value}\n" for value in sample)
    return 0


if __name__ == "__main__":
    sys.exit(main())
