"""Command-line entry point.

Usage:
    python -m montyhall.main --n 10000 --seed 42
"""

import argparse
import logging
from collections.abc import Sequence

import numpy as np

from montyhall.config import get_config
from montyhall.reporting import print_detailed_summary
from montyhall.simulation import play_n_games

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="montyhall",
        description="Compare Monty Hall stay and switch strategies by simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Example:\n  python -m montyhall.main --n 10000 --seed 42",
    )
    parser.add_argument(
        "--n",
        type=int,
        default=None,
        help="Number of games to play (default: MONTYHALL_DEFAULT_N_GAMES or 100)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible run (default: MONTYHALL_SEED or unseeded)",
    )
    parser.add_argument(
        "--confidence",
        type=float,
        default=None,
        help="Confidence level for win-rate intervals (default: 0.95)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point: play a batch and print the summary."""
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    config = get_config()

    if args.n is not None and args.n < 1:
        parser.error("--n must be ≥ 1")
    if args.seed is not None and args.seed < 0:
        parser.error("--seed must be ≥ 0")
    if args.confidence is not None and not 0.0 < args.confidence < 1.0:
        parser.error("--confidence must be between 0 and 1")

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    seed = args.seed if args.seed is not None else config.seed
    n = args.n if args.n is not None else config.default_n_games
    logger.info(f"Starting simulation: n={n}, seed={seed}")

    play_n_games(
        n,
        rng=np.random.default_rng(seed),
        reporter=print_detailed_summary,
        confidence_level=args.confidence,
    )
    logger.info("Simulation complete")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
