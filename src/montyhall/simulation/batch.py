"""Batch driver: repeat trials and collect strategy/outcome rows."""

import logging
from collections.abc import Callable

import numpy as np
import pandas as pd

from montyhall.config.settings import get_config
from montyhall.evaluation.metrics import BatchSummary, summarize_batch
from montyhall.reporting.console import print_summary
from montyhall.simulation.engine import RESULT_COLUMNS, play_trial

logger = logging.getLogger(__name__)

Reporter = Callable[[BatchSummary], None]


def play_n_games(
    n: int | None = None,
    rng: np.random.Generator | None = None,
    reporter: Reporter | None = print_summary,
    confidence_level: float | None = None,
) -> pd.DataFrame:
    """Play n games and return every strategy/outcome row.

    The summary (row-normalized Strategy x Outcome proportions) is handed to
    reporter as a side effect; the return value is the raw table.

    Args:
        n: Number of games (None = use config default)
        rng: Random generator (None = seeded from config.seed)
        reporter: Callable receiving the BatchSummary (None = no reporting)
        confidence_level: Win-rate interval coverage (None = use config default)

    Returns:
        DataFrame with columns ["strategy", "outcome"] and 2 * n rows

    Raises:
        ValueError: If n is not a positive integer
    """
    config = get_config()

    if n is None:
        n = config.default_n_games

    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise ValueError(f"n must be a positive integer, got {n!r}")

    if rng is None:
        rng = np.random.default_rng(config.seed)

    if confidence_level is None:
        confidence_level = config.confidence_level

    logger.info(f"Playing {n} games")

    rows: list[dict[str, str]] = []
    for _ in range(n):
        rows.extend(play_trial(rng).to_rows())

    results = pd.DataFrame(rows, columns=RESULT_COLUMNS)

    summary = summarize_batch(
        results,
        decimals=config.round_digits,
        confidence_level=confidence_level,
    )
    for win_rate in summary.win_rates:
        logger.debug(
            f"{win_rate.strategy.value}: {win_rate.wins}/{win_rate.trials} wins "
            f"({win_rate.win_rate:.3f})"
        )

    if reporter is not None:
        reporter(summary)

    logger.info(f"Batch complete: {len(results)} rows")
    return results
