"""Pure summary statistics over batch results.

All functions take the strategy/outcome DataFrame produced by
play_n_games() and have no printing or random-number dependencies.
"""

from dataclasses import dataclass

import pandas as pd
from scipy import stats

from montyhall.doors import Outcome, Strategy


STRATEGY_ORDER = [s.value for s in Strategy]
OUTCOME_ORDER = [Outcome.LOSE.value, Outcome.WIN.value]

# Exact win probabilities for the three-door game
THEORETICAL_WIN_PROBABILITY = {
    Strategy.STAY: 1 / 3,
    Strategy.SWITCH: 2 / 3,
}


@dataclass(frozen=True)
class StrategyWinRate:
    """Observed win rate for one strategy with a binomial confidence interval."""

    strategy: Strategy
    wins: int
    trials: int
    win_rate: float
    ci_low: float
    ci_high: float
    confidence_level: float


@dataclass
class BatchSummary:
    """Aggregated view of a batch run."""

    n_games: int
    counts: pd.DataFrame  # strategy x outcome counts
    proportions: pd.DataFrame  # row-normalized, rounded
    win_rates: list[StrategyWinRate]
    decimals: int


def _check_results(results: pd.DataFrame) -> None:
    missing = {"strategy", "outcome"} - set(results.columns)
    if missing:
        raise ValueError(f"results missing columns: {sorted(missing)}")

    if len(results) == 0:
        raise ValueError("Cannot summarize empty results")


def contingency_counts(results: pd.DataFrame) -> pd.DataFrame:
    """Count table of Strategy x Outcome.

    Rows are ordered (stay, switch) and columns (LOSE, WIN); combinations
    that never occurred are 0.

    Raises:
        ValueError: If results is empty or lacks the strategy/outcome columns
    """
    _check_results(results)

    counts = pd.crosstab(results["strategy"], results["outcome"])
    counts = counts.reindex(index=STRATEGY_ORDER, columns=OUTCOME_ORDER, fill_value=0)
    counts.index.name = "strategy"
    counts.columns.name = "outcome"
    return counts.astype(int)


def contingency_proportions(results: pd.DataFrame, decimals: int = 2) -> pd.DataFrame:
    """Row-normalized Strategy x Outcome table.

    Each row gives the share of LOSE and WIN for that strategy, rounded to
    `decimals` places, so rows sum to 1.0 up to rounding.

    Raises:
        ValueError: If results is empty or lacks the strategy/outcome columns
    """
    counts = contingency_counts(results)
    row_totals = counts.sum(axis=1)

    # Strategies absent from results keep a zero row instead of NaN
    proportions = counts.div(row_totals.where(row_totals > 0, 1), axis=0)
    return proportions.astype(float).round(decimals)


def theoretical_win_probability(strategy: Strategy) -> float:
    """Exact probability of winning with the given strategy."""
    return THEORETICAL_WIN_PROBABILITY[Strategy(strategy)]


def strategy_win_rates(
    results: pd.DataFrame, confidence_level: float = 0.95
) -> list[StrategyWinRate]:
    """Observed win rate per strategy with a Wilson score interval.

    Args:
        results: Strategy/outcome table from play_n_games()
        confidence_level: Interval coverage in (0, 1)

    Returns:
        One StrategyWinRate per strategy present in results, stay first

    Raises:
        ValueError: If results is empty or confidence_level is out of range
    """
    if not 0.0 < confidence_level < 1.0:
        raise ValueError(f"confidence_level must be in (0, 1), got {confidence_level}")

    counts = contingency_counts(results)

    win_rates = []
    for strategy in Strategy:
        wins = int(counts.loc[strategy.value, Outcome.WIN.value])
        trials = int(counts.loc[strategy.value].sum())
        if trials == 0:
            continue

        ci = stats.binomtest(wins, trials).proportion_ci(
            confidence_level=confidence_level, method="wilson"
        )
        win_rates.append(
            StrategyWinRate(
                strategy=strategy,
                wins=wins,
                trials=trials,
                win_rate=wins / trials,
                ci_low=float(ci.low),
                ci_high=float(ci.high),
                confidence_level=confidence_level,
            )
        )

    return win_rates


def summarize_batch(
    results: pd.DataFrame, decimals: int = 2, confidence_level: float = 0.95
) -> BatchSummary:
    """Build counts, proportions and win rates for a batch in one pass."""
    counts = contingency_counts(results)
    return BatchSummary(
        n_games=int(counts.loc[Strategy.STAY.value].sum()),
        counts=counts,
        proportions=contingency_proportions(results, decimals=decimals),
        win_rates=strategy_win_rates(results, confidence_level=confidence_level),
        decimals=decimals,
    )
