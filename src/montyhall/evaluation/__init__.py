"""Summary statistics for Monty Hall batch runs.

Provides contingency tables, per-strategy win rates with confidence
intervals, and the exact win probabilities for comparison.
"""

from montyhall.evaluation.metrics import (
    BatchSummary,
    StrategyWinRate,
    contingency_counts,
    contingency_proportions,
    strategy_win_rates,
    summarize_batch,
    theoretical_win_probability,
)

__all__ = [
    "BatchSummary",
    "StrategyWinRate",
    "contingency_counts",
    "contingency_proportions",
    "strategy_win_rates",
    "summarize_batch",
    "theoretical_win_probability",
]
