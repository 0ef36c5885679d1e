"""Text formatting for batch summaries.

Pure functions that return strings. No printing or state dependencies.
"""

import pandas as pd

from montyhall.evaluation.metrics import StrategyWinRate, theoretical_win_probability


def format_proportion_table(proportions: pd.DataFrame, decimals: int = 2) -> str:
    """Render a Strategy x Outcome table with a fixed number of decimals.

    Args:
        proportions: Row-normalized table from contingency_proportions()
        decimals: Decimal places shown for each cell

    Returns:
        Multi-line string: column labels, then one line per strategy
    """
    return proportions.to_string(float_format=lambda v: f"{v:.{decimals}f}")


def format_win_rates(win_rates: list[StrategyWinRate]) -> str:
    """One line per strategy: observed rate, interval and exact value.

    Example line:
        switch  win rate 0.664  (95% CI 0.655-0.673, n=10,000; exact 0.667)
    """
    width = max((len(w.strategy.value) for w in win_rates), default=0)

    lines = []
    for w in win_rates:
        lines.append(
            f"{w.strategy.value:<{width}}  win rate {w.win_rate:.3f}  "
            f"({w.confidence_level * 100:.0f}% CI {w.ci_low:.3f}-{w.ci_high:.3f}, "
            f"n={w.trials:,}; exact {theoretical_win_probability(w.strategy):.3f})"
        )
    return "\n".join(lines)
