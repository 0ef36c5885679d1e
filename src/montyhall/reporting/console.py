"""Console reporters for batch summaries."""

from montyhall.evaluation.metrics import BatchSummary
from montyhall.reporting.formatter import format_proportion_table, format_win_rates


def print_summary(summary: BatchSummary) -> None:
    """Print the row-normalized Strategy x Outcome table to stdout."""
    print(format_proportion_table(summary.proportions, decimals=summary.decimals))


def print_detailed_summary(summary: BatchSummary) -> None:
    """Print the proportion table followed by per-strategy win rates."""
    print_summary(summary)
    print()
    print(format_win_rates(summary.win_rates))
