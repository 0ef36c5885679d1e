"""Presentation layer for batch summaries."""

from montyhall.reporting.console import print_detailed_summary, print_summary
from montyhall.reporting.formatter import format_proportion_table, format_win_rates

__all__ = [
    "format_proportion_table",
    "format_win_rates",
    "print_summary",
    "print_detailed_summary",
]
