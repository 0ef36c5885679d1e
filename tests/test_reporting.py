"""Tests for the text formatters and console reporters."""

import pandas as pd
import pytest

from montyhall.doors import Strategy
from montyhall.evaluation import StrategyWinRate, summarize_batch
from montyhall.reporting import (
    format_proportion_table,
    format_win_rates,
    print_detailed_summary,
    print_summary,
)


@pytest.fixture
def summary():
    results = pd.DataFrame(
        [
            ("stay", "WIN"), ("switch", "LOSE"),
            ("stay", "LOSE"), ("switch", "WIN"),
            ("stay", "LOSE"), ("switch", "WIN"),
        ],
        columns=["strategy", "outcome"],
    )
    return summarize_batch(results)


def test_format_proportion_table_layout(summary):
    text = format_proportion_table(summary.proportions)
    lines = text.splitlines()

    assert lines[0].split() == ["outcome", "LOSE", "WIN"]
    assert lines[1].strip() == "strategy"
    assert lines[2].split() == ["stay", "0.67", "0.33"]
    assert lines[3].split() == ["switch", "0.33", "0.67"]


def test_format_proportion_table_fixed_decimals(summary):
    text = format_proportion_table(summary.proportions, decimals=3)
    assert "0.670" in text
    assert "0.330" in text


def test_format_win_rates_lines():
    win_rates = [
        StrategyWinRate(Strategy.STAY, 3321, 10_000, 0.3321, 0.323, 0.341, 0.95),
        StrategyWinRate(Strategy.SWITCH, 6679, 10_000, 0.6679, 0.659, 0.677, 0.95),
    ]
    lines = format_win_rates(win_rates).splitlines()

    assert len(lines) == 2
    assert lines[0].startswith("stay    win rate 0.332")
    assert "95% CI 0.323-0.341" in lines[0]
    assert "n=10,000" in lines[0]
    assert "exact 0.333" in lines[0]
    assert lines[1].startswith("switch  win rate 0.668")
    assert "exact 0.667" in lines[1]


def test_format_win_rates_empty():
    assert format_win_rates([]) == ""


def test_print_summary_prints_table_only(summary, capsys):
    print_summary(summary)
    out = capsys.readouterr().out

    assert out == format_proportion_table(summary.proportions) + "\n"


def test_print_detailed_summary_includes_win_rates(summary, capsys):
    print_detailed_summary(summary)
    out = capsys.readouterr().out

    assert format_proportion_table(summary.proportions) in out
    assert "win rate" in out
    assert "CI" in out
