"""Tests for the command-line entry point."""

import logging

import pytest

from montyhall.main import main


def test_main_prints_summary(capsys):
    assert main(["--n", "200", "--seed", "1"]) == 0

    out = capsys.readouterr().out
    assert "outcome" in out
    assert "stay" in out and "switch" in out
    assert "win rate" in out
    assert "95% CI" in out


def test_main_is_reproducible_with_seed(capsys):
    main(["--n", "300", "--seed", "42"])
    first = capsys.readouterr().out
    main(["--n", "300", "--seed", "42"])
    second = capsys.readouterr().out

    assert first == second


def test_main_confidence_flag(capsys):
    main(["--n", "50", "--seed", "3", "--confidence", "0.9"])
    out = capsys.readouterr().out

    assert "90% CI" in out


def test_main_uses_config_defaults(monkeypatch, capsys):
    monkeypatch.setenv("MONTYHALL_DEFAULT_N_GAMES", "12")
    monkeypatch.setenv("MONTYHALL_SEED", "8")

    main([])
    out = capsys.readouterr().out

    assert "n=12" in out


def test_main_logs_start_and_finish(caplog):
    with caplog.at_level(logging.INFO, logger="montyhall"):
        main(["--n", "10", "--seed", "0"])

    messages = [r.getMessage() for r in caplog.records]
    assert any("Starting simulation: n=10, seed=0" in m for m in messages)
    assert any("Simulation complete" in m for m in messages)


@pytest.mark.parametrize(
    "argv",
    [
        ["--n", "0"],
        ["--seed", "-1"],
        ["--confidence", "1.5"],
        ["--n", "ten"],
    ],
)
def test_main_rejects_invalid_arguments(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2
