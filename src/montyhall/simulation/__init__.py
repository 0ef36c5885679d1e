"""Monte Carlo simulation engine for the Monty Hall game.

The engine module holds the single-trial kernel; the batch module repeats
trials and returns the strategy/outcome table.
"""

from montyhall.doors import DOORS, DoorContent, Outcome, Strategy
from montyhall.simulation.engine import (
    Trial,
    TrialResult,
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    play_game,
    play_trial,
    select_door,
)
from montyhall.simulation.batch import play_n_games

__all__ = [
    "DOORS",
    "DoorContent",
    "Outcome",
    "Strategy",
    "Trial",
    "TrialResult",
    "create_game",
    "select_door",
    "open_goat_door",
    "change_door",
    "determine_winner",
    "play_trial",
    "play_game",
    "play_n_games",
]
