"""Single-trial Monty Hall simulation kernel.

Implements:
- Game setup (random car/goat arrangement)
- Contestant's first pick
- Host reveal of a goat door
- Stay/switch decision
- Win/lose determination

Every function that draws random numbers accepts an optional
numpy Generator so runs can be reproduced from a seed.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd

from montyhall.doors import (
    DOORS,
    DoorContent,
    Outcome,
    Strategy,
    content_at,
    validate_door,
    validate_game,
)


RESULT_COLUMNS = ["strategy", "outcome"]


@dataclass(frozen=True)
class TrialResult:
    """Outcome of one strategy within a trial."""

    strategy: Strategy
    outcome: Outcome


@dataclass(frozen=True)
class Trial:
    """Full record of one game played under both strategies."""

    game: tuple[DoorContent, ...]
    first_pick: int
    opened_door: int
    results: tuple[TrialResult, TrialResult]  # (stay, switch)

    def to_rows(self) -> list[dict[str, str]]:
        """Rows for a results DataFrame, one per strategy."""
        return [
            {"strategy": r.strategy.value, "outcome": r.outcome.value}
            for r in self.results
        ]


def _resolve_rng(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def create_game(rng: np.random.Generator | None = None) -> tuple[DoorContent, ...]:
    """Create a new game: two goats and one car behind three doors.

    Each of the three arrangements is equally likely.

    Args:
        rng: Random generator (None = fresh unseeded generator)

    Returns:
        Tuple of 3 DoorContent values; element i is behind door i + 1
    """
    rng = _resolve_rng(rng)
    contents = (DoorContent.GOAT, DoorContent.GOAT, DoorContent.CAR)
    order = rng.permutation(len(contents))
    return tuple(contents[i] for i in order)


def select_door(rng: np.random.Generator | None = None) -> int:
    """Contestant's first pick, uniform over the three doors."""
    rng = _resolve_rng(rng)
    return int(rng.integers(DOORS[0], DOORS[-1] + 1))


def open_goat_door(
    game: Sequence[DoorContent],
    pick: int,
    rng: np.random.Generator | None = None,
) -> int:
    """Door the host opens: never the car and never the contestant's pick.

    If the contestant picked the car, the host chooses between the two goat
    doors with equal probability. If the contestant picked a goat, only one
    door qualifies.

    Args:
        game: Game from create_game()
        pick: Contestant's current door
        rng: Random generator (None = fresh unseeded generator)

    Returns:
        Door number holding a goat, different from pick

    Raises:
        ValueError: If pick is not a valid door or game is malformed
    """
    validate_game(game)
    validate_door(pick, "pick")

    goat_doors = [
        door
        for door in DOORS
        if door != pick and content_at(game, door) is DoorContent.GOAT
    ]

    if content_at(game, pick) is DoorContent.CAR:
        # Both unpicked doors hide goats
        return int(_resolve_rng(rng).choice(goat_doors))

    return goat_doors[0]


def change_door(stay: bool, opened_door: int, pick: int) -> int:
    """Contestant's final door after the host reveal.

    Args:
        stay: True to keep the first pick, False to switch
        opened_door: Door opened by the host
        pick: Contestant's first pick

    Returns:
        pick when staying, otherwise the only door that is neither
        opened_door nor pick

    Raises:
        ValueError: If either door is invalid or opened_door equals pick
    """
    validate_door(opened_door, "opened_door")
    validate_door(pick, "pick")

    if opened_door == pick:
        raise ValueError(f"Host cannot open the picked door ({pick})")

    if stay:
        return pick

    remaining = [door for door in DOORS if door not in (opened_door, pick)]
    return remaining[0]


def determine_winner(final_pick: int, game: Sequence[DoorContent]) -> Outcome:
    """WIN if the car is behind final_pick, LOSE otherwise."""
    validate_game(game)
    validate_door(final_pick, "final_pick")

    if content_at(game, final_pick) is DoorContent.CAR:
        return Outcome.WIN
    return Outcome.LOSE


def play_trial(rng: np.random.Generator | None = None) -> Trial:
    """Play one game and evaluate both strategies against it.

    Stay and switch share the same game, first pick and host reveal,
    so the two results are paired counterfactuals of one trial.

    Args:
        rng: Random generator (None = fresh unseeded generator)

    Returns:
        Trial with the game state and (stay, switch) results
    """
    rng = _resolve_rng(rng)

    game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(game, first_pick, rng)

    final_pick_stay = change_door(True, opened_door, first_pick)
    final_pick_switch = change_door(False, opened_door, first_pick)

    return Trial(
        game=game,
        first_pick=first_pick,
        opened_door=opened_door,
        results=(
            TrialResult(Strategy.STAY, determine_winner(final_pick_stay, game)),
            TrialResult(Strategy.SWITCH, determine_winner(final_pick_switch, game)),
        ),
    )


def play_game(rng: np.random.Generator | None = None) -> pd.DataFrame:
    """Play one game and return a two-row strategy/outcome table.

    Returns:
        DataFrame with columns ["strategy", "outcome"], rows stay then switch
    """
    return pd.DataFrame(play_trial(rng).to_rows(), columns=RESULT_COLUMNS)
