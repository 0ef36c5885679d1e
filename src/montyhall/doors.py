"""Door positions, door contents and the labels used in trial results."""

from collections.abc import Sequence
from enum import Enum


# Door positions are 1-indexed
DOORS: tuple[int, ...] = (1, 2, 3)


class DoorContent(str, Enum):
    """What sits behind a door."""

    CAR = "car"
    GOAT = "goat"


class Strategy(str, Enum):
    """Contestant policy after the host opens a door."""

    STAY = "stay"
    SWITCH = "switch"


class Outcome(str, Enum):
    """Result of a contestant's final pick."""

    WIN = "WIN"
    LOSE = "LOSE"


def validate_door(door: int, name: str = "door") -> int:
    """Return door unchanged if it is a valid position, else raise ValueError."""
    if isinstance(door, bool) or door not in DOORS:
        raise ValueError(f"{name} must be one of {DOORS}, got {door!r}")
    return door


def validate_game(game: Sequence[DoorContent]) -> Sequence[DoorContent]:
    """Check that a game has three doors hiding exactly one car.

    Raises:
        ValueError: If the game has the wrong length, unknown contents,
            or a car count other than one
    """
    if len(game) != len(DOORS):
        raise ValueError(f"game must have {len(DOORS)} doors, got {len(game)}")

    if any(not isinstance(content, DoorContent) for content in game):
        raise ValueError(f"game must contain DoorContent values, got {list(game)!r}")

    n_cars = sum(1 for content in game if content is DoorContent.CAR)
    if n_cars != 1:
        raise ValueError(f"game must hide exactly one car, found {n_cars}")

    return game


def content_at(game: Sequence[DoorContent], door: int) -> DoorContent:
    """Content behind a 1-indexed door."""
    return game[door - 1]
