"""
Static definitions for a contest: game modes, hole score results, input fields,
and the contest configuration.
ContestConfig is immutable once the contest begins; changing it means a full reset.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from fortgolf.config import (
    DAMAGE_CAP_OPTIONS,
    DEFAULT_MAX_HEALTH,
    DEFAULT_MODE,
    DEFAULT_NUM_PLAYERS,
    DEFAULT_TOTAL_HOLES,
    MAX_HOLES,
    MAX_PLAYERS,
    MIN_HOLES,
    MIN_PLAYERS,
)


class GameMode(str, Enum):
    """Victory model for a contest."""
    ELIMINATION = "elimination"  # Option B: a fort at 0 is out for good
    SIEGE = "siege"  # Option E: fixed hole count, forts destroyed tallied

    @property
    def display_name(self) -> str:
        if self is GameMode.ELIMINATION:
            return "Option B: Elimination"
        return "Option E: Siege"


class ScoreResult(str, Enum):
    """A player's score on a hole relative to par."""
    BIRDIE = "birdie"
    PAR = "par"
    BOGEY_OR_WORSE = "bogey+"


class InputField(str, Enum):
    """Fields of a staged hole input."""
    FAIRWAY = "fairway"
    GIR = "gir"
    SCORE = "score"


def parse_mode(value: Any) -> GameMode:
    try:
        return GameMode(value)
    except ValueError:
        raise ValueError(
            f"Unknown game mode: {value!r}. Expected one of: "
            f"{', '.join(m.value for m in GameMode)}"
        ) from None


def parse_score(value: Any) -> ScoreResult:
    try:
        return ScoreResult(value)
    except ValueError:
        raise ValueError(
            f"Unknown score result: {value!r}. Expected one of: "
            f"{', '.join(s.value for s in ScoreResult)}"
        ) from None


def parse_field(value: Any) -> InputField:
    try:
        return InputField(value)
    except ValueError:
        raise ValueError(
            f"Unknown input field: {value!r}. Expected one of: "
            f"{', '.join(f.value for f in InputField)}"
        ) from None


@dataclass(frozen=True)
class ContestConfig:
    """Configuration fixed for the lifetime of a contest."""
    mode: GameMode = GameMode(DEFAULT_MODE)
    num_players: int = DEFAULT_NUM_PLAYERS  # 2..4
    max_health: int = DEFAULT_MAX_HEALTH  # starting and maximum fort health, shared by all forts
    total_holes: int = DEFAULT_TOTAL_HOLES  # 1..36

    def validate(self) -> None:
        """Raise ValueError if any field is outside its allowed domain."""
        if not isinstance(self.mode, GameMode):
            raise ValueError(f"Unknown game mode: {self.mode!r}")
        if not MIN_PLAYERS <= self.num_players <= MAX_PLAYERS:
            raise ValueError(
                f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {self.num_players}"
            )
        if self.max_health not in DAMAGE_CAP_OPTIONS:
            raise ValueError(
                f"Fort damage capacity must be one of {list(DAMAGE_CAP_OPTIONS)}, got {self.max_health}"
            )
        if not MIN_HOLES <= self.total_holes <= MAX_HOLES:
            raise ValueError(
                f"Total holes must be between {MIN_HOLES} and {MAX_HOLES}, got {self.total_holes}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "num_players": self.num_players,
            "max_health": self.max_health,
            "total_holes": self.total_holes,
        }


def get_contest_options() -> dict[str, Any]:
    """Choices the host offers when configuring a contest."""
    return {
        "modes": [{"id": m.value, "display_name": m.display_name} for m in GameMode],
        "damage_cap_options": list(DAMAGE_CAP_OPTIONS),
        "min_players": MIN_PLAYERS,
        "max_players": MAX_PLAYERS,
        "min_holes": MIN_HOLES,
        "max_holes": MAX_HOLES,
        "defaults": ContestConfig().to_dict(),
    }
