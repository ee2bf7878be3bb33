"""
Game state representation.
The reducer works on deep copies, so a GameState handed to apply_action is never mutated.
Snapshots serialize to plain dicts for the host; there is no load path back into a live game.
"""

from dataclasses import dataclass, field, replace
from copy import deepcopy
from typing import Any

from fortgolf.engine.definitions import ContestConfig, GameMode, InputField, ScoreResult
from fortgolf.engine.history import HistoryLog


@dataclass
class Player:
    """One participant and their fort."""
    id: int  # slot index, stable for the contest
    name: str  # cosmetic only, never used for identity
    health: int  # 0..max_health
    max_health: int  # fixed at contest start
    eliminated: bool = False  # elimination mode only; never reset within a contest
    forts_destroyed: int = 0  # times health went from >0 to 0

    @property
    def damage(self) -> int:
        return self.max_health - self.health

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "health": self.health,
            "max_health": self.max_health,
            "damage": self.damage,
            "eliminated": self.eliminated,
            "forts_destroyed": self.forts_destroyed,
        }


@dataclass(frozen=True)
class HoleInput:
    """A player's staged results for the current hole. Cleared once the hole is applied."""
    fairway: bool = False  # counts as damage only when attacking
    gir: bool = False  # counts as damage only when attacking
    score: ScoreResult = ScoreResult.BOGEY_OR_WORSE

    def with_field(self, input_field: InputField, value: bool | ScoreResult) -> "HoleInput":
        return replace(self, **{input_field.value: value})

    def to_dict(self) -> dict[str, Any]:
        return {"fairway": self.fairway, "gir": self.gir, "score": self.score.value}


@dataclass
class GameState:
    """Complete contest state, owned by the host and passed into every engine call."""
    config: ContestConfig
    players: list[Player]
    current_hole: int = 1  # 1-based; exceeds total_holes once the last hole is applied
    defender_index: int = 0
    # player_id -> staged input for the current hole
    hole_inputs: dict[int, HoleInput] = field(default_factory=dict)
    history: HistoryLog = field(default_factory=HistoryLog)

    @property
    def mode(self) -> GameMode:
        return self.config.mode

    def copy(self) -> "GameState":
        """Return a deep copy of this game state."""
        return deepcopy(self)

    def get_player(self, player_id: int) -> Player:
        for player in self.players:
            if player.id == player_id:
                return player
        raise ValueError(f"Unknown player id: {player_id}")

    def to_dict(self) -> dict[str, Any]:
        """Convert GameState to a dictionary for JSON serialization."""
        return {
            "config": self.config.to_dict(),
            "players": [p.to_dict() for p in self.players],
            "current_hole": self.current_hole,
            "defender_index": self.defender_index,
            "hole_inputs": {str(pid): hi.to_dict() for pid, hi in self.hole_inputs.items()},
            "history": self.history.to_list(),
        }
