"""
Game events for UI hooks and logging.
Events describe what happened during action processing.
"""

from dataclasses import dataclass
from typing import Any

from fortgolf.engine.history import HoleSummary


@dataclass
class GameEvent:
    """Base event class. All events have a type and payload."""
    type: str
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": self.payload}


# ===== Event Type Constants =====

# Setup events
GAME_CONFIGURED = "game_configured"
GAME_RESET = "game_reset"
PLAYER_COUNT_CHANGED = "player_count_changed"
PLAYER_RENAMED = "player_renamed"

# Input events
INPUT_RECORDED = "input_recorded"

# Hole events
HOLE_RESOLVED = "hole_resolved"
HOLE_SKIPPED = "hole_skipped"
DEFENDER_CHANGED = "defender_changed"

# Fort events
FORT_DESTROYED = "fort_destroyed"
PLAYER_ELIMINATED = "player_eliminated"

# End of contest
GAME_OVER = "game_over"


# ===== Event Factory Functions =====

def game_configured(config: dict[str, Any]) -> GameEvent:
    return GameEvent(GAME_CONFIGURED, {"config": config})


def game_reset(num_players: int) -> GameEvent:
    return GameEvent(GAME_RESET, {"num_players": num_players})


def player_count_changed(old_count: int, new_count: int) -> GameEvent:
    return GameEvent(PLAYER_COUNT_CHANGED, {
        "old_count": old_count,
        "new_count": new_count,
    })


def player_renamed(player_id: int, old_name: str, new_name: str) -> GameEvent:
    return GameEvent(PLAYER_RENAMED, {
        "player_id": player_id,
        "old_name": old_name,
        "new_name": new_name,
    })


def input_recorded(hole: int, player_id: int, field: str, value: Any) -> GameEvent:
    return GameEvent(INPUT_RECORDED, {
        "hole": hole,
        "player_id": player_id,
        "field": field,
        "value": value,
    })


def hole_resolved(summary: HoleSummary, defender_id: int) -> GameEvent:
    return GameEvent(HOLE_RESOLVED, {
        "defender_id": defender_id,
        **summary.to_dict(),
    })


def hole_skipped(hole: int, defender_id: int, reason: str) -> GameEvent:
    """Emitted when a hole is consumed without scoring (defender already eliminated)."""
    return GameEvent(HOLE_SKIPPED, {
        "hole": hole,
        "defender_id": defender_id,
        "reason": reason,
    })


def defender_changed(old_index: int, new_index: int, next_hole: int) -> GameEvent:
    return GameEvent(DEFENDER_CHANGED, {
        "old_index": old_index,
        "new_index": new_index,
        "next_hole": next_hole,
    })


def fort_destroyed(hole: int, player_id: int, forts_destroyed: int) -> GameEvent:
    return GameEvent(FORT_DESTROYED, {
        "hole": hole,
        "player_id": player_id,
        "forts_destroyed": forts_destroyed,  # running total for this player
    })


def player_eliminated(hole: int, player_id: int, remaining_players: int) -> GameEvent:
    return GameEvent(PLAYER_ELIMINATED, {
        "hole": hole,
        "player_id": player_id,
        "remaining_players": remaining_players,
    })


def game_over(reason: str, winner_ids: list[int], holes_played: int) -> GameEvent:
    """reason is "holes_complete" or "last_fort_standing"; winner_ids empty if nobody survived."""
    return GameEvent(GAME_OVER, {
        "reason": reason,
        "winner_ids": winner_ids,
        "holes_played": holes_played,
    })
