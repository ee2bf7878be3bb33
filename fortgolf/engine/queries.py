"""
Query functions for host integration.
These functions help the host understand the contest without mutating game state.
Game over is always derived from players and hole counter, never stored.
"""

from dataclasses import dataclass
from typing import Any

from fortgolf.engine.actions import (
    Action,
    APPLY_HOLE,
    CONFIGURE_GAME,
    RECORD_INPUT,
    RENAME_PLAYER,
    RESET_GAME,
    SET_PLAYER_COUNT,
)
from fortgolf.engine.definitions import (
    ContestConfig,
    GameMode,
    InputField,
    parse_field,
    parse_mode,
    parse_score,
)
from fortgolf.engine.history import HoleSummary
from fortgolf.engine.standings import Standings, compute_standings
from fortgolf.engine.state import GameState, Player
from fortgolf.engine.turns import defender_order

GAME_OVER_HOLES_COMPLETE = "holes_complete"
GAME_OVER_LAST_FORT_STANDING = "last_fort_standing"


@dataclass
class ValidationResult:
    """Result of action validation."""
    valid: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "error": self.error}


# ===== State Queries =====

def get_active_players(state: GameState) -> list[Player]:
    """Players still in the contest: non-eliminated in elimination mode, everyone in siege."""
    if state.mode is GameMode.ELIMINATION:
        return [p for p in state.players if not p.eliminated]
    return list(state.players)


def get_game_over_reason(state: GameState) -> str | None:
    """Why the contest has ended, or None while it is in progress."""
    if state.current_hole > state.config.total_holes:
        return GAME_OVER_HOLES_COMPLETE
    if state.mode is GameMode.ELIMINATION and len(get_active_players(state)) <= 1:
        return GAME_OVER_LAST_FORT_STANDING
    return None


def is_game_over(state: GameState) -> bool:
    return get_game_over_reason(state) is not None


def get_current_defender(state: GameState) -> Player | None:
    if 0 <= state.defender_index < len(state.players):
        return state.players[state.defender_index]
    return None


def get_attackers(state: GameState) -> list[Player]:
    """Everyone but the defender; eliminated players sit out in elimination mode."""
    return [
        p for idx, p in enumerate(state.players)
        if idx != state.defender_index
        and not (state.mode is GameMode.ELIMINATION and p.eliminated)
    ]


def get_display_hole(state: GameState) -> int:
    return min(state.current_hole, state.config.total_holes)


def get_winner(state: GameState) -> Standings | None:
    """Final standings. Only meaningful once the game is over."""
    return compute_standings(state.players, state.mode)


def get_history(state: GameState) -> tuple[HoleSummary, ...]:
    return state.history.entries


def get_game_summary(state: GameState) -> dict[str, Any]:
    """
    Get a snapshot of the contest for host display.
    """
    game_over = is_game_over(state)
    defender = None if game_over else get_current_defender(state)
    latest = state.history.latest
    return {
        "config": state.config.to_dict(),
        "current_hole": state.current_hole,
        "display_hole": get_display_hole(state),
        "defender_index": state.defender_index,
        "defender": defender.to_dict() if defender else None,
        "attacker_ids": [] if game_over else [p.id for p in get_attackers(state)],
        "upcoming_defender_indices": (
            [] if game_over
            else defender_order(state.defender_index, state.players, state.mode, max(0, holes_remaining(state) - 1))
        ),
        "players": [p.to_dict() for p in state.players],
        "active_player_count": len(get_active_players(state)),
        "hole_inputs": {str(pid): hi.to_dict() for pid, hi in state.hole_inputs.items()},
        "holes_played": len(state.history),
        "holes_remaining": holes_remaining(state),
        "last_summary": latest.to_dict() if latest else None,
        "game_over": game_over,
        "game_over_reason": get_game_over_reason(state),
    }


# ===== Action Validation =====

def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_action(state: GameState, action: Action) -> ValidationResult:
    """
    Validate an action without applying it.
    Returns ValidationResult with valid=True or valid=False with error message.
    """
    payload = action.payload
    if action.type == CONFIGURE_GAME:
        return _validate_configure(payload)
    elif action.type == SET_PLAYER_COUNT:
        if not _is_int(payload.get("num_players")):
            return ValidationResult(False, "num_players must be an integer")
        return ValidationResult(True)
    elif action.type == RENAME_PLAYER:
        if not _player_exists(state, payload.get("player_id")):
            return ValidationResult(False, f"Unknown player id: {payload.get('player_id')}")
        if not isinstance(payload.get("name"), str):
            return ValidationResult(False, "name must be a string")
        return ValidationResult(True)
    elif action.type == RECORD_INPUT:
        return _validate_record_input(state, payload)
    elif action.type in (RESET_GAME, APPLY_HOLE):
        return ValidationResult(True)

    return ValidationResult(False, f"Unknown action type: {action.type}")


def _player_exists(state: GameState, player_id: Any) -> bool:
    return _is_int(player_id) and any(p.id == player_id for p in state.players)


def _validate_configure(payload: dict[str, Any]) -> ValidationResult:
    for key in ("num_players", "max_health", "total_holes"):
        if not _is_int(payload.get(key)):
            return ValidationResult(False, f"{key} must be an integer")
    try:
        config = ContestConfig(
            mode=parse_mode(payload.get("mode")),
            num_players=payload["num_players"],
            max_health=payload["max_health"],
            total_holes=payload["total_holes"],
        )
        config.validate()
    except ValueError as e:
        return ValidationResult(False, str(e))

    names = payload.get("names")
    if names is not None:
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            return ValidationResult(False, "names must be a list of strings")
        if len(names) > config.num_players:
            return ValidationResult(
                False, f"Got {len(names)} names for {config.num_players} players"
            )
    return ValidationResult(True)


def _validate_record_input(state: GameState, payload: dict[str, Any]) -> ValidationResult:
    player_id = payload.get("player_id")
    if not _player_exists(state, player_id):
        return ValidationResult(False, f"Unknown player id: {player_id}")
    try:
        input_field = parse_field(payload.get("field"))
    except ValueError as e:
        return ValidationResult(False, str(e))

    value = payload.get("value")
    if input_field is InputField.SCORE:
        try:
            parse_score(value)
        except ValueError as e:
            return ValidationResult(False, str(e))
    elif not isinstance(value, bool):
        return ValidationResult(False, f"{input_field.value} must be true or false")
    return ValidationResult(True)


def holes_remaining(state: GameState) -> int:
    """Holes left to play, including the current one."""
    return max(0, state.config.total_holes - state.current_hole + 1)
