"""
Action definitions for the game.
Actions are immutable, deterministic instructions from the host.
"""

from dataclasses import dataclass

# Action type constants
CONFIGURE_GAME = "configure_game"
RESET_GAME = "reset_game"
SET_PLAYER_COUNT = "set_player_count"
RENAME_PLAYER = "rename_player"
RECORD_INPUT = "record_input"
APPLY_HOLE = "apply_hole"


@dataclass(frozen=True)
class Action:
    """Base action class. All actions have a type and payload."""
    type: str  # e.g., "record_input", "apply_hole"
    payload: dict  # Action-specific data


def configure_game(
    mode: str,
    num_players: int,
    max_health: int,
    total_holes: int,
    names: list[str] | None = None,
) -> Action:
    """
    Replace the contest config and start over.
    All players are recreated at full health; names default to Player A..D unless given.
    Example: configure_game("elimination", 3, 10, 9)
    """
    payload = {
        "mode": mode,
        "num_players": num_players,
        "max_health": max_health,
        "total_holes": total_holes,
    }
    if names:
        payload["names"] = list(names)
    return Action(type=CONFIGURE_GAME, payload=payload)


def reset_game() -> Action:
    """Start the contest over with the current config."""
    return Action(type=RESET_GAME, payload={})


def set_player_count(num_players: int) -> Action:
    """
    Change the number of players (clamped to 2..4).
    Existing slots are kept by index, new slots get fresh forts.
    Hole counter, defender, inputs and history are reset.
    """
    return Action(type=SET_PLAYER_COUNT, payload={"num_players": num_players})


def rename_player(player_id: int, name: str) -> Action:
    """Change a player's display name. Cosmetic only."""
    return Action(type=RENAME_PLAYER, payload={"player_id": player_id, "name": name})


def record_input(player_id: int, field: str, value: bool | str) -> Action:
    """
    Stage one field of a player's input for the current hole.
    field is "fairway", "gir" (bool) or "score" ("birdie", "par", "bogey+").
    Example: record_input(2, "score", "birdie")
    """
    return Action(
        type=RECORD_INPUT,
        payload={"player_id": player_id, "field": field, "value": value},
    )


def apply_hole() -> Action:
    """Resolve the current hole with the staged inputs and move on to the next one."""
    return Action(type=APPLY_HOLE, payload={})
