"""Helpers for building contests in tests."""

from fortgolf.engine.actions import apply_hole, record_input
from fortgolf.engine.definitions import ContestConfig, GameMode, parse_score
from fortgolf.engine.reducer import apply_action
from fortgolf.engine.state import HoleInput
from fortgolf.engine.utils import initialize_game_state

CRUSH = {"fairway": True, "gir": True, "score": "birdie"}  # -4 from one attacker


def make_state(mode=GameMode.SIEGE, num_players=4, max_health=10, total_holes=18, names=None):
    """Fresh contest state for a test."""
    config = ContestConfig(mode=mode, num_players=num_players, max_health=max_health, total_holes=total_holes)
    return initialize_game_state(config, names)


def hole_input(fairway=False, gir=False, score="bogey+"):
    return HoleInput(fairway=fairway, gir=gir, score=parse_score(score))


def play_hole(state, inputs=None):
    """Stage {player_id: {field: value}} and apply the hole. Returns (state, events from applying)."""
    for player_id, fields in (inputs or {}).items():
        for field, value in fields.items():
            state, _ = apply_action(state, record_input(player_id, field, value))
    return apply_action(state, apply_hole())
