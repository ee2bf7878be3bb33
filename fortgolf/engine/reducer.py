"""
Main game reducer.
Applies actions to state, enforcing rules and producing new state.
Returns (new_state, events) where events describe what happened.
The caller's state is never mutated: an action either applies fully or raises.
"""

import logging
from dataclasses import replace

from fortgolf.config import MAX_PLAYERS, MIN_PLAYERS
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
from fortgolf.engine.events import (
    GameEvent,
    defender_changed,
    fort_destroyed,
    game_configured,
    game_over,
    game_reset,
    hole_resolved,
    hole_skipped,
    input_recorded,
    player_count_changed,
    player_eliminated,
    player_renamed,
)
from fortgolf.engine.queries import (
    get_active_players,
    get_attackers,
    get_current_defender,
    get_game_over_reason,
    get_winner,
    validate_action,
)
from fortgolf.engine.history import HistoryLog
from fortgolf.engine.resolver import resolve_hole
from fortgolf.engine.state import GameState, HoleInput, Player
from fortgolf.engine.turns import next_defender_index
from fortgolf.engine.utils import initialize_game_state, resize_players

logger = logging.getLogger(__name__)


def apply_action(state: GameState, action: Action) -> tuple[GameState, list[GameEvent]]:
    """
    Apply a single action to the current state, returning new state and events.

    apply_hole on a finished contest is a no-op: the same state comes back with no events.

    Raises:
        ValueError: if the action is malformed (see queries.validate_action)
    """
    validation = validate_action(state, action)
    if not validation.valid:
        raise ValueError(validation.error)

    if action.type == APPLY_HOLE and get_game_over_reason(state) is not None:
        logger.debug("apply_hole ignored: game is over")
        return state, []

    new_state = state.copy()
    events: list[GameEvent] = []

    if action.type == CONFIGURE_GAME:
        new_state, evts = _handle_configure(action)
        events.extend(evts)

    elif action.type == RESET_GAME:
        new_state, evts = _handle_reset(new_state)
        events.extend(evts)

    elif action.type == SET_PLAYER_COUNT:
        new_state, evts = _handle_set_player_count(new_state, action)
        events.extend(evts)

    elif action.type == RENAME_PLAYER:
        new_state, evts = _handle_rename_player(new_state, action)
        events.extend(evts)

    elif action.type == RECORD_INPUT:
        new_state, evts = _handle_record_input(new_state, action)
        events.extend(evts)

    elif action.type == APPLY_HOLE:
        new_state, evts = _handle_apply_hole(new_state)
        events.extend(evts)

    else:
        raise ValueError(f"Unknown action type: {action.type}")

    return new_state, events


def _clear_progress(state: GameState) -> None:
    """Back to hole 1 with the first player defending and nothing staged or recorded."""
    state.current_hole = 1
    state.defender_index = 0
    state.hole_inputs = {}
    state.history = HistoryLog()


def _handle_configure(action: Action) -> tuple[GameState, list[GameEvent]]:
    payload = action.payload
    config = ContestConfig(
        mode=parse_mode(payload["mode"]),
        num_players=payload["num_players"],
        max_health=payload["max_health"],
        total_holes=payload["total_holes"],
    )
    state = initialize_game_state(config, payload.get("names"))
    logger.info(
        "Contest configured: %s, %d players, capacity %d, %d holes",
        config.mode.value, config.num_players, config.max_health, config.total_holes,
    )
    return state, [game_configured(config.to_dict())]


def _handle_reset(state: GameState) -> tuple[GameState, list[GameEvent]]:
    """Fresh forts with default names under the same config."""
    new_state = initialize_game_state(state.config)
    logger.info("Contest reset")
    return new_state, [game_reset(len(new_state.players))]


def _handle_set_player_count(state: GameState, action: Action) -> tuple[GameState, list[GameEvent]]:
    """
    Change the player count (clamped to 2..4).
    Existing players keep their slot records; new slots start at full health.
    """
    old_count = len(state.players)
    new_count = min(MAX_PLAYERS, max(MIN_PLAYERS, action.payload["num_players"]))

    state.config = ContestConfig(
        mode=state.config.mode,
        num_players=new_count,
        max_health=state.config.max_health,
        total_holes=state.config.total_holes,
    )
    state.players = resize_players(state.players, new_count, state.config.max_health)
    _clear_progress(state)
    return state, [player_count_changed(old_count, new_count)]


def _handle_rename_player(state: GameState, action: Action) -> tuple[GameState, list[GameEvent]]:
    player = state.get_player(action.payload["player_id"])
    old_name = player.name
    player.name = action.payload["name"]
    return state, [player_renamed(player.id, old_name, player.name)]


def _handle_record_input(state: GameState, action: Action) -> tuple[GameState, list[GameEvent]]:
    """
    Stage one field of a player's input for the current hole.
    Fields not yet staged default to no fairway, no GIR, bogey or worse.
    """
    payload = action.payload
    player_id = payload["player_id"]
    input_field = parse_field(payload["field"])
    value = payload["value"]
    if input_field is InputField.SCORE:
        value = parse_score(value)

    current = state.hole_inputs.get(player_id, HoleInput())
    state.hole_inputs[player_id] = current.with_field(input_field, value)

    logger.debug("Hole %d: player %d %s=%s", state.current_hole, player_id, input_field.value, value)
    stored = value.value if input_field is InputField.SCORE else value
    return state, [input_recorded(state.current_hole, player_id, input_field.value, stored)]


def _advance(state: GameState, rotation_snapshot: list[Player]) -> list[GameEvent]:
    """Clear staged inputs, move to the next hole and rotate the defender."""
    old_index = state.defender_index
    state.hole_inputs = {}
    state.current_hole += 1
    state.defender_index = next_defender_index(old_index, rotation_snapshot, state.mode)
    return [defender_changed(old_index, state.defender_index, state.current_hole)]


def _handle_apply_hole(state: GameState) -> tuple[GameState, list[GameEvent]]:
    """
    Resolve the current hole.

    Flow:
    - Defender already eliminated (elimination mode): no scoring, just advance
    - Otherwise resolve inputs against the defender's fort, update health and
      counters, record the summary, advance
    - The next defender is picked from the player list as it was before this
      hole's result was applied
    """
    events: list[GameEvent] = []
    hole = state.current_hole
    defender = get_current_defender(state)
    if defender is None:
        raise ValueError(f"No defender at index {state.defender_index}")

    rotation_snapshot = _snapshot_players(state)

    if state.mode is GameMode.ELIMINATION and defender.eliminated:
        logger.warning("Hole %d: defender %s already eliminated, skipping", hole, defender.name)
        events.append(hole_skipped(hole, defender.id, "defender_eliminated"))
        events.extend(_advance(state, rotation_snapshot))
        events.extend(_game_over_events(state))
        return state, events

    attacker_inputs = [state.hole_inputs.get(p.id) for p in get_attackers(state)]
    result = resolve_hole(hole, defender, attacker_inputs, state.hole_inputs.get(defender.id))

    defender.health = result.new_health
    if result.destroyed_this_hole:
        defender.forts_destroyed += 1
    newly_eliminated = (
        state.mode is GameMode.ELIMINATION
        and not defender.eliminated
        and result.new_health == 0
    )
    if newly_eliminated:
        defender.eliminated = True

    state.history.append(result.summary)

    logger.info(
        "Hole %d: %s defended, net %+d, health %d/%d",
        hole, defender.name, result.summary.net_change, defender.health, defender.max_health,
    )
    events.append(hole_resolved(result.summary, defender.id))
    if result.destroyed_this_hole:
        events.append(fort_destroyed(hole, defender.id, defender.forts_destroyed))
    if newly_eliminated:
        remaining = len(get_active_players(state))
        logger.info("Hole %d: %s eliminated, %d remaining", hole, defender.name, remaining)
        events.append(player_eliminated(hole, defender.id, remaining))

    events.extend(_advance(state, rotation_snapshot))
    events.extend(_game_over_events(state))
    return state, events


def _snapshot_players(state: GameState) -> list[Player]:
    """Detached copies of the players, used for rotation."""
    return [replace(p) for p in state.players]


def _game_over_events(state: GameState) -> list[GameEvent]:
    reason = get_game_over_reason(state)
    if reason is None:
        return []
    standings = get_winner(state)
    winner_ids = [p.id for p in standings.winners] if standings else []
    logger.info("Game over (%s) after %d holes, winners: %s", reason, len(state.history), winner_ids)
    return [game_over(reason, winner_ids, len(state.history))]


def replay_from_actions(
    initial_state: GameState,
    actions: list[Action],
) -> tuple[GameState, list[GameEvent]]:
    """
    Replay a series of actions from an initial state.

    Args:
        initial_state: Starting game state
        actions: List of actions to apply in sequence

    Returns:
        Tuple of (final_state, all_events) after all actions applied
    """
    current_state = initial_state.copy()
    all_events: list[GameEvent] = []

    for action in actions:
        current_state, events = apply_action(current_state, action)
        all_events.extend(events)

    return current_state, all_events
