"""
Main entry point for the Fort Golf scoring engine.
Demonstrates core functionality with two short simulated contests.
"""

from fortgolf.engine.actions import (
    apply_hole,
    configure_game,
    record_input,
    rename_player,
)
from fortgolf.engine.definitions import ContestConfig, GameMode
from fortgolf.engine.queries import get_winner, is_game_over
from fortgolf.engine.reducer import apply_action
from fortgolf.engine.utils import (
    initialize_game_state,
    print_game_state,
    print_hole_summary,
    print_standings,
)


def play_hole(state, inputs):
    """Stage inputs ({player_id: {field: value}}) and apply the hole."""
    for player_id, fields in inputs.items():
        for field, value in fields.items():
            state, _ = apply_action(state, record_input(player_id, field, value))
    state, events = apply_action(state, apply_hole())
    if state.history.latest is not None:
        print_hole_summary(state.history.latest)
    for e in events:
        if e.type in ("fort_destroyed", "player_eliminated", "hole_skipped", "game_over"):
            print(f"  ! {e.type}: {e.payload}")
    return state


def main():
    print("Fort Golf Scoring Engine")
    print("=" * 60)

    # ===== SCENARIO 1: Siege, 3 players, 4 holes =====
    print("\n[SCENARIO 1: Siege - fixed hole count]")
    state = initialize_game_state(ContestConfig(mode=GameMode.SIEGE, num_players=3, max_health=5, total_holes=4))
    state, _ = apply_action(state, rename_player(0, "Alice"))
    state, _ = apply_action(state, rename_player(1, "Bea"))
    state, _ = apply_action(state, rename_player(2, "Cal"))
    print_game_state(state)

    # Hole 1: Alice defends with par (+2), Bea birdies with fairway and GIR (-4), Cal pars (-1)
    state = play_hole(state, {
        0: {"score": "par"},
        1: {"fairway": True, "gir": True, "score": "birdie"},
        2: {"score": "par"},
    })
    # Hole 2: nobody does anything - Bea's fort repairs +1
    state = play_hole(state, {})
    # Hole 3: Cal defends at bogey, Alice and Bea hit everything
    state = play_hole(state, {
        0: {"fairway": True, "gir": True, "score": "birdie"},
        1: {"fairway": True, "gir": True, "score": "par"},
    })
    # Hole 4: Alice defends again, Bea finds the fairway
    state = play_hole(state, {1: {"fairway": True}})

    print()
    print_game_state(state)
    print(f"Game over: {is_game_over(state)}")
    print_standings(get_winner(state), state.mode)

    # ===== SCENARIO 2: Elimination, 3 players =====
    print("\n[SCENARIO 2: Elimination - last fort standing]")
    state, _ = apply_action(state, configure_game("elimination", 3, 5, 18, ["Alice", "Bea", "Cal"]))

    crush = {"fairway": True, "gir": True, "score": "birdie"}
    # Alice falls on hole 1; the rotation then skips her
    state = play_hole(state, {1: crush, 2: crush})
    state = play_hole(state, {2: crush})
    state = play_hole(state, {})
    # Bea defends again and falls
    state = play_hole(state, {2: crush})
    apply_action(state, apply_hole())  # no-op once the game is over

    print()
    print_game_state(state)
    print(f"Game over: {is_game_over(state)} after {len(state.history)} holes")
    print_standings(get_winner(state), state.mode)

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
