#!/usr/bin/env python3
"""
Interactive CLI for playing a Fort Golf contest at the terminal.
Run: python scripts/play_cli.py
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fortgolf.config import (
    DAMAGE_CAP_OPTIONS,
    DEFAULT_MAX_HEALTH,
    DEFAULT_MODE,
    DEFAULT_NUM_PLAYERS,
    DEFAULT_TOTAL_HOLES,
)
from fortgolf.engine.actions import (
    apply_hole,
    configure_game,
    record_input,
    rename_player,
    reset_game,
    set_player_count,
)
from fortgolf.engine.definitions import ScoreResult
from fortgolf.engine.queries import (
    get_attackers,
    get_current_defender,
    get_display_hole,
    get_winner,
    is_game_over,
    validate_action,
)
from fortgolf.engine.reducer import apply_action
from fortgolf.engine.scoring import format_signed
from fortgolf.engine.utils import initialize_game_state, print_game_state, print_standings

SCORE_CHOICES = {
    "b": ScoreResult.BIRDIE,
    "p": ScoreResult.PAR,
    "x": ScoreResult.BOGEY_OR_WORSE,
}


def print_header(state):
    """Print contest status header."""
    print("=" * 60)
    print(f"  HOLE {get_display_hole(state)} / {state.config.total_holes} | {state.mode.display_name}")
    if is_game_over(state):
        print("  *** GAME OVER ***")
    else:
        defender = get_current_defender(state)
        print(f"  Defender: {defender.name}")
    print("=" * 60)


def ask(prompt, default=""):
    answer = input(f"{prompt} [{default}]: ").strip()
    return answer or default


def ask_yes_no(prompt):
    return input(f"{prompt} (y/N): ").strip().lower() == "y"


def ask_score(prompt):
    while True:
        choice = input(f"{prompt} (b=birdie, p=par, x=bogey+) [x]: ").strip().lower() or "x"
        if choice in SCORE_CHOICES:
            return SCORE_CHOICES[choice]
        print("Invalid choice")


def prompt_configure():
    """Build a configure_game action from prompts."""
    print("\n--- New Contest ---")
    try:
        mode = ask("Mode (elimination/siege)", DEFAULT_MODE)
        num_players = int(ask("Players (2-4)", str(DEFAULT_NUM_PLAYERS)))
        max_health = int(ask(f"Fort damage capacity {list(DAMAGE_CAP_OPTIONS)}", str(DEFAULT_MAX_HEALTH)))
        total_holes = int(ask("Total holes (1-36)", str(DEFAULT_TOTAL_HOLES)))
    except ValueError:
        print("Invalid number")
        return None
    return configure_game(mode, num_players, max_health, total_holes)


def prompt_hole(state):
    """Collect inputs for the current hole. Returns the actions to stage."""
    actions = []
    defender = get_current_defender(state)
    score = ask_score(f"\n{defender.name} (defender) score")
    actions.append(record_input(defender.id, "score", score.value))

    for attacker in get_attackers(state):
        print(f"\n{attacker.name} (attacker)")
        actions.append(record_input(attacker.id, "fairway", ask_yes_no("  Fairway hit?")))
        actions.append(record_input(attacker.id, "gir", ask_yes_no("  Green in regulation?")))
        score = ask_score("  Score")
        actions.append(record_input(attacker.id, "score", score.value))
    return actions


def run(state, action):
    """Validate and apply one action, printing any error. Returns (state, events)."""
    result = validate_action(state, action)
    if not result.valid:
        print(f"\nInvalid action: {result.error}")
        return state, []
    return apply_action(state, action)


def print_events(events):
    for e in events:
        p = e.payload
        if e.type == "hole_resolved":
            print(
                f"  Hole {p['hole']}: {p['defender_name']} "
                f"attackers {format_signed(p['attacker_damage_total'])}, "
                f"repair {format_signed(p['defender_repair'])}, "
                f"net {format_signed(p['net_change'])} -> health {p['final_health']}/{p['max_damage']}"
            )
        elif e.type == "fort_destroyed":
            print(f"  Fort destroyed! (player {p['player_id']}, total {p['forts_destroyed']})")
        elif e.type == "player_eliminated":
            print(f"  Player {p['player_id']} eliminated, {p['remaining_players']} remaining")
        elif e.type == "hole_skipped":
            print(f"  Hole {p['hole']} skipped ({p['reason']})")
        elif e.type == "game_over":
            print(f"  *** GAME OVER ({p['reason']}) ***")
        elif e.type in ["input_recorded", "defender_changed"]:
            pass  # Header will show this
        else:
            print(f"  {e.type}: {p}")


def main_loop():
    state = initialize_game_state()

    while True:
        print()
        print_header(state)
        print_game_state(state)

        if is_game_over(state):
            print()
            print_standings(get_winner(state), state.mode)

        print("\nCommands: [h]ole, [n]ame, [c]ount, [r]eset, [g] new contest, [q]uit")
        cmd = input("> ").strip().lower()

        actions = []
        if cmd == "q":
            print("Goodbye!")
            return
        elif cmd == "h":
            if is_game_over(state):
                print("Contest is over. Reset or start a new one.")
                continue
            actions = prompt_hole(state) + [apply_hole()]
        elif cmd == "n":
            try:
                player_id = int(input("Player id: ").strip())
            except ValueError:
                print("Invalid id")
                continue
            actions = [rename_player(player_id, input("New name: ").strip())]
        elif cmd == "c":
            try:
                actions = [set_player_count(int(input("Players (2-4): ").strip()))]
            except ValueError:
                print("Invalid number")
                continue
        elif cmd == "r":
            actions = [reset_game()]
        elif cmd == "g":
            action = prompt_configure()
            actions = [action] if action else []
        else:
            continue

        for action in actions:
            state, events = run(state, action)
            print_events(events)


if __name__ == "__main__":
    try:
        main_loop()
    except KeyboardInterrupt:
        print("\n\nGame interrupted. Goodbye!")
        sys.exit(0)
