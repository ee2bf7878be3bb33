"""
Utility functions for the game engine.
"""

from fortgolf.config import DEFAULT_NAMES
from fortgolf.engine.definitions import ContestConfig, GameMode
from fortgolf.engine.history import HoleSummary
from fortgolf.engine.scoring import format_signed
from fortgolf.engine.standings import Standings, player_status
from fortgolf.engine.state import GameState, Player


def default_name(slot: int) -> str:
    if slot < len(DEFAULT_NAMES):
        return DEFAULT_NAMES[slot]
    return f"Player {slot + 1}"


def new_player(slot: int, max_health: int, name: str | None = None) -> Player:
    """A fresh player at full health."""
    return Player(
        id=slot,
        name=name or default_name(slot),
        health=max_health,
        max_health=max_health,
    )


def initialize_game_state(
    config: ContestConfig | None = None,
    names: list[str] | None = None,
) -> GameState:
    """
    Create the initial state for a contest.

    Args:
        config: Contest config (defaults from fortgolf.config if not provided)
        names: Optional display names by slot; missing slots get Player A..D
    """
    config = config or ContestConfig()
    config.validate()
    names = names or []
    players = [
        new_player(i, config.max_health, names[i] if i < len(names) else None)
        for i in range(config.num_players)
    ]
    return GameState(config=config, players=players)


def resize_players(players: list[Player], num_players: int, max_health: int) -> list[Player]:
    """
    Keep existing players by slot, pad with fresh ones, drop the rest.
    Ids are re-indexed to slot positions.
    """
    resized = []
    for i in range(num_players):
        if i < len(players):
            player = players[i]
            player.id = i
        else:
            player = new_player(i, max_health)
        resized.append(player)
    return resized


def print_game_state(state: GameState) -> None:
    """Print a readable summary of the contest."""
    config = state.config
    hole = min(state.current_hole, config.total_holes)
    print(f"Mode: {config.mode.display_name}")
    print(f"Hole {hole} / {config.total_holes}")
    for idx, player in enumerate(state.players):
        marker = " [DEFENDER]" if idx == state.defender_index else ""
        status = " [ELIMINATED]" if config.mode is GameMode.ELIMINATION and player.eliminated else ""
        print(
            f"  {player.name}{marker}{status}: "
            f"health {player.health}/{player.max_health}, "
            f"damage {player.damage}/{player.max_health}, "
            f"destroyed {player.forts_destroyed}"
        )


def print_hole_summary(summary: HoleSummary) -> None:
    print(
        f"Hole {summary.hole} | Defender: {summary.defender_name} | "
        f"attackers {format_signed(summary.attacker_damage_total)}, "
        f"repair {format_signed(summary.defender_repair)}, "
        f"net {format_signed(summary.net_change)} -> "
        f"health {summary.final_health}, damage {summary.final_damage}/{summary.max_damage}"
    )


def print_standings(standings: Standings | None, mode: GameMode) -> None:
    if standings is None:
        print("No surviving forts - no winner.")
        return
    label = "Winners" if standings.is_tie else "Winner"
    print(f"{label}: {', '.join(p.name for p in standings.winners)}")
    for rank, player in enumerate(standings.ranked, start=1):
        print(
            f"  {rank}. {player.name} ({player_status(player, mode)}) "
            f"health {player.health}/{player.max_health}, destroyed {player.forts_destroyed}"
        )
