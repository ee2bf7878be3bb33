"""
Defender rotation.
Pure functions over a snapshot of the player list; nothing here mutates state.
"""

from fortgolf.engine.definitions import GameMode
from fortgolf.engine.state import Player


def next_defender_index(start_index: int, players: list[Player], mode: GameMode) -> int:
    """
    Index of the player who defends after the one at start_index.

    Siege: plain circular increment.
    Elimination: scan forward (wrapping) for the first non-eliminated player.
    If nobody else is left the start index is returned unchanged; that only
    happens alongside game over.
    """
    n = len(players)
    if mode is not GameMode.ELIMINATION:
        return (start_index + 1) % n

    for step in range(1, n + 1):
        idx = (start_index + step) % n
        if not players[idx].eliminated:
            return idx
    return start_index


def defender_order(start_index: int, players: list[Player], mode: GameMode, count: int) -> list[int]:
    """Upcoming defender indices, assuming no further eliminations."""
    order = []
    idx = start_index
    for _ in range(count):
        idx = next_defender_index(idx, players, mode)
        order.append(idx)
    return order
