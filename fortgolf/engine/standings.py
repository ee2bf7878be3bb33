"""
Final standings.
Ranks players by health remaining, then fewer forts destroyed, then name.
"""

from dataclasses import dataclass
from typing import Any

from fortgolf.engine.definitions import GameMode
from fortgolf.engine.state import Player


@dataclass
class Standings:
    """Ranked players plus everyone tied for first."""
    ranked: list[Player]
    winners: list[Player]  # tied on health and forts destroyed with ranked[0]

    @property
    def winner(self) -> Player:
        return self.ranked[0]

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1

    def to_dict(self, mode: GameMode) -> dict[str, Any]:
        return {
            "winner": self.winner.to_dict(),
            "winners": [p.to_dict() for p in self.winners],
            "is_tie": self.is_tie,
            "ranked": [
                {**p.to_dict(), "status": player_status(p, mode)}
                for p in self.ranked
            ],
        }


def _rank_key(player: Player) -> tuple[int, int]:
    return (-player.health, player.forts_destroyed)


def player_status(player: Player, mode: GameMode) -> str:
    if mode is GameMode.ELIMINATION and player.eliminated:
        return "ELIMINATED"
    return "ACTIVE"


def compute_standings(players: list[Player], mode: GameMode) -> Standings | None:
    """
    Rank the final player pool.

    Siege ranks everyone; elimination ranks only surviving players.
    Name orders players within a tie but never breaks it.
    Returns None when the pool is empty.
    """
    if mode is GameMode.ELIMINATION:
        pool = [p for p in players if not p.eliminated]
    else:
        pool = list(players)

    if not pool:
        return None

    ranked = sorted(pool, key=lambda p: (_rank_key(p), p.name))
    best = _rank_key(ranked[0])
    winners = [p for p in ranked if _rank_key(p) == best]
    return Standings(ranked=ranked, winners=winners)
