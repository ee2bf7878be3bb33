"""
Hole-by-hole record of a contest.
Summaries are immutable and the log only grows; insertion order is hole order.
"""

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True)
class HoleSummary:
    """Outcome of one resolved hole, as seen from the defender's fort."""
    hole: int
    defender_name: str  # name at resolution time; later renames don't rewrite history
    attacker_damage_total: int  # <= 0
    defender_repair: int  # >= 0
    net_change: int
    final_health: int
    final_damage: int  # max_damage - final_health
    max_damage: int  # fort capacity when the hole was resolved

    def to_dict(self) -> dict[str, Any]:
        return {
            "hole": self.hole,
            "defender_name": self.defender_name,
            "attacker_damage_total": self.attacker_damage_total,
            "defender_repair": self.defender_repair,
            "net_change": self.net_change,
            "final_health": self.final_health,
            "final_damage": self.final_damage,
            "max_damage": self.max_damage,
        }


class HistoryLog:
    """Append-only sequence of HoleSummary."""

    def __init__(self) -> None:
        self._entries: list[HoleSummary] = []

    def append(self, summary: HoleSummary) -> None:
        if self._entries and summary.hole <= self._entries[-1].hole:
            raise ValueError(
                f"Hole {summary.hole} recorded after hole {self._entries[-1].hole}"
            )
        self._entries.append(summary)

    @property
    def entries(self) -> tuple[HoleSummary, ...]:
        return tuple(self._entries)

    @property
    def latest(self) -> HoleSummary | None:
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HoleSummary]:
        return iter(tuple(self._entries))

    def to_list(self) -> list[dict[str, Any]]:
        return [s.to_dict() for s in self._entries]
