"""
Hole resolution.
Combines attacker inputs and the defender's score into one net health change for the defender's fort.
Pure: returns the outcome, the caller applies it.
"""

from dataclasses import dataclass

from fortgolf.engine import NO_PRESSURE_REPAIR
from fortgolf.engine.definitions import ScoreResult
from fortgolf.engine.history import HoleSummary
from fortgolf.engine.scoring import FAIRWAY_DAMAGE, GIR_DAMAGE, attacker_score, defender_score
from fortgolf.engine.state import HoleInput, Player


@dataclass
class HoleResult:
    """Outcome of resolving one hole against the defender's fort."""
    new_health: int
    destroyed_this_hole: bool  # health went from >0 to exactly 0
    summary: HoleSummary


def clamp(value: int, low: int, high: int) -> int:
    return min(high, max(low, value))


def attacker_damage(hole_input: HoleInput | None) -> int:
    """Damage one attacker deals (<= 0). No input means no damage."""
    if hole_input is None:
        return 0
    fairway = FAIRWAY_DAMAGE if hole_input.fairway else 0
    gir = GIR_DAMAGE if hole_input.gir else 0
    return fairway + gir + attacker_score(hole_input.score)


def resolve_hole(
    hole: int,
    defender: Player,
    attacker_inputs: list[HoleInput | None],
    defender_input: HoleInput | None,
) -> HoleResult:
    """
    Resolve a single hole.

    Rules:
    - Each attacker deals fairway(-1) + GIR(-1) + score damage (birdie -2, par -1, bogey+ 0)
    - Defender repairs by score (birdie +3, par +2, bogey+ 0); flags don't count for the defender
    - net = total attacker damage + defender repair
    - If net is 0 because attackers did nothing and the defender made bogey or worse
      (or has no input), the defender repairs +1 instead
    - New health is clamped into [0, max_health]

    Args:
        hole: Hole number being resolved
        defender: Defending player (not modified)
        attacker_inputs: One entry per eligible attacker; None for attackers with no input
        defender_input: Defender's input, None treated as bogey or worse

    Returns:
        HoleResult with the new health, destruction flag and summary
    """
    attacker_damage_total = sum(attacker_damage(hi) for hi in attacker_inputs)
    defender_repair = defender_score(defender_input.score) if defender_input else 0

    net = attacker_damage_total + defender_repair

    attackers_did_nothing = attacker_damage_total == 0
    defender_bogey_or_worse = (
        defender_input is None or defender_input.score is ScoreResult.BOGEY_OR_WORSE
    )
    if net == 0 and attackers_did_nothing and defender_bogey_or_worse:
        net = NO_PRESSURE_REPAIR

    old_health = defender.health
    max_health = defender.max_health
    new_health = clamp(old_health + net, 0, max_health)

    summary = HoleSummary(
        hole=hole,
        defender_name=defender.name,
        attacker_damage_total=attacker_damage_total,
        defender_repair=defender_repair,
        net_change=net,
        final_health=new_health,
        final_damage=max_health - new_health,
        max_damage=max_health,
    )
    return HoleResult(
        new_health=new_health,
        destroyed_this_hole=old_health > 0 and new_health == 0,
        summary=summary,
    )
