"""
Hole scoring tables.
Attacker values are damage (non-positive), defender values are repair (non-negative).
"""

from fortgolf.engine.definitions import ScoreResult

ATTACKER_SCORE_DAMAGE = {
    ScoreResult.BIRDIE: -2,
    ScoreResult.PAR: -1,
    ScoreResult.BOGEY_OR_WORSE: 0,
}

DEFENDER_SCORE_REPAIR = {
    ScoreResult.BIRDIE: 3,
    ScoreResult.PAR: 2,
    ScoreResult.BOGEY_OR_WORSE: 0,
}

FAIRWAY_DAMAGE = -1
GIR_DAMAGE = -1


def attacker_score(score: ScoreResult) -> int:
    return ATTACKER_SCORE_DAMAGE[score]


def defender_score(score: ScoreResult) -> int:
    return DEFENDER_SCORE_REPAIR[score]


def format_signed(n: int) -> str:
    """Format a health change for display: +3, 0, -2."""
    if n > 0:
        return f"+{n}"
    return f"{n}"
