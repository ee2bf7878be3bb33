"""
Scoring tables: attacker damage, defender repair, display formatting.
"""

import pytest

from fortgolf.engine.definitions import ScoreResult
from fortgolf.engine.scoring import attacker_score, defender_score, format_signed


@pytest.mark.parametrize("score, expected", [
    (ScoreResult.BIRDIE, -2),
    (ScoreResult.PAR, -1),
    (ScoreResult.BOGEY_OR_WORSE, 0),
])
def test_attacker_score(score, expected):
    assert attacker_score(score) == expected


@pytest.mark.parametrize("score, expected", [
    (ScoreResult.BIRDIE, 3),
    (ScoreResult.PAR, 2),
    (ScoreResult.BOGEY_OR_WORSE, 0),
])
def test_defender_score(score, expected):
    assert defender_score(score) == expected


def test_tables_cover_every_score():
    for score in ScoreResult:
        assert attacker_score(score) <= 0
        assert defender_score(score) >= 0


def test_format_signed():
    assert format_signed(3) == "+3"
    assert format_signed(0) == "0"
    assert format_signed(-2) == "-2"
