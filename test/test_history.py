"""
Hole history log: ordering, latest entry, read-only views.
"""

import pytest

from fortgolf.engine.history import HistoryLog, HoleSummary


def summary(hole, name="A"):
    return HoleSummary(
        hole=hole,
        defender_name=name,
        attacker_damage_total=-1,
        defender_repair=0,
        net_change=-1,
        final_health=9,
        final_damage=1,
        max_damage=10,
    )


def test_empty_log():
    log = HistoryLog()
    assert len(log) == 0
    assert log.latest is None
    assert log.entries == ()
    assert log.to_list() == []


def test_append_keeps_hole_order():
    log = HistoryLog()
    log.append(summary(1, "A"))
    log.append(summary(2, "B"))

    assert [s.hole for s in log] == [1, 2]
    assert log.latest.defender_name == "B"
    assert log.to_list()[0]["defender_name"] == "A"


def test_out_of_order_hole_is_rejected():
    log = HistoryLog()
    log.append(summary(2))
    with pytest.raises(ValueError):
        log.append(summary(2))


def test_entries_are_read_only_views():
    log = HistoryLog()
    log.append(summary(1))

    entries = log.entries
    assert isinstance(entries, tuple)
    with pytest.raises(AttributeError):
        entries[0].net_change = 5
