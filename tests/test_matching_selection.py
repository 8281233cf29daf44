# tests/test_matching_selection.py
from __future__ import annotations

"""
Tests: matching/selection.py

Covers each stage (primary scan, position filter, exemption fallback) and
best_matches() end to end, with explicit exemption sets where it matters.
"""

import pytest

from move_name_matcher.matching import (
    DEFAULT_EXEMPTIONS,
    InvalidInputError,
    MatchRecord,
    best_matches,
    match_creature,
    needs_fallback,
    position_filter,
    primary_scan,
    secondary_scan,
    validate_names,
)

MR = MatchRecord


# ─────────────────────────────────────────────────────────────────────────────
# Stages
# ─────────────────────────────────────────────────────────────────────────────

def test_primary_scan_keeps_top_tier_in_move_order():
    got = primary_scan("Abc", ["Abq", "zz", "xAbz", "Aq"])
    assert got == (MR("Abq", 2, 0), MR("xAbz", 2, 1))


def test_primary_scan_empty_when_nothing_aligns():
    assert primary_scan("Zzz", ["Pound", "Tackle"]) == ()


def test_position_filter_prefers_start_zero():
    cands = (MR("xAbz", 2, 1), MR("Abq", 2, 0))
    assert position_filter(cands) == (MR("Abq", 2, 0),)


def test_position_filter_never_narrows_nonzero_ties():
    cands = (MR("xAb", 2, 1), MR("yyAb", 2, 2))
    assert position_filter(cands) == cands


def test_needs_fallback_only_when_all_exempt():
    exempt = frozenset({"False Swipe", "Pain Split"})
    assert needs_fallback((MR("False Swipe", 3, 6),), exempt) is True
    assert needs_fallback((MR("False Swipe", 4, 0), MR("Falsetto", 4, 0)), exempt) is False
    assert needs_fallback((), exempt) is False


def test_secondary_scan_keeps_max_length_then_min_start_ties():
    selected = (MR("False Swipe", 4, 0),)
    got = secondary_scan(
        "Fals", ["False Swipe", "Fan Kick", "Fang", "Xfa"], selected, DEFAULT_EXEMPTIONS
    )
    assert got == (MR("Fan Kick", 2, 0, True), MR("Fang", 2, 0, True))


def test_secondary_scan_picks_earliest_start_within_tier():
    selected = (MR("False Swipe", 4, 0),)
    got = secondary_scan("Fals", ["False Swipe", "Yyfa", "Xfa"], selected, DEFAULT_EXEMPTIONS)
    assert got == (MR("Xfa", 2, 1, True),)


def test_secondary_scan_skips_other_exempt_moves():
    selected = (MR("Pain Split", 2, 0),)
    got = secondary_scan("Pa", ["Pain Split", "False Swipe", "Peck"], selected, DEFAULT_EXEMPTIONS)
    assert got == (MR("Peck", 1, 0, True),)


# ─────────────────────────────────────────────────────────────────────────────
# match_creature / best_matches
# ─────────────────────────────────────────────────────────────────────────────

def test_prefix_match_wins():
    assert best_matches(["Pikachu"], ["Pika Punch", "Thunderbolt"]) == {
        "Pikachu": [MR("Pika Punch", 4, 0, False)]
    }


def test_position_filter_drops_exempt_mid_move_candidate():
    assert match_creature("Swi", ["False Swipe", "Swing"]) == [MR("Swing", 3, 0)]


def test_fallback_appends_secondary_after_primary():
    assert match_creature("Fals", ["False Swipe", "Fan Kick", "Flail"]) == [
        MR("False Swipe", 4, 0),
        MR("Fan Kick", 2, 0, True),
    ]


def test_exempt_start_zero_drops_mid_move_move_then_fallback_restores_it():
    # same length: the start-0 exempt move wins the position filter,
    # then the fallback brings the mid-move move back as secondary
    assert match_creature("Fal", ["False Swipe", "xFal"]) == [
        MR("False Swipe", 3, 0),
        MR("xFal", 3, 1, True),
    ]


def test_fallback_for_mid_move_exempt_match():
    assert match_creature("Swi", ["False Swipe", "Twist"]) == [
        MR("False Swipe", 3, 6),
        MR("Twist", 1, 3, True),
    ]


def test_fallback_with_nothing_else_keeps_exempt_move():
    assert match_creature("Swi", ["False Swipe"]) == [MR("False Swipe", 3, 6)]


def test_non_exempt_top_tier_candidate_suppresses_fallback():
    got = match_creature("Fals", ["False Swipe", "Falsetto", "Fan Kick"])
    assert got == [MR("False Swipe", 4, 0), MR("Falsetto", 4, 0)]
    assert not any(r.secondary for r in got)


def test_exemption_set_is_a_parameter():
    moves = ["Swing", "Twist"]
    assert match_creature("Swi", moves) == [MR("Swing", 3, 0)]
    assert match_creature("Swi", moves, exemptions=frozenset({"Swing"})) == [
        MR("Swing", 3, 0),
        MR("Twist", 1, 3, True),
    ]
    assert match_creature("Swi", ["False Swipe", "Twist"], exemptions=frozenset()) == [
        MR("False Swipe", 3, 6)
    ]


def test_unmatched_creature_is_kept_with_empty_list():
    got = best_matches(["Zzz", "Pikachu"], ["Pika Punch"])
    assert list(got) == ["Zzz", "Pikachu"]
    assert got["Zzz"] == []


def test_empty_creature_name_does_not_crash():
    assert best_matches([""], ["Pound"]) == {"": []}


def test_primary_entries_share_one_length():
    got = match_creature("Abc", ["Abq", "xAbz", "Abcd", "Ab"])
    primary = [r for r in got if not r.secondary]
    assert {r.match_length for r in primary} == {3}


def test_best_matches_is_deterministic_and_idempotent():
    creatures = ["Pikachu", "Fals", "Swi", "Abc", "Zzz"]
    moves = ["Pika Punch", "False Swipe", "Fan Kick", "Fang", "Twist", "Abq", "xAbz"]
    first = best_matches(creatures, moves)
    second = best_matches(creatures, moves)
    assert first == second
    assert [list(map(tuple, v)) for v in first.values()] == [
        list(map(tuple, v)) for v in second.values()
    ]


def test_best_matches_accepts_a_generator_of_moves():
    moves = (m for m in ["Pika Punch", "Pound"])
    got = best_matches(["Pikachu", "Poliwag"], moves)
    assert got["Poliwag"] == [MR("Pound", 2, 0)]


def test_best_matches_returns_fresh_lists():
    moves = ["Pika Punch"]
    a = best_matches(["Pikachu"], moves)
    a["Pikachu"].clear()
    assert best_matches(["Pikachu"], moves)["Pikachu"] == [MR("Pika Punch", 4, 0)]


def test_selection_trace_goes_to_debug_topic(monkeypatch, capsys):
    from move_name_matcher.utils import log

    monkeypatch.setenv(log.ENV_VAR, "selection")
    log.reload_topics()
    try:
        match_creature("Swi", ["False Swipe", "Twist"])
    finally:
        monkeypatch.delenv(log.ENV_VAR)
        log.reload_topics()
    err = capsys.readouterr().err
    assert "[selection][DEBUG]" in err
    assert "all exempt" in err


# ─────────────────────────────────────────────────────────────────────────────
# validate_names
# ─────────────────────────────────────────────────────────────────────────────

def test_validate_names_passes_clean_lists():
    assert validate_names(["Mew", "Mr. Mime"], "creature") == ["Mew", "Mr. Mime"]


@pytest.mark.parametrize("bad", [None, "", " Mew", "Mew\n", 42])
def test_validate_names_rejects_bad_entries(bad):
    with pytest.raises(InvalidInputError):
        validate_names(["Pound", bad], "move")


def test_invalid_input_is_a_value_error():
    assert issubclass(InvalidInputError, ValueError)
