"""Tests for ranking and discovery stack ordering."""

from types import SimpleNamespace

from app.matching.engine import order_discover_stack, rank_by_compatibility, top_matches
from app.matching.scoring import compatibility_score


def make_profile(id, interests=(), department=None, major=None):
    return SimpleNamespace(id=id, interests=list(interests), department=department, major=major)


SUBJECT = make_profile("me", ["Serious relationship", "Introvert", "Gaming", "Music"], "B.Tech", "Civil")

CANDIDATES = [
    make_profile("casual", ["Casual dating", "Gaming"]),                          # 5 - 30
    make_profile("nothing", []),                                                  # 0
    make_profile("twin", ["Serious relationship", "Introvert", "Gaming"], "B.Tech", "Civil"),
    make_profile("gamer", ["Gaming", "Music"]),                                   # 10
    make_profile("extro", ["Extrovert", "Serious relationship"]),                 # 5 + 30 + 15
]


def test_rank_is_descending_by_raw_score():
    ranked = rank_by_compatibility(SUBJECT, CANDIDATES)
    scores = [compatibility_score(SUBJECT, c) for c in ranked]

    assert [c.id for c in ranked] == ["twin", "extro", "gamer", "nothing", "casual"]
    assert scores == sorted(scores, reverse=True)


def test_rank_does_not_mutate_input():
    candidates = list(CANDIDATES)
    ranked = rank_by_compatibility(SUBJECT, candidates)

    assert candidates == CANDIDATES
    assert ranked is not candidates
    assert sorted(c.id for c in ranked) == sorted(c.id for c in candidates)


def test_rank_keeps_input_order_on_ties():
    a = make_profile("a", ["Gaming"])
    b = make_profile("b", ["Music"])
    c = make_profile("c", ["Gaming"])

    assert [p.id for p in rank_by_compatibility(SUBJECT, [a, b, c])] == ["a", "b", "c"]


def test_rank_empty():
    assert rank_by_compatibility(SUBJECT, []) == []


def test_top_matches_limits_and_scores():
    top = top_matches(SUBJECT, CANDIDATES, limit=3)

    assert [(p.id, score) for p, score in top] == [("twin", 80), ("extro", 50), ("gamer", 10)]


def test_top_matches_zero_limit():
    assert top_matches(SUBJECT, CANDIDATES, limit=0) == []


def test_discover_stack_puts_admin_picks_first():
    stack = order_discover_stack(
        SUBJECT,
        CANDIDATES,
        recommended_ids={"casual", "gamer"},
        soulmate_ids={"nothing"},
    )

    assert [entry.profile.id for entry in stack] == ["nothing", "gamer", "casual", "twin", "extro"]
    assert stack[0].is_soulmate and stack[0].is_admin_recommended
    assert [entry.is_admin_recommended for entry in stack] == [True, True, True, False, False]
    assert stack[3].analysis.percentage == 80


def test_discover_stack_without_recommendations_matches_ranking():
    stack = order_discover_stack(SUBJECT, CANDIDATES)

    assert [entry.profile for entry in stack] == rank_by_compatibility(SUBJECT, CANDIDATES)
    assert not any(entry.is_admin_recommended for entry in stack)
