"""
Ranking layer over the compatibility scorer.

Used by the discovery feed (order the swipe stack) and the admin matchmaking
tool (suggest the best candidates for a target user). Each candidate is
scored once against the fixed subject and sorted by raw score, highest
first. Python's sort is stable, so candidates with equal scores keep the
order they came in.

Flow for the discovery stack:
  1. Rank every candidate by compatibility
  2. Pull admin "soulmate" picks to the very top
  3. Then other admin recommendations
  4. Then everyone else, still in compatibility order
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from app.matching.scoring import MatchAnalysis, analyze_compatibility, compatibility_score
from app.models.profile import Profile

logger = logging.getLogger(__name__)


@dataclass
class RankedCandidate:
    """A candidate profile with its compatibility against the subject."""

    profile: Profile
    analysis: MatchAnalysis
    is_admin_recommended: bool = False
    is_soulmate: bool = False

    @property
    def score(self) -> int:
        return self.analysis.score


def rank_by_compatibility(subject: Profile, candidates: Iterable[Profile]) -> list[Profile]:
    """
    Return ``candidates`` sorted by descending compatibility with ``subject``.

    The input sequence is not modified.
    """
    scored = [(compatibility_score(subject, candidate), candidate) for candidate in candidates]
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [candidate for _, candidate in scored]


def top_matches(
    subject: Profile,
    candidates: Iterable[Profile],
    limit: int = 3,
) -> list[tuple[Profile, int]]:
    """
    Best ``limit`` candidates for ``subject`` as (profile, raw score) pairs.

    Used by the admin matchmaking tool to suggest pairings.
    """
    scored = [(candidate, compatibility_score(subject, candidate)) for candidate in candidates]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored[:max(limit, 0)]


def order_discover_stack(
    subject: Profile,
    candidates: Iterable[Profile],
    recommended_ids: set | frozenset = frozenset(),
    soulmate_ids: set | frozenset = frozenset(),
) -> list[RankedCandidate]:
    """
    Build the swipe stack for ``subject``.

    Args:
        subject: The user browsing the feed
        candidates: Eligible profiles (already filtered by the caller)
        recommended_ids: Ids an admin recommended to the subject
        soulmate_ids: Ids an admin flagged as the subject's soulmate

    Returns:
        RankedCandidate list: soulmates, then other recommendations, then
        the rest, each group in descending compatibility order.
    """
    ranked = [
        RankedCandidate(
            profile=candidate,
            analysis=analyze_compatibility(subject, candidate),
            is_admin_recommended=candidate.id in recommended_ids or candidate.id in soulmate_ids,
            is_soulmate=candidate.id in soulmate_ids,
        )
        for candidate in candidates
    ]
    ranked.sort(key=lambda entry: entry.score, reverse=True)

    soulmates = [entry for entry in ranked if entry.is_soulmate]
    recommended = [entry for entry in ranked if entry.is_admin_recommended and not entry.is_soulmate]
    others = [entry for entry in ranked if not entry.is_admin_recommended]

    logger.debug(
        "Discover stack for %s: %d soulmate, %d recommended, %d other",
        subject.id,
        len(soulmates),
        len(recommended),
        len(others),
    )

    return soulmates + recommended + others
