"""
Swipe service: records swipes and turns likes into matches.

A like becomes a match when either:
  - the other user has already liked back (mutual match), or
  - an admin recommended the liked profile to the swiper (instant match,
    no like back needed)

The match stores the compatibility computed from the swiper's side at that
moment. Soulmate recommendations are stored at a flat 100 and classified
as Soul Mate, whatever the engine computed.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import and_, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.matching.scoring import MatchAnalysis, analyze_compatibility
from app.models.match import Match, MatchSource, MatchType
from app.models.profile import Profile
from app.models.recommendation import AdminRecommendation, RecommendationType
from app.models.swipe import Swipe

logger = logging.getLogger(__name__)

SOULMATE_TAG = "Soul Mate ✨"
SOULMATE_SCORE = 100


@dataclass
class SwipeResult:
    """Outcome of a swipe."""

    swipe: Swipe
    match: Match | None = None
    analysis: MatchAnalysis | None = None

    @property
    def matched(self) -> bool:
        return self.match is not None


def find_match(db: Session, user_a: str, user_b: str) -> Match | None:
    """Return the match between two users in either direction, if any."""
    return (
        db.query(Match)
        .filter(
            or_(
                and_(Match.user1 == user_a, Match.user2 == user_b),
                and_(Match.user1 == user_b, Match.user2 == user_a),
            )
        )
        .first()
    )


def find_swipe(db: Session, swiper_id: str, swiped_id: str) -> Swipe | None:
    return (
        db.query(Swipe)
        .filter(Swipe.swiper_id == swiper_id, Swipe.swiped_id == swiped_id)
        .first()
    )


def _recommendation_for(db: Session, target_id: str, recommended_id: str) -> AdminRecommendation | None:
    """Strongest recommendation of ``recommended_id`` to ``target_id`` (soulmate wins)."""
    recommendations = (
        db.query(AdminRecommendation)
        .filter(
            AdminRecommendation.target_user_id == target_id,
            AdminRecommendation.recommended_user_id == recommended_id,
        )
        .all()
    )
    for rec in recommendations:
        if rec.type == RecommendationType.SOULMATE:
            return rec
    return recommendations[0] if recommendations else None


def record_swipe(db: Session, swiper: Profile, swiped: Profile, liked: bool) -> SwipeResult:
    """
    Store a swipe and create a match when it completes one.

    Raises:
        ValueError: on a self-swipe or a repeated swipe of the same profile.
    """
    if swiper.id == swiped.id:
        raise ValueError("Cannot swipe on your own profile")

    already_swiped = f"Profile {swiped.id} was already swiped by {swiper.id}"
    if find_swipe(db, swiper.id, swiped.id) is not None:
        raise ValueError(already_swiped)

    swipe = Swipe(swiper_id=swiper.id, swiped_id=swiped.id, liked=liked)
    db.add(swipe)
    try:
        db.flush()
    except IntegrityError:
        # A concurrent request stored the same swipe after our lookup
        db.rollback()
        raise ValueError(already_swiped)
    result = SwipeResult(swipe=swipe)

    if not liked:
        db.commit()
        logger.info("Pass: %s ✕ %s", swiper.id, swiped.id)
        return result

    liked_back = (
        db.query(Swipe)
        .filter(
            Swipe.swiper_id == swiped.id,
            Swipe.swiped_id == swiper.id,
            Swipe.liked.is_(True),
        )
        .first()
    )
    recommendation = _recommendation_for(db, swiper.id, swiped.id)

    if not liked_back and recommendation is None:
        db.commit()
        logger.info("Like: %s ♥ %s (waiting for like back)", swiper.id, swiped.id)
        return result

    match = find_match(db, swiper.id, swiped.id)
    if match is not None:
        db.commit()
        logger.info("Like: %s ♥ %s (already matched as %s)", swiper.id, swiped.id, match.id)
        result.match = match
        return result

    analysis = analyze_compatibility(swiper, swiped)
    if liked_back:
        source = MatchSource.MUTUAL
    elif recommendation.type == RecommendationType.SOULMATE:
        source = MatchSource.SOULMATE
    else:
        source = MatchSource.RECOMMENDATION

    if recommendation is not None and recommendation.type == RecommendationType.SOULMATE:
        analysis.score = SOULMATE_SCORE
        analysis.percentage = SOULMATE_SCORE
        analysis.match_type = MatchType.SOUL_MATE
        analysis.vibe_tags.insert(0, SOULMATE_TAG)

    match = create_match(db, swiper, swiped, analysis, source)
    db.commit()
    db.refresh(match)

    logger.info(
        "Match: %s ↔ %s (score: %d, %d%%, type: %s, source: %s)",
        swiper.id,
        swiped.id,
        analysis.score,
        analysis.percentage,
        analysis.match_type.value,
        source.value,
    )

    result.match = match
    result.analysis = analysis
    return result


def create_match(
    db: Session,
    user: Profile,
    other: Profile,
    analysis: MatchAnalysis,
    source: MatchSource,
) -> Match:
    """Add a Match record carrying a snapshot of ``analysis``."""
    match = Match(
        user1=user.id,
        user2=other.id,
        compatibility_score=analysis.score,
        percentage=analysis.percentage,
        match_type=analysis.match_type,
        source=source,
        match_details=analysis.to_dict(),
    )
    db.add(match)
    return match


def undo_swipe(db: Session, swiper_id: str, swiped_id: str) -> None:
    """
    Take back a swipe.

    Raises:
        LookupError: when there is no such swipe.
        ValueError: when the swipe already produced a match.
    """
    swipe = find_swipe(db, swiper_id, swiped_id)
    if swipe is None:
        raise LookupError(f"No swipe from {swiper_id} on {swiped_id}")

    if swipe.liked and find_match(db, swiper_id, swiped_id) is not None:
        raise ValueError("Cannot undo a swipe that produced a match")

    db.delete(swipe)
    db.commit()
    logger.info("Undo swipe: %s on %s", swiper_id, swiped_id)


def reset_swipes(db: Session, user_id: str) -> dict:
    """Delete every swipe made by ``user_id`` and every match involving them."""
    matches_deleted = (
        db.query(Match)
        .filter(or_(Match.user1 == user_id, Match.user2 == user_id))
        .delete(synchronize_session=False)
    )
    swipes_deleted = (
        db.query(Swipe)
        .filter(Swipe.swiper_id == user_id)
        .delete(synchronize_session=False)
    )
    db.commit()

    logger.info(
        "Reset for %s: %d swipes and %d matches deleted",
        user_id,
        swipes_deleted,
        matches_deleted,
    )
    return {"swipes_deleted": swipes_deleted, "matches_deleted": matches_deleted}
