"""
Discovery service: builds a user's swipe stack.

Called by the /discover endpoint. Runs in sequence:
  1. Collect ids to hide (self, already swiped, matched or blocked)
  2. Load remaining profiles and apply mutual gender preferences
  3. Look up admin recommendations aimed at the user
  4. Rank with the compatibility engine, recommendations first
"""

import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.config import get_settings
from app.matching.engine import RankedCandidate, order_discover_stack
from app.models.match import Match
from app.models.profile import InterestedIn, Profile
from app.models.recommendation import AdminRecommendation, RecommendationType
from app.models.swipe import Swipe
from app.services.safety_service import blocked_ids

logger = logging.getLogger(__name__)


def _wants(seeker: Profile, candidate: Profile) -> bool:
    """Whether ``seeker``'s preference admits ``candidate``'s gender."""
    if seeker.interested_in is None or seeker.interested_in == InterestedIn.EVERYONE:
        return True
    return candidate.gender is not None and seeker.interested_in.value == candidate.gender.value


def is_mutually_interested(user: Profile, candidate: Profile) -> bool:
    return _wants(user, candidate) and _wants(candidate, user)


def hidden_profile_ids(db: Session, user_id: str) -> set[str]:
    """Ids that must never appear in ``user_id``'s feed."""
    swiped = {
        row.swiped_id
        for row in db.query(Swipe.swiped_id).filter(Swipe.swiper_id == user_id).all()
    }
    matched = {
        match.other_user(user_id)
        for match in db.query(Match).filter(or_(Match.user1 == user_id, Match.user2 == user_id)).all()
    }
    return swiped | matched | blocked_ids(db, user_id) | {user_id}


def recommendation_ids(db: Session, user_id: str) -> tuple[set[str], set[str]]:
    """Return (recommended ids, soulmate ids) for recommendations targeting ``user_id``."""
    recommendations = (
        db.query(AdminRecommendation)
        .filter(AdminRecommendation.target_user_id == user_id)
        .all()
    )
    recommended = {rec.recommended_user_id for rec in recommendations}
    soulmates = {
        rec.recommended_user_id
        for rec in recommendations
        if rec.type == RecommendationType.SOULMATE
    }
    return recommended, soulmates


def build_discover_feed(
    db: Session,
    user: Profile,
    limit: int | None = None,
) -> list[RankedCandidate]:
    """
    Build the ordered discovery feed for ``user``.

    Args:
        db: SQLAlchemy session
        user: The browsing user
        limit: Maximum entries to return (defaults to settings, None = all)

    Returns:
        RankedCandidate list, admin picks first, then by compatibility.
    """
    if limit is None:
        limit = get_settings().discover_feed_limit

    hidden = hidden_profile_ids(db, user.id)
    candidates = [
        profile
        for profile in db.query(Profile).filter(Profile.id.notin_(hidden)).all()
        if is_mutually_interested(user, profile)
    ]

    if not candidates:
        logger.info("No profiles left to discover for %s", user.id)
        return []

    recommended, soulmates = recommendation_ids(db, user.id)
    feed = order_discover_stack(user, candidates, recommended, soulmates)

    logger.info(
        "Discover feed for %s: %d candidates (%d hidden, %d recommended)",
        user.id,
        len(feed),
        len(hidden) - 1,
        len(recommended),
    )

    if limit is not None:
        feed = feed[:limit]
    return feed
