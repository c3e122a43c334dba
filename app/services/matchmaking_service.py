"""
Matchmaking service: the admin side of pairing users up.

Admins pick a target user (usually by searching names), look at the top
compatibility suggestions for them and push a recommendation. Recommended
profiles jump the queue in the target's discovery feed and match instantly
when liked.
"""

import logging

from rapidfuzz import fuzz, process
from sqlalchemy.orm import Session

from app.config import get_settings
from app.matching.engine import top_matches
from app.models.profile import Profile
from app.models.recommendation import AdminRecommendation, RecommendationType

logger = logging.getLogger(__name__)


def suggest_matches(
    db: Session,
    target: Profile,
    limit: int | None = None,
) -> list[tuple[Profile, int]]:
    """
    Rank every other profile against ``target`` and return the best few.

    Returns:
        (profile, raw score) pairs, highest score first.
    """
    if limit is None:
        limit = get_settings().admin_suggestion_limit

    others = db.query(Profile).filter(Profile.id != target.id).all()
    suggestions = top_matches(target, others, limit=limit)

    logger.info(
        "Matchmaking for %s: %d candidates scored, top scores %s",
        target.id,
        len(others),
        [score for _, score in suggestions],
    )
    return suggestions


def create_recommendation(
    db: Session,
    admin_id: str,
    target: Profile,
    recommended: Profile,
    rec_type: RecommendationType = RecommendationType.STANDARD,
) -> AdminRecommendation:
    """
    Recommend ``recommended`` to ``target``.

    Raises:
        ValueError: when recommending a user to themselves.
    """
    if target.id == recommended.id:
        raise ValueError("Cannot recommend a user to themselves")

    recommendation = AdminRecommendation(
        admin_id=admin_id,
        target_user_id=target.id,
        recommended_user_id=recommended.id,
        type=rec_type,
    )
    db.add(recommendation)
    db.commit()
    db.refresh(recommendation)

    logger.info(
        "Recommendation by %s: %s → %s (%s)",
        admin_id,
        recommended.id,
        target.id,
        rec_type.value,
    )
    return recommendation


def _search_key(profile: Profile) -> str:
    return " ".join(part for part in (profile.name, profile.username) if part).lower()


def search_profiles(
    db: Session,
    query: str,
    limit: int | None = None,
) -> list[tuple[Profile, float]]:
    """
    Fuzzy search profiles by name and username.

    Uses rapidfuzz WRatio so partial names ("ananya") and typos
    ("Ananyaa") still find the profile.

    Returns:
        (profile, similarity 0-100) pairs, best first, above the configured
        minimum similarity.
    """
    settings = get_settings()
    if limit is None:
        limit = settings.profile_search_limit

    query = query.strip().lower()
    profiles = db.query(Profile).all()
    if not query or not profiles:
        return []

    choices = {index: _search_key(profile) for index, profile in enumerate(profiles)}
    results = process.extract(
        query,
        choices,
        scorer=fuzz.WRatio,
        score_cutoff=settings.profile_search_min_similarity,
        limit=limit,
    )
    return [(profiles[index], round(similarity, 1)) for _, similarity, index in results]
