"""Match endpoints: list a user's matches and fetch one."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from app.db.session import get_db
from app.models.match import Match, MatchType
from app.api.v1.schemas.compatibility import CompatibilityRuleDetail
from app.api.v1.schemas.matches import (
    MatchDetailResponse,
    MatchListResponse,
    MatchProfileSummary,
    MatchResponse,
)

router = APIRouter(prefix="/matches", tags=["Matches"])


def match_to_response(match: Match, viewer_id: str | None = None) -> MatchResponse:
    """Convert a Match ORM object to a MatchResponse schema.

    When ``viewer_id`` is given, the other participant's profile is embedded.
    """
    detail_response = None
    if match.match_details:
        detail_response = MatchDetailResponse(
            common_interests=match.match_details.get("common_interests", []),
            vibe_tags=match.match_details.get("vibe_tags", []),
            academic_synergy=match.match_details.get("academic_synergy"),
            rules={
                name: CompatibilityRuleDetail(**rule_data)
                for name, rule_data in match.match_details.get("rules", {}).items()
            },
        )

    profile_summary = None
    if viewer_id is not None:
        other = match.profile1 if match.user2 == viewer_id else match.profile2
        if other is not None:
            profile_summary = MatchProfileSummary(
                id=other.id,
                name=other.name,
                course=other.course,
                primary_photo=other.primary_photo,
            )

    return MatchResponse(
        id=match.id,
        user1=match.user1,
        user2=match.user2,
        compatibility_score=match.compatibility_score,
        percentage=match.percentage,
        match_type=match.match_type.value,
        source=match.source.value,
        match_details=detail_response,
        created_at=match.created_at,
        profile=profile_summary,
    )


@router.get("", response_model=MatchListResponse)
def list_matches(
    user_id: str | None = Query(None, description="Only matches involving this user"),
    match_type: str | None = Query(None, description="Filter by match type: soul_mate, bestie, study_buddy, standard"),
    db: Session = Depends(get_db),
):
    """
    List matches, newest first.

    With user_id, each match embeds the other participant's profile.
    """
    query = db.query(Match).options(joinedload(Match.profile1), joinedload(Match.profile2))

    if user_id:
        query = query.filter(or_(Match.user1 == user_id, Match.user2 == user_id))

    if match_type:
        try:
            mt = MatchType(match_type)
        except ValueError:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid match_type '{match_type}'. Use: soul_mate, bestie, study_buddy, standard",
            )
        query = query.filter(Match.match_type == mt)

    matches = query.order_by(Match.created_at.desc(), Match.id.desc()).all()

    return MatchListResponse(
        total=len(matches),
        matches=[match_to_response(m, viewer_id=user_id) for m in matches],
    )


@router.get("/{match_id}", response_model=MatchResponse)
def get_match(
    match_id: int,
    db: Session = Depends(get_db),
):
    """Get a single match by ID with its stored compatibility details."""
    match = db.query(Match).filter(Match.id == match_id).first()

    if not match:
        raise HTTPException(status_code=404, detail=f"Match {match_id} not found")

    return match_to_response(match)
