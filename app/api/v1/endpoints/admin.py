"""Admin endpoints: user search, match suggestions, recommendations and reports."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.matching.scoring import normalize
from app.models.recommendation import AdminRecommendation
from app.models.report import Report
from app.services.matchmaking_service import create_recommendation, search_profiles, suggest_matches
from app.api.v1.endpoints.profiles import get_profile_or_404
from app.api.v1.schemas.admin import (
    MatchSuggestion,
    MatchSuggestionsResponse,
    ProfileSearchHit,
    ProfileSearchResponse,
    RecommendationListResponse,
    RecommendationRequest,
    RecommendationResponse,
)
from app.api.v1.schemas.profiles import ProfileResponse, ReportListResponse, ReportResponse

router = APIRouter(prefix="/admin", tags=["Admin"])


def _recommendation_to_response(rec: AdminRecommendation) -> RecommendationResponse:
    return RecommendationResponse(
        id=str(rec.id),
        admin_id=rec.admin_id,
        target_user_id=rec.target_user_id,
        recommended_user_id=rec.recommended_user_id,
        type=rec.type,
        created_at=rec.created_at,
    )


@router.get("/users", response_model=ProfileSearchResponse)
def search_users(
    search: str = Query(..., min_length=1, description="Name or username, typos tolerated"),
    limit: int | None = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    """Find users to act on by fuzzy name/username match."""
    hits = search_profiles(db, search, limit=limit)
    return ProfileSearchResponse(
        total=len(hits),
        results=[
            ProfileSearchHit(profile=ProfileResponse.model_validate(p), similarity=similarity)
            for p, similarity in hits
        ],
    )


@router.get("/matchmaking/{target_id}/suggestions", response_model=MatchSuggestionsResponse)
def get_suggestions(
    target_id: str,
    limit: int | None = Query(None, ge=1, description="How many suggestions (default from settings)"),
    db: Session = Depends(get_db),
):
    """Best compatibility candidates for the target user, highest first."""
    target = get_profile_or_404(db, target_id)
    suggestions = suggest_matches(db, target, limit=limit)
    return MatchSuggestionsResponse(
        target_user_id=target.id,
        suggestions=[
            MatchSuggestion(
                profile=ProfileResponse.model_validate(profile),
                score=score,
                percentage=normalize(score),
            )
            for profile, score in suggestions
        ],
    )


@router.post("/recommendations", response_model=RecommendationResponse, status_code=201)
def recommend(
    request: RecommendationRequest,
    db: Session = Depends(get_db),
):
    """
    Recommend one user to another.

    The recommended profile is pinned to the top of the target's feed and a
    like from the target matches instantly.
    """
    target = get_profile_or_404(db, request.target_user_id)
    recommended = get_profile_or_404(db, request.recommended_user_id)

    try:
        rec = create_recommendation(db, request.admin_id, target, recommended, request.type)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _recommendation_to_response(rec)


@router.get("/recommendations", response_model=RecommendationListResponse)
def list_recommendations(
    target_user_id: str | None = Query(None, description="Only recommendations shown to this user"),
    db: Session = Depends(get_db),
):
    """List admin recommendations, newest first."""
    query = db.query(AdminRecommendation)
    if target_user_id:
        query = query.filter(AdminRecommendation.target_user_id == target_user_id)

    recommendations = query.order_by(AdminRecommendation.created_at.desc()).all()
    return RecommendationListResponse(
        total=len(recommendations),
        recommendations=[_recommendation_to_response(r) for r in recommendations],
    )


@router.get("/reports", response_model=ReportListResponse)
def list_reports(
    reported_user_id: str | None = Query(None, description="Only reports against this user"),
    db: Session = Depends(get_db),
):
    """List user reports for review, newest first."""
    query = db.query(Report)
    if reported_user_id:
        query = query.filter(Report.reported_user_id == reported_user_id)

    reports = query.order_by(Report.created_at.desc()).all()
    return ReportListResponse(
        total=len(reports),
        reports=[ReportResponse.model_validate(r) for r in reports],
    )
