"""Discovery and swipe endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.discovery_service import build_discover_feed
from app.services.swipe_service import record_swipe, reset_swipes, undo_swipe
from app.api.v1.endpoints.matches import match_to_response
from app.api.v1.endpoints.profiles import get_profile_or_404
from app.api.v1.schemas.compatibility import CompatibilityResponse
from app.api.v1.schemas.discover import (
    DiscoverEntry,
    DiscoverResponse,
    ResetResponse,
    SwipeRequest,
    SwipeResponse,
)
from app.api.v1.schemas.profiles import ProfileResponse

router = APIRouter(tags=["Discover"])


@router.get("/discover/{user_id}", response_model=DiscoverResponse)
def get_discover_feed(
    user_id: str,
    limit: int | None = Query(None, ge=1, description="Maximum cards to return"),
    db: Session = Depends(get_db),
):
    """
    The user's swipe stack.

    Admin soulmate picks come first, then other admin recommendations, then
    everyone else by descending compatibility. Already swiped or matched
    profiles are left out.
    """
    user = get_profile_or_404(db, user_id)
    feed = build_discover_feed(db, user, limit=limit)

    return DiscoverResponse(
        total=len(feed),
        entries=[
            DiscoverEntry(
                profile=ProfileResponse.model_validate(entry.profile),
                compatibility=CompatibilityResponse.from_analysis(entry.analysis),
                is_admin_recommended=entry.is_admin_recommended,
                is_soulmate=entry.is_soulmate,
            )
            for entry in feed
        ],
    )


@router.post("/discover/{user_id}/reset", response_model=ResetResponse)
def reset_discover(
    user_id: str,
    db: Session = Depends(get_db),
):
    """Forget all of the user's swipes and matches so every profile shows again."""
    get_profile_or_404(db, user_id)
    counts = reset_swipes(db, user_id)
    return ResetResponse(
        message=f"Reset complete: {counts['swipes_deleted']} swipes and {counts['matches_deleted']} matches removed",
        **counts,
    )


@router.post("/swipes", response_model=SwipeResponse, status_code=201)
def swipe(
    request: SwipeRequest,
    db: Session = Depends(get_db),
):
    """
    Swipe on a profile.

    A like creates a match when it is returned, or straight away when an
    admin recommended the profile to the swiper.
    """
    swiper = get_profile_or_404(db, request.swiper_id)
    swiped = get_profile_or_404(db, request.swiped_id)

    try:
        result = record_swipe(db, swiper, swiped, request.liked)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SwipeResponse(
        swiper_id=swiper.id,
        swiped_id=swiped.id,
        liked=request.liked,
        matched=result.matched,
        match=match_to_response(result.match, viewer_id=swiper.id) if result.match else None,
        compatibility=CompatibilityResponse.from_analysis(result.analysis) if result.analysis else None,
    )


@router.delete("/swipes/{swiper_id}/{swiped_id}", status_code=204)
def undo(
    swiper_id: str,
    swiped_id: str,
    db: Session = Depends(get_db),
):
    """Undo a swipe that has not turned into a match."""
    try:
        undo_swipe(db, swiper_id, swiped_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
