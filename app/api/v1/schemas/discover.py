"""Pydantic schemas for discovery and swipe endpoints."""
from pydantic import BaseModel

from app.api.v1.schemas.compatibility import CompatibilityResponse
from app.api.v1.schemas.matches import MatchResponse
from app.api.v1.schemas.profiles import ProfileResponse


class DiscoverEntry(BaseModel):
    """One card in the swipe stack."""
    profile: ProfileResponse
    compatibility: CompatibilityResponse
    is_admin_recommended: bool
    is_soulmate: bool


class DiscoverResponse(BaseModel):
    total: int
    entries: list[DiscoverEntry]


class ResetResponse(BaseModel):
    message: str
    swipes_deleted: int
    matches_deleted: int


class SwipeRequest(BaseModel):
    """Request body for swiping on a profile."""
    swiper_id: str
    swiped_id: str
    liked: bool


class SwipeResponse(BaseModel):
    swiper_id: str
    swiped_id: str
    liked: bool
    matched: bool
    match: MatchResponse | None = None
    compatibility: CompatibilityResponse | None = None
