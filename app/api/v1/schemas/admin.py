"""Pydantic schemas for admin matchmaking endpoints."""
from datetime import datetime
from pydantic import BaseModel

from app.api.v1.schemas.profiles import ProfileResponse
from app.models.recommendation import RecommendationType


class ProfileSearchHit(BaseModel):
    profile: ProfileResponse
    similarity: float


class ProfileSearchResponse(BaseModel):
    total: int
    results: list[ProfileSearchHit]


class MatchSuggestion(BaseModel):
    """A candidate suggested for the target user."""
    profile: ProfileResponse
    score: int
    percentage: int


class MatchSuggestionsResponse(BaseModel):
    target_user_id: str
    suggestions: list[MatchSuggestion]


class RecommendationRequest(BaseModel):
    """Request body for recommending one user to another."""
    admin_id: str
    target_user_id: str
    recommended_user_id: str
    type: RecommendationType = RecommendationType.SOULMATE


class RecommendationResponse(BaseModel):
    id: str
    admin_id: str
    target_user_id: str
    recommended_user_id: str
    type: RecommendationType
    created_at: datetime


class RecommendationListResponse(BaseModel):
    total: int
    recommendations: list[RecommendationResponse]
