"""Pydantic schemas for match endpoints."""

from datetime import datetime
from pydantic import BaseModel

from app.api.v1.schemas.compatibility import CompatibilityRuleDetail


class MatchDetailResponse(BaseModel):
    """Analysis snapshot stored when the match was created."""
    common_interests: list[str] = []
    vibe_tags: list[str] = []
    academic_synergy: str | None = None
    rules: dict[str, CompatibilityRuleDetail] = {}


class MatchProfileSummary(BaseModel):
    """Embedded profile info inside a match response."""
    id: str
    name: str
    course: str
    primary_photo: str | None = None


class MatchResponse(BaseModel):
    """Single match record."""
    id: int
    user1: str
    user2: str
    compatibility_score: int
    percentage: int
    match_type: str
    source: str
    match_details: MatchDetailResponse | None = None
    created_at: datetime
    profile: MatchProfileSummary | None = None


class MatchListResponse(BaseModel):
    """List of matches with count."""
    total: int
    matches: list[MatchResponse]
