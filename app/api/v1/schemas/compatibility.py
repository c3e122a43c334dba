"""Pydantic schemas for compatibility endpoints."""
from pydantic import BaseModel

from app.matching.scoring import MatchAnalysis


class CompatibilityProfile(BaseModel):
    """The profile fields the compatibility engine reads."""
    department: str | None = None
    major: str | None = None
    interests: list[str] = []


class AnalyzeRequest(BaseModel):
    """Request body for scoring two unsaved profiles."""
    subject: CompatibilityProfile
    other: CompatibilityProfile


class CompatibilityRuleDetail(BaseModel):
    score: int
    details: str


class CompatibilityResponse(BaseModel):
    """Compatibility of ``other`` from ``subject``'s point of view."""
    score: int
    percentage: int
    common_interests: list[str]
    vibe_tags: list[str]
    academic_synergy: str | None = None
    match_type: str
    rules: dict[str, CompatibilityRuleDetail]

    @classmethod
    def from_analysis(cls, analysis: MatchAnalysis) -> "CompatibilityResponse":
        return cls(**analysis.to_dict())
