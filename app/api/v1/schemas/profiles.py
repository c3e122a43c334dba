"""Pydantic schemas for profile and vocabulary endpoints."""
from datetime import date, datetime
from pydantic import BaseModel, Field

from app.models.profile import Gender, InterestedIn


class ProfileCreateRequest(BaseModel):
    """Request body for registering a profile after onboarding."""
    id: str | None = Field(None, description="Auth provider user id; generated when omitted")
    username: str | None = None
    name: str
    dob: date | None = None
    age: int = Field(..., ge=16, le=100)
    gender: Gender
    interested_in: InterestedIn = InterestedIn.EVERYONE
    department: str | None = None
    major: str | None = None
    year: str | None = None
    bio: str = ""
    interests: list[str] = []
    primary_photo: str | None = None
    is_admin: bool = False


class InterestsUpdateRequest(BaseModel):
    interests: list[str]


class ProfileResponse(BaseModel):
    id: str
    username: str | None = None
    name: str
    age: int
    gender: Gender
    interested_in: InterestedIn
    department: str | None = None
    major: str | None = None
    course: str
    year: str | None = None
    bio: str | None = None
    interests: list[str]
    primary_photo: str | None = None
    is_admin: bool
    created_at: datetime

    class Config:
        from_attributes = True


class ProfileListResponse(BaseModel):
    total: int
    profiles: list[ProfileResponse]


class VocabularyResponse(BaseModel):
    """Controlled vocabularies shown during signup and profile editing."""
    interests: dict[str, list[str]]
    departments: list[str]
    majors: dict[str, list[str]]
    years: list[str]


class BlockRequest(BaseModel):
    blocker_id: str


class BlockResponse(BaseModel):
    blocker_id: str
    blocked_id: str
    created_at: datetime

    class Config:
        from_attributes = True


class ReportRequest(BaseModel):
    """Request body for reporting a user; the reported user is blocked too."""
    reporter_id: str
    reason: str = Field(..., min_length=1, max_length=1000)


class ReportResponse(BaseModel):
    id: int
    reporter_id: str
    reported_user_id: str
    reason: str
    created_at: datetime

    class Config:
        from_attributes = True


class ReportListResponse(BaseModel):
    total: int
    reports: list[ReportResponse]
