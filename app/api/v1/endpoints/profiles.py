"""Profile endpoints: register, list, fetch, and edit interests."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.profile import Profile
from app.services.safety_service import block_user, report_user
from app.api.v1.schemas.profiles import (
    BlockRequest,
    BlockResponse,
    InterestsUpdateRequest,
    ProfileCreateRequest,
    ProfileListResponse,
    ProfileResponse,
    ReportRequest,
    ReportResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profiles", tags=["Profiles"])


def get_profile_or_404(db: Session, profile_id: str) -> Profile:
    """Load a profile or raise a 404."""
    profile = db.query(Profile).filter(Profile.id == profile_id).first()
    if not profile:
        raise HTTPException(status_code=404, detail=f"Profile {profile_id} not found")
    return profile


@router.post("", response_model=ProfileResponse, status_code=201)
def create_profile(
    request: ProfileCreateRequest,
    db: Session = Depends(get_db),
):
    """
    Register a profile once signup/onboarding is complete.

    Interest tags are stored as given; tags outside the vocabulary are kept
    but never affect compatibility.
    """
    data = request.model_dump(exclude_none=True)
    if request.id and db.query(Profile).filter(Profile.id == request.id).first():
        raise HTTPException(status_code=409, detail=f"Profile {request.id} already exists")
    if request.username and db.query(Profile).filter(Profile.username == request.username).first():
        raise HTTPException(status_code=409, detail=f"Username '{request.username}' is taken")

    profile = Profile(**data)
    db.add(profile)
    db.commit()
    db.refresh(profile)

    logger.info("Profile created: %s (%s)", profile.id, profile.course)
    return ProfileResponse.model_validate(profile)


@router.get("", response_model=ProfileListResponse)
def list_profiles(
    department: str | None = Query(None, description="Filter by department, e.g. B.Tech"),
    db: Session = Depends(get_db),
):
    """List all profiles, newest first."""
    query = db.query(Profile)
    if department:
        query = query.filter(Profile.department == department)

    profiles = query.order_by(Profile.created_at.desc()).all()
    return ProfileListResponse(
        total=len(profiles),
        profiles=[ProfileResponse.model_validate(p) for p in profiles],
    )


@router.get("/{profile_id}", response_model=ProfileResponse)
def get_profile(
    profile_id: str,
    db: Session = Depends(get_db),
):
    """Get a single profile by ID."""
    return ProfileResponse.model_validate(get_profile_or_404(db, profile_id))


@router.put("/{profile_id}/interests", response_model=ProfileResponse)
def update_interests(
    profile_id: str,
    request: InterestsUpdateRequest,
    db: Session = Depends(get_db),
):
    """Replace a profile's interest tags (duplicates are dropped, order kept)."""
    profile = get_profile_or_404(db, profile_id)
    profile.interests = list(dict.fromkeys(request.interests))
    db.commit()
    db.refresh(profile)
    return ProfileResponse.model_validate(profile)


@router.post("/{profile_id}/block", response_model=BlockResponse, status_code=201)
def block_profile(
    profile_id: str,
    request: BlockRequest,
    db: Session = Depends(get_db),
):
    """Block a profile. Both users stop seeing each other and any match between them is removed."""
    blocked = get_profile_or_404(db, profile_id)
    blocker = get_profile_or_404(db, request.blocker_id)

    try:
        block = block_user(db, blocker, blocked)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return BlockResponse.model_validate(block)


@router.post("/{profile_id}/report", response_model=ReportResponse, status_code=201)
def report_profile(
    profile_id: str,
    request: ReportRequest,
    db: Session = Depends(get_db),
):
    """Report a profile to the admins. The reporter also blocks it."""
    reported = get_profile_or_404(db, profile_id)
    reporter = get_profile_or_404(db, request.reporter_id)

    try:
        report = report_user(db, reporter, reported, request.reason)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ReportResponse.model_validate(report)
