"""Compatibility endpoints: score stored or ad-hoc profile pairs."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.matching.scoring import analyze_compatibility
from app.api.v1.endpoints.profiles import get_profile_or_404
from app.api.v1.schemas.compatibility import AnalyzeRequest, CompatibilityResponse

router = APIRouter(prefix="/compatibility", tags=["Compatibility"])


@router.get("/{subject_id}/{other_id}", response_model=CompatibilityResponse)
def get_compatibility(
    subject_id: str,
    other_id: str,
    db: Session = Depends(get_db),
):
    """
    Compatibility of ``other_id`` as seen by ``subject_id``.

    Order matters: the result is not guaranteed to be the same when the two
    ids are swapped.
    """
    subject = get_profile_or_404(db, subject_id)
    other = get_profile_or_404(db, other_id)
    return CompatibilityResponse.from_analysis(analyze_compatibility(subject, other))


@router.post("/analyze", response_model=CompatibilityResponse)
def analyze(request: AnalyzeRequest):
    """Score two profiles that are not stored, e.g. during onboarding previews."""
    return CompatibilityResponse.from_analysis(
        analyze_compatibility(request.subject, request.other)
    )
