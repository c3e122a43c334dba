"""Vocabulary endpoint: the fixed lists signup clients choose from."""

from fastapi import APIRouter

from app.matching.vocabulary import DEPARTMENTS, INTEREST_CATEGORIES, MAJORS, YEARS
from app.api.v1.schemas.profiles import VocabularyResponse

router = APIRouter(prefix="/vocabulary", tags=["Vocabulary"])


@router.get("", response_model=VocabularyResponse)
def get_vocabulary():
    """Interest categories, departments, majors per department and study years."""
    return VocabularyResponse(
        interests={category: list(tags) for category, tags in INTEREST_CATEGORIES.items()},
        departments=list(DEPARTMENTS),
        majors={department: list(majors) for department, majors in MAJORS.items()},
        years=list(YEARS),
    )
