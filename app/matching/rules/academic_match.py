"""
Academic compatibility rule (up to 25 points).

Compares department and major. Only runs when both profiles have a
department; otherwise the rule contributes nothing.

Scoring:
  - Same department and same major: 10 + 15 pts, "Study Buddies"
  - Same department, different major: 10 pts, "<department> Squad"
  - Other department listed as compatible with the subject's: 5 pts,
    "Power Couple" (lookup is keyed on the subject's department only)
  - Anything else: 0 pts
"""

from app.matching import weights
from app.matching.vocabulary import DEPARTMENT_COMPATIBILITY
from app.models.match import MatchType

STUDY_BUDDIES_LABEL = "Study Buddies 📚"
POWER_COUPLE_LABEL = "Power Couple 🚀"


def score(subject, other) -> dict:
    """
    Score academic compatibility between two profiles.

    Returns:
        dict with keys: score (int), details (str), synergy (str | None),
        match_type (MatchType | None)
    """
    subject_dept = getattr(subject, "department", None)
    other_dept = getattr(other, "department", None)

    if not subject_dept or not other_dept:
        return {
            "score": 0,
            "details": "Missing department on one or both sides",
            "synergy": None,
            "match_type": None,
        }

    if subject_dept == other_dept:
        subject_major = getattr(subject, "major", None)
        if subject_major == getattr(other, "major", None):
            return {
                "score": weights.DEPARTMENT_MATCH + weights.MAJOR_MATCH,
                "details": f"Same department and major: {subject_dept} / {subject_major}",
                "synergy": STUDY_BUDDIES_LABEL,
                "match_type": MatchType.STUDY_BUDDY,
            }
        return {
            "score": weights.DEPARTMENT_MATCH,
            "details": f"Same department: {subject_dept}",
            "synergy": f"{subject_dept} Squad",
            "match_type": None,
        }

    if other_dept in DEPARTMENT_COMPATIBILITY.get(subject_dept, ()):
        return {
            "score": weights.CROSS_DISCIPLINE_BONUS,
            "details": f"Compatible departments: {subject_dept} + {other_dept}",
            "synergy": POWER_COUPLE_LABEL,
            "match_type": None,
        }

    return {
        "score": 0,
        "details": f"Unrelated departments: {subject_dept} / {other_dept}",
        "synergy": None,
        "match_type": None,
    }
