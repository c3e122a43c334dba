"""
Shared interest rule (5 points per shared tag, uncapped).

Every vocabulary tag in the other profile's list that also appears in the
subject's list counts, whichever category it belongs to. Tags outside the
vocabulary are ignored. Common interests are reported in the other
profile's order.
"""

from app.matching import weights
from app.matching.vocabulary import ALL_INTEREST_TAGS


def score(subject, other) -> dict:
    """
    Score overlapping interest tags.

    Returns:
        dict with keys: score (int), details (str), common (list[str])
    """
    subject_interests = set(getattr(subject, "interests", None) or [])
    common = [
        interest
        for interest in (getattr(other, "interests", None) or [])
        if interest in subject_interests and interest in ALL_INTEREST_TAGS
    ]

    if not common:
        return {"score": 0, "details": "No shared interests", "common": []}

    return {
        "score": weights.INTEREST * len(common),
        "details": f"{len(common)} shared interest(s): {', '.join(common)}",
        "common": common,
    }
