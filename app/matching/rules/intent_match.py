"""
Dating intent rule (-30 to +50 points).

Each profile's intent is the first DatingIntent tag in its interest list.
The rule is skipped when either side has no intent.

Scoring:
  - Same intent: 30 pts, "Looking for the same thing"
  - Both "Friendship first": a further 20 pts, "Potential BFF", Bestie
  - "Serious relationship" vs "Casual dating" (either way round): -30 pts
  - Any other pairing: 0 pts

The rule also reports ``is_friendship``, true when either side is after
friendship first; the personality rule and final classification use it.
"""

from app.matching import weights
from app.matching.vocabulary import (
    CASUAL_DATING,
    DATING_INTENT,
    FRIENDSHIP_FIRST,
    SERIOUS_RELATIONSHIP,
    first_tag_in_category,
)
from app.models.match import MatchType

SAME_INTENT_TAG = "Looking for the same thing"
BFF_TAG = "Potential BFF 👯‍♀️"

_HARD_MISMATCH = frozenset({SERIOUS_RELATIONSHIP, CASUAL_DATING})


def score(subject, other) -> dict:
    """
    Score dating intent alignment.

    Returns:
        dict with keys: score (int), details (str), vibe_tags (list[str]),
        is_friendship (bool), match_type (MatchType | None)
    """
    subject_intent = first_tag_in_category(getattr(subject, "interests", None) or [], DATING_INTENT)
    other_intent = first_tag_in_category(getattr(other, "interests", None) or [], DATING_INTENT)
    is_friendship = FRIENDSHIP_FIRST in (subject_intent, other_intent)

    result = {
        "score": 0,
        "details": "",
        "vibe_tags": [],
        "is_friendship": is_friendship,
        "match_type": None,
    }

    if not subject_intent or not other_intent:
        result["details"] = "Missing dating intent on one or both sides"
        return result

    if subject_intent == other_intent:
        result["score"] = weights.INTENT_MATCH
        result["vibe_tags"].append(SAME_INTENT_TAG)
        result["details"] = f"Same intent: '{subject_intent}'"
        if subject_intent == FRIENDSHIP_FIRST:
            result["score"] += weights.FRIENDSHIP_BONUS
            result["vibe_tags"].append(BFF_TAG)
            result["match_type"] = MatchType.BESTIE
        return result

    if {subject_intent, other_intent} == _HARD_MISMATCH:
        result["score"] = weights.INTENT_MISMATCH_PENALTY
        result["details"] = f"Conflicting intents: '{subject_intent}' vs '{other_intent}'"
        return result

    result["details"] = f"Different intents: '{subject_intent}' vs '{other_intent}'"
    return result
