"""
Personality rule (capped at 40 points).

Compares every Personality tag of the subject against every Personality tag
of the other profile. The compatibility table is looked up from the
subject's side only, so swapping the profiles can change the result.

Scoring, per pair:
  - Same archetype: 10 pts (15 pts when the pair is friendship-minded)
  - Archetype listed as compatible with the subject's: 15 pts,
    "Vibe Check Passed" (reported once)
The pair total is capped at 40 before it is added to the raw score.
"""

from app.matching import weights
from app.matching.vocabulary import PERSONALITY, PERSONALITY_COMPATIBILITY, tags_in_category

VIBE_CHECK_TAG = "Vibe Check Passed"


def score(subject, other, is_friendship: bool = False) -> dict:
    """
    Score personality compatibility.

    Args:
        subject: Profile whose archetypes drive the compatibility lookup
        other: Candidate profile
        is_friendship: Whether either side wants friendship first

    Returns:
        dict with keys: score (int, capped), raw_score (int, uncapped),
        details (str), vibe_tags (list[str])
    """
    subject_traits = tags_in_category(getattr(subject, "interests", None) or [], PERSONALITY)
    other_traits = tags_in_category(getattr(other, "interests", None) or [], PERSONALITY)

    raw_score = 0
    vibe_tags: list[str] = []
    same = 0
    compatible = 0

    for p1 in subject_traits:
        for p2 in other_traits:
            if p1 == p2:
                raw_score += weights.PERSONALITY_MATCH
                if is_friendship:
                    raw_score += weights.FRIENDSHIP_SIMILARITY_BONUS
                same += 1
            elif p2 in PERSONALITY_COMPATIBILITY.get(p1, ()):
                raw_score += weights.PERSONALITY_COMPATIBLE
                compatible += 1
                if VIBE_CHECK_TAG not in vibe_tags:
                    vibe_tags.append(VIBE_CHECK_TAG)

    capped = min(raw_score, weights.PERSONALITY_CAP)

    if not subject_traits or not other_traits:
        details = "Missing personality tags on one or both sides"
    else:
        details = f"{same} same, {compatible} compatible personality pair(s)"
        if capped < raw_score:
            details += f" ({raw_score} pts capped at {weights.PERSONALITY_CAP})"

    return {
        "score": capped,
        "raw_score": raw_score,
        "details": details,
        "vibe_tags": vibe_tags,
    }
