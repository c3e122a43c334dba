"""
Scoring combiner: runs all compatibility rules and produces a MatchAnalysis.

Rules run in a fixed order because later ones depend on earlier ones: the
intent rule decides whether the pair is friendship-minded, which changes the
personality rule's same-archetype bonus and the final classification.

The raw score is unbounded (it can go negative on an intent clash) and is
clamped into 0-100 for the user-facing percentage. Scoring never raises:
missing departments, majors or tags simply make a rule contribute 0.

Scoring is not symmetric. ``analyze_compatibility(a, b)`` may differ from
``analyze_compatibility(b, a)`` because the department and personality
tables are looked up from the subject's side.
"""

from dataclasses import dataclass, field

from app.matching import weights
from app.matching.rules import academic_match, interest_match, intent_match, personality_match
from app.models.match import MatchType


@dataclass
class MatchAnalysis:
    """Result of scoring a subject/other profile pair."""

    score: int = 0
    percentage: int = 0
    common_interests: list = field(default_factory=list)
    vibe_tags: list = field(default_factory=list)
    academic_synergy: str | None = None
    match_type: MatchType = MatchType.STANDARD
    rule_scores: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "percentage": self.percentage,
            "common_interests": list(self.common_interests),
            "vibe_tags": list(self.vibe_tags),
            "academic_synergy": self.academic_synergy,
            "match_type": self.match_type.value,
            "rules": {
                name: {"score": rule["score"], "details": rule["details"]}
                for name, rule in self.rule_scores.items()
            },
        }


def normalize(raw_score: int) -> int:
    """Map a raw score onto 0-100, saturating at both ends."""
    return min(max(round(raw_score / weights.SCORE_SCALE * 100), 0), 100)


def analyze_compatibility(subject, other) -> MatchAnalysis:
    """
    Score how well ``other`` suits ``subject``.

    Args:
        subject: The viewing/reference profile
        other: The candidate profile

    Both arguments only need ``interests``, ``department`` and ``major``
    attributes, so ORM rows and API payloads can be mixed freely.

    Returns:
        MatchAnalysis with raw score, percentage, tags and per-rule breakdown.
    """
    analysis = MatchAnalysis()

    academic = academic_match.score(subject, other)
    analysis.academic_synergy = academic["synergy"]
    if academic["match_type"] is not None:
        analysis.match_type = academic["match_type"]

    interests = interest_match.score(subject, other)
    analysis.common_interests = interests["common"]

    intent = intent_match.score(subject, other)
    analysis.vibe_tags.extend(intent["vibe_tags"])
    if intent["match_type"] is not None:
        analysis.match_type = intent["match_type"]
    is_friendship = intent["is_friendship"]

    personality = personality_match.score(subject, other, is_friendship=is_friendship)
    for tag in personality["vibe_tags"]:
        if tag not in analysis.vibe_tags:
            analysis.vibe_tags.append(tag)

    analysis.rule_scores = {
        "academic": academic,
        "interests": interests,
        "intent": intent,
        "personality": personality,
    }
    analysis.score = sum(rule["score"] for rule in analysis.rule_scores.values())
    analysis.percentage = normalize(analysis.score)

    # Final classification overrides anything the rules set
    if analysis.percentage >= weights.SOUL_MATE_THRESHOLD:
        analysis.match_type = MatchType.SOUL_MATE
    elif is_friendship and analysis.percentage >= weights.BESTIE_THRESHOLD:
        analysis.match_type = MatchType.BESTIE

    return analysis


def compatibility_score(subject, other) -> int:
    """Raw compatibility score only, for ranking."""
    return analyze_compatibility(subject, other).score
