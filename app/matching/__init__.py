from app.matching.scoring import analyze_compatibility, compatibility_score, MatchAnalysis
from app.matching.engine import rank_by_compatibility, top_matches, order_discover_stack, RankedCandidate

__all__ = [
    "analyze_compatibility",
    "compatibility_score",
    "MatchAnalysis",
    "rank_by_compatibility",
    "top_matches",
    "order_discover_stack",
    "RankedCandidate",
]
