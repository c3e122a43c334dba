from app.models.profile import Profile, Gender, InterestedIn
from app.models.swipe import Swipe
from app.models.match import Match, MatchType, MatchSource
from app.models.recommendation import AdminRecommendation, RecommendationType
from app.models.block import Block
from app.models.report import Report

__all__ = [
    "Profile",
    "Gender",
    "InterestedIn",
    "Swipe",
    "Match",
    "MatchType",
    "MatchSource",
    "AdminRecommendation",
    "RecommendationType",
    "Block",
    "Report",
]
