"""
Scoring weights and classification thresholds.

These are fixed rather than read from settings: a match record stores the
score computed at creation time, so changing a weight would make stored and
freshly computed scores disagree.
"""

# Academic
DEPARTMENT_MATCH = 10
MAJOR_MATCH = 15
CROSS_DISCIPLINE_BONUS = 5

# Shared interests (per tag, uncapped)
INTEREST = 5

# Dating intent
INTENT_MATCH = 30
INTENT_MISMATCH_PENALTY = -30
FRIENDSHIP_BONUS = 20

# Personality
PERSONALITY_MATCH = 10
PERSONALITY_COMPATIBLE = 15
FRIENDSHIP_SIMILARITY_BONUS = 5
PERSONALITY_CAP = 40

# Normalisation: raw score that maps to 100%
SCORE_SCALE = 100

# Classification
SOUL_MATE_THRESHOLD = 90
BESTIE_THRESHOLD = 70
