"""
Controlled vocabularies used by signup clients and the compatibility engine.

The interest categories and both compatibility tables are part of the
scoring contract: editing them changes every score the engine produces.
The department table is deliberately asymmetric (e.g. MBA lists B.Tech but
B.Tech does not list MBA) and must be kept as-is.
"""

from types import MappingProxyType

LIFESTYLE = "Lifestyle"
PERSONALITY = "Personality"
DATING_INTENT = "DatingIntent"
HOBBIES = "Hobbies"

INTEREST_CATEGORIES = MappingProxyType({
    LIFESTYLE: ("Fitness", "Gaming", "Partying", "Reading", "Traveling", "Cooking", "Photography"),
    PERSONALITY: ("Introvert", "Extrovert", "Ambivert", "Deep thinker", "Funny", "Chill", "Romantic", "Adventurous"),
    DATING_INTENT: ("Serious relationship", "Casual dating", "Friendship first", "See where it goes"),
    HOBBIES: ("Music", "Movies", "Tech", "Sports", "Art", "Fashion", "Startups"),
})

# Dating intent literals with scoring behaviour attached
SERIOUS_RELATIONSHIP = "Serious relationship"
CASUAL_DATING = "Casual dating"
FRIENDSHIP_FIRST = "Friendship first"

ALL_INTEREST_TAGS = frozenset(tag for tags in INTEREST_CATEGORIES.values() for tag in tags)

# Personality archetype -> archetypes it gets along with
PERSONALITY_COMPATIBILITY = MappingProxyType({
    "Introvert": frozenset({"Extrovert", "Ambivert", "Deep thinker"}),
    "Extrovert": frozenset({"Introvert", "Ambivert", "Funny"}),
    "Deep thinker": frozenset({"Deep thinker", "Introvert", "Romantic"}),
    "Adventurous": frozenset({"Adventurous", "Funny", "Chill"}),
    "Chill": frozenset({"Chill", "Adventurous", "Ambivert"}),
    "Romantic": frozenset({"Romantic", "Deep thinker"}),
    "Funny": frozenset({"Funny", "Extrovert", "Adventurous"}),
})

# Subject's department -> departments counted as a cross-discipline match
DEPARTMENT_COMPATIBILITY = MappingProxyType({
    "B.Tech": frozenset({"B.Tech", "M.Tech", "MCA"}),
    "M.Tech": frozenset({"B.Tech", "M.Tech", "PhD"}),
    "MCA": frozenset({"B.Tech", "MCA", "B.Sc"}),
    "MBA": frozenset({"MBA", "BBA", "B.Tech"}),
    "B.Arch": frozenset({"B.Arch", "B.Des", "Fine Arts"}),
})

DEPARTMENTS = ("B.Tech", "M.Tech", "MCA", "MBA", "B.Arch")

MAJORS = MappingProxyType({
    "B.Tech": (
        "Computer Science",
        "Electronics & Comm",
        "Electrical & Electronics",
        "Mechanical",
        "Civil",
        "Industrial",
        "Applied Electronics",
    ),
    "M.Tech": ("Structural Eng", "Control Systems", "Computer Science", "Thermal Science", "Robotics"),
    "MCA": ("Computer Applications",),
    "MBA": ("Finance", "Marketing", "HR", "Operations", "Systems"),
    "B.Arch": ("Architecture",),
})

YEARS = ("1st Year", "2nd Year", "3rd Year", "4th Year", "5th Year")


def tags_in_category(interests, category: str) -> list[str]:
    """Return the tags from ``interests`` that belong to ``category``, in order."""
    members = INTEREST_CATEGORIES.get(category, ())
    return [tag for tag in interests if tag in members]


def first_tag_in_category(interests, category: str) -> str | None:
    """Return the first tag from ``interests`` in ``category``, or None."""
    members = INTEREST_CATEGORIES.get(category, ())
    return next((tag for tag in interests if tag in members), None)
