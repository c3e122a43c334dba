import enum
from datetime import datetime
from sqlalchemy import String, DateTime, Integer, Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.db.compat import JSONB

from app.db.base import Base


class MatchType(str, enum.Enum):
    """Classification label produced by the compatibility engine."""

    SOUL_MATE = "soul_mate"
    BESTIE = "bestie"
    STUDY_BUDDY = "study_buddy"
    STANDARD = "standard"


class MatchSource(str, enum.Enum):
    """What caused the match to be created."""

    MUTUAL = "mutual"
    RECOMMENDATION = "recommendation"
    SOULMATE = "soulmate"


class Match(Base):
    """Match between two profiles.

    The compatibility values are computed once at creation and never updated.
    """

    __tablename__ = "matches"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user1: Mapped[str] = mapped_column(
        String(64), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user2: Mapped[str] = mapped_column(
        String(64), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    compatibility_score: Mapped[int] = mapped_column(Integer, nullable=False)
    percentage: Mapped[int] = mapped_column(Integer, nullable=False)
    match_type: Mapped[MatchType] = mapped_column(Enum(MatchType), nullable=False)
    source: Mapped[MatchSource] = mapped_column(Enum(MatchSource), nullable=False)
    match_details: Mapped[dict] = mapped_column(JSONB, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    profile1: Mapped["Profile"] = relationship("Profile", foreign_keys=[user1])
    profile2: Mapped["Profile"] = relationship("Profile", foreign_keys=[user2])

    def other_user(self, user_id: str) -> str:
        """Return the id of the participant that is not ``user_id``."""
        return self.user1 if self.user2 == user_id else self.user2

    def __repr__(self) -> str:
        return f"<Match {self.id}: {self.user1} ↔ {self.user2} {self.percentage}% ({self.match_type.value})>"
