import uuid
import enum
from datetime import datetime
from sqlalchemy import String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from app.db.compat import UUID

from app.db.base import Base


class RecommendationType(str, enum.Enum):
    STANDARD = "standard"
    SOULMATE = "soulmate"
    FRIEND = "friend"


class AdminRecommendation(Base):
    """An admin's suggestion that ``recommended_user_id`` be shown to ``target_user_id``.

    Recommended profiles float to the top of the target's discovery feed and
    a like on them creates a match without waiting for a like back.
    """

    __tablename__ = "admin_recommendations"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(), primary_key=True, default=uuid.uuid4
    )
    admin_id: Mapped[str] = mapped_column(String(64), nullable=False)
    target_user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    recommended_user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )
    type: Mapped[RecommendationType] = mapped_column(
        Enum(RecommendationType), default=RecommendationType.STANDARD
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<AdminRecommendation {self.recommended_user_id} → {self.target_user_id} ({self.type.value})>"
