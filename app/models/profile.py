import uuid
import enum
from datetime import date, datetime
from sqlalchemy import String, Text, Date, DateTime, Integer, Enum
from sqlalchemy.orm import Mapped, mapped_column
from app.db.compat import JSONB

from app.db.base import Base


class Gender(str, enum.Enum):
    MALE = "Male"
    FEMALE = "Female"
    NON_BINARY = "Non-binary"
    OTHER = "Other"


class InterestedIn(str, enum.Enum):
    MALE = "Male"
    FEMALE = "Female"
    EVERYONE = "Everyone"


class Profile(Base):
    """A student's dating profile.

    The id is the opaque identifier issued by the external auth provider.
    """

    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    username: Mapped[str] = mapped_column(String(50), nullable=True, unique=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    dob: Mapped[date] = mapped_column(Date, nullable=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    gender: Mapped[Gender] = mapped_column(Enum(Gender), nullable=False)
    interested_in: Mapped[InterestedIn] = mapped_column(
        Enum(InterestedIn), default=InterestedIn.EVERYONE
    )

    # Academic
    department: Mapped[str] = mapped_column(String(50), nullable=True)
    major: Mapped[str] = mapped_column(String(100), nullable=True)
    year: Mapped[str] = mapped_column(String(20), nullable=True)

    bio: Mapped[str] = mapped_column(Text, default="")
    interests: Mapped[list] = mapped_column(JSONB, default=list)
    primary_photo: Mapped[str] = mapped_column(String(500), nullable=True)
    is_admin: Mapped[bool] = mapped_column(default=False)

    # Metadata
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    @property
    def course(self) -> str:
        """Display string such as "B.Tech - Computer Science"."""
        if self.department and self.major:
            return f"{self.department} - {self.major}"
        return self.department or self.major or ""

    def __repr__(self) -> str:
        return f"<Profile {self.id}: {self.name} ({self.course})>"
