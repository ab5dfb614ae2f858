"""Student profile model — the profile store's table."""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from opportunity_matcher.profile.models import Profile

from .base import Base


class ProfileRecord(Base):
    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), default="")
    skills: Mapped[list | None] = mapped_column(JSON, nullable=True)
    skills_detailed: Mapped[list | None] = mapped_column(JSON, nullable=True)
    professional_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    education: Mapped[list | None] = mapped_column(JSON, nullable=True)
    employment_history: Mapped[list | None] = mapped_column(JSON, nullable=True)
    contact_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    contact_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(512), nullable=True)
    media_links: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def to_profile(self) -> Profile:
        """Convert DB row to the Profile dataclass (raises ValueError on malformed data)."""
        return Profile.from_record({
            "id": self.id,
            "name": self.name,
            "skills": self.skills,
            "skills_detailed": self.skills_detailed,
            "professional_summary": self.professional_summary,
            "education": self.education,
            "employment_history": self.employment_history,
            "contact_email": self.contact_email,
            "contact_phone": self.contact_phone,
            "address": self.address,
            "media_links": self.media_links,
        })
