"""Opportunity model — the opportunity store's table."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from opportunity_matcher.opportunities.models import Opportunity

from .base import Base


class OpportunityRecord(Base):
    __tablename__ = "opportunities"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    org_id: Mapped[str] = mapped_column(String(64), default="", index=True)
    role: Mapped[str] = mapped_column(String(255), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    skills_required: Mapped[str] = mapped_column(Text, default="")
    type: Mapped[str] = mapped_column(String(50), default="Internship")
    work_mode: Mapped[str | None] = mapped_column(String(20), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    def to_opportunity(self) -> Opportunity:
        return Opportunity.from_record({
            "id": self.id,
            "role": self.role,
            "description": self.description,
            "skills_required": self.skills_required,
            "type": self.type,
            "org_id": self.org_id,
            "work_mode": self.work_mode,
        })
