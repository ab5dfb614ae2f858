"""Student match model — one row per persisted match."""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from opportunity_matcher.matching.models import Match

from .base import Base


class StudentMatch(Base):
    __tablename__ = "student_matches"
    # Not unique: append mode keeps every run as an audit trail
    __table_args__ = (
        Index("ix_student_matches_student_opportunity", "student_id", "opportunity_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    opportunity_id: Mapped[str] = mapped_column(String(64), nullable=False)
    match_score: Mapped[int] = mapped_column(Integer, nullable=False)
    matched_skills: Mapped[list] = mapped_column(JSON, default=list)
    reasoning: Mapped[str] = mapped_column(Text, default="")
    analyzed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    @classmethod
    def from_match(cls, match: Match) -> "StudentMatch":
        return cls(
            student_id=match.student_id,
            opportunity_id=match.opportunity_id,
            match_score=match.match_score,
            matched_skills=list(match.matched_skills),
            reasoning=match.reasoning,
            analyzed_at=match.analyzed_at or datetime.now(timezone.utc),
        )

    def to_match(self) -> Match:
        return Match(
            opportunity_id=self.opportunity_id,
            student_id=self.student_id,
            match_score=self.match_score,
            matched_skills=list(self.matched_skills or []),
            reasoning=self.reasoning or "",
            analyzed_at=self.analyzed_at,
        )
