"""Match data models."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional


@dataclass
class SkillOverlap:
    """Profile skills found in an opportunity's required skills."""

    matched: list[str] = field(default_factory=list)
    required_count: int = 0


@dataclass
class Match:
    """A scored association between one student profile and one opportunity."""

    opportunity_id: str
    student_id: str
    match_score: int
    matched_skills: list[str] = field(default_factory=list)
    reasoning: str = ""
    analyzed_at: Optional[datetime] = None

    def stamped(self, analyzed_at: datetime) -> "Match":
        """Return a copy carrying the analysis timestamp."""
        return replace(self, analyzed_at=analyzed_at, matched_skills=list(self.matched_skills))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "opportunity_id": self.opportunity_id,
            "student_id": self.student_id,
            "match_score": self.match_score,
            "matched_skills": list(self.matched_skills),
            "reasoning": self.reasoning,
            "analyzed_at": self.analyzed_at.isoformat() if self.analyzed_at else None,
        }
