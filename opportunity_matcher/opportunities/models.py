"""Opportunity data model."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger("opportunity_matcher.opportunities")


class OpportunityType(str, Enum):
    INTERNSHIP = "internship"
    VOLUNTEER = "volunteer"
    ATTACHMENT = "attachment"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Optional[str]) -> "OpportunityType":
        """Map a store value ("Internship", "Apprenticeship", ...) onto a known type."""
        key = str(value or "").strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return cls.OTHER


class WorkMode(str, Enum):
    REMOTE = "remote"
    ONSITE = "onsite"
    HYBRID = "hybrid"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["WorkMode"]:
        """Map a store value ("On-site", "Remote", ...) onto a work mode, None if unset or unknown."""
        key = str(value or "").strip().lower().replace("-", "").replace(" ", "")
        if not key:
            return None
        for member in cls:
            if member.value == key:
                return member
        logger.warning("Ignoring unknown work mode %r", value)
        return None


@dataclass
class Opportunity:
    """An open position or engagement offered by an organization."""

    id: str
    role: str = ""
    description: str = ""
    skills_required: str = ""  # comma-separated, e.g. "python, data analysis, sql"
    type: OpportunityType = OpportunityType.OTHER
    org_id: str = ""
    work_mode: Optional[WorkMode] = None

    @classmethod
    def from_record(cls, record: dict) -> "Opportunity":
        """Build an Opportunity from a raw store record. Raises ValueError when unreadable."""
        if not isinstance(record, dict):
            raise ValueError(f"Opportunity record must be a mapping, got {type(record).__name__}")

        opportunity_id = record.get("id")
        if opportunity_id is None or not str(opportunity_id).strip():
            raise ValueError("Opportunity record has no id")

        skills_required = record.get("skills_required") or ""
        if not isinstance(skills_required, str):
            raise ValueError("Opportunity field 'skills_required' must be a string")

        return cls(
            id=str(opportunity_id).strip(),
            role=(record.get("role") or "").strip(),
            description=record.get("description") or "",
            skills_required=skills_required,
            type=OpportunityType.parse(record.get("type")),
            org_id=str(record.get("org_id") or ""),
            work_mode=WorkMode.parse(record.get("work_mode")),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "role": self.role,
            "description": self.description,
            "skills_required": self.skills_required,
            "type": self.type.value,
            "org_id": self.org_id,
            "work_mode": self.work_mode.value if self.work_mode else None,
        }
