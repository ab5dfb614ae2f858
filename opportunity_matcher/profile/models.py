"""Student profile data model."""

from dataclasses import dataclass, field
from typing import Any, Optional

from opportunity_matcher.utils.text_processing import clean_text, dedupe_preserving_order

PROFICIENCY_LEVELS = ("Beginner", "Intermediate", "Advanced", "Expert")
ADVANCED_PROFICIENCIES = {"Advanced", "Expert"}


@dataclass
class SkillEntry:
    """A skill with an optional description and self-rated proficiency."""

    name: str
    description: str = ""
    proficiency: Optional[str] = None  # Beginner, Intermediate, Advanced, Expert

    @property
    def is_advanced(self) -> bool:
        return self.proficiency in ADVANCED_PROFICIENCIES


@dataclass
class Profile:
    """A candidate's stored career data, as read from the profile store."""

    id: str
    name: str = ""
    skills: list[str] = field(default_factory=list)
    skills_detailed: list[SkillEntry] = field(default_factory=list)
    professional_summary: Optional[str] = None
    education: list[Any] = field(default_factory=list)
    employment_history: list[Any] = field(default_factory=list)
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    address: Optional[str] = None
    media_links: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: dict) -> "Profile":
        """Build a Profile from a raw store record.

        Raises ValueError for records that cannot be read unambiguously.
        Empty strings are stored as None so the completion gate only ever
        sees present-or-absent values.
        """
        if not isinstance(record, dict):
            raise ValueError(f"Profile record must be a mapping, got {type(record).__name__}")

        profile_id = record.get("id")
        if profile_id is None or not str(profile_id).strip():
            raise ValueError("Profile record has no id")

        skills_detailed = [
            _parse_skill_entry(entry)
            for entry in _optional_list(record, "skills_detailed")
        ]
        skills_detailed = [entry for entry in skills_detailed if entry.name]

        skills = [
            skill.strip()
            for skill in _optional_list(record, "skills")
            if isinstance(skill, str) and skill.strip()
        ]
        if not skills and skills_detailed:
            skills = [entry.name for entry in skills_detailed]

        media_links = record.get("media_links") or {}
        if not isinstance(media_links, dict):
            raise ValueError("Profile field 'media_links' must be a mapping")

        return cls(
            id=str(profile_id).strip(),
            name=_optional_str(record, "name") or "",
            skills=dedupe_preserving_order(skills),
            skills_detailed=skills_detailed,
            professional_summary=_optional_str(record, "professional_summary"),
            education=_optional_list(record, "education"),
            employment_history=_optional_list(record, "employment_history"),
            contact_email=_optional_str(record, "contact_email"),
            contact_phone=_optional_str(record, "contact_phone"),
            address=_optional_str(record, "address"),
            media_links={str(k): str(v) for k, v in media_links.items() if v},
        )

    def find_skill_entry(self, skill: str) -> Optional[SkillEntry]:
        """Return the detailed entry for a skill (case-insensitive), if any."""
        key = skill.strip().lower()
        for entry in self.skills_detailed:
            if entry.name.strip().lower() == key:
                return entry
        return None


def _optional_str(record: dict, key: str) -> Optional[str]:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Profile field '{key}' must be a string")
    return clean_text(value)


def _optional_list(record: dict, key: str) -> list:
    value = record.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"Profile field '{key}' must be a list")
    return list(value)


def _parse_skill_entry(entry: Any) -> SkillEntry:
    if isinstance(entry, str):
        return SkillEntry(name=entry.strip())
    if not isinstance(entry, dict):
        raise ValueError("Profile field 'skills_detailed' must contain mappings")
    name = entry.get("name") or ""
    description = entry.get("description") or ""
    if not isinstance(name, str) or not isinstance(description, str):
        raise ValueError("Profile field 'skills_detailed' entries need string name and description")
    proficiency = entry.get("proficiency")
    if proficiency not in PROFICIENCY_LEVELS:
        proficiency = None
    return SkillEntry(
        name=name.strip(),
        description=description,
        proficiency=proficiency,
    )
