"""Bidirectional substring overlap between profile skills and required skills."""

from opportunity_matcher.matching.models import SkillOverlap
from opportunity_matcher.utils.text_processing import normalize_skill, split_skills_text


def parse_required_skills(text: str) -> list[str]:
    """Split an opportunity's required-skills text into lowercase tokens."""
    return split_skills_text(text)


def skills_overlap(profile_skill: str, required_skill: str) -> bool:
    """True when either normalized skill contains the other ("react" ~ "react.js")."""
    a = normalize_skill(profile_skill)
    b = normalize_skill(required_skill)
    if not a or not b:
        return False
    return a in b or b in a


def resolve_overlap(profile_skills: list[str], required_skills_text: str) -> SkillOverlap:
    """Find which profile skills an opportunity asks for.

    Matched skills keep the profile's casing and order; duplicates (by
    lowercase identity) are dropped, first occurrence wins.
    """
    required = parse_required_skills(required_skills_text)

    matched = []
    seen: set[str] = set()
    for skill in profile_skills:
        key = normalize_skill(skill)
        if not key or key in seen:
            continue
        if any(skills_overlap(key, req) for req in required):
            seen.add(key)
            matched.append(skill.strip())

    return SkillOverlap(matched=matched, required_count=len(required))
