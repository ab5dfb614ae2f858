"""Additive scoring of a profile against one opportunity."""

from opportunity_matcher.opportunities.models import Opportunity
from opportunity_matcher.profile.models import Profile
from opportunity_matcher.utils.text_processing import pluralize, round_half_up, summarize_list

# Scoring weights (points out of 100)
WEIGHT_SKILLS = 50
WEIGHT_EDUCATION = 20
WEIGHT_EMPLOYMENT = 15
WEIGHT_SUMMARY = 15

SUMMARY_MIN_LENGTH = 50
ACCEPTANCE_THRESHOLD = 40


def skill_ratio(matched_count: int, required_count: int) -> float:
    """Share of required skills covered, 0.0-1.0 (0 when nothing is required)."""
    if required_count <= 0:
        return 0.0
    # Containment is bidirectional, so two profile skills can land on one requirement
    return min(matched_count / required_count, 1.0)


def score_match(profile: Profile, matched: list[str], required_count: int) -> int:
    """Score a profile against an opportunity's required skills.

    Returns an int in 0-100: skill coverage (50) plus education (20),
    employment (15) and a substantive summary (15), rounded half-up.
    """
    skill_component = skill_ratio(len(matched), required_count) * WEIGHT_SKILLS
    education_component = WEIGHT_EDUCATION if profile.education else 0
    employment_component = WEIGHT_EMPLOYMENT if profile.employment_history else 0
    summary = profile.professional_summary or ""
    summary_component = WEIGHT_SUMMARY if len(summary) > SUMMARY_MIN_LENGTH else 0

    raw = skill_component + education_component + employment_component + summary_component
    return round_half_up(raw)


def build_reasoning(opportunity: Opportunity, matched: list[str], profile: Profile) -> str:
    """Human-readable explanation of a match."""
    if not matched:
        role = opportunity.role or "this"
        return f"Profile aligns with {role} opportunity"

    reasoning = f"Matched {pluralize(len(matched), 'skill')}: {summarize_list(matched)}"

    if profile.skills_detailed:
        advanced = []
        for skill in matched:
            entry = profile.find_skill_entry(skill)
            if entry and entry.is_advanced:
                advanced.append(skill)
        if advanced:
            reasoning += f". {pluralize(len(advanced), 'advanced/expert level skill')}"

    return reasoning
