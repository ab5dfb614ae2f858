"""Profile completeness gate: enough populated fields before matching runs."""

import logging
from dataclasses import dataclass, fields

from opportunity_matcher.errors import IncompleteProfileError
from opportunity_matcher.profile.models import Profile
from opportunity_matcher.utils.text_processing import round_half_up

logger = logging.getLogger("opportunity_matcher.matching.completeness")

COMPLETION_THRESHOLD = 50.0


@dataclass(frozen=True)
class CompletionCheck:
    """Which of the six gated profile fields are present."""

    skills: bool
    professional_summary: bool
    education: bool
    contact_email: bool
    contact_phone: bool
    address: bool
    threshold: float = COMPLETION_THRESHOLD

    @property
    def flags(self) -> dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "threshold"}

    @property
    def percentage(self) -> float:
        flags = self.flags
        return sum(flags.values()) / len(flags) * 100

    @property
    def rounded_percentage(self) -> int:
        return round_half_up(self.percentage)

    @property
    def passed(self) -> bool:
        # Compared unrounded; rounding is for display only
        return self.percentage >= self.threshold

    def missing_fields(self) -> dict[str, bool]:
        """Flags negated: True means the field still needs filling in."""
        return {name: not present for name, present in self.flags.items()}


def evaluate_completion(profile: Profile, threshold: float = COMPLETION_THRESHOLD) -> CompletionCheck:
    """Inspect a profile's gated fields."""
    return CompletionCheck(
        skills=bool(profile.skills) or bool(profile.skills_detailed),
        professional_summary=bool(profile.professional_summary),
        education=len(profile.education) > 0,
        contact_email=bool(profile.contact_email),
        contact_phone=bool(profile.contact_phone),
        address=bool(profile.address),
        threshold=threshold,
    )


def require_complete(profile: Profile, threshold: float = COMPLETION_THRESHOLD) -> CompletionCheck:
    """Evaluate the gate and raise IncompleteProfileError when it does not pass."""
    check = evaluate_completion(profile, threshold)
    if not check.passed:
        missing = [name for name, is_missing in check.missing_fields().items() if is_missing]
        logger.info(
            "Profile %s is %.1f%% complete (threshold %.1f%%), missing: %s",
            profile.id, check.percentage, threshold, ", ".join(missing),
        )
        raise IncompleteProfileError(check.percentage, check.missing_fields(), threshold)
    return check
