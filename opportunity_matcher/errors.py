"""Error taxonomy for the matching engine.

Each error knows the status code and body it maps to at the request boundary,
so the envelope and the HTTP service shape failures the same way.
"""

from typing import Optional

from opportunity_matcher.utils.text_processing import round_half_up


class MatchingError(Exception):
    """Base exception for matching engine errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(MatchingError):
    """Raised when the request is missing or malformed."""

    status_code = 400


class NotFoundError(MatchingError):
    """Raised when the referenced student profile does not exist."""

    status_code = 404

    def __init__(self, message: str = "Student not found"):
        super().__init__(message)


class IncompleteProfileError(MatchingError):
    """Raised when a profile is below the completion threshold.

    ``missing`` maps each checked field to True when it is still missing.
    """

    status_code = 422

    def __init__(self, completion_percentage: float, missing: dict[str, bool], threshold: float = 50.0):
        super().__init__("Profile incomplete")
        self.completion_percentage = completion_percentage
        self.missing = missing
        self.threshold = threshold

    def to_dict(self) -> dict:
        return {
            "error": "Profile incomplete",
            "message": (
                f"Please complete at least {round_half_up(self.threshold)}% of your profile "
                "to run matching analysis"
            ),
            "completionPercentage": round_half_up(self.completion_percentage),
            "requiredFields": {
                "skills": self.missing.get("skills", False),
                "professionalSummary": self.missing.get("professional_summary", False),
                "education": self.missing.get("education", False),
                "contactEmail": self.missing.get("contact_email", False),
                "contactPhone": self.missing.get("contact_phone", False),
                "address": self.missing.get("address", False),
            },
        }


class UpstreamError(MatchingError):
    """Raised when a profile or opportunity fetch fails."""

    status_code = 502

    def __init__(self, message: str, upstream_status: Optional[int] = None, details: str = ""):
        super().__init__(message)
        self.upstream_status = upstream_status
        self.details = details


class PersistenceWarning(MatchingError):
    """A failed match write. Logged and attached to the run result, never raised to callers."""

    def __init__(self, message: str, match_count: int = 0):
        super().__init__(message)
        self.match_count = match_count
