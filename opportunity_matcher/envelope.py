"""Request/response envelope around the matching pipeline."""

import logging
from typing import Any

from opportunity_matcher.errors import MatchingError, ValidationError
from opportunity_matcher.pipeline import MatchingPipeline

logger = logging.getLogger("opportunity_matcher.envelope")


def parse_match_request(payload: Any) -> str:
    """Pull the student id out of a ``{"studentId": ...}`` payload."""
    if not isinstance(payload, dict):
        raise ValidationError("studentId is required")

    student_id = payload.get("studentId")
    if not isinstance(student_id, str) or not student_id.strip():
        raise ValidationError("studentId is required")

    return student_id.strip()


def handle_match_request(pipeline: MatchingPipeline, payload: Any, persist: bool = True) -> tuple[int, dict]:
    """Run matching for a request payload and return (status_code, body).

    Never raises: every failure is turned into its status code and error body.
    """
    try:
        student_id = parse_match_request(payload)
        result = pipeline.run(student_id, persist=persist)
    except MatchingError as e:
        return e.status_code, e.to_dict()
    except Exception as e:
        logger.error("Unexpected error handling match request: %s", e, exc_info=True)
        return 500, {"error": str(e) or type(e).__name__}

    return 200, result.to_dict()
