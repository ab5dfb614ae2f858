"""ORM models for the SQL-backed stores."""

from .base import Base, create_session_factory
from .opportunity import OpportunityRecord
from .profile import ProfileRecord
from .student_match import StudentMatch

__all__ = [
    "Base",
    "create_session_factory",
    "ProfileRecord",
    "OpportunityRecord",
    "StudentMatch",
]
