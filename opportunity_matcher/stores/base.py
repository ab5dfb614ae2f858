"""Collaborator interfaces the pipeline reads from and writes to."""

from abc import ABC, abstractmethod
from typing import Optional

from opportunity_matcher.matching.models import Match
from opportunity_matcher.opportunities.models import Opportunity
from opportunity_matcher.profile.models import Profile


class ProfileStore(ABC):
    @abstractmethod
    def get_profile_by_id(self, profile_id: str) -> Optional[Profile]:
        """Return the profile, or None if no such profile exists. Raises UpstreamError on failure."""


class OpportunityStore(ABC):
    @abstractmethod
    def list_opportunities(self) -> list[Opportunity]:
        """Return every open opportunity. Raises UpstreamError on failure."""


class MatchStore(ABC):
    @abstractmethod
    def append_matches(self, matches: list[Match]) -> None:
        """Write a batch of matches. Raises on failure."""
