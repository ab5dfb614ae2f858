"""In-memory stores and builders shared across the test modules."""

from typing import Optional

from opportunity_matcher.config import AppConfig
from opportunity_matcher.matching.models import Match
from opportunity_matcher.opportunities.models import Opportunity, OpportunityType, WorkMode
from opportunity_matcher.pipeline import MatchingPipeline
from opportunity_matcher.profile.models import Profile
from opportunity_matcher.stores.base import MatchStore, OpportunityStore, ProfileStore

LONG_SUMMARY = "x" * 60


def make_profile(**kwargs) -> Profile:
    """Skills Python + SQL, 60-char summary, one education entry, no employment."""
    defaults = dict(
        id="student-1",
        name="Test Student",
        skills=["Python", "SQL"],
        professional_summary=LONG_SUMMARY,
        education=[{"institution": "State University", "degree": "BSc Statistics"}],
        employment_history=[],
        contact_email="student@example.com",
    )
    defaults.update(kwargs)
    return Profile(**defaults)


def make_opportunity(**kwargs) -> Opportunity:
    defaults = dict(
        id="opp-1",
        role="Data Analyst Intern",
        description="Help the analytics team build reports.",
        skills_required="python, data analysis, sql",
        type=OpportunityType.INTERNSHIP,
        org_id="org-1",
        work_mode=WorkMode.REMOTE,
    )
    defaults.update(kwargs)
    return Opportunity(**defaults)


class FakeStore(ProfileStore, OpportunityStore, MatchStore):
    def __init__(self, profiles=None, opportunities=None):
        self.profiles = {p.id: p for p in profiles or []}
        self.opportunities = list(opportunities or [])
        self.written: list[list[Match]] = []
        self.profile_calls = 0
        self.opportunity_calls = 0
        self.fail_profile: Optional[Exception] = None
        self.fail_opportunities: Optional[Exception] = None
        self.fail_write: Optional[Exception] = None

    def get_profile_by_id(self, profile_id: str) -> Optional[Profile]:
        self.profile_calls += 1
        if self.fail_profile:
            raise self.fail_profile
        return self.profiles.get(profile_id)

    def list_opportunities(self) -> list[Opportunity]:
        self.opportunity_calls += 1
        if self.fail_opportunities:
            raise self.fail_opportunities
        return list(self.opportunities)

    def append_matches(self, matches: list[Match]) -> None:
        if self.fail_write:
            raise self.fail_write
        self.written.append(list(matches))


def make_pipeline(store: FakeStore, **matching) -> MatchingPipeline:
    config = AppConfig()
    for key, value in matching.items():
        setattr(config.matching, key, value)
    return MatchingPipeline(config, store, store, store)
