"""Supabase (PostgREST) backed stores."""

import json
import logging
from typing import Optional

import requests

from opportunity_matcher.config import StoreConfig
from opportunity_matcher.errors import UpstreamError
from opportunity_matcher.matching.models import Match
from opportunity_matcher.opportunities.models import Opportunity
from opportunity_matcher.profile.models import Profile
from opportunity_matcher.stores.base import MatchStore, OpportunityStore, ProfileStore
from opportunity_matcher.utils.http_client import create_session

logger = logging.getLogger("opportunity_matcher.stores.rest")


class SupabaseStore(ProfileStore, OpportunityStore, MatchStore):
    """Reads profiles and opportunities and writes matches over the Supabase REST API."""

    def __init__(
        self,
        config: StoreConfig,
        upsert: bool = False,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self.base_url = f"{config.supabase_url.rstrip('/')}/rest/v1"
        self.upsert = upsert
        self.session = session or create_session(config.service_role_key)

    def _get(self, table: str, params: dict, what: str) -> list:
        url = f"{self.base_url}/{table}"
        try:
            response = self.session.get(url, params=params, timeout=self.config.timeout_seconds)
        except requests.RequestException as e:
            logger.error("Request for %s failed: %s", what, e)
            raise UpstreamError(f"Failed to fetch {what}", details=str(e)) from e

        if not response.ok:
            logger.error("Failed to fetch %s (%d): %s", what, response.status_code, response.text)
            raise UpstreamError(
                f"Failed to fetch {what}",
                upstream_status=response.status_code,
                details=response.text,
            )

        try:
            rows = response.json()
        except ValueError as e:
            raise UpstreamError(f"Invalid {what} data received", details=str(e)) from e

        if not isinstance(rows, list):
            raise UpstreamError(f"Invalid {what} data received")
        return rows

    def get_profile_by_id(self, profile_id: str) -> Optional[Profile]:
        rows = self._get(
            self.config.profiles_table,
            {"id": f"eq.{profile_id}", "select": "*"},
            "student profile",
        )
        if not rows:
            return None

        try:
            return Profile.from_record(rows[0])
        except ValueError as e:
            raise UpstreamError("Invalid student data received", details=str(e)) from e

    def list_opportunities(self) -> list[Opportunity]:
        rows = self._get(self.config.opportunities_table, {"select": "*"}, "opportunities")

        opportunities = []
        for row in rows:
            try:
                opportunities.append(Opportunity.from_record(row))
            except ValueError as e:
                raise UpstreamError("Invalid opportunity data received", details=str(e)) from e

        logger.info("Fetched %d opportunities", len(opportunities))
        return opportunities

    def append_matches(self, matches: list[Match]) -> None:
        if not matches:
            return

        url = f"{self.base_url}/{self.config.matches_table}"
        params = {}
        headers = {"Prefer": "return=minimal"}
        if self.upsert:
            params["on_conflict"] = "student_id,opportunity_id"
            headers["Prefer"] = "resolution=merge-duplicates,return=minimal"

        response = self.session.post(
            url,
            params=params,
            headers=headers,
            data=json.dumps([m.to_dict() for m in matches]),
            timeout=self.config.timeout_seconds,
        )
        response.raise_for_status()
        logger.info("Wrote %d matches to %s", len(matches), self.config.matches_table)
