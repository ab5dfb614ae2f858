"""Matching pipeline — load profile, gate, fetch, score, rank, persist."""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from opportunity_matcher.config import AppConfig
from opportunity_matcher.errors import MatchingError, NotFoundError, PersistenceWarning, UpstreamError, ValidationError
from opportunity_matcher.matching.completeness import require_complete
from opportunity_matcher.matching.matcher import rank_matches, score_opportunities
from opportunity_matcher.matching.models import Match
from opportunity_matcher.stores.base import MatchStore, OpportunityStore, ProfileStore

logger = logging.getLogger("opportunity_matcher.pipeline")


class PipelineState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    GATING = "gating"
    FETCHING = "fetching"
    SCORING = "scoring"
    RANKING = "ranking"
    PERSISTING = "persisting"
    DONE = "done"
    FAILED = "failed"


@dataclass
class MatchRun:
    """State machine for a single run() call; never shared between calls."""

    state: PipelineState = PipelineState.IDLE
    transitions: list[PipelineState] = field(default_factory=lambda: [PipelineState.IDLE])

    def enter(self, state: PipelineState) -> None:
        self.state = state
        self.transitions.append(state)


@dataclass
class MatchRunResult:
    """Outcome of one matching run."""

    student_id: str
    completion_percentage: int
    total_matches: int
    top_matches: list[Match] = field(default_factory=list)
    persisted: bool = False
    warnings: list[PersistenceWarning] = field(default_factory=list)
    transitions: list[PipelineState] = field(default_factory=list)
    duration_seconds: float = 0.0

    def to_dict(self) -> dict:
        return {
            "success": True,
            "completionPercentage": self.completion_percentage,
            "totalMatches": self.total_matches,
            "topMatches": [m.to_dict() for m in self.top_matches],
        }


class MatchingPipeline:
    """Runs one student's matching pass against the configured stores.

    The pipeline holds only configuration and stores, so one instance can serve
    concurrent requests. Each call to run() tracks its progress in its own MatchRun.
    """

    def __init__(
        self,
        config: AppConfig,
        profile_store: ProfileStore,
        opportunity_store: OpportunityStore,
        match_store: MatchStore,
    ):
        self.config = config
        self.profile_store = profile_store
        self.opportunity_store = opportunity_store
        self.match_store = match_store

    def _fetch(self, fetch, what: str, *args):
        """Call a store read, reporting anything other than a MatchingError as an upstream failure."""
        try:
            return fetch(*args)
        except MatchingError:
            raise
        except Exception as e:
            raise UpstreamError(f"Failed to fetch {what}", details=str(e)) from e

    def run(self, student_id: str, persist: bool = True, tracker: Optional[MatchRun] = None) -> MatchRunResult:
        """Run matching for one student. Raises MatchingError subclasses on failure.

        Pass a tracker to observe the states a run went through, including failed runs.
        """
        tracker = tracker if tracker is not None else MatchRun()
        start = time.time()

        try:
            return self._run(tracker, student_id, persist, start)
        except MatchingError as e:
            failed_in = tracker.state
            tracker.enter(PipelineState.FAILED)
            logger.warning("Matching failed during %s: %s", failed_in.value, e)
            raise
        except Exception:
            failed_in = tracker.state
            tracker.enter(PipelineState.FAILED)
            logger.error("Matching crashed during %s", failed_in.value, exc_info=True)
            raise

    def _run(self, tracker: MatchRun, student_id: str, persist: bool, start: float) -> MatchRunResult:
        matching = self.config.matching

        # Step 1: Validate request
        tracker.enter(PipelineState.VALIDATING)
        if not isinstance(student_id, str) or not student_id.strip():
            raise ValidationError("studentId is required")
        student_id = student_id.strip()

        # Step 2: Load profile and check completion (opportunities are never fetched for an incomplete profile)
        tracker.enter(PipelineState.GATING)
        logger.info("[student:%s] Loading profile...", student_id)
        profile = self._fetch(self.profile_store.get_profile_by_id, "student profile", student_id)
        if profile is None:
            raise NotFoundError()
        check = require_complete(profile, matching.completion_threshold)
        logger.info("[student:%s] Profile %.1f%% complete", student_id, check.percentage)

        # Step 3: Fetch opportunities
        tracker.enter(PipelineState.FETCHING)
        opportunities = self._fetch(self.opportunity_store.list_opportunities, "opportunities")
        logger.info("[student:%s] Fetched %d opportunities", student_id, len(opportunities))

        # Step 4: Score each opportunity independently
        tracker.enter(PipelineState.SCORING)
        candidates = score_opportunities(
            profile,
            opportunities,
            threshold=matching.acceptance_threshold,
            max_workers=matching.max_workers,
        )

        # Step 5: Rank and truncate
        tracker.enter(PipelineState.RANKING)
        ranked = rank_matches(candidates, matching.top_n)
        logger.info(
            "[student:%s] %d/%d opportunities at or above %d, keeping top %d",
            student_id, ranked.total, len(opportunities), matching.acceptance_threshold, len(ranked.top),
        )

        # Step 6: Persist (best effort)
        tracker.enter(PipelineState.PERSISTING)
        analyzed_at = datetime.now(timezone.utc)
        top_matches = [m.stamped(analyzed_at) for m in ranked.top]
        persisted = False
        warnings: list[PersistenceWarning] = []

        if not persist:
            logger.info("[student:%s] DRY RUN - skipping write of %d matches", student_id, len(top_matches))
        elif top_matches:
            try:
                self.match_store.append_matches(top_matches)
                persisted = True
            except Exception as e:
                warning = PersistenceWarning(
                    f"Failed to insert matches: {type(e).__name__}: {e}",
                    match_count=len(top_matches),
                )
                logger.warning("[student:%s] %s", student_id, warning.message)
                warnings.append(warning)

        tracker.enter(PipelineState.DONE)
        result = MatchRunResult(
            student_id=student_id,
            completion_percentage=check.rounded_percentage,
            total_matches=ranked.total,
            top_matches=top_matches,
            persisted=persisted,
            warnings=warnings,
            transitions=list(tracker.transitions),
            duration_seconds=round(time.time() - start, 2),
        )
        logger.info(
            "[student:%s] Matching done: %d matches, %d kept, persisted=%s",
            student_id, result.total_matches, len(result.top_matches), result.persisted,
        )
        return result


def build_pipeline(config: AppConfig) -> MatchingPipeline:
    """Build a pipeline wired to the configured store backend."""
    from opportunity_matcher.stores import build_stores

    profile_store, opportunity_store, match_store = build_stores(config)
    return MatchingPipeline(config, profile_store, opportunity_store, match_store)
