"""Matcher facade: scores every opportunity and ranks the accepted ones."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional

from opportunity_matcher.matching.models import Match
from opportunity_matcher.matching.scoring import ACCEPTANCE_THRESHOLD, build_reasoning, score_match
from opportunity_matcher.matching.skill_overlap import resolve_overlap
from opportunity_matcher.opportunities.models import Opportunity
from opportunity_matcher.profile.models import Profile

logger = logging.getLogger("opportunity_matcher.matching")

TOP_N = 10


@dataclass
class RankedMatches:
    """All accepted candidates plus the truncated top list."""

    candidates: list[Match] = field(default_factory=list)
    top: list[Match] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.candidates)


def evaluate_opportunity(
    profile: Profile,
    opportunity: Opportunity,
    threshold: int = ACCEPTANCE_THRESHOLD,
) -> Optional[Match]:
    """Score one opportunity; return a candidate Match only if it clears the threshold."""
    overlap = resolve_overlap(profile.skills, opportunity.skills_required)
    score = score_match(profile, overlap.matched, overlap.required_count)

    if score < threshold:
        return None

    return Match(
        opportunity_id=opportunity.id,
        student_id=profile.id,
        match_score=score,
        matched_skills=overlap.matched,
        reasoning=build_reasoning(opportunity, overlap.matched, profile),
    )


def score_opportunities(
    profile: Profile,
    opportunities: list[Opportunity],
    threshold: int = ACCEPTANCE_THRESHOLD,
    max_workers: int = 1,
) -> list[Match]:
    """Map every opportunity to a candidate Match, keeping fetch order."""
    if max_workers > 1 and len(opportunities) > 1:
        workers = min(max_workers, len(opportunities))
        logger.debug("Scoring %d opportunities on %d threads", len(opportunities), workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(lambda opp: evaluate_opportunity(profile, opp, threshold), opportunities))
    else:
        results = [evaluate_opportunity(profile, opp, threshold) for opp in opportunities]

    return [match for match in results if match is not None]


def rank_matches(candidates: list[Match], top_n: int = TOP_N) -> RankedMatches:
    """Sort by score descending (stable, so ties keep fetch order) and truncate."""
    ranked = sorted(candidates, key=lambda m: m.match_score, reverse=True)
    return RankedMatches(candidates=ranked, top=ranked[:top_n])

