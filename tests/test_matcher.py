"""Tests for scoring and ranking across opportunities."""

from opportunity_matcher.matching.matcher import rank_matches, score_opportunities
from opportunity_matcher.matching.models import Match
from conftest import make_opportunity, make_profile


def varied_opportunities():
    # Scores for the default profile: 85, 60, 48, 35 (excluded), 85
    return [
        make_opportunity(id="one-skill", skills_required="python"),
        make_opportunity(id="half", skills_required="python, java"),
        make_opportunity(id="quarter", skills_required="python, java, go, rust"),
        make_opportunity(id="none", skills_required="java"),
        make_opportunity(id="sql-only", skills_required="SQL"),
    ]


class TestScoreOpportunities:
    def test_filters_below_threshold(self):
        matches = score_opportunities(make_profile(), varied_opportunities())
        assert [m.opportunity_id for m in matches] == ["one-skill", "half", "quarter", "sql-only"]
        assert [m.match_score for m in matches] == [85, 60, 48, 85]

    def test_thread_pool_gives_same_results(self):
        profile = make_profile()
        sequential = score_opportunities(profile, varied_opportunities())
        parallel = score_opportunities(profile, varied_opportunities(), max_workers=4)
        assert parallel == sequential

    def test_custom_threshold(self):
        matches = score_opportunities(make_profile(), varied_opportunities(), threshold=80)
        assert [m.opportunity_id for m in matches] == ["one-skill", "sql-only"]


class TestRankMatches:
    def test_sorted_descending_with_stable_ties(self):
        candidates = [
            Match(opportunity_id="a", student_id="s", match_score=50),
            Match(opportunity_id="b", student_id="s", match_score=90),
            Match(opportunity_id="c", student_id="s", match_score=50),
            Match(opportunity_id="d", student_id="s", match_score=90),
        ]
        ranked = rank_matches(candidates)
        assert [m.opportunity_id for m in ranked.top] == ["b", "d", "a", "c"]

    def test_truncates_but_counts_everything(self):
        candidates = [Match(opportunity_id=str(i), student_id="s", match_score=40 + i) for i in range(15)]
        ranked = rank_matches(candidates, top_n=10)
        assert ranked.total == 15
        assert len(ranked.top) == 10
        assert ranked.top[0].match_score == 54

    def test_empty(self):
        ranked = rank_matches([])
        assert ranked.total == 0
        assert ranked.top == []

