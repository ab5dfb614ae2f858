"""Tests for match scoring and reasoning."""

from opportunity_matcher.matching.matcher import evaluate_opportunity
from opportunity_matcher.matching.scoring import ACCEPTANCE_THRESHOLD, build_reasoning, score_match, skill_ratio
from opportunity_matcher.profile.models import Profile, SkillEntry
from conftest import LONG_SUMMARY, make_opportunity, make_profile


class TestScoreMatch:
    def test_partial_skills_with_education_and_summary(self):
        # 2/3 skills (33.3) + education (20) + summary (15) = 68.3
        profile = make_profile()
        assert score_match(profile, ["Python", "SQL"], 3) == 68

    def test_empty_profile_scores_zero(self):
        profile = Profile(id="s1", professional_summary="x" * 10)
        assert score_match(profile, [], 3) == 0

    def test_no_required_skills_uses_secondary_signals_only(self):
        profile = make_profile(employment_history=[{"employer": "Acme"}])
        assert score_match(profile, [], 0) == 50

    def test_maximum_score(self):
        profile = make_profile(employment_history=[{"employer": "Acme"}])
        assert score_match(profile, ["Python", "SQL"], 2) == 100

    def test_ties_round_half_up(self):
        # 1/4 skills = 12.5
        profile = Profile(id="s1")
        assert score_match(profile, ["Python"], 4) == 13

    def test_summary_must_exceed_fifty_chars(self):
        assert score_match(Profile(id="s1", professional_summary="x" * 50), [], 0) == 0
        assert score_match(Profile(id="s1", professional_summary="x" * 51), [], 0) == 15

    def test_monotonic_in_matched_count(self):
        profile = make_profile()
        skills = ["a", "b", "c", "d", "e"]
        scores = [score_match(profile, skills[:k], 5) for k in range(6)]
        assert scores == sorted(scores)

    def test_skill_component_capped(self):
        profile = make_profile(employment_history=[{"employer": "Acme"}])
        # "java" and "script" both sit inside the single requirement "javascript"
        assert score_match(profile, ["Java", "Script"], 1) == 100

    def test_skill_ratio(self):
        assert skill_ratio(2, 3) == 2 / 3
        assert skill_ratio(5, 0) == 0.0
        assert skill_ratio(2, 1) == 1.0


class TestBuildReasoning:
    def test_lists_matched_skills(self):
        reasoning = build_reasoning(make_opportunity(), ["Python", "SQL"], make_profile())
        assert reasoning == "Matched 2 skills: Python, SQL"

    def test_single_skill(self):
        reasoning = build_reasoning(make_opportunity(), ["Python"], make_profile())
        assert reasoning == "Matched 1 skill: Python"

    def test_truncates_long_lists(self):
        matched = ["Python", "SQL", "Excel", "Tableau", "R"]
        reasoning = build_reasoning(make_opportunity(), matched, make_profile())
        assert reasoning == "Matched 5 skills: Python, SQL, Excel, +2 more"

    def test_no_skills_mentions_role(self):
        reasoning = build_reasoning(make_opportunity(role="Field Volunteer"), [], make_profile())
        assert reasoning == "Profile aligns with Field Volunteer opportunity"

    def test_mentions_advanced_skills(self):
        profile = make_profile(skills_detailed=[
            SkillEntry(name="Python", proficiency="Expert"),
            SkillEntry(name="SQL", proficiency="Beginner"),
        ])
        reasoning = build_reasoning(make_opportunity(), ["Python", "SQL"], profile)
        assert reasoning == "Matched 2 skills: Python, SQL. 1 advanced/expert level skill"


class TestEvaluateOpportunity:
    def test_accepted_match(self):
        match = evaluate_opportunity(make_profile(), make_opportunity())
        assert match is not None
        assert match.match_score == 68
        assert match.matched_skills == ["Python", "SQL"]
        assert match.student_id == "student-1"
        assert match.opportunity_id == "opp-1"
        assert match.analyzed_at is None

    def test_below_threshold_excluded(self):
        profile = Profile(id="s1", professional_summary="x" * 10)
        assert evaluate_opportunity(profile, make_opportunity()) is None

    def test_empty_requirements_still_accepted_on_secondary_signals(self):
        profile = make_profile(
            skills=["Python"],
            employment_history=[{"employer": "Acme"}],
            professional_summary=LONG_SUMMARY,
        )
        match = evaluate_opportunity(profile, make_opportunity(skills_required=""))
        assert match.match_score == 50
        assert match.matched_skills == []

    def test_threshold_is_inclusive(self):
        # education (20) + employment (15) + 1/10 skills (5) = 40
        profile = make_profile(professional_summary="short", employment_history=[{"employer": "Acme"}])
        opp = make_opportunity(skills_required="python, a1, a2, a3, a4, a5, a6, a7, a8, a9")
        match = evaluate_opportunity(profile, opp)
        assert match.match_score == ACCEPTANCE_THRESHOLD
