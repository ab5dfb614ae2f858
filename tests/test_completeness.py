"""Tests for the profile completeness gate."""

import pytest

from opportunity_matcher.errors import IncompleteProfileError
from opportunity_matcher.matching.completeness import evaluate_completion, require_complete
from opportunity_matcher.profile.models import Profile, SkillEntry


def full_profile() -> Profile:
    return Profile(
        id="s1",
        skills=["Python"],
        professional_summary="Statistics student.",
        education=[{"institution": "UoN"}],
        contact_email="s1@example.com",
        contact_phone="+254700000000",
        address="Nairobi",
    )


class TestEvaluateCompletion:
    def test_full_profile(self):
        check = evaluate_completion(full_profile())
        assert check.percentage == 100
        assert check.passed
        assert all(check.flags.values())

    def test_half_complete_passes(self):
        profile = Profile(id="s1", skills=["Python"], professional_summary="Hi", education=[{}])
        check = evaluate_completion(profile)
        assert check.percentage == 50
        assert check.passed

    def test_two_of_six_fails(self):
        profile = Profile(id="s1", skills=["Python"], contact_email="s1@example.com")
        check = evaluate_completion(profile)
        assert check.percentage == pytest.approx(33.333, abs=0.01)
        assert check.rounded_percentage == 33
        assert not check.passed

    def test_five_of_six_rounds_for_display(self):
        profile = full_profile()
        profile.address = None
        check = evaluate_completion(profile)
        assert check.rounded_percentage == 83

    def test_empty_lists_count_as_absent(self):
        profile = Profile(id="s1", skills=[], education=[])
        check = evaluate_completion(profile)
        assert not check.skills
        assert not check.education

    def test_detailed_skills_count_as_skills(self):
        profile = Profile(id="s1", skills_detailed=[SkillEntry(name="Excel")])
        assert evaluate_completion(profile).skills

    def test_missing_fields_are_negated_flags(self):
        profile = Profile(id="s1", skills=["Python"], contact_phone="+254700000000")
        missing = evaluate_completion(profile).missing_fields()
        assert missing == {
            "skills": False,
            "professional_summary": True,
            "education": True,
            "contact_email": True,
            "contact_phone": False,
            "address": True,
        }

    def test_custom_threshold(self):
        profile = Profile(id="s1", skills=["Python"], professional_summary="Hi", education=[{}])
        assert not evaluate_completion(profile, threshold=60).passed


class TestRequireComplete:
    def test_passes_through_check(self):
        check = require_complete(full_profile())
        assert check.passed

    def test_raises_with_details(self):
        profile = Profile(id="s1", skills=["Python"])
        with pytest.raises(IncompleteProfileError) as exc_info:
            require_complete(profile)

        body = exc_info.value.to_dict()
        assert exc_info.value.status_code == 422
        assert body["error"] == "Profile incomplete"
        assert "50%" in body["message"]
        assert body["completionPercentage"] == 17
        assert body["requiredFields"] == {
            "skills": False,
            "professionalSummary": True,
            "education": True,
            "contactEmail": True,
            "contactPhone": True,
            "address": True,
        }
