"""Tests for resume vs job description skills gap analysis."""
import pytest

from careertools.services.skills_data import (
    SKILL_CATEGORIES,
    Skill,
    SkillCategory,
    get_all_skills,
    get_skill_by_name,
    get_skills_by_category,
)
from careertools.services.skills_gap import (
    analyse_skills_gap,
    determine_priority,
    find_skill_in_text,
    get_priority_info,
    get_score_info,
    is_nice_to_have,
)

RESUME = "Python, Docker"
JOB = "We need Python and Kubernetes experience. Nice to have: Rust."


@pytest.fixture
def result():
    return analyse_skills_gap(RESUME, JOB)


def _skill(name, importance="important", aliases=()):
    return Skill(name=name, category="Test", aliases=tuple(aliases), importance=importance)


class TestAnalyseSkillsGap:
    def test_score_and_counts(self, result):
        assert result.overall_match_score == 33
        assert result.total_job_skills == 3
        assert result.matched_skills_count == 1
        assert result.missing_skills_count == 2

    def test_partition(self, result):
        assert [m.skill.name for m in result.strong_matches] == ["Python"]
        assert all(m.strength == "strong" for m in result.strong_matches)
        assert [s.name for s in result.additional_skills] == ["Docker"]

    def test_missing_skills_sorted_by_priority(self, result):
        assert [(g.skill.name, g.priority) for g in result.missing_skills] == [
            ("Kubernetes", "high"),
            ("Rust", "low"),
        ]
        kubernetes, rust = result.missing_skills
        assert kubernetes.reason == "Required in job description"
        assert rust.reason == "Nice-to-have in job description"
        assert kubernetes.learning_resources

    def test_category_breakdown_weakest_first(self, result):
        assert [(c.category, c.match_percentage) for c in result.category_analysis] == [
            ("MLOps & DevOps", 0),
            ("Programming Languages", 50),
        ]

    def test_summary_and_recommendations(self, result):
        assert "You match 1 skills but are missing 2" in result.summary
        assert len(result.recommendations) == 3
        assert result.recommendations[0] == (
            "Focus on learning these high-priority skills first: Kubernetes"
        )

    def test_no_job_skills(self):
        result = analyse_skills_gap("Python and SQL", "Friendly office with great coffee")

        assert result.overall_match_score == 0
        assert result.total_job_skills == 0
        assert result.missing_skills == ()
        assert {s.name for s in result.additional_skills} == {"Python", "SQL"}
        assert result.category_analysis == ()
        assert "significant stretch" in result.summary

    def test_empty_inputs(self):
        result = analyse_skills_gap("", "")

        assert result.overall_match_score == 0
        assert result.strong_matches == ()
        assert result.additional_skills == ()

    def test_full_match(self):
        result = analyse_skills_gap(
            "Python, SQL and Docker in production",
            "Must know Python, SQL and Docker",
        )

        assert result.overall_match_score == 100
        assert "Excellent match!" in result.summary
        assert not any("high-priority" in r for r in result.recommendations)

    def test_alias_in_job_description(self):
        result = analyse_skills_gap("Kubernetes operator", "Experience running k8s clusters")

        assert [m.skill.name for m in result.strong_matches] == ["Kubernetes"]

    def test_custom_categories(self):
        categories = (
            SkillCategory(name="Test", description="", skills=(_skill("Terraform", aliases=["tf"]),)),
        )
        result = analyse_skills_gap("", "Terraform required", categories)

        assert [g.skill.name for g in result.missing_skills] == ["Terraform"]
        assert result.missing_skills[0].priority == "high"


class TestMatching:
    def test_alias_match(self):
        kubernetes = get_skill_by_name("Kubernetes")

        hit = find_skill_in_text("Ran k8s clusters", kubernetes)

        assert hit.matched_text == "k8s"
        assert hit.position == 4

    def test_name_preferred_over_alias(self):
        hit = find_skill_in_text("kubectl and Kubernetes", get_skill_by_name("Kubernetes"))

        assert hit.matched_text == "Kubernetes"

    def test_single_letter_skill_is_whole_word(self):
        r_skill = get_skill_by_name("R")

        assert find_skill_in_text("I write Rust", r_skill) is None
        assert find_skill_in_text("Modelling in R and Python", r_skill) is not None

    def test_name_is_not_matched_inside_longer_word(self):
        assert find_skill_in_text("Dockerized services", get_skill_by_name("Docker")) is None
        assert find_skill_in_text("Wrote a Dockerfile", get_skill_by_name("Docker")).matched_text == "dockerfile"

    def test_nice_to_have_window(self):
        text = "Nice to have: Rust"
        assert is_nice_to_have(text, text.index("Rust"))
        assert not is_nice_to_have("We need Rust", 8)

    def test_nice_to_have_only_looks_back(self):
        text = "Rust is required. Go would be a bonus."
        assert not is_nice_to_have(text, text.index("Rust"))


@pytest.mark.parametrize(
    "importance, is_required, expected",
    [
        ("essential", True, "high"),
        ("important", True, "high"),
        ("nice-to-have", True, "medium"),
        ("essential", False, "medium"),
        ("important", False, "low"),
        ("nice-to-have", False, "low"),
    ],
)
def test_determine_priority(importance, is_required, expected):
    assert determine_priority(_skill("X", importance), is_required) == expected


class TestSkillsData:
    def test_lookup_by_alias(self):
        assert get_skill_by_name("sklearn").name == "scikit-learn"
        assert get_skill_by_name("  PYTORCH ").name == "PyTorch"
        assert get_skill_by_name("cobol") is None

    def test_skills_by_category(self):
        names = [s.name for s in get_skills_by_category("cloud platforms")]
        assert names == ["AWS", "Azure", "GCP"]
        assert get_skills_by_category("Nope") == []

    def test_skill_names_unique(self):
        names = [s.name.lower() for s in get_all_skills()]
        assert len(names) == len(set(names))

    def test_category_set_on_every_skill(self):
        for category in SKILL_CATEGORIES:
            assert all(s.category == category.name for s in category.skills)


@pytest.mark.parametrize(
    "score, label, tone",
    [
        (95, "Excellent Match", "positive"),
        (60, "Good Match", "informational"),
        (45, "Moderate Match", "warning"),
        (20, "Stretch Role", "caution"),
        (5, "Skills Gap", "negative"),
    ],
)
def test_get_score_info(score, label, tone):
    info = get_score_info(score)
    assert (info.label, info.tone) == (label, tone)


def test_get_priority_info():
    assert get_priority_info("high").label == "High Priority"
    assert get_priority_info("low").label == "Nice to Have"
    with pytest.raises(ValueError):
        get_priority_info("urgent")
