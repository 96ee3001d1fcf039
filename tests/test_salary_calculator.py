"""Tests for the salary calculator and city comparison."""
import pytest

from careertools.services.errors import UnknownValueError
from careertools.services.salary_calculator import (
    calculate_salary,
    compare_cities,
    format_percentage,
    format_salary,
    get_salary_recommendation,
    get_skill_impact,
)
from careertools.services.salary_data import (
    LOCATIONS,
    ExperienceLevel,
    Location,
    Role,
    SalaryRange,
    find_skill_modifier,
    get_all_skills,
    get_base_salary,
    get_skill_categories,
    get_skills_by_category,
)


class TestBaseSalary:
    def test_location_scaling(self):
        assert get_base_salary(
            Role.MACHINE_LEARNING_ENGINEER, ExperienceLevel.JUNIOR, Location.MELBOURNE
        ) == SalaryRange(77600, 92150, 106700)

    def test_sydney_is_unscaled(self):
        assert get_base_salary("Data Scientist", "Senior", "Sydney") == SalaryRange(135000, 160000, 185000)

    def test_every_combination_is_ordered(self):
        for role in Role:
            for level in ExperienceLevel:
                for location in Location:
                    salary = get_base_salary(role, level, location)
                    assert salary.min <= salary.median <= salary.max


class TestCalculateSalary:
    def test_no_skills(self):
        result = calculate_salary("Machine Learning Engineer", "Junior", "Melbourne", [])

        assert result.skill_bonus == 0
        assert result.skill_impacts == ()
        assert result.total_salary == result.base_salary
        assert result.role is Role.MACHINE_LEARNING_ENGINEER
        assert result.location is Location.MELBOURNE

    def test_flat_bonus_added_to_every_figure(self):
        result = calculate_salary("Machine Learning Engineer", "Junior", "Sydney", ["Python", "AWS"])

        assert result.skill_bonus == 15000
        assert result.total_salary == SalaryRange(95000, 110000, 125000)

    def test_bonus_scaled_by_location(self):
        result = calculate_salary("Data Engineer", "Mid", "Brisbane", ["AWS"])

        assert result.skill_bonus == 8800
        assert result.total_salary.median == result.base_salary.median + 8800

    def test_impacts_sorted_highest_first(self):
        result = calculate_salary("Data Scientist", "Mid", "Sydney", ["Python", "Deep Learning", "AWS"])

        assert [(i.skill, i.modifier) for i in result.skill_impacts] == [
            ("Deep Learning", 12000),
            ("AWS", 10000),
            ("Python", 5000),
        ]

    def test_unknown_skill_is_ignored(self):
        result = calculate_salary("Data Scientist", "Mid", "Sydney", ["Python", "Underwater Basket Weaving"])

        assert result.skill_bonus == 5000
        assert len(result.skill_impacts) == 1

    def test_skill_lookup_ignores_case_and_whitespace(self):
        result = calculate_salary("Data Scientist", "Mid", "Sydney", ["  python ", "aws"])

        assert result.skill_bonus == 15000
        assert {i.skill for i in result.skill_impacts} == {"Python", "AWS"}

    def test_repeated_skill_adds_bonus_each_time(self):
        result = calculate_salary("Data Scientist", "Mid", "Sydney", ["Python", "Python"])

        assert result.skill_bonus == 10000
        assert [i.skill for i in result.skill_impacts] == ["Python", "Python"]

    def test_repeated_skill_is_scaled_by_location(self):
        result = calculate_salary("Data Engineer", "Mid", "Brisbane", ["AWS", "aws"])

        assert result.skill_bonus == 17600

    @pytest.mark.parametrize(
        "role, level, location",
        [
            ("Astronaut", "Junior", "Sydney"),
            ("Data Scientist", "Intern", "Sydney"),
            ("Data Scientist", "Junior", "Hobart"),
            ("data scientist", "Junior", "Sydney"),
        ],
    )
    def test_unknown_enum_values(self, role, level, location):
        with pytest.raises(UnknownValueError) as exc_info:
            calculate_salary(role, level, location, [])

        assert isinstance(exc_info.value, ValueError)
        assert "expected one of" in str(exc_info.value)


class TestCompareCities:
    def test_rows_for_every_city_sorted_by_median(self):
        rows = compare_cities("Machine Learning Engineer", "Junior", [], "Melbourne")

        assert len(rows) == len(LOCATIONS)
        assert [r.location for r in rows] == [
            Location.SYDNEY,
            Location.CANBERRA,
            Location.MELBOURNE,
            Location.PERTH,
            Location.BRISBANE,
            Location.ADELAIDE,
        ]
        medians = [r.salary.median for r in rows]
        assert medians == sorted(medians, reverse=True)

    def test_current_city_has_zero_difference(self):
        rows = compare_cities("Machine Learning Engineer", "Junior", [], "Melbourne")

        current = next(r for r in rows if r.location is Location.MELBOURNE)
        assert current.difference_amount == 0
        assert current.difference_percentage == 0.0

    def test_difference_relative_to_current_city(self):
        rows = compare_cities("Machine Learning Engineer", "Junior", [], "Melbourne")

        sydney = rows[0]
        assert sydney.difference_amount == 2850
        assert sydney.difference_percentage == 3.1

        adelaide = rows[-1]
        assert adelaide.difference_amount == 78850 - 92150
        assert adelaide.difference_percentage == -14.4

    def test_skills_apply_in_every_city(self):
        rows = compare_cities("Data Scientist", "Senior", ["AWS"], "Sydney")

        perth = next(r for r in rows if r.location is Location.PERTH)
        assert perth.salary.median == 148800 + 9300


def test_get_skill_impact_is_unscaled():
    impacts = get_skill_impact(["Python", "Kubernetes", "nonsense"])

    assert [(i.skill, i.modifier) for i in impacts] == [("Kubernetes", 8000), ("Python", 5000)]


class TestFormatting:
    @pytest.mark.parametrize(
        "amount, expected",
        [(95000, "$95,000"), (0, "$0"), (1234567, "$1,234,567"), (-2850, "-$2,850")],
    )
    def test_format_salary(self, amount, expected):
        assert format_salary(amount) == expected

    @pytest.mark.parametrize(
        "percentage, expected",
        [(3.1, "+3.1%"), (-12.0, "-12.0%"), (0.0, "0.0%"), (5, "+5.0%")],
    )
    def test_format_percentage(self, percentage, expected):
        assert format_percentage(percentage) == expected


class TestSalaryRecommendation:
    @pytest.mark.parametrize(
        "skills, expected",
        [
            ([], "Consider adding relevant skills"),
            (["Python"], "You have some valuable skills"),
            (["Python", "R", "SQL"], "Good skill set!"),
            (["AWS", "Deep Learning", "Python"], "Excellent skill combination!"),
            (["Deep Learning", "Reinforcement Learning", "AWS", "Azure"], "Outstanding skill portfolio!"),
        ],
    )
    def test_bands(self, skills, expected):
        result = calculate_salary("Data Scientist", "Mid", "Sydney", skills)

        assert get_salary_recommendation(result).startswith(expected)


class TestSalaryData:
    def test_find_skill_modifier(self):
        assert find_skill_modifier("SCIKIT-LEARN").skill == "scikit-learn"
        assert find_skill_modifier("Cobol") is None
        assert find_skill_modifier(None) is None

    def test_catalogue(self):
        categories = get_skill_categories()

        assert categories[0] == "Languages"
        assert len(categories) == len(set(categories))
        assert sum(len(get_skills_by_category(c)) for c in categories) == len(get_all_skills())
