"""
Salary calculator.

Total salary = location-scaled base range + location-scaled skill bonuses.
The bonus is flat: the same amount is added to min, median and max.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from careertools.services.salary_data import (
    LOCATION_MULTIPLIERS,
    LOCATIONS,
    ExperienceLevel,
    Location,
    Role,
    SalaryRange,
    find_skill_modifier,
    get_base_salary,
    to_experience_level,
    to_location,
    to_role,
)
from careertools.services.text_matcher import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillImpact:
    skill: str
    modifier: int
    category: str


@dataclass(frozen=True)
class SalaryResult:
    """Salary estimate for one role/level/location/skills selection."""
    base_salary: SalaryRange
    skill_bonus: int
    skill_impacts: Tuple[SkillImpact, ...]
    total_salary: SalaryRange
    role: Role
    experience_level: ExperienceLevel
    location: Location


@dataclass(frozen=True)
class CityComparison:
    """Total salary in one city relative to the selected city."""
    location: Location
    salary: SalaryRange
    difference_percentage: float  # one decimal place
    difference_amount: int  # median


def _recognised_skills(selected_skills: Iterable[str]):
    """Known skill modifiers in selection order; repeated selections repeat the bonus."""
    for skill in selected_skills or []:
        modifier = find_skill_modifier(skill)
        if modifier is None:
            logger.debug(f"Ignoring unrecognised skill: {skill!r}")
            continue
        yield modifier


def calculate_salary(
    role,
    experience_level,
    location,
    selected_skills: Iterable[str],
) -> SalaryResult:
    """
    Calculate total salary including base salary and skill bonuses.

    Args:
        role: Role member or its value, e.g. "Data Scientist"
        experience_level: ExperienceLevel member or value, e.g. "Senior"
        location: Location member or value, e.g. "Perth"
        selected_skills: Skill names; unrecognised names are ignored

    Raises:
        UnknownValueError: If role, level or location is not in its closed set
    """
    role = to_role(role)
    experience_level = to_experience_level(experience_level)
    location = to_location(location)

    base_salary = get_base_salary(role, experience_level, location)
    multiplier = LOCATION_MULTIPLIERS[location]

    impacts = [
        SkillImpact(
            skill=sm.skill,
            modifier=round_half_up(sm.modifier * multiplier),
            category=sm.category,
        )
        for sm in _recognised_skills(selected_skills)
    ]
    skill_bonus = sum(impact.modifier for impact in impacts)

    total_salary = SalaryRange(
        min=base_salary.min + skill_bonus,
        median=base_salary.median + skill_bonus,
        max=base_salary.max + skill_bonus,
    )

    return SalaryResult(
        base_salary=base_salary,
        skill_bonus=skill_bonus,
        skill_impacts=tuple(sorted(impacts, key=lambda i: i.modifier, reverse=True)),
        total_salary=total_salary,
        role=role,
        experience_level=experience_level,
        location=location,
    )


def compare_cities(
    role,
    experience_level,
    selected_skills: Iterable[str],
    current_location,
) -> List[CityComparison]:
    """Compare total salary across all cities, highest median first."""
    selected_skills = list(selected_skills or [])
    current = calculate_salary(role, experience_level, current_location, selected_skills)
    current_median = current.total_salary.median

    comparisons = []
    for location in LOCATIONS:
        salary = calculate_salary(role, experience_level, location, selected_skills).total_salary
        difference_amount = salary.median - current_median
        if current_median:
            percentage = difference_amount / current_median * 100
            difference_percentage = round_half_up(percentage * 10) / 10
        else:
            difference_percentage = 0.0
        comparisons.append(CityComparison(
            location=location,
            salary=salary,
            difference_percentage=difference_percentage,
            difference_amount=difference_amount,
        ))

    return sorted(comparisons, key=lambda c: c.salary.median, reverse=True)


def get_skill_impact(selected_skills: Iterable[str]) -> List[SkillImpact]:
    """Unscaled (Sydney) impact of each recognised skill, highest first."""
    impacts = [
        SkillImpact(skill=sm.skill, modifier=sm.modifier, category=sm.category)
        for sm in _recognised_skills(selected_skills)
    ]
    return sorted(impacts, key=lambda i: i.modifier, reverse=True)


def format_salary(amount: int) -> str:
    """Format as whole Australian dollars, e.g. $95,000."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def format_percentage(percentage: float) -> str:
    """Signed one-decimal percentage, e.g. +3.0%."""
    sign = "+" if percentage > 0 else ""
    return f"{sign}{percentage:.1f}%"


def get_salary_recommendation(result: SalaryResult) -> str:
    """Advice based on how many skills were recognised and their total bonus."""
    skill_count = len(result.skill_impacts)
    skill_bonus = result.skill_bonus

    if skill_count == 0:
        return (
            "Consider adding relevant skills to increase your earning potential. Skills like "
            "AWS, TensorFlow, or Deep Learning can add significant value."
        )
    elif skill_count < 3:
        return (
            "You have some valuable skills. Adding more specialized skills (e.g., cloud "
            "platforms or advanced ML frameworks) could boost your salary further."
        )
    elif skill_bonus < 20000:
        return (
            "Good skill set! Consider adding high-impact skills like Deep Learning, Kubernetes, "
            "or cloud certifications to maximize your earning potential."
        )
    elif skill_bonus < 40000:
        return (
            "Excellent skill combination! You have valuable expertise that commands a premium "
            "in the Australian AI/ML job market."
        )
    else:
        return (
            "Outstanding skill portfolio! You possess highly sought-after expertise that places "
            "you at the top of the market. Consider lead or principal roles."
        )
