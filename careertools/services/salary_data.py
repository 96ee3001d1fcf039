"""Australian AI/ML salary reference data (Sydney baseline, AUD)."""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from careertools.services.errors import coerce_enum
from careertools.services.text_matcher import round_half_up


class Role(str, Enum):
    MACHINE_LEARNING_ENGINEER = "Machine Learning Engineer"
    DATA_SCIENTIST = "Data Scientist"
    AI_RESEARCHER = "AI Researcher"
    DATA_ENGINEER = "Data Engineer"
    MLOPS_ENGINEER = "MLOps Engineer"


class ExperienceLevel(str, Enum):
    JUNIOR = "Junior"
    MID = "Mid"
    SENIOR = "Senior"
    LEAD = "Lead"


class Location(str, Enum):
    SYDNEY = "Sydney"
    MELBOURNE = "Melbourne"
    BRISBANE = "Brisbane"
    PERTH = "Perth"
    ADELAIDE = "Adelaide"
    CANBERRA = "Canberra"


@dataclass(frozen=True)
class SalaryRange:
    min: int
    median: int
    max: int


@dataclass(frozen=True)
class SkillModifier:
    """Flat salary bonus (AUD, Sydney baseline) for having a skill."""
    skill: str
    category: str
    modifier: int


ROLES: Tuple[Role, ...] = tuple(Role)
LOCATIONS: Tuple[Location, ...] = tuple(Location)

EXPERIENCE_LEVEL_LABELS: Dict[ExperienceLevel, str] = {
    ExperienceLevel.JUNIOR: "Junior (0-2 years)",
    ExperienceLevel.MID: "Mid-Level (2-5 years)",
    ExperienceLevel.SENIOR: "Senior (5-10 years)",
    ExperienceLevel.LEAD: "Lead/Principal (10+ years)",
}

# Estimated from 2024-2025 market data
BASE_SALARIES: Dict[Role, Dict[ExperienceLevel, SalaryRange]] = {
    Role.MACHINE_LEARNING_ENGINEER: {
        ExperienceLevel.JUNIOR: SalaryRange(80000, 95000, 110000),
        ExperienceLevel.MID: SalaryRange(110000, 130000, 150000),
        ExperienceLevel.SENIOR: SalaryRange(140000, 165000, 190000),
        ExperienceLevel.LEAD: SalaryRange(170000, 200000, 240000),
    },
    Role.DATA_SCIENTIST: {
        ExperienceLevel.JUNIOR: SalaryRange(75000, 90000, 105000),
        ExperienceLevel.MID: SalaryRange(105000, 125000, 145000),
        ExperienceLevel.SENIOR: SalaryRange(135000, 160000, 185000),
        ExperienceLevel.LEAD: SalaryRange(165000, 195000, 230000),
    },
    Role.AI_RESEARCHER: {
        ExperienceLevel.JUNIOR: SalaryRange(85000, 100000, 115000),
        ExperienceLevel.MID: SalaryRange(115000, 135000, 155000),
        ExperienceLevel.SENIOR: SalaryRange(150000, 175000, 200000),
        ExperienceLevel.LEAD: SalaryRange(180000, 215000, 260000),
    },
    Role.DATA_ENGINEER: {
        ExperienceLevel.JUNIOR: SalaryRange(75000, 88000, 100000),
        ExperienceLevel.MID: SalaryRange(100000, 120000, 140000),
        ExperienceLevel.SENIOR: SalaryRange(130000, 155000, 180000),
        ExperienceLevel.LEAD: SalaryRange(160000, 190000, 220000),
    },
    Role.MLOPS_ENGINEER: {
        ExperienceLevel.JUNIOR: SalaryRange(80000, 95000, 110000),
        ExperienceLevel.MID: SalaryRange(110000, 130000, 150000),
        ExperienceLevel.SENIOR: SalaryRange(140000, 165000, 190000),
        ExperienceLevel.LEAD: SalaryRange(170000, 200000, 235000),
    },
}

# Relative to Sydney = 1.0
LOCATION_MULTIPLIERS: Dict[Location, float] = {
    Location.SYDNEY: 1.0,
    Location.MELBOURNE: 0.97,
    Location.BRISBANE: 0.88,
    Location.PERTH: 0.93,
    Location.ADELAIDE: 0.83,
    Location.CANBERRA: 0.98,  # government roles
}

SKILL_MODIFIERS: Tuple[SkillModifier, ...] = (
    # Programming Languages
    SkillModifier("Python", "Languages", 5000),
    SkillModifier("R", "Languages", 3000),
    SkillModifier("Julia", "Languages", 4000),
    SkillModifier("Scala", "Languages", 6000),
    SkillModifier("Java", "Languages", 4000),

    # ML/DL Frameworks
    SkillModifier("TensorFlow", "ML/DL Frameworks", 8000),
    SkillModifier("PyTorch", "ML/DL Frameworks", 8000),
    SkillModifier("scikit-learn", "ML/DL Frameworks", 4000),
    SkillModifier("Keras", "ML/DL Frameworks", 5000),
    SkillModifier("XGBoost", "ML/DL Frameworks", 4000),
    SkillModifier("LightGBM", "ML/DL Frameworks", 4000),

    # Cloud Platforms
    SkillModifier("AWS", "Cloud Platforms", 10000),
    SkillModifier("Azure", "Cloud Platforms", 9000),
    SkillModifier("GCP", "Cloud Platforms", 9000),

    # MLOps Tools
    SkillModifier("Docker", "MLOps Tools", 6000),
    SkillModifier("Kubernetes", "MLOps Tools", 8000),
    SkillModifier("MLflow", "MLOps Tools", 5000),
    SkillModifier("Airflow", "MLOps Tools", 6000),
    SkillModifier("Kubeflow", "MLOps Tools", 7000),

    # Specializations
    SkillModifier("Deep Learning", "Specializations", 12000),
    SkillModifier("NLP", "Specializations", 10000),
    SkillModifier("Computer Vision", "Specializations", 10000),
    SkillModifier("Reinforcement Learning", "Specializations", 12000),
    SkillModifier("Time Series", "Specializations", 6000),
    SkillModifier("Recommendation Systems", "Specializations", 7000),

    # Big Data
    SkillModifier("Spark", "Big Data", 8000),
    SkillModifier("Hadoop", "Big Data", 6000),
    SkillModifier("Kafka", "Big Data", 7000),

    # Databases
    SkillModifier("SQL", "Databases", 3000),
    SkillModifier("PostgreSQL", "Databases", 4000),
    SkillModifier("MongoDB", "Databases", 4000),
    SkillModifier("Redis", "Databases", 4000),
)

_MODIFIERS_BY_NAME: Dict[str, SkillModifier] = {sm.skill.lower(): sm for sm in SKILL_MODIFIERS}


def to_role(value) -> Role:
    return coerce_enum(Role, value, "role")


def to_experience_level(value) -> ExperienceLevel:
    return coerce_enum(ExperienceLevel, value, "experience level")


def to_location(value) -> Location:
    return coerce_enum(Location, value, "location")


def get_base_salary(role, experience_level, location) -> SalaryRange:
    """Base salary range for a role and level, scaled to a location."""
    base = BASE_SALARIES[to_role(role)][to_experience_level(experience_level)]
    multiplier = LOCATION_MULTIPLIERS[to_location(location)]

    return SalaryRange(
        min=round_half_up(base.min * multiplier),
        median=round_half_up(base.median * multiplier),
        max=round_half_up(base.max * multiplier),
    )


def find_skill_modifier(skill: str):
    """
    Look up a skill modifier by name.

    More lenient than an exact table lookup: case is ignored and surrounding
    whitespace is stripped, so " python " finds "Python".
    """
    if not isinstance(skill, str):
        return None
    return _MODIFIERS_BY_NAME.get(skill.strip().lower())


def get_skill_categories() -> List[str]:
    """Skill categories in declaration order."""
    return list(dict.fromkeys(sm.category for sm in SKILL_MODIFIERS))


def get_skills_by_category(category: str) -> List[SkillModifier]:
    return [sm for sm in SKILL_MODIFIERS if sm.category == category]


def get_all_skills() -> List[str]:
    return [sm.skill for sm in SKILL_MODIFIERS]
