"""
Skills gap analysis between a resume and a job description.

Every skill in the skills database is looked up (by name, then aliases) in
both texts. Skills in both are strong matches, skills only in the job are
gaps, and skills only in the resume are additional. A job-side mention is
treated as required unless nice-to-have wording precedes it.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Sequence, Tuple

from careertools.services.skills_data import (
    SKILL_CATEGORIES,
    LearningResource,
    Skill,
    SkillCategory,
    get_all_skills,
)
from careertools.services.text_matcher import find_first, round_half_up

logger = logging.getLogger(__name__)

Priority = Literal["high", "medium", "low"]

# Wording that marks a skill as optional when it appears shortly before it
NICE_TO_HAVE_PATTERNS = (
    "nice to have",
    "nice-to-have",
    "preferred",
    "bonus",
    "plus",
    "advantageous",
    "desirable",
    "ideally",
    "would be great",
    "good to have",
    "not essential",
    "optional",
    "a plus",
    "an advantage",
)
CONTEXT_WINDOW = 150

PRIORITY_ORDER: Dict[str, int] = {"high": 0, "medium": 1, "low": 2}


@dataclass(frozen=True)
class SkillHit:
    matched_text: str
    position: int


@dataclass(frozen=True)
class MatchedSkill:
    skill: Skill
    found_in_resume: bool
    found_in_job: bool
    is_required: bool
    matched_text: Optional[str] = None


@dataclass(frozen=True)
class SkillMatch:
    skill: Skill
    strength: Literal["strong", "mentioned"]


@dataclass(frozen=True)
class SkillGap:
    skill: Skill
    priority: Priority
    reason: str
    learning_resources: Tuple[LearningResource, ...]


@dataclass(frozen=True)
class CategoryAnalysis:
    category: str
    matches: Tuple[SkillMatch, ...]
    gaps: Tuple[SkillGap, ...]
    match_percentage: int


@dataclass(frozen=True)
class GapAnalysisResult:
    """Complete skills gap analysis result."""
    overall_match_score: int  # 0-100
    matched_skills_count: int
    missing_skills_count: int
    total_job_skills: int
    strong_matches: Tuple[SkillMatch, ...]
    missing_skills: Tuple[SkillGap, ...]
    additional_skills: Tuple[Skill, ...]
    category_analysis: Tuple[CategoryAnalysis, ...]
    summary: str
    recommendations: Tuple[str, ...]


@dataclass(frozen=True)
class ScoreInfo:
    label: str
    tone: str


def find_skill_in_text(text: str, skill: Skill) -> Optional[SkillHit]:
    """First term of the skill (name, then aliases) found in the text."""
    # Whole-word only: "Dockerized" is not Docker and "Rust" is not R
    for term in skill.terms:
        position = find_first(text, term)
        if position is not None:
            return SkillHit(matched_text=term, position=position)
    return None


def is_nice_to_have(text: str, position: int) -> bool:
    """Whether optional wording appears just before ``position``."""
    context = text[max(0, position - CONTEXT_WINDOW):position].lower()
    return any(pattern in context for pattern in NICE_TO_HAVE_PATTERNS)


def determine_priority(skill: Skill, is_required: bool) -> Priority:
    if is_required and skill.importance in ("essential", "important"):
        return "high"
    if is_required and skill.importance == "nice-to-have":
        return "medium"
    if not is_required and skill.importance == "essential":
        return "medium"
    return "low"


def analyse_skills_gap(
    resume_text: str,
    job_description: str,
    categories: Sequence[SkillCategory] = SKILL_CATEGORIES,
) -> GapAnalysisResult:
    """
    Compare resume skills against job description skills.

    Args:
        resume_text: Candidate resume text
        job_description: Job posting text
        categories: Skills database to match against

    Returns:
        GapAnalysisResult with matches, prioritised gaps and guidance
    """
    resume_text = resume_text or ""
    job_description = job_description or ""

    matched_skills: List[MatchedSkill] = []
    for skill in get_all_skills(categories):
        resume_hit = find_skill_in_text(resume_text, skill)
        job_hit = find_skill_in_text(job_description, skill)
        if resume_hit is None and job_hit is None:
            continue

        is_required = job_hit is not None and not is_nice_to_have(job_description, job_hit.position)
        matched_skills.append(MatchedSkill(
            skill=skill,
            found_in_resume=resume_hit is not None,
            found_in_job=job_hit is not None,
            is_required=is_required,
            matched_text=(job_hit or resume_hit).matched_text,
        ))

    strong_matches: List[SkillMatch] = []
    missing_skills: List[SkillGap] = []
    additional_skills: List[Skill] = []

    for match in matched_skills:
        if match.found_in_resume and match.found_in_job:
            strong_matches.append(SkillMatch(skill=match.skill, strength="strong"))
        elif match.found_in_job:
            missing_skills.append(SkillGap(
                skill=match.skill,
                priority=determine_priority(match.skill, match.is_required),
                reason=(
                    "Required in job description" if match.is_required
                    else "Nice-to-have in job description"
                ),
                learning_resources=match.skill.learning_resources,
            ))
        else:
            additional_skills.append(match.skill)

    missing_skills.sort(key=lambda gap: PRIORITY_ORDER[gap.priority])

    job_skills = [m for m in matched_skills if m.found_in_job]
    category_analysis = _analyse_categories(categories, strong_matches, missing_skills, job_skills)

    if job_skills:
        overall_match_score = round_half_up(len(strong_matches) / len(job_skills) * 100)
    else:
        overall_match_score = 0

    logger.debug(
        f"Skills gap: {len(strong_matches)} matched, {len(missing_skills)} missing, "
        f"{len(additional_skills)} additional"
    )

    return GapAnalysisResult(
        overall_match_score=overall_match_score,
        matched_skills_count=len(strong_matches),
        missing_skills_count=len(missing_skills),
        total_job_skills=len(job_skills),
        strong_matches=tuple(strong_matches),
        missing_skills=tuple(missing_skills),
        additional_skills=tuple(additional_skills),
        category_analysis=tuple(category_analysis),
        summary=generate_summary(overall_match_score, len(strong_matches), len(missing_skills)),
        recommendations=tuple(generate_recommendations(missing_skills, overall_match_score)),
    )


def _analyse_categories(
    categories: Sequence[SkillCategory],
    matches: List[SkillMatch],
    gaps: List[SkillGap],
    job_skills: List[MatchedSkill],
) -> List[CategoryAnalysis]:
    """Per-category breakdown, weakest categories first."""
    results = []
    for category in categories:
        category_matches = tuple(m for m in matches if m.skill.category == category.name)
        category_gaps = tuple(g for g in gaps if g.skill.category == category.name)
        if not category_matches and not category_gaps:
            continue

        category_job_skills = [s for s in job_skills if s.skill.category == category.name]
        if category_job_skills:
            match_percentage = round_half_up(len(category_matches) / len(category_job_skills) * 100)
        else:
            match_percentage = 0

        results.append(CategoryAnalysis(
            category=category.name,
            matches=category_matches,
            gaps=category_gaps,
            match_percentage=match_percentage,
        ))

    return sorted(results, key=lambda c: c.match_percentage)


def generate_summary(score: int, match_count: int, gap_count: int) -> str:
    if score >= 80:
        return (
            f"Excellent match! Your resume covers {match_count} of the skills mentioned in this "
            f"job description. You're well-positioned for this role."
        )
    if score >= 60:
        return (
            f"Good match! You have {match_count} matching skills. There are {gap_count} skills "
            f"you could develop to strengthen your application."
        )
    if score >= 40:
        return (
            f"Moderate match with {match_count} matching skills. Consider addressing the "
            f"{gap_count} skill gaps before applying, or highlight transferable experience in "
            f"your cover letter."
        )
    if score >= 20:
        return (
            f"This role requires skills you're still developing. You match {match_count} skills "
            f"but are missing {gap_count}. This could be a stretch role to grow into."
        )
    return (
        "This role appears to be a significant stretch based on current skills. Consider "
        "building foundational skills first or looking for more aligned roles."
    )


def generate_recommendations(gaps: Sequence[SkillGap], score: int) -> List[str]:
    recommendations = []

    high_priority = [g for g in gaps if g.priority == "high"]
    if high_priority:
        top_skills = ", ".join(g.skill.name for g in high_priority[:3])
        recommendations.append(f"Focus on learning these high-priority skills first: {top_skills}")

    if score < 50:
        recommendations.append(
            "Consider taking an online course to build foundational skills in the areas "
            "you're missing"
        )
    elif score < 80:
        recommendations.append(
            "Highlight your matching skills prominently in your resume and cover letter"
        )

    if any(g.learning_resources for g in gaps):
        recommendations.append(
            "Check out the learning resources below to start building the missing skills"
        )

    if score >= 60:
        recommendations.append(
            "Your additional skills not mentioned in the job description could differentiate "
            "you - consider highlighting relevant ones"
        )

    return recommendations


def get_score_info(score: int) -> ScoreInfo:
    if score >= 80:
        return ScoreInfo(label="Excellent Match", tone="positive")
    if score >= 60:
        return ScoreInfo(label="Good Match", tone="informational")
    if score >= 40:
        return ScoreInfo(label="Moderate Match", tone="warning")
    if score >= 20:
        return ScoreInfo(label="Stretch Role", tone="caution")
    return ScoreInfo(label="Skills Gap", tone="negative")


def get_priority_info(priority: Priority) -> ScoreInfo:
    if priority == "high":
        return ScoreInfo(label="High Priority", tone="negative")
    if priority == "medium":
        return ScoreInfo(label="Medium Priority", tone="caution")
    if priority == "low":
        return ScoreInfo(label="Nice to Have", tone="warning")
    raise ValueError(f"Unknown priority: {priority!r}")
