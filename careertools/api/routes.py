"""
API Routes for the Career Tools backend.

Provides endpoints for:
- Resume keyword analysis and score labels
- Skills gap analysis against a job description
- Salary estimates and city comparisons
- Reference catalogues (keywords, skills, salary options)
- Health checks
"""
import time
from dataclasses import asdict
from datetime import datetime, timezone
from typing import List
import logging

from fastapi import APIRouter, HTTPException, Query

from careertools.models.analysis import (
    HealthResponse,
    ResumeAnalysisRequest,
    ResumeAnalysisResponse,
    ScoreLabelResponse,
    KeywordCategoryInfo,
    SkillsGapRequest,
    SkillsGapResponse,
    SkillCategoryInfo,
    SalaryRequest,
    SalaryResponse,
    CityComparisonResponse,
    SalaryOptionsResponse,
)
from careertools.services.cache import cache_get_json, cache_set_json
from careertools.services.resume_analyzer import (
    get_resume_analyzer,
    get_score_label,
    role_keyword_coverage,
)
from careertools.services.salary_calculator import (
    calculate_salary,
    compare_cities,
    format_percentage,
    format_salary,
    get_salary_recommendation,
)
from careertools.services.salary_data import (
    EXPERIENCE_LEVEL_LABELS,
    LOCATIONS,
    ROLES,
    get_skill_categories,
    get_skills_by_category,
)
from careertools.services.skills_data import SKILL_CATEGORIES
from careertools.services.skills_gap import analyse_skills_gap, get_score_info
from careertools.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter()


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns the service status, version, and the size of the active keyword taxonomy.
    """
    settings = get_settings()
    taxonomy = get_resume_analyzer().taxonomy

    return HealthResponse(
        status="healthy" if taxonomy else "unhealthy",
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc),
        taxonomyCategories=len(taxonomy),
        taxonomyKeywords=sum(len(c.keywords) for c in taxonomy),
    )


# ============================================
# Resume keyword analysis
# ============================================


@router.post("/resume/analyze", response_model=ResumeAnalysisResponse, tags=["Resume"])
async def analyze_resume_text(request: ResumeAnalysisRequest):
    """
    Analyze resume text for AI/ML keywords.

    Request body:
    - resumeText: Plain text of the resume
    - targetRole: Optional role (e.g. "Data Scientist") for role-specific coverage

    Returns the weighted keyword score, per-category found/missing keywords,
    the top missing keywords to add, a recommendation and readability stats.
    """
    start = time.perf_counter()
    try:
        result = get_resume_analyzer().analyze(request.resume_text)
        coverage = None
        if request.target_role:
            coverage = asdict(role_keyword_coverage(request.resume_text, request.target_role))

        return ResumeAnalysisResponse(
            success=True,
            score_label=asdict(get_score_label(result.percentage)),
            role_coverage=coverage,
            analysis_time_ms=_elapsed_ms(start),
            **asdict(result),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Resume analysis failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/resume/score-label", response_model=ScoreLabelResponse, tags=["Resume"])
async def resume_score_label(
    percentage: float = Query(..., ge=0, le=100, description="Score percentage")
):
    """Qualitative label and colour hint for a score percentage."""
    return ScoreLabelResponse(**asdict(get_score_label(percentage)))


@router.get("/resume/keywords", response_model=List[KeywordCategoryInfo], tags=["Resume"])
async def list_keyword_categories():
    """List the active keyword taxonomy with category weights."""
    settings = get_settings()
    cache_key = f"keywords:v1:{settings.taxonomy_path or 'builtin'}"
    cached = await cache_get_json(cache_key)
    if cached:
        return [KeywordCategoryInfo(**category) for category in cached]

    categories = [
        {"name": c.name, "weight": c.weight, "keywords": list(c.keywords)}
        for c in get_resume_analyzer().taxonomy
    ]
    await cache_set_json(cache_key, categories, ttl=settings.cache_ttl)
    return [KeywordCategoryInfo(**category) for category in categories]


# ============================================
# Skills gap analysis
# ============================================


@router.post("/skills-gap/analyze", response_model=SkillsGapResponse, tags=["Skills Gap"])
async def analyze_skills_gap(request: SkillsGapRequest):
    """
    Compare resume skills with the skills a job description asks for.

    Returns strong matches, prioritised gaps (with learning resources),
    additional skills, a per-category breakdown and recommendations.
    """
    start = time.perf_counter()
    try:
        result = analyse_skills_gap(request.resume_text, request.job_description)
        score_info = get_score_info(result.overall_match_score)

        return SkillsGapResponse(
            success=True,
            score_label=score_info.label,
            score_tone=score_info.tone,
            analysis_time_ms=_elapsed_ms(start),
            **asdict(result),
        )
    except Exception as e:
        logger.error(f"Skills gap analysis failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/skills-gap/skills", response_model=List[SkillCategoryInfo], tags=["Skills Gap"])
async def list_skill_categories():
    """List the skills database grouped by category."""
    cache_key = "skills:v1"
    cached = await cache_get_json(cache_key)
    if cached:
        return [SkillCategoryInfo(**category) for category in cached]

    categories = [
        SkillCategoryInfo.model_validate(asdict(category)) for category in SKILL_CATEGORIES
    ]
    await cache_set_json(
        cache_key,
        [c.model_dump(by_alias=True) for c in categories],
        ttl=get_settings().cache_ttl,
    )
    return categories


# ============================================
# Salary calculator
# ============================================


@router.post("/salary/calculate", response_model=SalaryResponse, tags=["Salary"])
async def calculate_salary_estimate(request: SalaryRequest):
    """
    Estimate salary for a role, experience level, location and skill set.

    Unrecognised skill names are ignored.
    """
    try:
        result = calculate_salary(
            request.role,
            request.experience_level,
            request.location,
            request.skills,
        )

        return SalaryResponse(
            success=True,
            formatted_median=format_salary(result.total_salary.median),
            recommendation=get_salary_recommendation(result),
            **asdict(result),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Salary calculation failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/salary/compare", response_model=List[CityComparisonResponse], tags=["Salary"])
async def compare_city_salaries(request: SalaryRequest):
    """
    Compare the selected salary across all cities, highest median first.

    The request location is the reference city for the differences.
    """
    try:
        comparisons = compare_cities(
            request.role,
            request.experience_level,
            request.skills,
            request.location,
        )

        return [
            CityComparisonResponse(
                formatted_difference=format_percentage(c.difference_percentage),
                is_current=c.location == request.location,
                **asdict(c),
            )
            for c in comparisons
        ]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"City comparison failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/salary/options", response_model=SalaryOptionsResponse, tags=["Salary"])
async def salary_options():
    """Roles, experience levels, locations and skills available to the calculator."""
    cache_key = "salary-options:v1"
    cached = await cache_get_json(cache_key)
    if cached:
        return SalaryOptionsResponse(**cached)

    options = SalaryOptionsResponse(
        roles=list(ROLES),
        experience_levels=[
            {"value": level, "label": label} for level, label in EXPERIENCE_LEVEL_LABELS.items()
        ],
        locations=list(LOCATIONS),
        skills_by_category={
            category: [asdict(sm) for sm in get_skills_by_category(category)]
            for category in get_skill_categories()
        },
    )
    await cache_set_json(
        cache_key,
        options.model_dump(mode="json", by_alias=True),
        ttl=get_settings().cache_ttl,
    )
    return options
