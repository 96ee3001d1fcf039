"""Request and response models for the career tools API."""
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from careertools.config import get_settings
from careertools.services.salary_data import ExperienceLevel, Location, Role


def _check_text_length(v: str) -> str:
    limit = get_settings().max_text_length
    if v is not None and len(v) > limit:
        raise ValueError(f"Text must be at most {limit} characters")
    return v


class HealthResponse(BaseModel):
    """Health check response."""
    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime
    taxonomy_categories: int = Field(alias="taxonomyCategories")
    taxonomy_keywords: int = Field(alias="taxonomyKeywords")

    class Config:
        populate_by_name = True


# ============================================
# Resume Keyword Analysis Models
# ============================================


class ResumeAnalysisRequest(BaseModel):
    """Request model for resume keyword analysis."""
    resume_text: str = Field(..., alias="resumeText", description="Plain resume text")
    target_role: Optional[str] = Field(
        None,
        alias="targetRole",
        description="Optional role for role-specific keyword coverage"
    )

    class Config:
        populate_by_name = True

    @field_validator("resume_text")
    @classmethod
    def limit_length(cls, v):
        return _check_text_length(v)


class KeywordMatchResponse(BaseModel):
    keyword: str
    count: int = Field(..., ge=1)
    category: str


class CategoryResultResponse(BaseModel):
    """Found/missing keywords for one category."""
    name: str
    found_keywords: List[KeywordMatchResponse] = Field(alias="foundKeywords", default_factory=list)
    missing_keywords: List[str] = Field(alias="missingKeywords", default_factory=list)
    score: float
    max_score: float = Field(alias="maxScore")

    class Config:
        populate_by_name = True


class ReadabilityStatsResponse(BaseModel):
    word_count: int = Field(alias="wordCount")
    character_count: int = Field(alias="characterCount")
    estimated_reading_time_minutes: int = Field(alias="estimatedReadingTimeMinutes")

    class Config:
        populate_by_name = True


class ScoreLabelResponse(BaseModel):
    label: str
    color_hint: str = Field(alias="colorHint")

    class Config:
        populate_by_name = True


class RoleKeywordCoverageResponse(BaseModel):
    role: str
    found: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)


class ResumeAnalysisResponse(BaseModel):
    """Complete resume keyword analysis response."""
    success: bool
    total_score: float = Field(alias="totalScore")
    max_score: float = Field(alias="maxScore")
    percentage: int = Field(..., ge=0, le=100)
    category_results: List[CategoryResultResponse] = Field(alias="categoryResults")
    total_keywords_found: int = Field(alias="totalKeywordsFound")
    total_keywords_possible: int = Field(alias="totalKeywordsPossible")
    top_missing_keywords: List[str] = Field(alias="topMissingKeywords", default_factory=list)
    recommendation: str
    readability_stats: ReadabilityStatsResponse = Field(alias="readabilityStats")
    score_label: ScoreLabelResponse = Field(alias="scoreLabel")
    role_coverage: Optional[RoleKeywordCoverageResponse] = Field(None, alias="roleCoverage")
    analysis_time_ms: Optional[float] = Field(None, alias="analysisTimeMs")

    class Config:
        populate_by_name = True


class KeywordCategoryInfo(BaseModel):
    name: str
    weight: float
    keywords: List[str]


# ============================================
# Skills Gap Models
# ============================================


class SkillsGapRequest(BaseModel):
    """Request model for skills gap analysis."""
    resume_text: str = Field(..., alias="resumeText")
    job_description: str = Field(..., alias="jobDescription")

    class Config:
        populate_by_name = True

    @field_validator("resume_text", "job_description")
    @classmethod
    def limit_length(cls, v):
        return _check_text_length(v)


class LearningResourceResponse(BaseModel):
    name: str
    type: str
    url: str
    provider: str
    is_free: bool = Field(alias="isFree")

    class Config:
        populate_by_name = True


class SkillResponse(BaseModel):
    name: str
    category: str
    aliases: List[str] = Field(default_factory=list)
    importance: Literal["essential", "important", "nice-to-have"]
    learning_resources: List[LearningResourceResponse] = Field(
        alias="learningResources", default_factory=list
    )

    class Config:
        populate_by_name = True


class SkillMatchResponse(BaseModel):
    skill: SkillResponse
    strength: Literal["strong", "mentioned"]


class SkillGapResponse(BaseModel):
    skill: SkillResponse
    priority: Literal["high", "medium", "low"]
    reason: str
    learning_resources: List[LearningResourceResponse] = Field(
        alias="learningResources", default_factory=list
    )

    class Config:
        populate_by_name = True


class CategoryAnalysisResponse(BaseModel):
    category: str
    matches: List[SkillMatchResponse] = Field(default_factory=list)
    gaps: List[SkillGapResponse] = Field(default_factory=list)
    match_percentage: int = Field(alias="matchPercentage")

    class Config:
        populate_by_name = True


class SkillsGapResponse(BaseModel):
    """Complete skills gap analysis response."""
    success: bool
    overall_match_score: int = Field(..., alias="overallMatchScore", ge=0, le=100)
    score_label: str = Field(alias="scoreLabel")
    score_tone: str = Field(alias="scoreTone")
    matched_skills_count: int = Field(alias="matchedSkillsCount")
    missing_skills_count: int = Field(alias="missingSkillsCount")
    total_job_skills: int = Field(alias="totalJobSkills")
    strong_matches: List[SkillMatchResponse] = Field(alias="strongMatches", default_factory=list)
    missing_skills: List[SkillGapResponse] = Field(alias="missingSkills", default_factory=list)
    additional_skills: List[SkillResponse] = Field(alias="additionalSkills", default_factory=list)
    category_analysis: List[CategoryAnalysisResponse] = Field(alias="categoryAnalysis", default_factory=list)
    summary: str
    recommendations: List[str] = Field(default_factory=list)
    analysis_time_ms: Optional[float] = Field(None, alias="analysisTimeMs")

    class Config:
        populate_by_name = True


class SkillCategoryInfo(BaseModel):
    name: str
    description: str
    skills: List[SkillResponse]


# ============================================
# Salary Calculator Models
# ============================================


class SalaryRequest(BaseModel):
    """Request model for salary calculation and city comparison."""
    role: Role
    experience_level: ExperienceLevel = Field(..., alias="experienceLevel")
    location: Location
    skills: List[str] = Field(default_factory=list, description="Selected skill names")

    class Config:
        populate_by_name = True


class SalaryRangeResponse(BaseModel):
    min: int
    median: int
    max: int


class SkillImpactResponse(BaseModel):
    skill: str
    modifier: int
    category: str


class SalaryResponse(BaseModel):
    """Salary estimate response."""
    success: bool
    role: Role
    experience_level: ExperienceLevel = Field(alias="experienceLevel")
    location: Location
    base_salary: SalaryRangeResponse = Field(alias="baseSalary")
    skill_bonus: int = Field(alias="skillBonus")
    skill_impacts: List[SkillImpactResponse] = Field(alias="skillImpacts", default_factory=list)
    total_salary: SalaryRangeResponse = Field(alias="totalSalary")
    formatted_median: str = Field(alias="formattedMedian")
    recommendation: str

    class Config:
        populate_by_name = True


class CityComparisonResponse(BaseModel):
    location: Location
    salary: SalaryRangeResponse
    difference_percentage: float = Field(alias="differencePercentage")
    difference_amount: int = Field(alias="differenceAmount")
    formatted_difference: str = Field(alias="formattedDifference")
    is_current: bool = Field(alias="isCurrent")

    class Config:
        populate_by_name = True


class ExperienceLevelInfo(BaseModel):
    value: ExperienceLevel
    label: str


class SalaryOptionsResponse(BaseModel):
    roles: List[Role]
    experience_levels: List[ExperienceLevelInfo] = Field(alias="experienceLevels")
    locations: List[Location]
    skills_by_category: dict[str, List[SkillImpactResponse]] = Field(alias="skillsByCategory")

    class Config:
        populate_by_name = True
