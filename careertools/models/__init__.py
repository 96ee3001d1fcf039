"""Data models for the Career Tools API."""
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

__all__ = [
    "HealthResponse",
    "ResumeAnalysisRequest",
    "ResumeAnalysisResponse",
    "ScoreLabelResponse",
    "KeywordCategoryInfo",
    "SkillsGapRequest",
    "SkillsGapResponse",
    "SkillCategoryInfo",
    "SalaryRequest",
    "SalaryResponse",
    "CityComparisonResponse",
    "SalaryOptionsResponse",
]
