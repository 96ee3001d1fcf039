"""
Resume keyword analysis.

Scores free resume text against a weighted keyword taxonomy:
- Whole-word matching of every keyword in every category
- Per-category found/missing partition and bounded score
- Overall percentage against the maximum possible score
- Highest-weight missing keywords to add
- Rule-based recommendation and score label
- Basic readability statistics

A keyword contributes its category weight once no matter how often it
appears; the occurrence count is reported on the match.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from careertools.services.errors import UnknownValueError
from careertools.services.keywords import (
    AI_KEYWORDS,
    ROLE_SPECIFIC_KEYWORDS,
    KeywordCategory,
    get_max_possible_score,
)
from careertools.services.text_matcher import count_matches, round_half_up

logger = logging.getLogger(__name__)

TOP_MISSING_LIMIT = 10
WORDS_PER_MINUTE = 200


@dataclass(frozen=True)
class KeywordMatch:
    """A keyword found in the text."""
    keyword: str
    count: int
    category: str


@dataclass(frozen=True)
class CategoryResult:
    """Found/missing partition for one taxonomy category."""
    name: str
    found_keywords: Tuple[KeywordMatch, ...]
    missing_keywords: Tuple[str, ...]
    score: float
    max_score: float


@dataclass(frozen=True)
class ReadabilityStats:
    word_count: int
    character_count: int
    estimated_reading_time_minutes: int


@dataclass(frozen=True)
class AnalysisResult:
    """Complete keyword analysis result."""
    total_score: float
    max_score: float
    percentage: int  # 0-100
    category_results: Tuple[CategoryResult, ...]
    total_keywords_found: int
    total_keywords_possible: int
    top_missing_keywords: Tuple[str, ...]
    recommendation: str
    readability_stats: ReadabilityStats


@dataclass(frozen=True)
class ScoreLabel:
    label: str
    color_hint: str  # positive, informational, warning, negative


@dataclass(frozen=True)
class RoleKeywordCoverage:
    """Which of a target role's expected keywords appear in the text."""
    role: str
    found: Tuple[str, ...] = field(default_factory=tuple)
    missing: Tuple[str, ...] = field(default_factory=tuple)


def readability_stats(text: str) -> ReadabilityStats:
    """Word/character counts and reading time at 200 words per minute."""
    word_count = len(text.split())
    return ReadabilityStats(
        word_count=word_count,
        character_count=len(text),
        estimated_reading_time_minutes=math.ceil(word_count / WORDS_PER_MINUTE),
    )


def score_text(taxonomy: Sequence[KeywordCategory], text: str) -> AnalysisResult:
    """
    Score text against a keyword taxonomy.

    Args:
        taxonomy: Categories to score, in reporting order
        text: Raw resume (or any document) text

    Returns:
        AnalysisResult with per-category breakdown and recommendation
    """
    text = text or ""
    category_results = []
    missing_with_weight: List[Tuple[str, float]] = []
    total_score = 0.0
    total_found = 0

    for category in taxonomy:
        found = []
        missing = []

        for keyword in category.keywords:
            count = count_matches(text, keyword)
            if count > 0:
                found.append(KeywordMatch(keyword=keyword, count=count, category=category.name))
            else:
                missing.append(keyword)
                missing_with_weight.append((keyword, category.weight))

        # Same product as max_score so a full category never exceeds it
        category_score = category.weight * len(found)
        total_score += category_score
        total_found += len(found)
        category_results.append(CategoryResult(
            name=category.name,
            found_keywords=tuple(found),
            missing_keywords=tuple(missing),
            score=category_score,
            max_score=category.max_score,
        ))

    max_score = get_max_possible_score(taxonomy)
    if max_score > 0:
        percentage = max(0, min(100, round_half_up(total_score / max_score * 100)))
    else:
        percentage = 0

    # Stable sort keeps declaration order between equal weights
    top_missing = [
        keyword for keyword, _ in sorted(missing_with_weight, key=lambda kw: kw[1], reverse=True)
    ][:TOP_MISSING_LIMIT]

    logger.debug(f"Scored text: {total_found} keywords found, {percentage}%")

    return AnalysisResult(
        total_score=total_score,
        max_score=max_score,
        percentage=percentage,
        category_results=tuple(category_results),
        total_keywords_found=total_found,
        total_keywords_possible=sum(len(c.keywords) for c in taxonomy),
        top_missing_keywords=tuple(top_missing),
        recommendation=get_recommendation(percentage, total_found),
        readability_stats=readability_stats(text),
    )


def get_recommendation(percentage: int, keywords_found: int) -> str:
    """Guidance text for a score; inputs outside their range are clamped."""
    percentage = max(0, min(100, percentage))
    keywords_found = max(0, keywords_found)

    if percentage >= 70:
        return (
            "Excellent! Your resume is well-optimised for AI/ML roles. It contains strong "
            "technical keywords that ATS systems and recruiters look for."
        )
    elif percentage >= 50:
        return (
            "Good start! Your resume has decent keyword coverage, but adding 5-7 more relevant "
            "technical terms could significantly improve your ATS compatibility."
        )
    elif percentage >= 30:
        return (
            "Your resume could benefit from more AI/ML keywords. Consider adding relevant "
            "frameworks, tools, and techniques you've worked with to improve visibility."
        )
    elif keywords_found >= 5:
        return (
            "Your resume needs more technical keywords. Review the missing keywords below and "
            "add relevant ones that match your actual experience."
        )
    else:
        return (
            "Your resume appears to lack AI/ML-specific keywords. Make sure to include "
            "programming languages, frameworks, and techniques you've used in your projects."
        )


def get_score_label(percentage: float) -> ScoreLabel:
    """Qualitative label and tone for a percentage."""
    if percentage >= 70:
        return ScoreLabel(label="Excellent", color_hint="positive")
    elif percentage >= 50:
        return ScoreLabel(label="Good", color_hint="informational")
    elif percentage >= 30:
        return ScoreLabel(label="Fair", color_hint="warning")
    else:
        return ScoreLabel(label="Needs Improvement", color_hint="negative")


def role_keyword_coverage(text: str, role: str) -> RoleKeywordCoverage:
    """Split a target role's expected keywords into found and missing."""
    keywords = ROLE_SPECIFIC_KEYWORDS.get(role)
    if keywords is None:
        raise UnknownValueError("target role", role, ROLE_SPECIFIC_KEYWORDS)

    found = [kw for kw in keywords if count_matches(text or "", kw) > 0]
    missing = [kw for kw in keywords if kw not in found]
    return RoleKeywordCoverage(role=role, found=tuple(found), missing=tuple(missing))


class ResumeAnalyzer:
    """Keyword analyser bound to one taxonomy."""

    def __init__(self, taxonomy: Optional[Sequence[KeywordCategory]] = None):
        self.taxonomy = tuple(taxonomy) if taxonomy is not None else AI_KEYWORDS

    def analyze(self, text: str) -> AnalysisResult:
        return score_text(self.taxonomy, text)


# Singleton instance
_resume_analyzer: Optional[ResumeAnalyzer] = None


def get_resume_analyzer() -> ResumeAnalyzer:
    """Get or create the resume analyzer singleton."""
    global _resume_analyzer
    if _resume_analyzer is None:
        _resume_analyzer = ResumeAnalyzer()
    return _resume_analyzer


def set_resume_analyzer(analyzer: Optional[ResumeAnalyzer]) -> None:
    """Replace the singleton, e.g. with one built from a taxonomy file."""
    global _resume_analyzer
    _resume_analyzer = analyzer


def analyze_resume(text: str) -> AnalysisResult:
    """Analyze resume text with the active taxonomy."""
    return get_resume_analyzer().analyze(text)
