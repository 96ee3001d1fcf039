"""Scoring engines for the career tools."""
from careertools.services.resume_analyzer import ResumeAnalyzer, analyze_resume, get_score_label
from careertools.services.salary_calculator import calculate_salary, compare_cities
from careertools.services.skills_gap import analyse_skills_gap

__all__ = [
    "ResumeAnalyzer",
    "analyze_resume",
    "get_score_label",
    "calculate_salary",
    "compare_cities",
    "analyse_skills_gap",
]
