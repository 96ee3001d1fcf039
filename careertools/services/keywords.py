"""
AI/ML resume keyword taxonomy.

Each category groups related terms under a single importance weight. The
built-in taxonomy is compiled in; a replacement can be loaded from YAML:

    categories:
      - name: Programming Languages
        weight: 1.5
        keywords: [Python, R, C++]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError

from careertools.services.errors import TaxonomyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeywordCategory:
    """A named group of keywords sharing one per-match weight."""
    name: str
    keywords: Tuple[str, ...]
    weight: float

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise TaxonomyError("Keyword category name must not be blank")
        if self.weight < 0:
            raise TaxonomyError(f"Category '{self.name}': weight must not be negative")
        # Accept lists from callers but store an immutable tuple
        object.__setattr__(self, "keywords", tuple(self.keywords))
        seen = set()
        for keyword in self.keywords:
            if not keyword or not keyword.strip():
                raise TaxonomyError(f"Category '{self.name}': blank keyword")
            key = keyword.lower()
            if key in seen:
                raise TaxonomyError(
                    f"Category '{self.name}': duplicate keyword '{keyword}'"
                )
            seen.add(key)

    @property
    def max_score(self) -> float:
        return self.weight * len(self.keywords)


Taxonomy = Tuple[KeywordCategory, ...]


AI_KEYWORDS: Taxonomy = (
    KeywordCategory(
        name="Programming Languages",
        weight=1.5,
        keywords=(
            "Python", "R", "Java", "C++", "JavaScript", "TypeScript",
            "Scala", "Julia", "SQL", "MATLAB",
        ),
    ),
    KeywordCategory(
        name="ML/AI Frameworks",
        weight=2.0,
        keywords=(
            "TensorFlow", "PyTorch", "Keras", "Scikit-learn", "XGBoost",
            "LightGBM", "Hugging Face", "OpenCV", "NLTK", "spaCy", "Pandas",
            "NumPy", "JAX",
        ),
    ),
    KeywordCategory(
        name="Cloud & Infrastructure",
        weight=1.5,
        keywords=(
            "AWS", "Azure", "GCP", "Google Cloud", "Docker", "Kubernetes",
            "MLflow", "Airflow", "Spark", "Databricks", "SageMaker",
        ),
    ),
    KeywordCategory(
        name="ML/AI Techniques",
        weight=2.0,
        keywords=(
            "Machine Learning", "Deep Learning", "Neural Networks",
            "Natural Language Processing", "NLP", "Computer Vision",
            "Reinforcement Learning", "Supervised Learning",
            "Unsupervised Learning", "Transfer Learning", "Generative AI",
            "Large Language Models", "LLM", "CNN", "RNN", "LSTM",
            "Transformer", "GPT", "BERT",
        ),
    ),
    KeywordCategory(
        name="Data & Analytics",
        weight=1.0,
        keywords=(
            "Data Analysis", "Data Science", "Big Data", "ETL",
            "Data Pipeline", "Data Engineering", "Data Visualization",
            "Statistical Analysis", "A/B Testing", "Tableau", "Power BI",
            "Jupyter",
        ),
    ),
    KeywordCategory(
        name="MLOps & Deployment",
        weight=1.5,
        keywords=(
            "MLOps", "Model Deployment", "CI/CD", "Model Monitoring",
            "Model Optimization", "REST API", "FastAPI", "Flask",
            "Model Serving", "Production ML",
        ),
    ),
    KeywordCategory(
        name="Soft Skills",
        weight=0.8,
        keywords=(
            "Communication", "Leadership", "Team Collaboration",
            "Problem Solving", "Critical Thinking", "Research",
            "Presentation", "Stakeholder Management", "Agile", "Scrum",
        ),
    ),
)


# Keywords recruiters expect for common target roles
ROLE_SPECIFIC_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "Machine Learning Engineer": (
        "Model Training", "Feature Engineering", "Hyperparameter Tuning",
        "Model Optimization", "PyTorch", "TensorFlow", "MLOps",
    ),
    "Data Scientist": (
        "Statistical Analysis", "Data Visualization", "Predictive Modeling",
        "Python", "R", "SQL", "A/B Testing",
    ),
    "AI Researcher": (
        "Research", "Publications", "Deep Learning", "Neural Networks",
        "Algorithm Development", "PyTorch", "TensorFlow",
    ),
    "NLP Engineer": (
        "Natural Language Processing", "NLP", "Transformers", "BERT", "GPT",
        "spaCy", "Hugging Face",
    ),
    "Computer Vision Engineer": (
        "Computer Vision", "OpenCV", "Image Processing", "CNN",
        "Object Detection", "Image Segmentation",
    ),
    "Data Engineer": (
        "Data Pipeline", "ETL", "Spark", "Airflow", "SQL", "Data Warehouse",
        "Big Data",
    ),
}


def get_all_keywords(taxonomy: Sequence[KeywordCategory] = AI_KEYWORDS) -> List[str]:
    """All keywords across categories, first occurrence wins."""
    seen = {}
    for category in taxonomy:
        for keyword in category.keywords:
            seen.setdefault(keyword.lower(), keyword)
    return list(seen.values())


def get_max_possible_score(taxonomy: Sequence[KeywordCategory] = AI_KEYWORDS) -> float:
    """Total score available when every keyword is found."""
    return sum(category.max_score for category in taxonomy)


# ============================================
# Taxonomy files
# ============================================


class _CategoryEntry(BaseModel):
    name: str = Field(..., min_length=1)
    weight: float = Field(..., ge=0)
    keywords: List[str] = Field(..., min_length=1)


class _TaxonomyFile(BaseModel):
    categories: List[_CategoryEntry] = Field(..., min_length=1)


def parse_taxonomy(data) -> Taxonomy:
    """Validate parsed YAML/JSON data into a taxonomy."""
    try:
        parsed = _TaxonomyFile.model_validate(data)
    except ValidationError as e:
        raise TaxonomyError(f"Invalid taxonomy: {e}") from e

    names = set()
    categories = []
    for entry in parsed.categories:
        if entry.name in names:
            raise TaxonomyError(f"Duplicate category name '{entry.name}'")
        names.add(entry.name)
        categories.append(
            KeywordCategory(name=entry.name, keywords=tuple(entry.keywords), weight=entry.weight)
        )
    return tuple(categories)


def load_taxonomy(path: str | Path) -> Taxonomy:
    """
    Load a keyword taxonomy from a YAML file.

    Raises:
        TaxonomyError: If the file is missing, unparseable or malformed.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise TaxonomyError(f"Cannot read taxonomy file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise TaxonomyError(f"Cannot parse taxonomy file {path}: {e}") from e

    taxonomy = parse_taxonomy(data)
    logger.info(
        f"Loaded taxonomy from {path}: {len(taxonomy)} categories, "
        f"{sum(len(c.keywords) for c in taxonomy)} keywords"
    )
    return taxonomy
