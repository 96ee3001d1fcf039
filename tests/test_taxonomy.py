"""Tests for loading keyword taxonomies from YAML."""
import pytest

from careertools.services.errors import TaxonomyError
from careertools.services.keywords import load_taxonomy, parse_taxonomy
from careertools.services.resume_analyzer import score_text

VALID_TAXONOMY = """\
categories:
  - name: Languages
    weight: 2
    keywords: [Python, Go]
  - name: Cloud
    weight: 1
    keywords:
      - AWS
      - Terraform
"""


@pytest.fixture
def taxonomy_file(tmp_path):
    path = tmp_path / "taxonomy.yaml"
    path.write_text(VALID_TAXONOMY, encoding="utf-8")
    return path


def test_load_taxonomy(taxonomy_file):
    taxonomy = load_taxonomy(taxonomy_file)

    assert [c.name for c in taxonomy] == ["Languages", "Cloud"]
    assert taxonomy[0].keywords == ("Python", "Go")
    assert taxonomy[0].weight == 2
    assert taxonomy[1].max_score == 2


def test_loaded_taxonomy_scores_text(taxonomy_file):
    result = score_text(load_taxonomy(taxonomy_file), "Python on AWS")

    # 2 (Python) + 1 (AWS) out of 6
    assert result.total_score == 3
    assert result.percentage == 50
    assert result.top_missing_keywords == ("Go", "Terraform")


def test_missing_file(tmp_path):
    with pytest.raises(TaxonomyError, match="Cannot read"):
        load_taxonomy(tmp_path / "nope.yaml")


def test_unparseable_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("categories: [unclosed", encoding="utf-8")

    with pytest.raises(TaxonomyError, match="Cannot parse"):
        load_taxonomy(path)


@pytest.mark.parametrize(
    "data",
    [
        None,
        {},
        {"categories": []},
        {"categories": [{"name": "X", "weight": 1, "keywords": []}]},
        {"categories": [{"name": "X", "weight": -1, "keywords": ["Python"]}]},
        {"categories": [{"name": "", "weight": 1, "keywords": ["Python"]}]},
        {"categories": [{"weight": 1, "keywords": ["Python"]}]},
    ],
)
def test_malformed_structure(data):
    with pytest.raises(TaxonomyError):
        parse_taxonomy(data)


def test_duplicate_category_name():
    data = {
        "categories": [
            {"name": "Languages", "weight": 1, "keywords": ["Python"]},
            {"name": "Languages", "weight": 2, "keywords": ["Go"]},
        ]
    }
    with pytest.raises(TaxonomyError, match="Duplicate category"):
        parse_taxonomy(data)


def test_duplicate_keyword_within_category():
    data = {"categories": [{"name": "Languages", "weight": 1, "keywords": ["Python", "PYTHON"]}]}

    with pytest.raises(TaxonomyError, match="duplicate keyword"):
        parse_taxonomy(data)
