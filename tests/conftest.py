"""Shared fixtures for the Career Tools test suite."""
import pytest
from fastapi.testclient import TestClient

from careertools.config import get_settings
from careertools.services.cache import get_redis_client
from careertools.services.resume_analyzer import set_resume_analyzer

ENV_VARS = (
    "CAREERTOOLS_REDIS_URL",
    "CAREERTOOLS_TAXONOMY_PATH",
    "CAREERTOOLS_MAX_TEXT_LENGTH",
)


def _reset():
    get_settings.cache_clear()
    get_redis_client.cache_clear()
    set_resume_analyzer(None)


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Isolate settings, cache client and analyzer singleton per test."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    _reset()
    yield
    _reset()


@pytest.fixture
def client():
    from careertools.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_resume():
    return (
        "Senior Machine Learning Engineer with 6 years of experience.\n"
        "Built deep learning models in Python and PyTorch, deployed with Docker "
        "and Kubernetes on AWS. Led NLP projects using Hugging Face and BERT.\n"
        "Strong communication and leadership; comfortable with SQL, Pandas and NumPy. "
        "Python tooling, Python services, CI/CD with GitHub Actions."
    )
