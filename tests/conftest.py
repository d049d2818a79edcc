"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

from pathlib import Path

import pytest

from review_analyzer.config import Settings
from review_analyzer.models.enums import NounLevelEnum, SentimentEnum
from review_analyzer.models.review_models import Review
from review_analyzer.store.review_store import ReviewStore


@pytest.fixture
def test_settings(fixtures_dir: Path) -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.LOCAL_SENTIMENT_FALLBACK = True
    """
    return Settings(
        # === Application ===
        APP_NAME="Review Analyzer (Test)",
        APP_VERSION="0.1.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Hosted Inference ===
        HF_API_BASE_URL="https://inference.test",
        HF_API_TOKEN=None,
        INFERENCE_TIMEOUT=5.0,
        SENTIMENT_MODELS=["test/sentiment-classifier"],
        GENERATION_MODELS=["test/generator"],

        # === Normalization Policy ===
        DEFAULT_SENTIMENT=SentimentEnum.NEUTRAL,
        DEFAULT_NOUN_LEVEL=NounLevelEnum.MEDIUM,
        SENTIMENT_MIN_SCORE=0.0,
        LOCAL_SENTIMENT_FALLBACK=False,
        LOCAL_NOUN_FALLBACK=True,

        # === Reviews ===
        REVIEWS_SOURCE=str(fixtures_dir / "reviews_test.tsv"),
        PROMETHEUS_ENABLED=False,  # Disable metrics in tests unless explicitly needed
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def reviews_tsv(fixtures_dir: Path) -> Path:
    """Sample reviews file (3 usable rows, 1 blank text row)."""
    return fixtures_dir / "reviews_test.tsv"


@pytest.fixture
def sample_review() -> Review:
    return Review(text="Great product, fast shipping!")


@pytest.fixture
def sample_store(sample_review: Review) -> ReviewStore:
    """Store with a single review so random selection is deterministic."""
    return ReviewStore([sample_review], source="memory")
