"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without external dependencies.
"""

from unittest.mock import AsyncMock, Mock

import pytest

from review_analyzer.inference.base_client import BaseInferenceClient
from review_analyzer.inference.prompt_builder import PromptBuilder
from review_analyzer.models.inference_models import InferenceResponse, ScoreItem


def make_text_response(text: str, model: str = "test/generator") -> InferenceResponse:
    """InferenceResponse as returned for a text-generation model."""
    return InferenceResponse(
        model=model,
        text=text,
        payload=[{"generated_text": text}],
        latency_ms=12,
    )


def make_score_response(
    scores: list[tuple[str, float]], model: str = "test/sentiment-classifier"
) -> InferenceResponse:
    """InferenceResponse as returned for a text-classification model."""
    return InferenceResponse(
        model=model,
        scores=[ScoreItem(label=label, score=score) for label, score in scores],
        payload=[[{"label": label, "score": score} for label, score in scores]],
        latency_ms=8,
    )


@pytest.fixture
def mock_inference_client():
    """Mock BaseInferenceClient (async generate, health_check, close)."""
    mock = Mock(spec=BaseInferenceClient)
    mock.generate = AsyncMock(return_value=make_text_response("Positive"))
    mock.health_check = AsyncMock(return_value=True)
    mock.close = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def prompt_builder() -> PromptBuilder:
    """PromptBuilder over the packaged templates."""
    return PromptBuilder(max_new_tokens=50, temperature=0.1)


@pytest.fixture
def text_response():
    """Factory for generator-model responses."""
    return make_text_response


@pytest.fixture
def score_response():
    """Factory for classifier-model responses."""
    return make_score_response
