"""
Unit tests for API and domain response models.
"""

import pytest
from pydantic import ValidationError

from review_analyzer.api.models import AnalyzeRequest, HealthResponse, LoadReviewsRequest
from review_analyzer.models.enums import NounLevelEnum, SentimentEnum, TaskEnum
from review_analyzer.models.inference_models import InferenceRequest
from review_analyzer.models.output_models import ClassificationResult
from review_analyzer.models.review_models import Review


def test_classification_result_label_from_string():
    """Labels are parsed into the closed enums."""
    sentiment = ClassificationResult.model_validate(
        {"task": "sentiment", "label": "negative", "source": "remote", "backend": "b"}
    )
    nouns = ClassificationResult.model_validate(
        {"task": "noun_level", "label": "high", "source": "local", "backend": "b"}
    )

    assert sentiment.label is SentimentEnum.NEGATIVE
    assert nouns.label is NounLevelEnum.HIGH


def test_classification_result_rejects_unknown_label():
    with pytest.raises(ValidationError):
        ClassificationResult(task=TaskEnum.SENTIMENT, label="mixed", source="remote", backend="b")


def test_classification_result_score_range():
    with pytest.raises(ValidationError):
        ClassificationResult(
            task=TaskEnum.SENTIMENT,
            label=SentimentEnum.POSITIVE,
            source="remote",
            backend="b",
            score=1.5,
        )


def test_review_rejects_blank_text():
    with pytest.raises(ValidationError):
        Review(text="   ")


def test_inference_request_payload_omits_empty_sections():
    request = InferenceRequest(model="m", inputs="hello", parameters={}, options=None)
    assert request.to_payload() == {"inputs": "hello"}


def test_request_bodies_are_optional():
    assert AnalyzeRequest().api_token is None
    assert LoadReviewsRequest().source is None


def test_health_response():
    response = HealthResponse(
        status="healthy", version="0.1.0", services={"inference": "up"}, reviews_loaded=3
    )
    assert response.timestamp is not None

    with pytest.raises(ValidationError):
        HealthResponse(status="healthy", version="0.1.0", services={}, reviews_loaded=-1)
