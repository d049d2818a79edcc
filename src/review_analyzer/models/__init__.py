"""
Pydantic data models for Review Analyzer.

Includes:
- Enums (SentimentEnum, NounLevelEnum, TaskEnum, BackendMode)
- Review (one TSV row)
- Inference models (InferenceRequest, InferenceResponse, ScoreItem)
- Output models (ClassificationResult, ChainAttempt)
"""

from review_analyzer.models.enums import (
    BackendMode,
    NounLevelEnum,
    SentimentEnum,
    TaskEnum,
)
from review_analyzer.models.review_models import Review
from review_analyzer.models.inference_models import (
    InferenceRequest,
    InferenceResponse,
    ScoreItem,
)
from review_analyzer.models.output_models import ChainAttempt, ClassificationResult

__all__ = [
    # Enums
    "BackendMode",
    "NounLevelEnum",
    "SentimentEnum",
    "TaskEnum",
    # Review
    "Review",
    # Inference models
    "InferenceRequest",
    "InferenceResponse",
    "ScoreItem",
    # Output models
    "ChainAttempt",
    "ClassificationResult",
]
