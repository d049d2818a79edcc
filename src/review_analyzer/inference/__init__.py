"""
Hosted inference client abstraction and implementation.

Components:
- BaseInferenceClient: Abstract base class for inference clients
- HuggingFaceClient: Implementation for the Hugging Face Inference API
- PromptBuilder: Builds requests (prompts, parameters) per task and model mode
- exceptions: Transport / status / response-shape errors
"""

from review_analyzer.inference.base_client import BaseInferenceClient
from review_analyzer.inference.hf_client import HuggingFaceClient, parse_inference_payload
from review_analyzer.inference.prompt_builder import PromptBuilder
from review_analyzer.inference.exceptions import (
    InferenceAPIError,
    InferenceAuthError,
    InferenceConnectionError,
    InferenceError,
    InferenceModelError,
    InferenceModelLoadingError,
    InferenceQuotaError,
    InferenceRateLimitError,
    InferenceResponseShapeError,
    InferenceStatusError,
    InferenceTimeoutError,
    InferenceUnavailableError,
    error_for_status,
)

__all__ = [
    "BaseInferenceClient",
    "HuggingFaceClient",
    "parse_inference_payload",
    "PromptBuilder",
    "InferenceAPIError",
    "InferenceAuthError",
    "InferenceConnectionError",
    "InferenceError",
    "InferenceModelError",
    "InferenceModelLoadingError",
    "InferenceQuotaError",
    "InferenceRateLimitError",
    "InferenceResponseShapeError",
    "InferenceStatusError",
    "InferenceTimeoutError",
    "InferenceUnavailableError",
    "error_for_status",
]
