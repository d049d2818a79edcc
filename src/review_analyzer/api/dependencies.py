"""
FastAPI dependency injection for Review Analyzer.

Provides singleton instances of expensive resources (inference client,
prompt builder, classifier) and the single session state.
"""

from functools import lru_cache
from pathlib import Path

from review_analyzer.classification.chain import ReviewClassifier
from review_analyzer.config import Settings, settings
from review_analyzer.inference.base_client import BaseInferenceClient
from review_analyzer.inference.hf_client import HuggingFaceClient
from review_analyzer.inference.prompt_builder import PromptBuilder
from review_analyzer.session.handlers import ReviewLoader
from review_analyzer.session.state import AppState
from review_analyzer.store.review_store import load_reviews


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_inference_client() -> BaseInferenceClient:
    """
    Get singleton inference client with connection pooling.

    Returns:
        HuggingFaceClient instance
    """
    current = get_settings()
    return HuggingFaceClient(
        base_url=current.HF_API_BASE_URL,
        timeout=current.INFERENCE_TIMEOUT,
        api_token=current.HF_API_TOKEN,
    )


@lru_cache()
def get_prompt_builder() -> PromptBuilder:
    """
    Get singleton prompt builder.

    Loads Jinja2 templates once and reuses them across requests.
    """
    current = get_settings()
    return PromptBuilder(
        templates_dir=Path(current.PROMPT_TEMPLATES_DIR) if current.PROMPT_TEMPLATES_DIR else None,
        max_new_tokens=current.GENERATION_MAX_NEW_TOKENS,
        temperature=current.GENERATION_TEMPERATURE,
        wait_for_model=current.WAIT_FOR_MODEL,
    )


@lru_cache()
def get_review_classifier() -> ReviewClassifier:
    """
    Get singleton classifier (one fallback chain per task).

    Backends share the cached client and prompt builder.
    """
    return ReviewClassifier.from_settings(
        client=get_inference_client(),
        prompt_builder=get_prompt_builder(),
        settings=get_settings(),
    )


@lru_cache()
def get_app_state() -> AppState:
    """
    Get the session state.

    The service mirrors the single-page tool: one user, one state.
    The configured HF_API_TOKEN stays on the client as the default.
    """
    return AppState()


def get_reviews_loader() -> ReviewLoader:
    """
    Get the coroutine that loads the reviews file.

    Overridden in tests to serve the file through a mock transport.
    """
    return load_reviews
