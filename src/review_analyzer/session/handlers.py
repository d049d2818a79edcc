"""
Action handlers.

Each handler performs one user action against an explicit AppState:
- marks the action pending for its duration (controls disabled) and
  clears the mark when it settles, success or failure
- refuses to start while another action is pending
- catches every error at the action boundary and stores a short message
  in state.error; the displayed result is left untouched on failure

Handlers return the same state object for convenient chaining.
"""

import random
from contextlib import contextmanager
from typing import Awaitable, Callable, Iterator, Optional, Protocol

import httpx
import structlog

from review_analyzer.exceptions import ReviewAnalyzerError
from review_analyzer.models.enums import TaskEnum
from review_analyzer.models.output_models import ClassificationResult
from review_analyzer.session.exceptions import ActionInProgressError, NoReviewSelectedError
from review_analyzer.session.state import Action, AppState
from review_analyzer.store.review_store import ReviewStore, load_reviews


logger = structlog.get_logger(__name__)

ReviewLoader = Callable[..., Awaitable[ReviewStore]]


class Classifier(Protocol):
    """Anything that classifies review text for a task (ReviewClassifier)."""

    async def classify(
        self, task: TaskEnum, text: str, api_token: Optional[str] = None
    ) -> ClassificationResult:
        ...


@contextmanager
def _busy(state: AppState, action: Action) -> Iterator[None]:
    if state.pending:
        raise ActionInProgressError(
            f"{action.value} refused while {sorted(a.value for a in state.pending)} pending",
            details={"action": action.value},
        )
    state.pending.add(action)
    try:
        yield
    finally:
        state.pending.discard(action)


def _record_error(state: AppState, action: Action, exc: Exception) -> None:
    if isinstance(exc, ReviewAnalyzerError):
        state.error = exc.user_message
        logger.warning(
            "Action failed",
            action=action.value,
            error_type=type(exc).__name__,
            error=exc.message,
            details=exc.details,
        )
    else:
        state.error = f"Unexpected error: {exc}"
        logger.exception("Unexpected error in action", action=action.value)


def set_api_token(state: AppState, api_token: Optional[str]) -> AppState:
    """Store the token entered by the user (blank clears it)."""
    state.api_token = (api_token or "").strip() or None
    return state


async def load_reviews_action(
    state: AppState,
    source: str,
    loader: ReviewLoader = load_reviews,
    http_client: Optional[httpx.AsyncClient] = None,
) -> AppState:
    """
    Load the reviews file into the state.

    A file without usable rows loads as an empty store and shows
    "No reviews found in the TSV file".
    """
    try:
        with _busy(state, Action.LOAD_REVIEWS):
            store = await loader(source, http_client=http_client)
            state.store = store
            state.error = None if len(store) else "No reviews found in the TSV file"
    except Exception as e:
        _record_error(state, Action.LOAD_REVIEWS, e)
    return state


def select_random_review(state: AppState, rng: Optional[random.Random] = None) -> AppState:
    """
    Make a random review current.

    Clears the previous result and error. With no reviews loaded the error
    region shows "No reviews loaded yet" and nothing else changes.
    """
    try:
        with _busy(state, Action.SELECT_REVIEW):
            review = state.store.random_review(rng)
            state.current_review = review
            state.result = None
            state.error = None
            logger.info("Review selected", review_length=len(review.text))
    except Exception as e:
        _record_error(state, Action.SELECT_REVIEW, e)
    return state


async def _run_analysis(
    state: AppState,
    classifier: Classifier,
    task: TaskEnum,
    action: Action,
    api_token: Optional[str],
) -> AppState:
    try:
        with _busy(state, action):
            state.error = None
            if state.current_review is None:
                raise NoReviewSelectedError(f"{task.value} requested without a review")
            token = api_token if api_token is not None else state.api_token
            result = await classifier.classify(task, state.current_review.text, api_token=token)
            state.result = result
            # A refusal recorded while this action ran is stale now
            state.error = None
    except Exception as e:
        _record_error(state, action, e)
    return state


async def analyze_sentiment(
    state: AppState,
    classifier: Classifier,
    api_token: Optional[str] = None,
) -> AppState:
    """Classify the current review's sentiment."""
    return await _run_analysis(
        state, classifier, TaskEnum.SENTIMENT, Action.ANALYZE_SENTIMENT, api_token
    )


async def count_nouns(
    state: AppState,
    classifier: Classifier,
    api_token: Optional[str] = None,
) -> AppState:
    """Classify the current review's noun-density level."""
    return await _run_analysis(
        state, classifier, TaskEnum.NOUN_LEVEL, Action.COUNT_NOUNS, api_token
    )
