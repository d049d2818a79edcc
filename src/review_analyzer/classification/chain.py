"""
Ordered backend attempts with short-circuit on first success.

Fallback chain per task:
    sentiment:  classifier models -> generator models -> [local keywords]
    noun level: generator models -> [local noun count]

Each attempt runs in its own error boundary. Authentication and quota
failures repeat for every hosted model (same token), so they skip the
remaining remote backends and go straight to local ones, if any.

Usage:
    classifier = ReviewClassifier.from_settings(client, prompt_builder, settings)
    result = await classifier.classify(TaskEnum.SENTIMENT, review.text, api_token)
"""

import time
from typing import Optional, Sequence

import structlog

from review_analyzer.classification.backends import (
    ClassificationBackend,
    LocalHeuristicBackend,
    RemoteBackend,
)
from review_analyzer.config import Settings
from review_analyzer.exceptions import ReviewAnalyzerError
from review_analyzer.inference.base_client import BaseInferenceClient
from review_analyzer.inference.exceptions import InferenceError
from review_analyzer.inference.prompt_builder import PromptBuilder
from review_analyzer.models.enums import BackendMode, TaskEnum
from review_analyzer.models.output_models import ChainAttempt, ClassificationResult
from review_analyzer.monitoring.metrics import (
    backend_fallbacks_total,
    classification_labels_total,
)


logger = structlog.get_logger(__name__)


class ChainExhausted(ReviewAnalyzerError):
    """
    Raised when every backend of a chain failed.

    The user sees the last backend's message (e.g. the rate-limit hint),
    the attempt log keeps the rest for debugging.

    Attributes:
        task: Task that could not be classified
        attempts: One ChainAttempt per backend tried or skipped
        last_error: Last InferenceError raised; unexpected errors are only
            recorded in attempts
    """

    def __init__(
        self,
        task: TaskEnum,
        attempts: list[ChainAttempt],
        last_error: Optional[InferenceError],
    ):
        if last_error is not None:
            user_message = last_error.user_message
        elif attempts:
            user_message = "Classification failed - please try again"
        else:
            user_message = "No classification backend available"
        super().__init__(
            f"All {len(attempts)} backends failed for {task.value}",
            details={
                "task": task.value,
                "backends": [a.backend for a in attempts],
                "last_error": type(last_error).__name__ if last_error else None,
            },
            user_message=user_message,
        )
        self.task = task
        self.attempts = attempts
        self.last_error = last_error


class BackendChain:
    """
    Ordered list of backends for one task.

    Attributes:
        task: Task every backend is asked to perform
        backends: Backends in priority order
    """

    def __init__(self, task: TaskEnum, backends: Sequence[ClassificationBackend]):
        self.task = task
        self.backends = [b for b in backends if b.supports(task)]

    async def run(
        self, text: str, api_token: Optional[str] = None
    ) -> tuple[ClassificationResult, list[ChainAttempt]]:
        """
        Classify with the first backend that succeeds.

        Returns:
            (result, attempts) where attempts lists the failed backends
            followed by the successful one

        Raises:
            ChainExhausted: Every backend failed (or the chain is empty)
        """
        attempts: list[ChainAttempt] = []
        last_error: Optional[InferenceError] = None
        skip_remote = False

        for backend in self.backends:
            if skip_remote and backend.is_remote:
                attempts.append(ChainAttempt(
                    backend=backend.name,
                    success=False,
                    error_type="skipped",
                    error="remote backends skipped after credential failure",
                ))
                continue

            start = time.perf_counter()
            try:
                result = await backend.classify(self.task, text, api_token=api_token)
            except InferenceError as e:
                latency_ms = int((time.perf_counter() - start) * 1000)
                last_error = e
                attempts.append(ChainAttempt(
                    backend=backend.name,
                    success=False,
                    error_type=type(e).__name__,
                    error=e.message,
                    latency_ms=latency_ms,
                ))
                backend_fallbacks_total.labels(task=self.task.value, backend=backend.name).inc()
                logger.warning(
                    "Backend failed, trying next",
                    task=self.task.value,
                    backend=backend.name,
                    error_type=type(e).__name__,
                    error=e.message,
                )
                if e.skip_remaining_remote:
                    skip_remote = True
                continue
            except Exception as e:
                latency_ms = int((time.perf_counter() - start) * 1000)
                attempts.append(ChainAttempt(
                    backend=backend.name,
                    success=False,
                    error_type=type(e).__name__,
                    error=str(e),
                    latency_ms=latency_ms,
                ))
                backend_fallbacks_total.labels(task=self.task.value, backend=backend.name).inc()
                logger.exception(
                    "Backend raised unexpected error, trying next",
                    task=self.task.value,
                    backend=backend.name,
                    error_type=type(e).__name__,
                )
                continue

            latency_ms = int((time.perf_counter() - start) * 1000)
            attempts.append(ChainAttempt(backend=backend.name, success=True, latency_ms=latency_ms))
            classification_labels_total.labels(
                task=self.task.value, label=result.label.value, source=result.source
            ).inc()
            logger.info(
                "Classification succeeded",
                task=self.task.value,
                backend=backend.name,
                label=result.label.value,
                source=result.source,
                attempts=len(attempts),
            )
            return result, attempts

        logger.error(
            "All classification backends failed",
            task=self.task.value,
            backends=[a.backend for a in attempts],
            last_error=type(last_error).__name__ if last_error else None,
        )
        raise ChainExhausted(self.task, attempts, last_error)


class ReviewClassifier:
    """
    One BackendChain per task, built from settings.

    Attributes:
        chains: Mapping task -> BackendChain
    """

    def __init__(self, chains: dict[TaskEnum, BackendChain]):
        self.chains = chains

    @classmethod
    def from_settings(
        cls,
        client: BaseInferenceClient,
        prompt_builder: PromptBuilder,
        settings: Settings,
    ) -> "ReviewClassifier":
        """
        Build the default chains.

        Sentiment: SENTIMENT_MODELS as classifiers, then GENERATION_MODELS,
        then local keywords if LOCAL_SENTIMENT_FALLBACK.
        Noun level: GENERATION_MODELS, then local count if LOCAL_NOUN_FALLBACK.
        """
        def remote(model: str, mode: BackendMode) -> RemoteBackend:
            return RemoteBackend(
                client=client,
                prompt_builder=prompt_builder,
                model=model,
                mode=mode,
                default_sentiment=settings.DEFAULT_SENTIMENT,
                default_noun_level=settings.DEFAULT_NOUN_LEVEL,
                min_score=settings.SENTIMENT_MIN_SCORE,
            )

        generators = [remote(m, BackendMode.GENERATOR) for m in settings.GENERATION_MODELS]

        sentiment_backends: list[ClassificationBackend] = [
            remote(m, BackendMode.CLASSIFIER) for m in settings.SENTIMENT_MODELS
        ]
        sentiment_backends.extend(generators)
        if settings.LOCAL_SENTIMENT_FALLBACK:
            sentiment_backends.append(LocalHeuristicBackend())

        noun_backends: list[ClassificationBackend] = list(generators)
        if settings.LOCAL_NOUN_FALLBACK:
            noun_backends.append(LocalHeuristicBackend())

        logger.info(
            "ReviewClassifier initialized",
            sentiment_backends=[b.name for b in sentiment_backends],
            noun_backends=[b.name for b in noun_backends],
        )

        return cls({
            TaskEnum.SENTIMENT: BackendChain(TaskEnum.SENTIMENT, sentiment_backends),
            TaskEnum.NOUN_LEVEL: BackendChain(TaskEnum.NOUN_LEVEL, noun_backends),
        })

    async def classify(
        self, task: TaskEnum, text: str, api_token: Optional[str] = None
    ) -> ClassificationResult:
        """Run the chain for a task and return its result."""
        result, _ = await self.chains[task].run(text, api_token=api_token)
        return result
