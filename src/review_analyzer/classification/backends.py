"""
Classification backends (Strategy Pattern).

A backend turns review text into a ClassificationResult for one task.
BackendChain tries backends in order; the same protocol covers hosted
models and local heuristics, so a chain can mix them freely.

Backends:
    RemoteBackend: one hosted model, driven as classifier or generator
    LocalHeuristicBackend: regex/keyword heuristics, never fails
"""

from typing import Optional, Protocol

import structlog

from review_analyzer.classification.keyword_sentiment import score_sentiment_locally
from review_analyzer.classification.normalizer import (
    classify_noun_count,
    match_noun_level,
    match_sentiment,
    top_score,
)
from review_analyzer.classification.noun_counter import count_nouns_locally
from review_analyzer.inference.base_client import BaseInferenceClient
from review_analyzer.inference.exceptions import InferenceResponseShapeError
from review_analyzer.inference.prompt_builder import PromptBuilder
from review_analyzer.models.enums import BackendMode, NounLevelEnum, SentimentEnum, TaskEnum
from review_analyzer.models.inference_models import InferenceResponse
from review_analyzer.models.output_models import ClassificationResult


logger = structlog.get_logger(__name__)

RAW_EXCERPT_CHARS = 200


class ClassificationBackend(Protocol):
    """
    Protocol for classification backends.

    Attributes:
        name: Stable identifier used in logs, metrics and results
        is_remote: True when the backend calls a hosted model
    """

    name: str
    is_remote: bool

    def supports(self, task: TaskEnum) -> bool:
        """Whether this backend can handle the task."""
        ...

    async def classify(
        self, task: TaskEnum, text: str, api_token: Optional[str] = None
    ) -> ClassificationResult:
        """
        Classify review text for one task.

        Raises:
            InferenceError: Remote failures (caught by BackendChain, which
                also contains any other exception to the failing attempt)
        """
        ...


class RemoteBackend:
    """
    One hosted model.

    CLASSIFIER mode sends the raw review and reads the score list (sentiment
    only). GENERATOR mode sends a rendered prompt and normalizes the first
    line of the generated text. A noun-level answer that matches no pattern
    is decided by the local noun count; a sentiment answer that matches
    nothing gets the configured default.
    """

    is_remote = True

    def __init__(
        self,
        client: BaseInferenceClient,
        prompt_builder: PromptBuilder,
        model: str,
        mode: BackendMode,
        default_sentiment: SentimentEnum = SentimentEnum.NEUTRAL,
        default_noun_level: NounLevelEnum = NounLevelEnum.MEDIUM,
        min_score: float = 0.0,
    ):
        self.client = client
        self.prompt_builder = prompt_builder
        self.model = model
        self.mode = mode
        self.default_sentiment = default_sentiment
        self.default_noun_level = default_noun_level
        self.min_score = min_score
        self.name = f"{mode.value}:{model}"

    def supports(self, task: TaskEnum) -> bool:
        return self.mode == BackendMode.GENERATOR or task == TaskEnum.SENTIMENT

    async def classify(
        self, task: TaskEnum, text: str, api_token: Optional[str] = None
    ) -> ClassificationResult:
        request = self.prompt_builder.build_request(task, text, self.model, self.mode)
        response = await self.client.generate(request, api_token=api_token)

        if task == TaskEnum.SENTIMENT:
            return self._sentiment_result(response)
        return self._noun_level_result(response, text)

    def _sentiment_result(self, response: InferenceResponse) -> ClassificationResult:
        if self.mode == BackendMode.CLASSIFIER:
            if response.scores is None:
                raise InferenceResponseShapeError(
                    "Classifier model returned text instead of scores",
                    details={"model": self.model},
                )
            raw = [item.model_dump() for item in response.scores]
        else:
            raw = response.text or ""

        label = match_sentiment(raw, min_score=self.min_score)
        best = top_score(raw)
        # Forced to neutral by min_score: the winning score belongs to another label
        if best and best[1] < self.min_score:
            best = None
        return ClassificationResult(
            task=TaskEnum.SENTIMENT,
            label=label if label is not None else self.default_sentiment,
            source="remote" if label is not None else "default",
            backend=self.name,
            model=self.model,
            score=best[1] if best and 0.0 <= best[1] <= 1.0 else None,
            matched=label is not None,
            raw_excerpt=_excerpt(response),
        )

    def _noun_level_result(self, response: InferenceResponse, text: str) -> ClassificationResult:
        raw = response.text or ""
        level = match_noun_level(raw)
        if level is not None:
            return ClassificationResult(
                task=TaskEnum.NOUN_LEVEL,
                label=level,
                source="remote",
                backend=self.name,
                model=self.model,
                raw_excerpt=_excerpt(response),
            )

        # Ambiguous answer: substitute the local count silently
        count = count_nouns_locally(text)
        logger.info(
            "Model answer matched no noun level, using local count",
            model=self.model,
            noun_count=count,
        )
        return ClassificationResult(
            task=TaskEnum.NOUN_LEVEL,
            label=classify_noun_count(count),
            source="remote+heuristic",
            backend=self.name,
            model=self.model,
            noun_count=count,
            matched=False,
            raw_excerpt=_excerpt(response),
        )


class LocalHeuristicBackend:
    """
    Rule-based fallback, used when no hosted model is reachable.

    Noun level: count_nouns_locally + fixed thresholds.
    Sentiment: keyword hit counts (negation aware).
    """

    name = "local-heuristic"
    is_remote = False

    def supports(self, task: TaskEnum) -> bool:
        return True

    async def classify(
        self, task: TaskEnum, text: str, api_token: Optional[str] = None
    ) -> ClassificationResult:
        if task == TaskEnum.NOUN_LEVEL:
            count = count_nouns_locally(text)
            return ClassificationResult(
                task=task,
                label=classify_noun_count(count),
                source="local",
                backend=self.name,
                noun_count=count,
            )

        return ClassificationResult(
            task=task,
            label=score_sentiment_locally(text),
            source="local",
            backend=self.name,
        )


def _excerpt(response: InferenceResponse) -> Optional[str]:
    if response.text is not None:
        return response.text[:RAW_EXCERPT_CHARS]
    if response.scores is not None:
        return ", ".join(f"{s.label}={s.score:.3f}" for s in response.scores)[:RAW_EXCERPT_CHARS]
    return None
