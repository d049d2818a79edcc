"""
Unit tests for classification backends and the fallback chain.

The inference client is mocked; each test scripts the sequence of
responses/errors the hosted models would produce.
"""

import pytest

from review_analyzer.classification.backends import LocalHeuristicBackend, RemoteBackend
from review_analyzer.classification.chain import BackendChain, ChainExhausted, ReviewClassifier
from review_analyzer.inference.exceptions import (
    InferenceAuthError,
    InferenceConnectionError,
    InferenceModelLoadingError,
    InferenceRateLimitError,
)
from review_analyzer.models.enums import BackendMode, NounLevelEnum, SentimentEnum, TaskEnum


REVIEW = "Great product, fast shipping!"


@pytest.fixture
def classifier(mock_inference_client, prompt_builder, test_settings) -> ReviewClassifier:
    return ReviewClassifier.from_settings(mock_inference_client, prompt_builder, test_settings)


class TestRemoteBackend:

    @pytest.mark.asyncio
    async def test_classifier_mode_sends_raw_review(
        self, mock_inference_client, prompt_builder, score_response
    ):
        mock_inference_client.generate.return_value = score_response(
            [("POSITIVE", 0.9987), ("NEGATIVE", 0.0013)]
        )
        backend = RemoteBackend(
            mock_inference_client, prompt_builder, "test/sentiment-classifier", BackendMode.CLASSIFIER
        )

        result = await backend.classify(TaskEnum.SENTIMENT, REVIEW, api_token="hf_user")

        request = mock_inference_client.generate.call_args.args[0]
        assert request.inputs == REVIEW
        assert request.parameters is None
        assert mock_inference_client.generate.call_args.kwargs["api_token"] == "hf_user"
        assert result.label == SentimentEnum.POSITIVE
        assert result.source == "remote"
        assert result.score == pytest.approx(0.9987)
        assert result.backend == "classifier:test/sentiment-classifier"

    @pytest.mark.asyncio
    async def test_generator_mode_sends_prompt(
        self, mock_inference_client, prompt_builder, text_response
    ):
        mock_inference_client.generate.return_value = text_response("Negative\nThe buyer is upset")
        backend = RemoteBackend(
            mock_inference_client, prompt_builder, "test/generator", BackendMode.GENERATOR
        )

        result = await backend.classify(TaskEnum.SENTIMENT, REVIEW)

        request = mock_inference_client.generate.call_args.args[0]
        assert REVIEW in request.inputs
        assert request.parameters["return_full_text"] is False
        assert result.label == SentimentEnum.NEGATIVE
        assert result.score is None
        assert result.raw_excerpt.startswith("Negative")

    @pytest.mark.asyncio
    async def test_unmatched_sentiment_uses_default(
        self, mock_inference_client, prompt_builder, text_response
    ):
        mock_inference_client.generate.return_value = text_response("Hard to say.")
        backend = RemoteBackend(
            mock_inference_client,
            prompt_builder,
            "test/generator",
            BackendMode.GENERATOR,
            default_sentiment=SentimentEnum.NEGATIVE,
        )

        result = await backend.classify(TaskEnum.SENTIMENT, REVIEW)

        assert result.label == SentimentEnum.NEGATIVE
        assert result.source == "default"
        assert result.matched is False

    @pytest.mark.asyncio
    async def test_unmatched_noun_level_uses_local_count(
        self, mock_inference_client, prompt_builder, text_response
    ):
        mock_inference_client.generate.return_value = text_response("I am not sure.")
        backend = RemoteBackend(
            mock_inference_client, prompt_builder, "test/generator", BackendMode.GENERATOR
        )

        result = await backend.classify(TaskEnum.NOUN_LEVEL, REVIEW)

        assert result.label == NounLevelEnum.LOW
        assert result.source == "remote+heuristic"
        assert result.noun_count == 2
        assert result.matched is False

    def test_classifier_mode_supports_sentiment_only(self, mock_inference_client, prompt_builder):
        backend = RemoteBackend(
            mock_inference_client, prompt_builder, "m", BackendMode.CLASSIFIER
        )
        assert backend.supports(TaskEnum.SENTIMENT)
        assert not backend.supports(TaskEnum.NOUN_LEVEL)


@pytest.mark.asyncio
async def test_local_backend_noun_level():
    result = await LocalHeuristicBackend().classify(TaskEnum.NOUN_LEVEL, REVIEW)

    assert result.label == NounLevelEnum.LOW
    assert result.noun_count == 2
    assert result.source == "local"


class TestReviewClassifier:

    def test_chain_layout(self, classifier):
        sentiment = [b.name for b in classifier.chains[TaskEnum.SENTIMENT].backends]
        nouns = [b.name for b in classifier.chains[TaskEnum.NOUN_LEVEL].backends]

        assert sentiment == ["classifier:test/sentiment-classifier", "generator:test/generator"]
        assert nouns == ["generator:test/generator", "local-heuristic"]

    def test_local_sentiment_fallback_flag(
        self, mock_inference_client, prompt_builder, test_settings
    ):
        test_settings.LOCAL_SENTIMENT_FALLBACK = True
        classifier = ReviewClassifier.from_settings(
            mock_inference_client, prompt_builder, test_settings
        )
        assert classifier.chains[TaskEnum.SENTIMENT].backends[-1].name == "local-heuristic"

    @pytest.mark.asyncio
    async def test_first_success_short_circuits(self, classifier, mock_inference_client, score_response):
        mock_inference_client.generate.return_value = score_response([("POSITIVE", 0.99)])

        result = await classifier.classify(TaskEnum.SENTIMENT, REVIEW)

        assert result.label == SentimentEnum.POSITIVE
        assert mock_inference_client.generate.await_count == 1

    @pytest.mark.asyncio
    async def test_falls_back_to_generator(self, classifier, mock_inference_client, text_response):
        mock_inference_client.generate.side_effect = [
            InferenceRateLimitError("Rate limited", 429),
            text_response("negative"),
        ]

        result, attempts = await classifier.chains[TaskEnum.SENTIMENT].run(REVIEW)

        assert result.label == SentimentEnum.NEGATIVE
        assert result.backend == "generator:test/generator"
        assert [a.success for a in attempts] == [False, True]
        assert attempts[0].error_type == "InferenceRateLimitError"

    @pytest.mark.asyncio
    async def test_exhausted_surfaces_last_error(self, classifier, mock_inference_client):
        mock_inference_client.generate.side_effect = [
            InferenceConnectionError("Network error"),
            InferenceRateLimitError("Rate limited", 429),
        ]

        with pytest.raises(ChainExhausted) as exc_info:
            await classifier.classify(TaskEnum.SENTIMENT, REVIEW)

        assert exc_info.value.user_message == "Rate limit exceeded - please wait and try again"
        assert len(exc_info.value.attempts) == 2
        assert isinstance(exc_info.value.last_error, InferenceRateLimitError)

    @pytest.mark.asyncio
    async def test_auth_failure_skips_remaining_remote(
        self, mock_inference_client, prompt_builder, test_settings
    ):
        test_settings.LOCAL_SENTIMENT_FALLBACK = True
        classifier = ReviewClassifier.from_settings(
            mock_inference_client, prompt_builder, test_settings
        )
        mock_inference_client.generate.side_effect = InferenceAuthError("Unauthorized", 401)

        result, attempts = await classifier.chains[TaskEnum.SENTIMENT].run(REVIEW)

        assert mock_inference_client.generate.await_count == 1
        assert [a.error_type for a in attempts] == ["InferenceAuthError", "skipped", None]
        assert result.source == "local"
        assert result.label == SentimentEnum.POSITIVE

    @pytest.mark.asyncio
    async def test_noun_level_falls_back_to_local_count(self, classifier, mock_inference_client):
        mock_inference_client.generate.side_effect = InferenceModelLoadingError(
            "Model loading", retry_after=20.0
        )

        result = await classifier.classify(TaskEnum.NOUN_LEVEL, REVIEW)

        assert result.label == NounLevelEnum.LOW
        assert result.source == "local"

    @pytest.mark.asyncio
    async def test_empty_chain_raises(self):
        chain = BackendChain(TaskEnum.NOUN_LEVEL, [])

        with pytest.raises(ChainExhausted) as exc_info:
            await chain.run(REVIEW)

        assert exc_info.value.user_message == "No classification backend available"

    @pytest.mark.asyncio
    async def test_unexpected_error_falls_through_to_next_backend(
        self, classifier, mock_inference_client, text_response
    ):
        mock_inference_client.generate.side_effect = [
            RuntimeError("template exploded"),
            text_response("positive"),
        ]

        result, attempts = await classifier.chains[TaskEnum.SENTIMENT].run(REVIEW)

        assert result.label == SentimentEnum.POSITIVE
        assert result.backend == "generator:test/generator"
        assert [a.error_type for a in attempts] == ["RuntimeError", None]
        assert attempts[0].error == "template exploded"

    @pytest.mark.asyncio
    async def test_only_unexpected_errors_exhaust_chain(self, classifier, mock_inference_client):
        mock_inference_client.generate.side_effect = ValueError("bad payload")

        with pytest.raises(ChainExhausted) as exc_info:
            await classifier.classify(TaskEnum.SENTIMENT, REVIEW)

        assert exc_info.value.last_error is None
        assert exc_info.value.user_message == "Classification failed - please try again"
        assert [a.error_type for a in exc_info.value.attempts] == ["ValueError", "ValueError"]


class TestMinScore:

    @pytest.mark.asyncio
    async def test_weak_winner_is_neutral_without_score(
        self, mock_inference_client, prompt_builder, score_response
    ):
        mock_inference_client.generate.return_value = score_response(
            [("POSITIVE", 0.45), ("NEGATIVE", 0.30), ("NEUTRAL", 0.25)]
        )
        backend = RemoteBackend(
            mock_inference_client,
            prompt_builder,
            "test/sentiment-classifier",
            BackendMode.CLASSIFIER,
            min_score=0.5,
        )

        result = await backend.classify(TaskEnum.SENTIMENT, REVIEW)

        assert result.label == SentimentEnum.NEUTRAL
        assert result.score is None

    @pytest.mark.asyncio
    async def test_confident_winner_keeps_score(
        self, mock_inference_client, prompt_builder, score_response
    ):
        mock_inference_client.generate.return_value = score_response([("POSITIVE", 0.8)])
        backend = RemoteBackend(
            mock_inference_client,
            prompt_builder,
            "test/sentiment-classifier",
            BackendMode.CLASSIFIER,
            min_score=0.5,
        )

        result = await backend.classify(TaskEnum.SENTIMENT, REVIEW)

        assert result.label == SentimentEnum.POSITIVE
        assert result.score == pytest.approx(0.8)
