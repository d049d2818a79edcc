"""
Unit tests for HuggingFaceClient.

Uses httpx.MockTransport so no network access is needed.
"""

import json

import httpx
import pytest

from review_analyzer.inference.exceptions import (
    InferenceAPIError,
    InferenceAuthError,
    InferenceConnectionError,
    InferenceModelError,
    InferenceModelLoadingError,
    InferenceQuotaError,
    InferenceRateLimitError,
    InferenceResponseShapeError,
    InferenceTimeoutError,
    InferenceUnavailableError,
    error_for_status,
)
from review_analyzer.inference.hf_client import HuggingFaceClient, parse_inference_payload
from review_analyzer.models.inference_models import InferenceRequest


BASE_URL = "https://inference.test"


def make_client(handler, api_token=None) -> HuggingFaceClient:
    return HuggingFaceClient(
        base_url=BASE_URL,
        timeout=5.0,
        api_token=api_token,
        transport=httpx.MockTransport(handler),
    )


def sentiment_request() -> InferenceRequest:
    return InferenceRequest(model="test/sentiment-classifier", inputs="Great product")


class TestGenerate:

    @pytest.mark.asyncio
    async def test_classifier_scores(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            seen["auth"] = request.headers.get("authorization")
            return httpx.Response(
                200,
                json=[[{"label": "POSITIVE", "score": 0.9987}, {"label": "NEGATIVE", "score": 0.0013}]],
            )

        async with make_client(handler) as client:
            response = await client.generate(sentiment_request(), api_token="hf_user")

        assert seen["path"] == "/models/test/sentiment-classifier"
        assert seen["body"] == {"inputs": "Great product"}
        assert seen["auth"] == "Bearer hf_user"
        assert [s.label for s in response.scores] == ["POSITIVE", "NEGATIVE"]
        assert response.text is None

    @pytest.mark.asyncio
    async def test_generated_text_with_parameters(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=[{"generated_text": "Medium"}])

        request = InferenceRequest(
            model="test/generator",
            inputs="Count the nouns",
            parameters={"max_new_tokens": 50, "temperature": 0.1, "return_full_text": False},
            options={"wait_for_model": True},
        )
        async with make_client(handler) as client:
            response = await client.generate(request)

        assert seen["body"]["parameters"]["max_new_tokens"] == 50
        assert seen["body"]["options"] == {"wait_for_model": True}
        assert response.text == "Medium"
        assert response.scores is None

    @pytest.mark.asyncio
    async def test_default_token_and_override(self):
        tokens = []

        def handler(request: httpx.Request) -> httpx.Response:
            tokens.append(request.headers.get("authorization"))
            return httpx.Response(200, json=[{"generated_text": "ok"}])

        async with make_client(handler, api_token="hf_default") as client:
            await client.generate(sentiment_request())
            await client.generate(sentiment_request(), api_token="  ")
            await client.generate(sentiment_request(), api_token="hf_user")

        assert tokens == ["Bearer hf_default", "Bearer hf_default", "Bearer hf_user"]

    @pytest.mark.asyncio
    async def test_no_token_sends_no_authorization(self):
        headers = []

        def handler(request: httpx.Request) -> httpx.Response:
            headers.append(request.headers.get("authorization"))
            return httpx.Response(200, json=[{"generated_text": "ok"}])

        async with make_client(handler) as client:
            await client.generate(sentiment_request())

        assert headers == [None]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code,exc_class,user_message",
        [
            (401, InferenceAuthError, "Invalid credentials - please check your API token"),
            (402, InferenceQuotaError, None),
            (429, InferenceRateLimitError, "Rate limit exceeded - please wait and try again"),
            (404, InferenceUnavailableError, None),
            (500, InferenceAPIError, "API error: 500 boom"),
        ],
    )
    async def test_status_mapping(self, status_code, exc_class, user_message):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, text="boom")

        async with make_client(handler) as client:
            with pytest.raises(exc_class) as exc_info:
                await client.generate(sentiment_request())

        assert exc_info.value.status_code == status_code
        if user_message:
            assert exc_info.value.user_message == user_message

    @pytest.mark.asyncio
    async def test_model_loading_estimated_time(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                503, json={"error": "Model is currently loading", "estimated_time": 19.6}
            )

        async with make_client(handler) as client:
            with pytest.raises(InferenceModelLoadingError) as exc_info:
                await client.generate(sentiment_request())

        assert exc_info.value.retry_after == pytest.approx(19.6)
        assert exc_info.value.user_message == "Model is loading, please try again in about 20 seconds"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("retry_after", ["inf", "nan", "-5"])
    async def test_model_loading_unusable_retry_after(self, retry_after):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                503,
                headers={"Retry-After": retry_after},
                json={"error": "Model is currently loading"},
            )

        async with make_client(handler) as client:
            with pytest.raises(InferenceModelLoadingError) as exc_info:
                await client.generate(sentiment_request())

        assert exc_info.value.retry_after is None
        assert exc_info.value.user_message == "Model is loading, please try again in a few moments"

    def test_loading_error_with_infinite_wait(self):
        error = InferenceModelLoadingError("Model loading", retry_after=float("inf"))
        assert error.user_message == "Model is loading, please try again in a few moments"

    @pytest.mark.asyncio
    async def test_model_error_in_success_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"error": "Input is too long"})

        async with make_client(handler) as client:
            with pytest.raises(InferenceModelError) as exc_info:
                await client.generate(sentiment_request())

        assert exc_info.value.user_message == "Model error: Input is too long"

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        async with make_client(handler) as client:
            with pytest.raises(InferenceResponseShapeError):
                await client.generate(sentiment_request())

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with make_client(handler) as client:
            with pytest.raises(InferenceTimeoutError):
                await client.generate(sentiment_request())

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(InferenceConnectionError) as exc_info:
                await client.generate(sentiment_request())

        assert not isinstance(exc_info.value, InferenceTimeoutError)


class TestHealthCheck:

    @pytest.mark.asyncio
    async def test_reachable(self):
        async with make_client(lambda request: httpx.Response(404)) as client:
            assert await client.health_check() is True

    @pytest.mark.asyncio
    async def test_server_error(self):
        async with make_client(lambda request: httpx.Response(502)) as client:
            assert await client.health_check() is False

    @pytest.mark.asyncio
    async def test_unreachable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("down", request=request)

        async with make_client(handler) as client:
            assert await client.health_check() is False


class TestParseInferencePayload:

    def test_flat_scores(self):
        scores, text = parse_inference_payload([{"label": "NEGATIVE", "score": 0.6}])
        assert scores[0].label == "NEGATIVE"
        assert text is None

    def test_single_score(self):
        scores, _ = parse_inference_payload({"label": "POSITIVE", "score": 1})
        assert scores[0].score == 1.0

    def test_generated_text_object(self):
        assert parse_inference_payload({"generated_text": "Low"}) == (None, "Low")

    @pytest.mark.parametrize(
        "payload",
        [[], {}, "positive", 3, [3], [[]], [[{"label": "POSITIVE"}]], {"foo": 1}],
    )
    def test_unexpected_shapes(self, payload):
        with pytest.raises(InferenceResponseShapeError):
            parse_inference_payload(payload)


def test_error_for_status_other_codes():
    exc = error_for_status(418, "x" * 500)
    assert isinstance(exc, InferenceAPIError)
    assert len(exc.body_excerpt) == 200
    assert error_for_status(403, "").status_code == 403
    assert isinstance(error_for_status(403, ""), InferenceUnavailableError)
