"""
Hugging Face Inference client implementation.

Communicates with the hosted inference API using httpx AsyncClient. Supports:
- Text-classification models (returns [[{label, score}, ...]])
- Text-generation models (returns [{generated_text}])
- Per-call bearer token (entered by the user) with a configured default
- HTTP status mapping to InferenceError subclasses

No automatic retries: a failure is reported once and the user re-triggers.
"""

import math
import time
from typing import Any, Optional

import httpx
import structlog

from review_analyzer.inference.base_client import BaseInferenceClient
from review_analyzer.inference.exceptions import (
    InferenceConnectionError,
    InferenceError,
    InferenceModelError,
    InferenceResponseShapeError,
    InferenceTimeoutError,
    error_for_status,
)
from review_analyzer.models.inference_models import (
    InferenceRequest,
    InferenceResponse,
    ScoreItem,
)
from review_analyzer.monitoring.metrics import (
    inference_latency_seconds,
    inference_requests_total,
)


logger = structlog.get_logger(__name__)


def parse_inference_payload(data: Any) -> tuple[Optional[list[ScoreItem]], Optional[str]]:
    """
    Extract scores or generated text from a decoded response body.

    Accepted shapes:
        [[{"label": ..., "score": ...}, ...]]   text-classification
        [{"label": ..., "score": ...}, ...]     text-classification (flat)
        {"label": ..., "score": ...}            single score
        [{"generated_text": ...}]               text-generation
        {"generated_text": ...}                 text-generation (single)
        {"error": ...}                          model runtime error

    Returns:
        (scores, text) with exactly one of them set

    Raises:
        InferenceModelError: Body carries an "error" field
        InferenceResponseShapeError: Any other structure
    """
    if isinstance(data, dict):
        if "error" in data:
            raise InferenceModelError(str(data["error"]), details={"payload": data})
        if "generated_text" in data:
            return None, str(data["generated_text"] or "")
        if "label" in data:
            return _score_items([data]), None
        raise InferenceResponseShapeError(
            "Unexpected object in response", details={"keys": sorted(data.keys())}
        )

    if isinstance(data, list) and data:
        first = data[0]
        if isinstance(first, list):
            return _score_items(first), None
        if isinstance(first, dict):
            if "generated_text" in first:
                return None, str(first["generated_text"] or "")
            if "label" in first:
                return _score_items(data), None

    raise InferenceResponseShapeError(
        "Unexpected response structure",
        details={"type": type(data).__name__},
    )


def _score_items(entries: list) -> list[ScoreItem]:
    items = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise InferenceResponseShapeError(
                "Score entry is not an object", details={"entry": repr(entry)[:100]}
            )
        label = entry.get("label")
        score = entry.get("score")
        if not isinstance(label, str) or isinstance(score, bool) or not isinstance(score, (int, float)):
            raise InferenceResponseShapeError(
                "Score entry missing label/score", details={"entry": repr(entry)[:100]}
            )
        items.append(ScoreItem(label=label, score=float(score)))
    if not items:
        raise InferenceResponseShapeError("Empty score list")
    return items


def _finite_seconds(value: float) -> Optional[float]:
    return value if math.isfinite(value) and value >= 0 else None


def _parse_retry_after(response: httpx.Response) -> Optional[float]:
    """Seconds to wait from Retry-After header or the body's estimated_time."""
    header = response.headers.get("retry-after")
    if header:
        try:
            seconds = _finite_seconds(float(header))
        except ValueError:
            seconds = None
        if seconds is not None:
            return seconds
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        estimated = body.get("estimated_time")
        if isinstance(estimated, (int, float)) and not isinstance(estimated, bool):
            return _finite_seconds(float(estimated))
    return None


class HuggingFaceClient(BaseInferenceClient):
    """
    Hugging Face Inference client using httpx for async HTTP communication.

    API Endpoints:
    - POST /models/{model_id}: Run inference with {inputs, parameters?, options?}

    Features:
    - Connection pooling via persistent AsyncClient
    - Injectable transport (httpx.MockTransport in tests)
    - Latency and outcome metrics per model
    """

    def __init__(
        self,
        base_url: str = "https://router.huggingface.co/hf-inference",
        timeout: float = 30.0,
        api_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        connection_limits: Optional[httpx.Limits] = None,
        **kwargs
    ):
        """
        Initialize Hugging Face client.

        Args:
            base_url: Inference provider URL
            timeout: Request timeout in seconds
            api_token: Default bearer token
            transport: Custom httpx transport (tests, proxies)
            connection_limits: httpx connection pool limits
            **kwargs: Additional config
        """
        super().__init__(base_url, timeout, api_token, **kwargs)

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )

        self._client: Optional[httpx.AsyncClient] = None
        self._connection_limits = connection_limits
        self._transport = transport

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
                follow_redirects=True
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    def _headers(self, api_token: Optional[str]) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = (api_token or "").strip() or self.api_token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def generate(
        self, request: InferenceRequest, api_token: Optional[str] = None
    ) -> InferenceResponse:
        """
        Run inference via POST /models/{model}.

        Request body:
        {
            "inputs": "Classify this review ...",
            "parameters": {"max_new_tokens": 50, "temperature": 0.1},
            "options": {"wait_for_model": false}
        }
        """
        start_time = time.time()
        payload = request.to_payload()

        logger.info(
            "Sending inference request",
            model=request.model,
            inputs_length=len(request.inputs),
            has_parameters=bool(request.parameters),
        )

        try:
            response = await self._send(request.model, payload, api_token)
            latency_ms = int((time.time() - start_time) * 1000)

            if not response.is_success:
                body = response.text
                logger.error(
                    "Inference HTTP error",
                    model=request.model,
                    status_code=response.status_code,
                    body_excerpt=body[:200],
                )
                raise error_for_status(
                    response.status_code,
                    body,
                    retry_after=_parse_retry_after(response),
                    details={"model": request.model},
                )

            try:
                data = response.json()
            except ValueError as e:
                raise InferenceResponseShapeError(
                    "Invalid JSON response from inference API",
                    details={"parse_error": str(e), "body_excerpt": response.text[:200]},
                )

            scores, text = parse_inference_payload(data)

        except InferenceError as exc:
            inference_requests_total.labels(
                model=request.model, outcome=type(exc).__name__
            ).inc()
            raise

        inference_requests_total.labels(model=request.model, outcome="success").inc()
        inference_latency_seconds.labels(model=request.model).observe(latency_ms / 1000.0)

        logger.info(
            "Inference successful",
            model=request.model,
            latency_ms=latency_ms,
            kind="scores" if scores is not None else "text",
        )

        return InferenceResponse(
            model=request.model,
            scores=scores,
            text=text,
            payload=data,
            status_code=response.status_code,
            latency_ms=latency_ms,
        )

    async def _send(
        self, model: str, payload: dict[str, Any], api_token: Optional[str]
    ) -> httpx.Response:
        """POST the payload, translating transport failures."""
        client = await self._get_client()
        try:
            return await client.post(
                f"/models/{model}",
                json=payload,
                headers=self._headers(api_token),
            )
        except httpx.TimeoutException as e:
            logger.warning("Inference request timeout", model=model, timeout=self.timeout, error=str(e))
            raise InferenceTimeoutError(
                f"Request timeout after {self.timeout}s",
                details={"model": model, "timeout": self.timeout},
            )
        except httpx.TransportError as e:
            logger.warning("Inference network error", model=model, error=str(e))
            raise InferenceConnectionError(
                f"Network error: {str(e)}",
                details={"model": model, "error_type": type(e).__name__},
                user_message=f"Network error: {str(e)}" if str(e) else None,
            )

    async def health_check(self) -> bool:
        """
        Check the provider is reachable.

        Any HTTP answer below 500 counts as reachable; the root path of the
        provider is not guaranteed to return 200.
        """
        try:
            client = await self._get_client()
            response = await client.get("/", timeout=5.0)
            healthy = response.status_code < 500
            logger.debug("Inference health check", status_code=response.status_code, healthy=healthy)
            return healthy
        except httpx.HTTPError as e:
            logger.warning("Inference health check failed", error=str(e))
            return False

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed inference client connection")
