"""
Custom exceptions for the inference client layer.

These exceptions let the fallback chain and the session handlers
distinguish between failure modes:
- transport failures (network, timeout)
- remote-status failures (mapped HTTP codes)
- response-shape failures (unexpected JSON structure)

Each carries a short user_message suitable for the error region.
"""

import math

from review_analyzer.exceptions import ReviewAnalyzerError


BODY_EXCERPT_CHARS = 200


class InferenceError(ReviewAnalyzerError):
    """
    Base exception for all inference client errors.

    `skip_remaining_remote` marks failures that will repeat for every hosted
    model (same token), so the chain moves straight to local backends.
    """
    default_user_message = "Inference API error"
    skip_remaining_remote = False


# === Transport failures ===

class InferenceConnectionError(InferenceError):
    """
    Raised when the inference endpoint cannot be reached.

    Includes DNS failures, refused connections, TLS errors, etc.
    """
    default_user_message = "Network error - unable to reach the inference API"


class InferenceTimeoutError(InferenceConnectionError):
    """Raised when the request exceeds the configured timeout."""
    default_user_message = "The inference API timed out - please try again"


# === Remote-status failures ===

class InferenceStatusError(InferenceError):
    """
    Base for non-2xx responses.

    Attributes:
        status_code: HTTP status returned by the endpoint
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        details: dict | None = None,
        user_message: str | None = None,
    ):
        details = dict(details or {})
        details.setdefault("status", status_code)
        super().__init__(message, details=details, user_message=user_message)
        self.status_code = status_code


class InferenceAuthError(InferenceStatusError):
    """401: token missing, malformed or revoked."""
    default_user_message = "Invalid credentials - please check your API token"
    skip_remaining_remote = True


class InferenceQuotaError(InferenceStatusError):
    """402: the account has run out of credits."""
    default_user_message = "Payment required - your API quota is exhausted, please check your API token"
    skip_remaining_remote = True


class InferenceRateLimitError(InferenceStatusError):
    """429: too many requests for this token/IP."""
    default_user_message = "Rate limit exceeded - please wait and try again"


class InferenceModelLoadingError(InferenceStatusError):
    """
    503: the hosted model is cold-starting.

    Attributes:
        retry_after: Seconds suggested by the endpoint, if any
    """
    default_user_message = "Model is loading, please try again in a few moments"

    def __init__(
        self,
        message: str,
        status_code: int = 503,
        retry_after: float | None = None,
        details: dict | None = None,
    ):
        user_message = None
        if retry_after is not None and math.isfinite(retry_after):
            user_message = (
                f"Model is loading, please try again in about {int(round(retry_after))} seconds"
            )
        super().__init__(message, status_code, details=details, user_message=user_message)
        self.retry_after = retry_after


class InferenceUnavailableError(InferenceStatusError):
    """403/404: model or endpoint not available to this token."""
    default_user_message = "The requested model is unavailable"


class InferenceAPIError(InferenceStatusError):
    """Any other non-2xx status; message includes status and body excerpt."""

    def __init__(self, status_code: int, body: str, details: dict | None = None):
        excerpt = body[:BODY_EXCERPT_CHARS]
        details = dict(details or {})
        details["body_excerpt"] = excerpt
        super().__init__(
            f"Inference API returned {status_code}",
            status_code,
            details=details,
            user_message=f"API error: {status_code} {excerpt}".strip(),
        )
        self.body_excerpt = excerpt


# === Response-shape failures ===

class InferenceResponseShapeError(InferenceError):
    """Raised when a 2xx body is not JSON or has an unexpected structure."""
    default_user_message = "Unexpected API response format"


class InferenceModelError(InferenceError):
    """Raised when a 2xx body carries {"error": ...} from the model runtime."""

    def __init__(self, model_error: str, details: dict | None = None):
        super().__init__(
            f"Model error: {model_error}",
            details=details,
            user_message=f"Model error: {model_error}",
        )
        self.model_error = model_error


def error_for_status(
    status_code: int,
    body: str,
    retry_after: float | None = None,
    details: dict | None = None,
) -> InferenceStatusError:
    """
    Map an HTTP status code to the matching InferenceStatusError.

    Args:
        status_code: Non-2xx HTTP status
        body: Response body text (used for the generic excerpt)
        retry_after: Seconds to wait, parsed from headers/body for 503
        details: Extra context (model id, ...)

    Returns:
        Exception instance (not raised)
    """
    if status_code == 401:
        return InferenceAuthError("Unauthorized", status_code, details=details)
    if status_code == 402:
        return InferenceQuotaError("Payment required", status_code, details=details)
    if status_code == 429:
        return InferenceRateLimitError("Rate limited", status_code, details=details)
    if status_code == 503:
        return InferenceModelLoadingError(
            "Model loading", status_code, retry_after=retry_after, details=details
        )
    if status_code in (403, 404):
        return InferenceUnavailableError(
            f"Model unavailable ({status_code})", status_code, details=details
        )
    return InferenceAPIError(status_code, body, details=details)
