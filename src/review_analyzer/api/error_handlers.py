"""
FastAPI exception handlers for structured error responses.

Action errors never reach these handlers (the session layer turns them into
ViewState.error); they cover failures outside an action, such as dependency
construction. Bodies follow ErrorResponse.
"""

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

from review_analyzer.api.models import ErrorResponse
from review_analyzer.exceptions import ReviewAnalyzerError

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def review_analyzer_error_handler(request: Request, exc: ReviewAnalyzerError) -> JSONResponse:
    """
    Handle expected domain errors raised outside the session handlers.

    Maps to 502 Bad Gateway (a collaborator failed).
    """
    logger.warning(
        "Domain error outside action",
        error_type=type(exc).__name__,
        details=exc.details,
    )
    return _error_response(status.HTTP_502_BAD_GATEWAY, type(exc).__name__, exc.user_message)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error.
    """
    logger.exception("Unexpected error", error_type=type(exc).__name__)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", "An unexpected error occurred"
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    ReviewAnalyzerError: review_analyzer_error_handler,
    Exception: generic_error_handler,
}
