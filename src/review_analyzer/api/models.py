"""
API-specific request and response models for FastAPI endpoints.

ViewState is what the page would render: current review, result line,
error region and whether the controls are disabled.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from review_analyzer.models.output_models import ClassificationResult
from review_analyzer.session.state import AppState
from review_analyzer.session.view import render_result


class ViewState(BaseModel):
    """Snapshot of the session for the client to render."""

    review_text: Optional[str] = Field(default=None, description="Currently selected review")
    result: Optional[ClassificationResult] = Field(default=None, description="Last classification")
    result_display: str = Field(..., description="Rendered result line or placeholder")
    error: Optional[str] = Field(default=None, description="Error region text, None when hidden")
    controls_disabled: bool = Field(default=False, description="True while an action is pending")
    pending: list[str] = Field(default_factory=list, description="Pending action names")
    reviews_loaded: int = Field(default=0, ge=0, description="Number of loaded reviews")

    @classmethod
    def from_state(cls, state: AppState) -> "ViewState":
        return cls(
            review_text=state.current_review.text if state.current_review else None,
            result=state.result,
            result_display=render_result(state.result),
            error=state.error,
            controls_disabled=state.controls_disabled,
            pending=sorted(action.value for action in state.pending),
            reviews_loaded=state.reviews_loaded,
        )


class AnalyzeRequest(BaseModel):
    """Optional body for analysis endpoints."""

    api_token: Optional[str] = Field(
        default=None,
        description="Hugging Face token for this call (falls back to the session token)",
    )


class TokenRequest(BaseModel):
    """Body for setting the session token."""

    api_token: Optional[str] = Field(default=None, description="Token; blank or null clears it")


class LoadReviewsRequest(BaseModel):
    """Body for (re)loading the reviews file."""

    source: Optional[str] = Field(
        default=None,
        description="Path or http(s) URL of the TSV file (default: REVIEWS_SOURCE)",
    )


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = Field(description="healthy or degraded", examples=["healthy", "degraded"])
    version: str
    services: dict[str, str] = Field(description="Per-dependency status")
    reviews_loaded: int = Field(ge=0)
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class ErrorResponse(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    message: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
