"""
Inference data models for the request/response cycle.

These models are internal to the inference layer and handle the raw
communication with the hosted inference endpoint. They are separate from
ClassificationResult so the client stays unaware of label normalization.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class InferenceRequest(BaseModel):
    """
    Standardized request sent to an inference client.
    
    Serialized to the endpoint body as {inputs, parameters?, options?}.
    """
    model_config = ConfigDict(frozen=True)
    
    model: str = Field(..., description="Hosted model id (e.g. 'google/gemma-7b-it')")
    inputs: str = Field(..., description="Prompt or raw review text")
    parameters: Optional[dict[str, Any]] = Field(
        default=None,
        description="Task parameters (max_new_tokens, temperature, return_full_text...)"
    )
    options: Optional[dict[str, Any]] = Field(
        default=None,
        description="Endpoint options (wait_for_model, use_cache...)"
    )
    
    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body expected by the endpoint."""
        payload: dict[str, Any] = {"inputs": self.inputs}
        if self.parameters:
            payload["parameters"] = dict(self.parameters)
        if self.options:
            payload["options"] = dict(self.options)
        return payload


class ScoreItem(BaseModel):
    """One {label, score} pair from a text-classification model."""
    model_config = ConfigDict(frozen=True)
    
    label: str
    score: float


class InferenceResponse(BaseModel):
    """
    Parsed response from the inference endpoint.
    
    Exactly one of `scores` (classifier models) or `text` (generator models)
    is set. `payload` keeps the raw JSON for normalization and debugging.
    """
    model_config = ConfigDict(frozen=True)
    
    model: str = Field(..., description="Model id the request was sent to")
    scores: Optional[list[ScoreItem]] = Field(default=None, description="Label scores")
    text: Optional[str] = Field(default=None, description="Generated text")
    payload: Any = Field(default=None, description="Raw decoded JSON body")
    status_code: int = Field(default=200, description="HTTP status")
    latency_ms: int = Field(..., ge=0, description="Round-trip latency in milliseconds")
