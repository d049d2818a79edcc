"""
Classification output models.

A ClassificationResult is produced per analysis request and never persisted.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from review_analyzer.models.enums import NounLevelEnum, SentimentEnum, TaskEnum


class ClassificationResult(BaseModel):
    """
    Outcome of one classification (sentiment or noun level).
    
    `source` tells where the label came from:
    - "remote": parsed from the hosted model output
    - "remote+heuristic": remote output was ambiguous, local noun count decided
    - "default": remote output was ambiguous, configured default used
    - "local": local heuristic backend (no model reached)
    """
    model_config = ConfigDict(frozen=True)
    
    task: TaskEnum
    label: Union[SentimentEnum, NounLevelEnum]
    source: str = Field(..., examples=["remote", "remote+heuristic", "default", "local"])
    backend: str = Field(..., description="Name of the backend that produced the label")
    model: Optional[str] = Field(default=None, description="Hosted model id, if remote")
    score: Optional[float] = Field(default=None, ge=0.0, le=1.0, description="Winning score")
    noun_count: Optional[int] = Field(default=None, ge=0, description="Local noun count, if computed")
    matched: bool = Field(default=True, description="False when the label is a fallback default")
    raw_excerpt: Optional[str] = Field(default=None, description="First 200 chars of model output")


class ChainAttempt(BaseModel):
    """Record of one backend attempt inside a fallback chain."""
    model_config = ConfigDict(frozen=True)
    
    backend: str
    success: bool
    error_type: Optional[str] = None
    error: Optional[str] = None
    latency_ms: int = Field(default=0, ge=0)
