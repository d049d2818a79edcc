"""
Review data model.

A Review is loaded once per session from the TSV file and never mutated.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Review(BaseModel):
    """Single product review (one TSV row with non-empty text)."""
    
    model_config = ConfigDict(frozen=True)
    
    text: str = Field(..., min_length=1, description="Review body")
    
    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Review text must not be blank")
        return v
