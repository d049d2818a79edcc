"""
Enumerations for Review Analyzer data models.

All label enums are closed sets - normalization never produces a value
outside them.
"""

from enum import Enum


class SentimentEnum(str, Enum):
    """
    Review sentiment classification.
    
    Single-label: exactly one value per analysis.
    """
    
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class NounLevelEnum(str, Enum):
    """
    Noun-density level of a review.
    
    Thresholds on the noun count: >15 high, 6-15 medium, <6 low.
    """
    
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskEnum(str, Enum):
    """Classification task requested by the user."""
    
    SENTIMENT = "sentiment"
    NOUN_LEVEL = "noun_level"


class BackendMode(str, Enum):
    """How a remote model is driven."""
    
    CLASSIFIER = "classifier"  # Review text in, {label, score} list out
    GENERATOR = "generator"  # Prompt in, generated text out
