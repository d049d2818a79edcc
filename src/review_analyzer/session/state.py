"""
Application state.

One explicit AppState per session replaces page-level globals. Handlers
receive it as an argument and are the only code that mutates it; every
mutation happens on the single control-flow path of one action.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from review_analyzer.models.output_models import ClassificationResult
from review_analyzer.models.review_models import Review
from review_analyzer.store.review_store import ReviewStore


class Action(str, Enum):
    """User actions, one per page control."""

    LOAD_REVIEWS = "load_reviews"
    SELECT_REVIEW = "select_review"
    ANALYZE_SENTIMENT = "analyze_sentiment"
    COUNT_NOUNS = "count_nouns"


@dataclass
class AppState:
    """
    Mutable state of one session.

    Attributes:
        store: Loaded reviews (empty until a load succeeds)
        current_review: Review shown to the user, if any
        result: Last classification shown, kept when a later action fails
        error: Message shown in the error region, None when hidden
        pending: Actions currently running; non-empty means controls disabled
        api_token: Token entered by the user, sent as bearer token
    """

    store: ReviewStore = field(default_factory=ReviewStore)
    current_review: Optional[Review] = None
    result: Optional[ClassificationResult] = None
    error: Optional[str] = None
    pending: set[Action] = field(default_factory=set)
    api_token: Optional[str] = None

    @property
    def reviews_loaded(self) -> int:
        return len(self.store)

    @property
    def controls_disabled(self) -> bool:
        return bool(self.pending)
