"""
Session layer: explicit application state and one handler per user action.
"""

from review_analyzer.session.exceptions import ActionInProgressError, NoReviewSelectedError
from review_analyzer.session.handlers import (
    analyze_sentiment,
    count_nouns,
    load_reviews_action,
    select_random_review,
    set_api_token,
)
from review_analyzer.session.state import Action, AppState
from review_analyzer.session.view import render_result

__all__ = [
    "ActionInProgressError",
    "NoReviewSelectedError",
    "analyze_sentiment",
    "count_nouns",
    "load_reviews_action",
    "select_random_review",
    "set_api_token",
    "Action",
    "AppState",
    "render_result",
]
