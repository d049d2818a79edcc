"""
Session (input-validation) exceptions.

Raised inside the handlers and turned into messages in AppState.error.
"""

from review_analyzer.exceptions import ReviewAnalyzerError


class NoReviewSelectedError(ReviewAnalyzerError):
    """Analysis requested before a review was selected."""
    default_user_message = "Please select a review first"


class ActionInProgressError(ReviewAnalyzerError):
    """Another action is still pending (controls are disabled)."""
    default_user_message = "Another request is still running - please wait"
