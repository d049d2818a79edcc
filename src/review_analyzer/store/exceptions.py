"""
Review store exceptions.

ReviewLoadError covers data-load failures (missing file, HTTP error,
malformed TSV, missing "text" column). NoReviewsLoadedError is raised by
random selection on an empty store.
"""

from review_analyzer.exceptions import ReviewAnalyzerError


class ReviewLoadError(ReviewAnalyzerError):
    """Raised when the reviews TSV cannot be fetched or parsed."""
    default_user_message = "Failed to load reviews data"


class NoReviewsLoadedError(ReviewAnalyzerError):
    """Raised when a random review is requested but none are loaded."""
    default_user_message = "No reviews loaded yet"
