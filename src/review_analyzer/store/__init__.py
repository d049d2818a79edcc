"""Review store: TSV parsing, loading from path/URL, random selection."""

from review_analyzer.store.exceptions import NoReviewsLoadedError, ReviewLoadError
from review_analyzer.store.review_store import ReviewStore, load_reviews, parse_reviews

__all__ = [
    "NoReviewsLoadedError",
    "ReviewLoadError",
    "ReviewStore",
    "load_reviews",
    "parse_reviews",
]
