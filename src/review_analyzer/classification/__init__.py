"""
Classification: normalizer, local heuristics and the backend fallback chain.

Components:
- normalizer: model output -> closed label set (never raises)
- noun_counter / keyword_sentiment: local rule-based fallbacks
- backends: RemoteBackend / LocalHeuristicBackend strategies
- chain: BackendChain (ordered attempts) and ReviewClassifier
"""

from review_analyzer.classification.normalizer import (
    classify_noun_count,
    match_noun_level,
    match_sentiment,
    normalize_noun_level,
    normalize_sentiment,
)
from review_analyzer.classification.noun_counter import count_nouns_locally
from review_analyzer.classification.keyword_sentiment import score_sentiment_locally
from review_analyzer.classification.backends import (
    ClassificationBackend,
    LocalHeuristicBackend,
    RemoteBackend,
)
from review_analyzer.classification.chain import (
    BackendChain,
    ChainExhausted,
    ReviewClassifier,
)

__all__ = [
    "classify_noun_count",
    "match_noun_level",
    "match_sentiment",
    "normalize_noun_level",
    "normalize_sentiment",
    "count_nouns_locally",
    "score_sentiment_locally",
    "ClassificationBackend",
    "LocalHeuristicBackend",
    "RemoteBackend",
    "BackendChain",
    "ChainExhausted",
    "ReviewClassifier",
]
