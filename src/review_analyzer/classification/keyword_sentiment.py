"""
Keyword-count sentiment heuristic.

Counts positive and negative keyword hits, flipping a hit when one of the
two preceding tokens is a negator ("not good" counts as negative). Ties and
texts without hits are neutral.
"""

from review_analyzer.classification.lexicon import NEGATIVE_WORDS, NEGATORS, POSITIVE_WORDS
from review_analyzer.classification.noun_counter import tokenize_sentences
from review_analyzer.models.enums import SentimentEnum


NEGATION_WINDOW = 2


def keyword_hits(text) -> tuple[int, int]:
    """Return (positive_hits, negative_hits) for a text."""
    if not isinstance(text, str) or not text.strip():
        return 0, 0

    positive = negative = 0
    for tokens in tokenize_sentences(text):
        lowered = [t.lower().replace("’", "'") for t in tokens]
        for i, word in enumerate(lowered):
            if word in POSITIVE_WORDS:
                polarity = 1
            elif word in NEGATIVE_WORDS:
                polarity = -1
            else:
                continue
            window = lowered[max(0, i - NEGATION_WINDOW):i]
            if any(w in NEGATORS for w in window):
                polarity = -polarity
            if polarity > 0:
                positive += 1
            else:
                negative += 1
    return positive, negative


def score_sentiment_locally(text) -> SentimentEnum:
    """Classify sentiment from keyword hits alone."""
    positive, negative = keyword_hits(text)
    if positive > negative:
        return SentimentEnum.POSITIVE
    if negative > positive:
        return SentimentEnum.NEGATIVE
    return SentimentEnum.NEUTRAL
