"""
Local noun-count heuristic.

Used only when no hosted model is reachable, or when a model answer for the
noun level matches no known pattern. It is a rule-based approximation, not a
part-of-speech tagger: false positives/negatives are expected.

Pipeline:
1. Strip URLs, HTML tags/entities and ID-like tokens (letters mixed with digits)
2. Split into sentences (to know which words are sentence-initial)
3. Drop punctuation except apostrophes/hyphens, tokenize on word boundaries
4. Exclude closed word classes (pronouns, auxiliaries, adverbs, ...)
5. Count what looks nominal (word list, suffix, mid-sentence capital, long word)
"""

import re

from review_analyzer.classification.lexicon import (
    COMMON_NOUNS,
    EXCLUDED_WORDS,
    NOMINAL_SUFFIXES,
)


URL_RE = re.compile(r"(?:https?://|www\.)\S+", re.IGNORECASE)
HTML_TAG_RE = re.compile(r"<[^>]+>")
HTML_ENTITY_RE = re.compile(r"&(?:[a-z]+|#\d+);", re.IGNORECASE)
ID_TOKEN_RE = re.compile(r"\b(?=[\w-]*\d)(?=[\w-]*[^\W\d_])[\w-]+\b")
SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+|\n+")
PUNCTUATION_RE = re.compile(r"[^\w\s'’-]")
TOKEN_RE = re.compile(r"[^\W\d_]+(?:['’-][^\W\d_]+)*")

MIN_SUFFIX_WORD_LENGTH = 5  # "longer than 4 characters"
MIN_FALLBACK_WORD_LENGTH = 5


def _strip_noise(text: str) -> str:
    text = URL_RE.sub(" ", text)
    text = HTML_TAG_RE.sub(" ", text)
    text = HTML_ENTITY_RE.sub(" ", text)
    return ID_TOKEN_RE.sub(" ", text)


def tokenize_sentences(text: str) -> list[list[str]]:
    """
    Split cleaned text into sentences of word tokens.

    Tokens keep internal apostrophes and hyphens ("don't", "well-made").
    Empty sentences are dropped.
    """
    sentences = []
    for sentence in SENTENCE_SPLIT_RE.split(_strip_noise(text)):
        tokens = TOKEN_RE.findall(PUNCTUATION_RE.sub(" ", sentence))
        if tokens:
            sentences.append(tokens)
    return sentences


def is_probable_noun(token: str, sentence_initial: bool = False) -> bool:
    """Decide whether a single token counts as a noun."""
    lower = token.lower().replace("’", "'")
    base = lower[:-2] if lower.endswith("'s") else lower

    if lower in EXCLUDED_WORDS or base in EXCLUDED_WORDS:
        return False
    if base in COMMON_NOUNS:
        return True
    if len(base) >= MIN_SUFFIX_WORD_LENGTH and base.endswith(NOMINAL_SUFFIXES):
        return True
    # Proper-noun guess: capitalized but not just because it starts a sentence
    if token[0].isupper() and not sentence_initial:
        return True
    letters = base.replace("-", "").replace("'", "")
    return token.islower() and letters.isalpha() and len(base) >= MIN_FALLBACK_WORD_LENGTH


def count_nouns_locally(text) -> int:
    """
    Count probable nouns in a review.

    Deterministic and total: non-string or blank input returns 0.

    Examples:
        >>> count_nouns_locally("Great product, fast shipping!")
        2
    """
    if not isinstance(text, str) or not text.strip():
        return 0

    count = 0
    for tokens in tokenize_sentences(text):
        for position, token in enumerate(tokens):
            if is_probable_noun(token, sentence_initial=position == 0):
                count += 1
    return count
