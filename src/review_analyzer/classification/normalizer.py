"""
Classifier normalizer.

Turns heterogeneous, possibly malformed model output into exactly one label
from a closed set. Hosted models answer in different shapes (score lists,
free text with explanations, other languages), so every function here is
total: unparseable input resolves to the configured default and nothing is
raised to the caller.

Sentiment:
    score list  -> highest score wins, label mapped by "pos"/"neg" substring
    free text   -> first non-blank line matched against positive, negative,
                   neutral patterns in that order

Noun level:
    free text   -> high, medium, low patterns in that order, then a bare
                   number in the line, then the local noun count
"""

import math
import re
from typing import Any, Optional

import structlog

from review_analyzer.models.enums import NounLevelEnum, SentimentEnum


logger = structlog.get_logger(__name__)

HIGH_THRESHOLD = 15  # count > 15 -> high
MEDIUM_THRESHOLD = 6  # count >= 6 -> medium, below -> low

LEADING_NON_LETTERS_RE = re.compile(r"^[\W\d_]+")

SENTIMENT_PATTERNS: list[tuple[SentimentEnum, re.Pattern]] = [
    (
        SentimentEnum.POSITIVE,
        re.compile(r"positiv|positif|\bpos\b|позитив|положительн"),
    ),
    (
        SentimentEnum.NEGATIVE,
        re.compile(r"negativ|négati|negatif|\bneg\b|негатив|отрицательн"),
    ),
    (
        SentimentEnum.NEUTRAL,
        re.compile(r"neutr|нейтрал"),
    ),
]

NOUN_LEVEL_PATTERNS: list[tuple[NounLevelEnum, re.Pattern]] = [
    (
        NounLevelEnum.HIGH,
        re.compile(
            r"\bhigh\b|\bmany\b|>\s*15|(?:more than|over|above) 15"
            r"|\balt[oa]\b|élevé|\bhoch\b|высок|много"
        ),
    ),
    (
        NounLevelEnum.MEDIUM,
        re.compile(
            r"\bmedium\b|\bmoderate\b|\b6\s*(?:-|–|to)\s*15\b"
            r"|\bmedi[oa]\b|moyen|mittel|средн"
        ),
    ),
    (
        NounLevelEnum.LOW,
        re.compile(
            r"\blow\b|\bfew\b|<\s*6|(?:less than|fewer than|under|below) 6\b"
            r"|\bbaj[oa]\b|\bbass[oa]\b|faible|niedrig|низк|мало"
        ),
    ),
]

NUMBER_RE = re.compile(r"(?<![\d.,])(\d{1,4})(?![\d.,]?\d)")


def _coerce_text(raw: Any) -> str:
    """Pull free text out of the shapes generator models return."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="ignore")
    if isinstance(raw, dict):
        value = raw.get("generated_text")
        return value if isinstance(value, str) else ""
    if isinstance(raw, (list, tuple)) and raw:
        return _coerce_text(raw[0]) if isinstance(raw[0], (dict, str)) else ""
    return ""


def first_line(raw: Any) -> str:
    """
    First non-blank line of the model output, lower-cased.

    Returns "" when there is no text at all.
    """
    for line in _coerce_text(raw).splitlines():
        if line.strip():
            return line.strip().lower()
    return ""


def _score_entries(raw: Any) -> Optional[list[tuple[str, float]]]:
    """
    Extract (label, score) pairs from structured output.

    Returns None when `raw` is not structured (free text), and an empty list
    when it is structured but holds no usable entry.
    """
    if isinstance(raw, dict):
        candidates = [raw] if "label" in raw else None
    elif isinstance(raw, (list, tuple)) and raw:
        flat: list = []
        for item in raw:
            if isinstance(item, (list, tuple)):
                flat.extend(item)
            else:
                flat.append(item)
        candidates = flat if any(_looks_scored(item) for item in flat) else None
    else:
        candidates = None

    if candidates is None:
        return None

    entries = []
    for item in candidates:
        label = _field(item, "label")
        score = _field(item, "score")
        if not isinstance(label, str):
            continue
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            continue
        if not math.isfinite(score):
            continue
        entries.append((label, float(score)))
    return entries


def _field(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def _looks_scored(item: Any) -> bool:
    if isinstance(item, dict):
        return "label" in item
    return hasattr(item, "label") and hasattr(item, "score")


def top_score(raw: Any) -> Optional[tuple[str, float]]:
    """
    Highest-scoring (label, score) of structured output.

    Ties are broken by label so the result does not depend on input order.
    Returns None for free text or when no entry is usable.
    """
    entries = _score_entries(raw)
    if not entries:
        return None
    return max(entries, key=lambda entry: (entry[1], entry[0]))


def label_to_sentiment(label: str) -> SentimentEnum:
    """Map a model label by substring: "pos" -> positive, "neg" -> negative."""
    lowered = label.lower()
    if "pos" in lowered:
        return SentimentEnum.POSITIVE
    if "neg" in lowered:
        return SentimentEnum.NEGATIVE
    return SentimentEnum.NEUTRAL


def match_sentiment(raw: Any, min_score: float = 0.0) -> Optional[SentimentEnum]:
    """
    Sentiment found in the output, or None when nothing matched.

    Args:
        raw: Score list, single score mapping, or free text
        min_score: Structured winners scoring below this map to neutral
    """
    entries = _score_entries(raw)
    if entries is not None:
        if not entries:
            return None
        label, score = max(entries, key=lambda entry: (entry[1], entry[0]))
        if score < min_score:
            return SentimentEnum.NEUTRAL
        return label_to_sentiment(label)

    line = LEADING_NON_LETTERS_RE.sub("", first_line(raw))
    for sentiment, pattern in SENTIMENT_PATTERNS:
        if pattern.search(line):
            return sentiment
    return None


def normalize_sentiment(
    raw: Any,
    default: SentimentEnum = SentimentEnum.NEUTRAL,
    min_score: float = 0.0,
) -> SentimentEnum:
    """
    Normalize model output to a sentiment label. Never raises.

    Examples:
        >>> normalize_sentiment("Positive.\\nThe reviewer liked it")
        <SentimentEnum.POSITIVE: 'positive'>
        >>> normalize_sentiment([[{"label": "NEGATIVE", "score": 0.98},
        ...                       {"label": "POSITIVE", "score": 0.02}]])
        <SentimentEnum.NEGATIVE: 'negative'>
        >>> normalize_sentiment(None)
        <SentimentEnum.NEUTRAL: 'neutral'>
    """
    try:
        matched = match_sentiment(raw, min_score=min_score)
    except Exception as e:
        logger.warning("Sentiment normalization failed", error=str(e), raw_type=type(raw).__name__)
        return default
    return matched if matched is not None else default


def classify_noun_count(count: int) -> NounLevelEnum:
    """Bucket a noun count: >15 high, 6-15 medium, <6 low."""
    if count > HIGH_THRESHOLD:
        return NounLevelEnum.HIGH
    if count >= MEDIUM_THRESHOLD:
        return NounLevelEnum.MEDIUM
    return NounLevelEnum.LOW


def match_noun_level(raw: Any) -> Optional[NounLevelEnum]:
    """Noun level found in the output (keywords, then a bare number), or None."""
    line = first_line(raw)
    if not line:
        return None

    for level, pattern in NOUN_LEVEL_PATTERNS:
        if pattern.search(line):
            return level

    number = NUMBER_RE.search(line)
    if number:
        return classify_noun_count(int(number.group(1)))
    return None


def normalize_noun_level(
    raw: Any,
    noun_count: Optional[int] = None,
    default: NounLevelEnum = NounLevelEnum.MEDIUM,
) -> NounLevelEnum:
    """
    Normalize model output to a noun-density level. Never raises.

    Args:
        raw: Free text (or generated_text shapes) from the model
        noun_count: Local heuristic count used when the text is ambiguous
        default: Level returned when neither text nor count decide

    Examples:
        >>> normalize_noun_level("Medium (6-15)")
        <NounLevelEnum.MEDIUM: 'medium'>
        >>> normalize_noun_level("I cannot tell", noun_count=20)
        <NounLevelEnum.HIGH: 'high'>
    """
    try:
        matched = match_noun_level(raw)
        if matched is not None:
            return matched
        if noun_count is not None:
            return classify_noun_count(int(noun_count))
    except Exception as e:
        logger.warning("Noun level normalization failed", error=str(e), raw_type=type(raw).__name__)
    return default
