"""Display strings for classification results."""

from review_analyzer.models.enums import NounLevelEnum, SentimentEnum, TaskEnum
from review_analyzer.models.output_models import ClassificationResult


EMOJI = {
    SentimentEnum.POSITIVE: "👍",
    SentimentEnum.NEGATIVE: "👎",
    SentimentEnum.NEUTRAL: "❓",
    NounLevelEnum.HIGH: "🟢",
    NounLevelEnum.MEDIUM: "🟡",
    NounLevelEnum.LOW: "🔴",
}

TITLES = {
    TaskEnum.SENTIMENT: "Sentiment",
    TaskEnum.NOUN_LEVEL: "Noun Count Level",
}

PLACEHOLDER = "Results will appear here"


def render_result(result: ClassificationResult | None) -> str:
    """
    Render a result line, e.g. "Sentiment: 👍 POSITIVE (confidence: 99.87%)".

    Returns the placeholder text when there is no result.
    """
    if result is None:
        return PLACEHOLDER
    line = f"{TITLES[result.task]}: {EMOJI[result.label]} {result.label.value.upper()}"
    if result.score is not None:
        line += f" (confidence: {result.score * 100:.2f}%)"
    return line
