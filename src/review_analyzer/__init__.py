"""
Review Analyzer.

Loads product reviews from a TSV file, picks one at random and classifies it:
- Sentiment (positive / negative / neutral)
- Noun-density level (high / medium / low)

Classification goes through a hosted inference API (Hugging Face) with
regex/keyword based local fallbacks when the API is unavailable.

Architecture: FastAPI surface + httpx inference client + normalizer/fallback chain
"""

__version__ = "0.1.0"
