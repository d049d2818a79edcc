"""
Unit tests for Review Analyzer.

Components in isolation, collaborators mocked:
- Normalizer (closed label sets, thresholds, malformed input)
- Local heuristics (noun count, keyword sentiment)
- Backends and fallback chain
- Hugging Face client (httpx.MockTransport) and prompt builder
- Review store, session handlers, view rendering, API models
"""
