"""Custom Prometheus metrics for Review Analyzer.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules worth configuring:
- inference_requests_total{outcome="InferenceRateLimitError"} (token shared by too many users)
- backend_fallbacks_total (hosted models unavailable, local heuristics in use)
"""

from prometheus_client import Counter, Histogram

# === Inference Metrics ===

inference_requests_total = Counter(
    "inference_requests_total",
    "Total hosted inference calls by model and outcome",
    ["model", "outcome"],
)
"""
Inference calls counter.

Labels:
- model: hosted model id
- outcome: "success", or the error class name
  (InferenceRateLimitError, InferenceAuthError, InferenceTimeoutError, ...)
"""

inference_latency_seconds = Histogram(
    "inference_latency_seconds",
    "Hosted inference round-trip latency in seconds",
    ["model"],
    buckets=(0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0),
)

# === Classification Metrics ===

backend_fallbacks_total = Counter(
    "backend_fallbacks_total",
    "Times a fallback chain moved past a failed backend",
    ["task", "backend"],
)
"""
Fallback counter.

Labels:
- task: sentiment, noun_level
- backend: name of the backend that failed
"""

classification_labels_total = Counter(
    "classification_labels_total",
    "Produced labels by task, label and source",
    ["task", "label", "source"],
)
"""
Label distribution.

A rising share of source="default" means model outputs stopped matching
the normalizer patterns (prompt or model drift).
"""
