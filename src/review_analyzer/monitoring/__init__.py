"""Prometheus metrics for inference calls, fallbacks and label distribution."""
