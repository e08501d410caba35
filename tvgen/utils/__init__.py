"""Utility functions for sampling statistics."""

from tvgen.utils.metrics import SamplingStats, vector_set_metrics

__all__ = ["SamplingStats", "vector_set_metrics"]
