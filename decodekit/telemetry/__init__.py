"""Telemetry package - metric instruments for decode outcomes."""

from .metrics import decode_latency_ms, decode_outcome_total, record_decode_metrics
from .runtime import meter

__all__ = [
    "decode_latency_ms",
    "decode_outcome_total",
    "meter",
    "record_decode_metrics",
]
