# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for decodekit."""

from __future__ import annotations

import time

from ..config import get_settings
from .runtime import meter

decode_outcome_total = meter.create_counter(
    name="decodekit.decode.outcome.total",
    description="Counts decode attempts made through the runtime helpers, by outcome.",
    unit="1",
)

decode_latency_ms = meter.create_histogram(
    name="decodekit.decode.latency.ms",
    description="Time taken to decode a single value through the runtime helpers.",
    unit="ms",
)


def record_decode_metrics(decoder_name: str, status: str, start: float) -> None:
    """Record the outcome and latency of a decode started at *start* (perf_counter)."""

    if not get_settings().metrics_enabled:
        return

    attributes = {"decoder": decoder_name, "status": status}
    decode_outcome_total.add(1, attributes)
    decode_latency_ms.record((time.perf_counter() - start) * 1000.0, attributes)


__all__ = [
    "decode_latency_ms",
    "decode_outcome_total",
    "record_decode_metrics",
]
