# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests that the runtime helpers record decode outcome metrics."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

import decodekit as Decode
from decodekit.config import reset_settings
from decodekit.telemetry import metrics as decode_metrics


@pytest.fixture()
def instruments(monkeypatch):
    counter = MagicMock()
    histogram = MagicMock()
    monkeypatch.setattr(decode_metrics, "decode_outcome_total", counter)
    monkeypatch.setattr(decode_metrics, "decode_latency_ms", histogram)
    return counter, histogram


def test_success_is_counted(instruments):
    counter, histogram = instruments

    Decode.try_decode(Decode.str, "ok", name="greeting")

    counter.add.assert_called_once_with(1, {"decoder": "greeting", "status": "success"})
    [call] = histogram.record.call_args_list
    latency, attributes = call.args
    assert latency >= 0
    assert attributes == {"decoder": "greeting", "status": "success"}


def test_failure_is_counted_with_decoder_name(instruments):
    counter, _ = instruments

    Decode.try_decode(Decode.array(Decode.number), "nope")

    counter.add.assert_called_once_with(1, {"decoder": "array", "status": "failure"})


def test_metrics_disabled_by_environment(instruments, monkeypatch):
    counter, histogram = instruments
    monkeypatch.setenv("DECODEKIT_METRICS", "0")
    reset_settings()

    Decode.try_decode(Decode.str, "ok")

    counter.add.assert_not_called()
    histogram.record.assert_not_called()


def test_decorated_function_uses_qualified_name(instruments):
    counter, _ = instruments

    @Decode.decode_result(Decode.number)
    def answer():
        return 42

    answer()

    [call] = counter.add.call_args_list
    assert call.args[1]["decoder"].endswith("test_decorated_function_uses_qualified_name.<locals>.answer")


def test_real_instruments_accept_records():
    decode_metrics.record_decode_metrics("str", "success", 0.0)
