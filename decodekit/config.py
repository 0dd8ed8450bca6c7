# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings for the runtime helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

LOG_FAILURES_ENV = "DECODEKIT_LOG_FAILURES"
METRICS_ENV = "DECODEKIT_METRICS"

_FALSY = ("", "0", "false", "no", "off")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSY


@dataclass(frozen=True)
class DecodeSettings:
    """Settings read by :func:`decodekit.runtime.try_decode` and friends."""

    log_failures: bool = False  # WARNING instead of DEBUG for failures
    metrics_enabled: bool = True


def load_settings() -> DecodeSettings:
    """Read settings from the environment."""

    return DecodeSettings(
        log_failures=_env_flag(LOG_FAILURES_ENV, False),
        metrics_enabled=_env_flag(METRICS_ENV, True),
    )


_SETTINGS: Optional[DecodeSettings] = None


def get_settings() -> DecodeSettings:
    """Return the process-wide settings, loading them on first use."""

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""

    global _SETTINGS
    _SETTINGS = None


__all__ = [
    "DecodeSettings",
    "LOG_FAILURES_ENV",
    "METRICS_ENV",
    "get_settings",
    "load_settings",
    "reset_settings",
]
