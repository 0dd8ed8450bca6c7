"""Pytest fixtures for the decodekit test-suite."""
from __future__ import annotations

import pytest

from decodekit.config import LOG_FAILURES_ENV, METRICS_ENV, reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):  # noqa: D401
    """Every test starts from default settings, read from a clean environment."""
    monkeypatch.delenv(LOG_FAILURES_ENV, raising=False)
    monkeypatch.delenv(METRICS_ENV, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def user_decoder():
    """The two-field object decoder used throughout the examples."""
    import decodekit as Decode

    return Decode.object(
        {
            "name": Decode.required("name", Decode.str),
            "id": Decode.required("id", Decode.number),
        }
    )


@pytest.fixture()
def anyio_backend():  # noqa: D401
    """Force *anyio* tests to use the standard asyncio backend only."""
    return "asyncio"
