# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Runtime helpers that run a decoder and account for the outcome.

:func:`decode` raises like calling the decoder directly; :func:`try_decode`
returns a :class:`DecodeResult` instead. Both log failures and record the
``decodekit.decode.*`` metrics.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from .config import get_settings
from .decoder import Decoder
from .exceptions import DecodeError
from .reporting import format_failure
from .telemetry.metrics import record_decode_metrics

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class DecodeResult(Generic[T]):
    """Outcome of :func:`try_decode`: either a value or the failure."""

    ok: bool
    value: Optional[T] = None
    error: Optional[DecodeError] = None

    def unwrap(self) -> T:
        """Return the decoded value or raise the stored failure."""

        if not self.ok:
            assert self.error is not None
            raise self.error
        return self.value  # type: ignore[return-value]


def _log_failure(label: str, error: DecodeError) -> None:
    level = logging.WARNING if get_settings().log_failures else logging.DEBUG
    if logger.isEnabledFor(level):
        logger.log(level, "%s", format_failure(error, label=label))


def decode(decoder: Decoder[T], value: Any, *, name: Optional[str] = None) -> T:
    """Run *decoder* on *value*, recording the outcome, and re-raise failures."""

    label = name or decoder.name
    start = time.perf_counter()
    try:
        result = decoder(value)
    except DecodeError as error:
        record_decode_metrics(label, "failure", start)
        _log_failure(label, error)
        raise

    record_decode_metrics(label, "success", start)
    return result


def try_decode(decoder: Decoder[T], value: Any, *, name: Optional[str] = None) -> DecodeResult[T]:
    """Run *decoder* on *value* without raising :class:`DecodeError`."""

    try:
        return DecodeResult(ok=True, value=decode(decoder, value, name=name))
    except DecodeError as error:
        return DecodeResult(ok=False, error=error)


__all__ = [
    "DecodeResult",
    "decode",
    "try_decode",
]
