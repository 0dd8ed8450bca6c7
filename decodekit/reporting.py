# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Helpers for walking and displaying a chain of decode failures."""

from __future__ import annotations

from typing import Iterator, Optional

from .exceptions import DecodeError


def iter_failure_chain(error: DecodeError) -> Iterator[DecodeError]:
    """Yield *error* and then each ``inner_error``, outermost first."""

    current: Optional[DecodeError] = error
    while current is not None:
        yield current
        current = current.inner_error


def root_cause(error: DecodeError) -> DecodeError:
    """Return the innermost failure in the chain."""

    cause = error
    for cause in iter_failure_chain(error):
        pass
    return cause


def format_failure(error: DecodeError, *, label: Optional[str] = None) -> str:
    """Produce a human-readable, multi-line report of a failure chain."""

    header = f"Decoding failed for '{label}':" if label else "Decoding failed:"
    lines = [header]
    for link in iter_failure_chain(error):
        lines.append(f" - {link.plain_message}")
    return "\n".join(lines)


__all__ = [
    "format_failure",
    "iter_failure_chain",
    "root_cause",
]
