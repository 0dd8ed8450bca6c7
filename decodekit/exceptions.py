# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception types raised by decodekit."""

from __future__ import annotations

from typing import Optional


class DecodekitError(Exception):
    """Base class for every error raised by the library."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DecodeError(DecodekitError):
    """A value did not match the shape a decoder expects.

    ``plain_message`` holds the description alone so that outer combinators
    can embed it into their own message; ``message`` carries the banner.
    ``inner_error`` points at the more specific failure that caused this one,
    forming a chain from the outermost failure down to the leaf that failed.
    """

    BANNER = "Decode Failure: "

    def __init__(self, message: str, inner_error: Optional["DecodeError"] = None):
        self.plain_message = message
        self.inner_error = inner_error
        super().__init__(self.BANNER + message)

    def __reduce__(self):
        return (type(self), (self.plain_message, self.inner_error))

    def __repr__(self) -> str:
        return f"DecodeError({self.plain_message!r})"


class ConfigurationError(DecodekitError):
    """A combinator was built from arguments it cannot work with."""


__all__ = [
    "ConfigurationError",
    "DecodeError",
    "DecodekitError",
]
