# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Combinators that wrap a single decoder and change control flow around it.

``required`` and ``optional`` pull one key out of a mapping before decoding
it, and are the only place field paths enter failure messages. ``nullable``
and ``with_default`` deal with null and empty results. ``enumeration``,
``custom`` and ``dependent`` cover closed string sets, escape hatches and
tagged unions.
"""

from __future__ import annotations

import logging
from functools import cached_property
from typing import Any, Callable, Optional, Sequence, TypeVar

from .decoder import (
    UNDEFINED,
    Decoder,
    describe_actual,
    ensure_callable,
    ensure_decoder,
    has_key,
    is_nil,
    is_string,
    render_value,
)
from .exceptions import ConfigurationError, DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P")


def required(path: Any, decoder: Decoder[T]) -> Decoder[T]:
    """Decode the value stored under *path*, failing when the key is absent."""

    decoder = ensure_decoder(decoder, "required()")
    inner = decoder.expectation

    def decode(value: Any) -> T:
        if not has_key(value, path):
            raise DecodeError(f"Expected the value at [{path}] to {inner} but there was none.")

        try:
            return decoder(value[path])
        except DecodeError as error:
            raise DecodeError(
                f"Expected the value at [{path}] to {inner}. {error.plain_message}", error
            ) from error

    return Decoder(decode, f"{inner} at [{path}]", name="required")


def nullable(decoder: Decoder[T]) -> Decoder[Optional[T]]:
    """Accept ``None`` as-is and hand anything else to *decoder*."""

    decoder = ensure_decoder(decoder, "nullable()")
    expectation = f"be null or {decoder.expectation}"

    def decode(value: Any) -> Optional[T]:
        if value is None:
            return None

        try:
            return decoder(value)
        except DecodeError as error:
            raise DecodeError(
                f"Expected the value to {expectation} but got {describe_actual(value)}. "
                f"{error.plain_message}",
                error,
            ) from error

    return Decoder(decode, expectation, name="nullable")


def optional(path: Any, decoder: Decoder[T]) -> Decoder[Optional[T]]:
    """Like :func:`required`, but an absent, undefined or null value yields ``None``."""

    decoder = ensure_decoder(decoder, "optional()")
    present = nullable(decoder)

    def decode(value: Any) -> Optional[T]:
        if not has_key(value, path):
            return None

        item = value[path]
        if item is UNDEFINED:
            return None

        return present(item)

    return Decoder(decode, f"{decoder.expectation} optionally at [{path}]", name="optional")


def with_default(default_value: T, decoder: Decoder[Optional[T]]) -> Decoder[T]:
    """Replace an empty result (null, undefined or NaN) with *default_value*.

    Failures raised by *decoder* are not caught.
    """

    decoder = ensure_decoder(decoder, "withDefault()")

    def decode(value: Any) -> T:
        result = decoder(value)
        if is_nil(result):
            return default_value
        return result

    return Decoder(decode, decoder.expectation, name="withDefault")


def enumeration(coerce: Callable[[str], T], options: Sequence[str]) -> Decoder[T]:
    """Accept one of a fixed set of strings and convert it with *coerce*.

    >>> colour = enumeration(str.upper, ["red", "green"])
    >>> colour("red")
    'RED'
    """

    coerce = ensure_callable(coerce, "enumeration()")
    if is_string(options) or not isinstance(options, (list, tuple)):
        raise ConfigurationError("enumeration() expects a list of string options")
    options = tuple(options)
    invalid = [option for option in options if not is_string(option)]
    if invalid:
        raise ConfigurationError(
            f"enumeration() options must be strings, got {', '.join(repr(option) for option in invalid)}"
        )

    allowed = frozenset(options)
    expectation = f"be one of [{', '.join(options)}]"
    logger.debug("Built enumeration decoder over %d options", len(options))

    def decode(value: Any) -> T:
        if not is_string(value) or value not in allowed:
            raise DecodeError(f"to {expectation} but got [{render_value(value)}]")
        return coerce(value)

    return Decoder(decode, expectation, name="enumeration")


def custom(fn: Callable[[Any], T], expectation: str) -> Decoder[T]:
    """Wrap *fn* as a decoder.

    *fn* is responsible for raising :class:`DecodeError` (see
    :func:`decodekit.fail`) when it rejects a value.
    """

    fn = ensure_callable(fn, "custom()")
    return Decoder(fn, expectation, name="custom")


class _DependentDecoder(Decoder):
    """Decoder whose expectation is derived from its selector on first use."""

    def __init__(self, fn, pivot: Decoder, select: Callable, expectation: Optional[str]):
        super().__init__(fn, expectation, name="dependent")
        self._pivot = pivot
        self._select = select

    @cached_property
    def _probed_expectation(self) -> Optional[str]:
        try:
            return getattr(ensure_callable(self._select(None), "dependent() selector"), "expectation")
        except Exception as exc:  # selector may not accept a null pivot
            logger.debug("dependent() selector could not describe itself without a pivot: %s", exc)
            return f"{self._pivot.expectation} followed by a dependent shape"

    @property
    def expectation(self) -> Optional[str]:
        if self._expectation is not None:
            return self._expectation
        return self._probed_expectation


def dependent(
    decoder: Decoder[P],
    select: Callable[[P], Decoder[T]],
    expectation: Optional[str] = None,
) -> Decoder[T]:
    """Decode a pivot with *decoder*, then decode the same input with ``select(pivot)``.

    The second decoder always receives the original input, not the pivot::

        shape = dependent(
            required("kind", enumeration(str, ["circle", "square"])),
            lambda kind: CIRCLE if kind == "circle" else SQUARE,
        )

    *select* may return any callable; returning something that cannot be
    called is reported as a :class:`DecodeError`.

    When *expectation* is omitted it is worked out lazily, the first time it
    is read, by asking ``select(None)`` for its expectation.
    """

    pivot = ensure_decoder(decoder, "dependent()")
    select = ensure_callable(select, "dependent()")

    def decode(value: Any) -> T:
        key = pivot(value)
        chosen = select(key)
        if not callable(chosen):
            raise DecodeError(
                f"Expected a decoder to be selected for [{render_value(key)}] but got {describe_actual(chosen)}."
            )
        return chosen(value)

    return _DependentDecoder(decode, pivot, select, expectation)


__all__ = [
    "custom",
    "dependent",
    "enumeration",
    "nullable",
    "optional",
    "required",
    "with_default",
]
