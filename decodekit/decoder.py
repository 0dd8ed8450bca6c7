# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""The decoder abstraction and the value predicates shared by all decoders.

A :class:`Decoder` is a callable paired with an *expectation*: a short
phrase such as ``"be a string"`` that reads naturally after "Expected to".
Combinators embed the expectations of the decoders they wrap into their own
expectation and into the failure messages they raise.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from datetime import date as _date
from typing import Any, Callable, Generic, Optional, TypeVar

from .exceptions import ConfigurationError, DecodeError

T = TypeVar("T")


class _Undefined:
    """Marker for a value that is absent rather than ``None``."""

    _instance: Optional["_Undefined"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


class Decoder(Generic[T]):
    """An invocable validation step with a human-readable expectation."""

    def __init__(
        self,
        fn: Callable[[Any], T],
        expectation: Optional[str],
        *,
        name: Optional[str] = None,
    ):
        self._fn = fn
        self._expectation = expectation
        self._name = name

    @property
    def expectation(self) -> Optional[str]:
        return self._expectation

    @property
    def name(self) -> str:
        return self._name or "custom"

    def __call__(self, value: Any) -> T:
        return self._fn(value)

    def __repr__(self) -> str:
        return f"<Decoder {self.name}: {self.expectation!r}>"


def ensure_decoder(candidate: Any, where: str) -> Decoder:
    """Reject anything that is not a :class:`Decoder` at build time."""

    if not isinstance(candidate, Decoder):
        raise ConfigurationError(
            f"{where} expects a Decoder but was given {type(candidate).__name__}"
        )
    return candidate


def ensure_callable(candidate: Any, where: str) -> Callable:
    if not callable(candidate):
        raise ConfigurationError(
            f"{where} expects a callable but was given {type(candidate).__name__}"
        )
    return candidate


# ---------------------------------------------------------------------------
# Value predicates
# ---------------------------------------------------------------------------


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    # bool is an int subclass but never counts as a number here.
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_date(value: Any) -> bool:
    return isinstance(value, _date)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """True for containers and instances, false for scalars and null."""

    if value is None or value is UNDEFINED:
        return False
    return not isinstance(value, (str, bytes, bytearray, numbers.Number))


def is_nil(value: Any) -> bool:
    """True for ``None``, :data:`UNDEFINED` and float NaN."""

    if value is None or value is UNDEFINED:
        return True
    return isinstance(value, float) and math.isnan(value)


def has_key(container: Any, key: Any) -> bool:
    return isinstance(container, Mapping) and key in container


# ---------------------------------------------------------------------------
# Message helpers
# ---------------------------------------------------------------------------


def render_value(value: Any) -> str:
    """Render a scalar the way it appears between brackets in messages."""

    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return "%d" % value
    return str(value)


def describe_actual(value: Any) -> str:
    """Describe *value* for the "but got ..." part of a failure message.

    >>> describe_actual("tester")
    '[tester]'
    >>> describe_actual({"name": "tester", "id": 42})
    'an object with the properties [name, id]'
    """

    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if is_string(value) or is_number(value):
        return f"[{render_value(value)}]"
    if is_mapping(value):
        return f"an object with the properties [{', '.join(str(key) for key in value)}]"
    if is_boolean(value):
        return "boolean"
    if callable(value):
        return "function"
    return "object"


def fail(message: str) -> DecodeError:
    """Build a bare :class:`DecodeError` for custom decoders to raise."""

    return DecodeError(message)


__all__ = [
    "Decoder",
    "UNDEFINED",
    "describe_actual",
    "ensure_callable",
    "ensure_decoder",
    "fail",
    "has_key",
    "is_array",
    "is_boolean",
    "is_date",
    "is_mapping",
    "is_nil",
    "is_number",
    "is_object",
    "is_string",
    "render_value",
]
