# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Leaf decoders that check a single runtime type and pass the value through."""

from __future__ import annotations

from datetime import date as _date
from typing import Any, Callable, TypeVar

from .decoder import (
    Decoder,
    describe_actual,
    is_boolean,
    is_date,
    is_number,
    is_object,
    is_string,
)
from .exceptions import DecodeError

T = TypeVar("T")


def _primitive(name: str, expectation: str, check: Callable[[Any], bool]) -> Decoder:
    def decode(value: Any) -> Any:
        if not check(value):
            raise DecodeError(f"Expected to {expectation} but got {describe_actual(value)}.")
        return value

    return Decoder(decode, expectation, name=name)


string: Decoder[str] = _primitive("str", "be a string", is_string)
number: Decoder[float] = _primitive("number", "be a number", is_number)
boolean: Decoder[bool] = _primitive("bool", "be a boolean", is_boolean)
date: Decoder[_date] = _primitive("date", "be a date", is_date)
any_object: Decoder[Any] = _primitive("anyObject", "be an object", is_object)

without_validation: Decoder[Any] = Decoder(lambda value: value, "be any value", name="withoutValidation")


def hardcoded(value: T) -> Decoder[T]:
    """Ignore the input and always produce *value*."""

    return Decoder(lambda _ignored: value, None, name="hardcoded")


__all__ = [
    "any_object",
    "boolean",
    "date",
    "hardcoded",
    "number",
    "string",
    "without_validation",
]
