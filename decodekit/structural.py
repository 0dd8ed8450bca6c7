# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Combinators for containers: fixed-shape objects, arrays and dictionaries."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

from .decoder import Decoder, describe_actual, ensure_callable, ensure_decoder, is_array, is_mapping
from .exceptions import ConfigurationError, DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def obj(fields: Mapping[str, Decoder], into: Optional[Callable[..., T]] = None) -> Decoder:
    """Build a decoder for a structure with a fixed set of named fields.

    Each field decoder receives the *whole* input, so fields are normally
    declared with :func:`~decodekit.modifiers.required` or
    :func:`~decodekit.modifiers.optional`, which extract their own key::

        user = obj({
            "name": required("name", string),
            "id": required("id", number),
        })

    The result is a new ``dict`` holding exactly the declared fields, in
    declaration order. When *into* is given, the decoded fields are passed to
    it as keyword arguments instead (``into=User`` for a dataclass).

    Fields are decoded in order and the first failure stops decoding. The
    raised :class:`DecodeError` names the failing field's expectation, adds
    the detail of the failure one level further in, and keeps the caught
    failure as ``inner_error``. Earlier decoder libraries of this shape drop
    the caught failure here; keeping it lets :func:`~decodekit.reporting.root_cause`
    reach the leaf, while ``message`` reads the same either way.
    """

    if not is_mapping(fields):
        raise ConfigurationError("object() expects a mapping of field names to decoders")
    fields = {name: ensure_decoder(decoder, f"object() field '{name}'") for name, decoder in fields.items()}
    if into is not None:
        ensure_callable(into, "object() into")

    expectation = f"be an object with the properties [{', '.join(fields)}]"
    logger.debug("Built object decoder with fields %s", list(fields))

    def decode(value: Any) -> Any:
        result: Dict[str, Any] = {}
        for name, decoder in fields.items():
            try:
                result[name] = decoder(value)
            except DecodeError as error:
                if error.inner_error is None:
                    detail = error.plain_message
                else:
                    detail = error.inner_error.plain_message
                raise DecodeError(
                    f"Expected the value to {decoder.expectation}. {detail}", error
                ) from error

        if into is not None:
            return into(**result)
        return result

    return Decoder(decode, expectation, name="object")


def array(decoder: Decoder[T]) -> Decoder[List[T]]:
    """Decode every element of a list or tuple, producing a new list."""

    decoder = ensure_decoder(decoder, "array()")
    expectation = f"be an array where each element should {decoder.expectation}"

    def decode(value: Any) -> List[T]:
        if not is_array(value):
            raise DecodeError(f"Expected to {expectation} but got {describe_actual(value)}.")
        # Element failures propagate untouched; no index is added.
        return [decoder(item) for item in value]

    return Decoder(decode, expectation, name="array")


def dictionary(decoder: Decoder[T]) -> Decoder[Dict[Any, T]]:
    """Decode every value of a mapping, keeping its keys."""

    decoder = ensure_decoder(decoder, "dictionary()")
    expectation = f"be a dictionary object where each value should {decoder.expectation}"

    def decode(value: Any) -> Dict[Any, T]:
        if not is_mapping(value):
            raise DecodeError(f"Expected the value to {expectation} but got {describe_actual(value)}.")

        result: Dict[Any, T] = {}
        for key, item in value.items():
            try:
                result[key] = decoder(item)
            except DecodeError as error:
                # The failing key is reported, but the inner failure is not chained.
                raise DecodeError(
                    f"Expected the value with the key [{key}] to {decoder.expectation}. {error.plain_message}"
                ) from error
        return result

    return Decoder(decode, expectation, name="dictionary")


__all__ = [
    "array",
    "dictionary",
    "obj",
]
