# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Composable decoders for validating untyped data.

Import the package under a short alias and build decoders from its
attributes::

    import decodekit as Decode

    User = Decode.object({
        "name": Decode.required("name", Decode.str),
        "id": Decode.required("id", Decode.number),
    })

    User({"name": "tester", "id": 42})   # -> {"name": "tester", "id": 42}

Several names (``object``, ``str``, ``bool``) match Python builtins, so they
are left out of ``__all__``; use attribute access rather than star imports.
"""

from .decoder import UNDEFINED, Decoder, describe_actual, fail
from .decorator import decode_result
from .exceptions import ConfigurationError, DecodeError, DecodekitError
from .modifiers import custom, dependent, enumeration, nullable, optional, required, with_default
from .primitives import any_object, boolean, date, hardcoded, number, string, without_validation
from .reporting import format_failure, iter_failure_chain, root_cause
from .runtime import DecodeResult, decode, try_decode
from .structural import array, dictionary, obj

# Public names from the combinator catalogue.
object = obj  # noqa: A001
str = string  # noqa: A001
bool = boolean  # noqa: A001
anyObject = any_object
withDefault = with_default
withoutValidation = without_validation
actualValueDescription = describe_actual

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "DecodeResult",
    "Decoder",
    "DecodekitError",
    "UNDEFINED",
    "actualValueDescription",
    "anyObject",
    "any_object",
    "array",
    "boolean",
    "custom",
    "date",
    "decode",
    "decode_result",
    "dependent",
    "describe_actual",
    "dictionary",
    "enumeration",
    "fail",
    "format_failure",
    "hardcoded",
    "iter_failure_chain",
    "nullable",
    "number",
    "obj",
    "optional",
    "required",
    "root_cause",
    "string",
    "try_decode",
    "withDefault",
    "with_default",
    "withoutValidation",
    "without_validation",
]
