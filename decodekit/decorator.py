# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

# decodekit/decorator.py

import functools
import inspect
import logging
from typing import Any, Callable, Optional

from .decoder import Decoder, ensure_decoder
from .exceptions import DecodeError
from .runtime import decode

logger = logging.getLogger(__name__)

# Sentinel object to detect if a parameter was provided by the user
_sentinel = object()


def _accepts_error(handler: Callable) -> bool:
    """True when *handler* can be called with the error as its only argument."""

    try:
        inspect.signature(handler).bind(None)
    except TypeError:
        return False
    except ValueError:
        # No signature available (some builtins); assume it takes the error.
        return True
    return True


def decode_result(
    decoder: Decoder,
    *,
    on_failure: Any = _sentinel,
    name: Optional[str] = None,
):
    """
    Decode the return value of the wrapped function with *decoder*.

    Works for plain and ``async def`` functions alike. The decoded value
    replaces the original return value, so decoders that transform (an
    ``enumeration`` with a coercion, ``with_default``, ``object`` with
    ``into=``) take effect for the caller.

    :param decoder: The decoder applied to the return value.
    :param on_failure: Optional. If not provided, the ``DecodeError`` is
                       raised. If it is a callable, it is invoked and its
                       result returned; the ``DecodeError`` is passed as an
                       argument if the callable accepts it. Any other value is
                       returned directly.
    :param name: Optional. Label used in logs and metrics. Defaults to the
                 function's qualified name.

    .. code-block:: python

        from decodekit import decode_result
        import decodekit as Decode

        User = Decode.object({
            "name": Decode.required("name", Decode.str),
            "id": Decode.required("id", Decode.number),
        })

        @decode_result(User, on_failure=None)
        def load_user(raw): return json.loads(raw)
    """

    decoder = ensure_decoder(decoder, "decode_result()")

    def wrap(func: Callable):
        label = name or f"{func.__module__}.{func.__qualname__}"

        def _handle_failure(error: DecodeError):
            """Executes the user-supplied `on_failure` handler or raises by default."""

            if on_failure is _sentinel:
                raise error

            logger.debug("Return value of '%s' failed to decode; using on_failure", label)
            if not callable(on_failure):
                return on_failure

            if _accepts_error(on_failure):
                return on_failure(error)
            return on_failure()

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                result = await func(*args, **kwargs)
                try:
                    return decode(decoder, result, name=label)
                except DecodeError as error:
                    handled = _handle_failure(error)
                    if inspect.isawaitable(handled):
                        return await handled
                    return handled

            wrapper = async_wrapper
        else:

            @functools.wraps(func)
            def sync_wrapper(*args, **kwargs):
                result = func(*args, **kwargs)
                try:
                    return decode(decoder, result, name=label)
                except DecodeError as error:
                    return _handle_failure(error)

            wrapper = sync_wrapper

        wrapper.__decodekit_decoder__ = decoder
        return wrapper

    return wrap


__all__ = ["decode_result"]
