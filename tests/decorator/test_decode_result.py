"""
Tests for @decode_result - decoding the return value of a function.

Key concepts:
- The decoded value replaces the function's return value
- Sync and async functions are both supported
- on_failure controls what happens when the return value does not decode
"""
from __future__ import annotations

import pytest

import decodekit as Decode
from decodekit import ConfigurationError, DecodeError, decode_result


Colour = Decode.enumeration(str.upper, ["red", "green"])


def test_sync_function_returns_decoded_value():
    @decode_result(Colour)
    def favourite():
        return "red"

    assert favourite() == "RED"


def test_sync_function_raises_by_default():
    @decode_result(Colour)
    def favourite():
        return "blue"

    with pytest.raises(DecodeError) as excinfo:
        favourite()

    assert "but got [blue]" in excinfo.value.message


def test_on_failure_static_value_is_returned():
    @decode_result(Colour, on_failure=None)
    def favourite():
        return "blue"

    assert favourite() is None


def test_on_failure_handler_receives_error():
    seen = []

    def handler(error: DecodeError):
        seen.append(error)
        return "fallback"

    @decode_result(Colour, on_failure=handler)
    def favourite():
        return 7

    assert favourite() == "fallback"
    [error] = seen
    assert error.plain_message == "to be one of [red, green] but got [7]"


def test_on_failure_handler_without_arguments():
    @decode_result(Colour, on_failure=lambda: "GREEN")
    def favourite():
        return "blue"

    assert favourite() == "GREEN"


def test_wrapper_preserves_metadata_and_decoder():
    @decode_result(Colour)
    def favourite():
        """Return a colour."""
        return "red"

    assert favourite.__name__ == "favourite"
    assert favourite.__doc__ == "Return a colour."
    assert favourite.__decodekit_decoder__ is Colour


def test_arguments_are_forwarded():
    @decode_result(Decode.array(Decode.number))
    def numbers(*values, scale=1):
        return [value * scale for value in values]

    assert numbers(1, 2, scale=3) == [3, 6]


def test_rejects_non_decoder():
    with pytest.raises(ConfigurationError):
        decode_result(lambda value: value)


@pytest.mark.anyio
async def test_async_function_returns_decoded_value():
    @decode_result(Colour)
    async def favourite():
        return "green"

    assert await favourite() == "GREEN"


@pytest.mark.anyio
async def test_async_function_raises_by_default():
    @decode_result(Colour)
    async def favourite():
        return None

    with pytest.raises(DecodeError):
        await favourite()


@pytest.mark.anyio
async def test_async_on_failure_may_be_a_coroutine_function():
    async def handler(error):
        return error.plain_message

    @decode_result(Colour, on_failure=handler)
    async def favourite():
        return "blue"

    assert await favourite() == "to be one of [red, green] but got [blue]"


def test_type_error_inside_handler_propagates_unchanged():
    calls = []

    def handler(error):
        calls.append(error)
        raise TypeError("handler bug")

    @decode_result(Colour, on_failure=handler)
    def favourite():
        return "blue"

    with pytest.raises(TypeError, match="handler bug"):
        favourite()

    assert len(calls) == 1


def test_zero_argument_handler_type_error_propagates():
    def handler():
        raise TypeError("no fallback colour")

    @decode_result(Colour, on_failure=handler)
    def favourite():
        return "blue"

    with pytest.raises(TypeError, match="no fallback colour"):
        favourite()
