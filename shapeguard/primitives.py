"""Leaf guards for the primitive kinds and the two container base kinds.

Kinds are decided by comparing ``type(value)`` against the expected type, not
by ``isinstance``: ``bool`` is not a number, a ``dict`` subclass is not a plain
object and a ``tuple`` is not an array.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Final, TypeGuard

from shapeguard.guard import Guard, make_guard
from shapeguard.types import UNDEFINED, Undefined


def _is_string(value: object) -> TypeGuard[str]:
    return type(value) is str


def _is_number(value: object) -> TypeGuard[int | float]:
    kind = type(value)
    return kind is int or kind is float


def _is_boolean(value: object) -> TypeGuard[bool]:
    return type(value) is bool


def _is_null(value: object) -> TypeGuard[None]:
    return value is None


def _is_undefined(value: object) -> TypeGuard[Undefined]:
    return value is UNDEFINED


def _is_function(value: object) -> TypeGuard[Callable[..., object]]:
    # Classes are callable but are constructors, not functions.
    return callable(value) and not isinstance(value, type)


def _is_symbol(value: object) -> TypeGuard[object]:
    # Bare identity tokens such as ``object()`` sentinels.
    return type(value) is object


def _is_bigint(value: object) -> TypeGuard[int]:
    return type(value) is int


def _is_plain_object(value: object) -> TypeGuard[dict[str, object]]:
    return type(value) is dict


def _is_array(value: object) -> TypeGuard[list[object]]:
    return type(value) is list


string: Final[Guard[str]] = make_guard(_is_string, "string")
number: Final[Guard[int | float]] = make_guard(_is_number, "number")
boolean: Final[Guard[bool]] = make_guard(_is_boolean, "boolean")
null: Final[Guard[None]] = make_guard(_is_null, "null")
undefined: Final[Guard[Undefined]] = make_guard(_is_undefined, "undefined")
function: Final[Guard[Callable[..., object]]] = make_guard(_is_function, "function")
symbol: Final[Guard[object]] = make_guard(_is_symbol, "symbol")
bigint: Final[Guard[int]] = make_guard(_is_bigint, "bigint")
plain_object: Final[Guard[dict[str, object]]] = make_guard(
    _is_plain_object, "plain_object"
)
array: Final[Guard[list[object]]] = make_guard(_is_array, "array")
