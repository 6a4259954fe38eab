"""Composable runtime shape guards that narrow static types.

Guards classify untyped values (for example decoded JSON) and narrow them for
type checkers via ``TypeGuard`` when they accept. Leaf guards, literal sets and
structural constructors all share one ``Guard`` abstraction carrying the
``and_``, ``or_``, ``optional`` and ``nullable`` modifiers.
"""
from __future__ import annotations

from shapeguard.errors import GuardConfigError, GuardRejectedError
from shapeguard.guard import Guard, expect, make_guard, never, unknown
from shapeguard.literal import literal
from shapeguard.primitives import (
    array,
    bigint,
    boolean,
    function,
    null,
    number,
    plain_object,
    string,
    symbol,
    undefined,
)
from shapeguard.structural import StructShape, array_of, object_of, struct, tuple_of
from shapeguard.types import UNDEFINED, Undefined

__all__ = [
    "UNDEFINED",
    "Guard",
    "GuardConfigError",
    "GuardRejectedError",
    "StructShape",
    "Undefined",
    "array",
    "array_of",
    "bigint",
    "boolean",
    "expect",
    "function",
    "literal",
    "make_guard",
    "never",
    "null",
    "number",
    "object_of",
    "plain_object",
    "string",
    "struct",
    "symbol",
    "tuple_of",
    "undefined",
    "unknown",
]
