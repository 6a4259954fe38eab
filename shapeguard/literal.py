from __future__ import annotations

import math
from typing import TypeGuard, TypeVar

from shapeguard.errors import GuardConfigError
from shapeguard.guard import Guard, make_guard
from shapeguard.types import UNDEFINED, LiteralKind, LiteralValue

L = TypeVar("L", bound=LiteralValue)


def literal_key(value: object) -> tuple[LiteralKind, object] | None:
    """Kind-tagged key for strict equality, or ``None`` for non-literal values.

    Tagging keeps ``True`` apart from ``1`` while letting ``1`` and ``1.0``
    compare equal, as numbers of the same kind.
    """
    if value is None:
        return ("null", None)
    if value is UNDEFINED:
        return ("undefined", None)
    kind = type(value)
    if kind is bool:
        return ("boolean", value)
    if kind is int or kind is float:
        return ("number", value)
    if kind is str:
        return ("string", value)
    return None


def literal(*values: L) -> Guard[L]:
    """Guard accepting values strictly equal to one of ``values``.

    Raises:
        GuardConfigError: if no values are given, a value is not a str, int,
            float, bool, None or UNDEFINED, or a value is NaN.
    """
    if not values:
        raise GuardConfigError("literal() requires at least one value")
    keys: list[tuple[LiteralKind, object]] = []
    for value in values:
        key = literal_key(value)
        if key is None:
            raise GuardConfigError(
                "literal() accepts only str, int, float, bool, None or UNDEFINED; "
                f"got {type(value).__name__}"
            )
        if type(value) is float and math.isnan(value):
            raise GuardConfigError("literal() cannot match NaN")
        keys.append(key)
    members = frozenset(keys)

    def _check(value: object) -> TypeGuard[L]:
        key = literal_key(value)
        return key is not None and key in members

    return make_guard(_check, f"literal({', '.join(repr(v) for v in values)})")
