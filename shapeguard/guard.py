from __future__ import annotations

from collections.abc import Callable
from typing import Generic, NoReturn, TypeGuard, TypeVar

from shapeguard.errors import GuardConfigError, GuardRejectedError
from shapeguard.types import UNDEFINED, Undefined

T = TypeVar("T")
U = TypeVar("U")
T_co = TypeVar("T_co", covariant=True)

CheckFn = Callable[[object], bool]


class Guard(Generic[T_co]):
    """Immutable classifier over untyped values that narrows to ``T_co``.

    A guard is called like a predicate, ``guard(value) -> bool``, and doubles
    as a ``TypeGuard`` so that a true result narrows ``value`` inside the
    branch. Every guard carries the same modifiers; they return new guards
    and never touch the receiver.
    """

    __slots__ = ("_check", "_name", "_is_optional", "_is_nullable")

    _check: CheckFn
    _name: str
    _is_optional: bool
    _is_nullable: bool

    def __init__(
        self,
        check: CheckFn,
        name: str,
        *,
        is_optional: bool = False,
        is_nullable: bool = False,
    ) -> None:
        object.__setattr__(self, "_check", check)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_is_optional", is_optional)
        object.__setattr__(self, "_is_nullable", is_nullable)

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError(f"Guard is immutable; cannot set {key!r}")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"Guard is immutable; cannot delete {key!r}")

    def __call__(self, value: object) -> TypeGuard[T_co]:
        return self._check(value)

    def __repr__(self) -> str:
        return f"<Guard {self._name}>"

    @property
    def check(self) -> CheckFn:
        return self._check

    @property
    def name(self) -> str:
        return self._name

    def and_(self, other: Guard[U]) -> Guard[U]:
        """Accept values that satisfy both guards, checking ``self`` first."""
        require_guard(other, "and_()")
        left, right = self._check, other._check

        def _check(value: object) -> TypeGuard[U]:
            return left(value) and right(value)

        return make_guard(_check, f"({self._name} & {other._name})")

    def or_(self, other: Guard[U]) -> Guard[T_co | U]:
        """Accept values that satisfy either guard, checking ``self`` first."""
        require_guard(other, "or_()")
        left, right = self._check, other._check

        def _check(value: object) -> TypeGuard[T_co | U]:
            return left(value) or right(value)

        return make_guard(_check, f"({self._name} | {other._name})")

    def __and__(self, other: Guard[U]) -> Guard[U]:
        return self.and_(other)

    def __or__(self, other: Guard[U]) -> Guard[T_co | U]:
        return self.or_(other)

    @property
    def optional(self) -> Guard[T_co | Undefined]:
        """Also accept ``UNDEFINED``. Applying it twice changes nothing."""
        if self._is_optional:
            return self
        inner = self._check

        def _check(value: object) -> TypeGuard[T_co | Undefined]:
            return inner(value) or value is UNDEFINED

        return Guard(
            _check,
            f"{self._name}.optional",
            is_optional=True,
            is_nullable=self._is_nullable,
        )

    @property
    def nullable(self) -> Guard[T_co | None]:
        """Also accept ``None``. Applying it twice changes nothing."""
        if self._is_nullable:
            return self
        inner = self._check

        def _check(value: object) -> TypeGuard[T_co | None]:
            return inner(value) or value is None

        return Guard(
            _check,
            f"{self._name}.nullable",
            is_optional=self._is_optional,
            is_nullable=True,
        )


def make_guard(check: Callable[[object], TypeGuard[T]], name: str) -> Guard[T]:
    """Wrap a classification function into a ``Guard``.

    ``check`` must be total and pure: it receives arbitrary values, must not
    raise, and must give the same answer for the same value.
    """
    if not callable(check):
        raise GuardConfigError(
            f"make_guard() expects a callable, got {type(check).__name__}"
        )
    return Guard(check, name)


def require_guard(candidate: object, where: str) -> None:
    if not isinstance(candidate, Guard):
        raise GuardConfigError(
            f"{where} expects a Guard, got {type(candidate).__name__}"
        )


def _accept_all(value: object) -> TypeGuard[object]:
    return True


def _reject_all(value: object) -> TypeGuard[NoReturn]:
    return False


unknown: Guard[object] = make_guard(_accept_all, "unknown")
never: Guard[NoReturn] = make_guard(_reject_all, "never")


def expect(guard: Guard[T], value: object, context: str = "") -> T:
    """Return ``value`` narrowed to the guard's type or raise.

    Raises:
        GuardRejectedError: if the guard rejects ``value``. The message names
            the guard and the runtime type of the value, prefixed by
            ``context`` when given.
    """
    require_guard(guard, "expect()")
    if guard(value):
        return value
    raise GuardRejectedError(
        guard_name=guard.name, value_type=type(value).__name__, context=context
    )
