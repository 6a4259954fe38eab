from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeGuard, TypeVar

from shapeguard.errors import GuardConfigError
from shapeguard.guard import Guard, make_guard, require_guard, unknown
from shapeguard.primitives import array, plain_object

T = TypeVar("T")


def array_of(element: Guard[T]) -> Guard[list[T]]:
    """Guard for lists whose every element satisfies ``element``."""
    require_guard(element, "array_of()")
    check_element = element.check

    def _check(value: object) -> TypeGuard[list[T]]:
        return array(value) and all(check_element(item) for item in value)

    return make_guard(_check, f"array_of({element.name})")


def object_of(value_guard: Guard[T]) -> Guard[dict[str, T]]:
    """Guard for plain dicts whose every value satisfies ``value_guard``."""
    require_guard(value_guard, "object_of()")
    check_value = value_guard.check

    def _check(value: object) -> TypeGuard[dict[str, T]]:
        return plain_object(value) and all(
            check_value(item) for item in value.values()
        )

    return make_guard(_check, f"object_of({value_guard.name})")


def tuple_of(*guards: Guard[object]) -> Guard[list[object]]:
    """Guard for lists of exactly ``len(guards)`` items, checked by position."""
    for position, guard in enumerate(guards):
        require_guard(guard, f"tuple_of() position {position}")
    checks = tuple(guard.check for guard in guards)
    arity = len(checks)

    def _check(value: object) -> TypeGuard[list[object]]:
        return (
            array(value)
            and len(value) == arity
            and all(check(item) for check, item in zip(checks, value))
        )

    return make_guard(_check, f"tuple_of({', '.join(g.name for g in guards)})")


@dataclass(frozen=True)
class StructShape:
    """Validated field mapping and key policy for a ``struct`` guard.

    ``required`` names the fields that must be present as keys. ``additional``
    checks the value of every key that is not a declared field; ``never``
    closes the struct and ``unknown`` leaves it open.
    """

    fields: Mapping[str, Guard[object]]
    required: frozenset[str]
    additional: Guard[object]

    @staticmethod
    def from_options(
        fields: Mapping[str, Guard[object]],
        required: Collection[str] | None = None,
        additional: Guard[object] = unknown,
    ) -> StructShape:
        if not isinstance(fields, Mapping):
            raise GuardConfigError(
                f"struct() expects a mapping of fields, got {type(fields).__name__}"
            )
        for field_name, field_guard in fields.items():
            if type(field_name) is not str:
                raise GuardConfigError(
                    f"struct() field names must be str, got {type(field_name).__name__}"
                )
            require_guard(field_guard, f"struct() field {field_name!r}")
        require_guard(additional, "struct() additional")
        if isinstance(required, str):
            raise GuardConfigError(
                "struct() required must be a collection of field names, not a str"
            )
        if required is not None:
            for name in required:
                if type(name) is not str:
                    raise GuardConfigError(
                        "struct() required names must be str, "
                        f"got {type(name).__name__}"
                    )
        required_names = frozenset(fields) if required is None else frozenset(required)
        unknown_names = sorted(required_names - fields.keys())
        if unknown_names:
            raise GuardConfigError(
                "struct() required names undeclared fields: "
                f"{', '.join(unknown_names)}"
            )
        return StructShape(
            fields=MappingProxyType(dict(fields)),
            required=required_names,
            additional=additional,
        )


def struct(
    fields: Mapping[str, Guard[object]],
    *,
    required: Collection[str] | None = None,
    additional: Guard[object] = unknown,
) -> Guard[dict[str, object]]:
    """Guard for plain dicts with named, individually guarded fields.

    A declared field that is present must satisfy its guard. A declared field
    that is absent is tolerated only when it is not in ``required`` (default:
    every declared field is required). Keys that are not declared must satisfy
    ``additional`` (default: any value).

    A key holding ``UNDEFINED`` is present. Declare the field with
    ``.optional`` to accept it; leave it out of ``required`` to allow the key
    to be missing.

    Raises:
        GuardConfigError: if ``required`` names an undeclared field or a field
            or ``additional`` is not a ``Guard``.
    """
    shape = StructShape.from_options(fields, required=required, additional=additional)
    field_checks = tuple((name, guard.check) for name, guard in shape.fields.items())
    declared = frozenset(shape.fields)
    required_names = shape.required
    check_additional = shape.additional.check
    is_open = shape.additional is unknown

    def _check(value: object) -> TypeGuard[dict[str, object]]:
        if not plain_object(value):
            return False
        for name, check_field in field_checks:
            if name in value:
                if not check_field(value[name]):
                    return False
            elif name in required_names:
                return False
        if is_open:
            return True
        return all(
            check_additional(item)
            for key, item in value.items()
            if key not in declared
        )

    body = ", ".join(f"{name}: {guard.name}" for name, guard in shape.fields.items())
    return make_guard(_check, f"struct({{{body}}})")
