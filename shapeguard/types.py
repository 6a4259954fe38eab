from __future__ import annotations

from typing import ClassVar, Final, Literal


class Undefined:
    """Type of the ``UNDEFINED`` sentinel: a value that is present but undefined.

    Distinct from ``None``, which stands for an explicit null. There is exactly
    one instance; copying or pickling it yields the same object.
    """

    _instance: ClassVar[Undefined | None] = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final[Undefined] = Undefined()

LiteralValue = str | int | float | bool | None | Undefined

LiteralKind = Literal["string", "number", "boolean", "null", "undefined"]
