"""Exceptions raised by the scoring engines."""
from enum import Enum
from typing import Type, TypeVar

E = TypeVar("E", bound=Enum)


class UnknownValueError(ValueError):
    """A role, experience level, location or target role outside the closed set."""

    def __init__(self, kind: str, value, allowed):
        self.kind = kind
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown {kind} {value!r}; expected one of: {', '.join(self.allowed)}"
        )


class TaxonomyError(ValueError):
    """Keyword taxonomy data is malformed."""


def coerce_enum(enum_cls: Type[E], value, kind: str) -> E:
    """Accept an enum member or its string value, reject anything else."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise UnknownValueError(kind, value, [m.value for m in enum_cls]) from None
