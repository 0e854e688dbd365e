"""Shared types for the utest engine."""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable


class Kind(Enum):
    """Semantic kind of a value, used for dispatch and diagnostics."""

    NULL = "null"
    UNDEFINED = "undefined"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    FUNCTION = "function"
    REGEXP = "regexp"
    DATE = "date"
    MAPPING = "mapping"
    OBJECT = "object"


class _Sentinel:
    """Named singleton marker."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return self._name


# A value that was never provided (absent mapping key, missing operand).
UNDEFINED: Any = _Sentinel("UNDEFINED")

# An empty slot of a sparse array. Distinct from UNDEFINED for equality and dumps.
HOLE: Any = _Sentinel("HOLE")


@runtime_checkable
class HasEquals(Protocol):
    """Values that define their own equivalence for strict-deep comparison."""

    def equals(self, other: Any) -> bool: ...


@runtime_checkable
class HasCustomDump(Protocol):
    """Values that render their own diagnostic string."""

    def __utest_dump__(self) -> str: ...
