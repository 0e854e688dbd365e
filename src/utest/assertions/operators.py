"""Registry of named binary operators usable in assertion triples."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from utest.types import HOLE, UNDEFINED, HasEquals, Kind
from utest.values import classify, elements

Operator = Callable[[Any, Any], bool]

_operator_registry: dict[str, Operator] = {}


def operator(name: str) -> Callable[[Operator], Operator]:
    """Register a predicate under ``name``.

    Usable by test authors to extend the grammar::

        @operator("startswith")
        def _startswith(left, right):
            return str(left).startswith(str(right))
    """

    def decorator(fn: Operator) -> Operator:
        _operator_registry[name] = fn
        return fn

    return decorator


def get_operator(name: Any) -> Operator | None:
    """Return the operator registered under ``name``, or None."""
    if not isinstance(name, str):
        return None
    return _operator_registry.get(name)


def get_operator_registry() -> dict[str, Operator]:
    """Get the global operator registry."""
    return _operator_registry


@operator("===")
def strict_equal(left: Any, right: Any) -> bool:
    """Structural equality that never crosses kinds."""
    kind = classify(left)
    if kind is not classify(right):
        return False
    if kind in (Kind.NULL, Kind.UNDEFINED):
        return True
    if isinstance(left, HasEquals) and isinstance(right, HasEquals):
        return bool(left.equals(right)) and bool(right.equals(left))
    if kind is Kind.ARRAY:
        left_items, right_items = elements(left), elements(right)
        if len(left_items) != len(right_items):
            return False
        for a, b in zip(left_items, right_items):
            if (a is HOLE) != (b is HOLE):
                return False
            if a is not HOLE and not strict_equal(a, b):
                return False
        return True
    if kind is Kind.MAPPING:
        for key in [*left.keys(), *right.keys()]:
            if not strict_equal(left.get(key, UNDEFINED), right.get(key, UNDEFINED)):
                return False
        return True
    return bool(left == right)


@operator("!==")
def strict_not_equal(left: Any, right: Any) -> bool:
    return not strict_equal(left, right)


def _mixed_scalar(left: Any, right: Any) -> bool:
    """True when one side is a string and the other a number or boolean."""
    scalar = (Kind.NUMBER, Kind.BOOLEAN)
    left_kind, right_kind = classify(left), classify(right)
    return (left_kind is Kind.STRING and right_kind in scalar) or (
        right_kind is Kind.STRING and left_kind in scalar
    )


def _to_number(value: Any) -> float | None:
    if classify(value) in (Kind.NUMBER, Kind.BOOLEAN):
        return value
    text = value.strip()
    if not text:
        return 0
    try:
        return float(text)
    except ValueError:
        return None


@operator("==")
def loose_equal(left: Any, right: Any) -> bool:
    """Equality with string-to-number coercion; None and UNDEFINED match each other."""
    nullish = (Kind.NULL, Kind.UNDEFINED)
    left_kind, right_kind = classify(left), classify(right)
    if left_kind in nullish or right_kind in nullish:
        return left_kind in nullish and right_kind in nullish
    if _mixed_scalar(left, right):
        a, b = _to_number(left), _to_number(right)
        return a is not None and b is not None and a == b
    return bool(left == right)


@operator("!=")
def loose_not_equal(left: Any, right: Any) -> bool:
    return not loose_equal(left, right)


def _ordering(compare: Operator) -> Operator:
    # Strings meet numbers as numbers, like ==. Incomparable operands are not
    # ordered either way.
    def ordered(left: Any, right: Any) -> bool:
        if _mixed_scalar(left, right):
            left, right = _to_number(left), _to_number(right)
            if left is None or right is None:
                return False
        try:
            return bool(compare(left, right))
        except TypeError:
            return False

    return ordered


@operator(">")
@_ordering
def greater(left: Any, right: Any) -> bool:
    return left > right


@operator(">=")
@_ordering
def greater_equal(left: Any, right: Any) -> bool:
    return left >= right


@operator("<")
@_ordering
def less(left: Any, right: Any) -> bool:
    return left < right


@operator("<=")
@_ordering
def less_equal(left: Any, right: Any) -> bool:
    return left <= right


def _text(value: Any) -> str:
    # Integral floats read like ints: 1.0 -> "1".
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _has_member(container: Any, key: Any) -> bool:
    kind = classify(container)
    if kind is Kind.MAPPING:
        try:
            return key in container
        except TypeError:
            return False
    if kind is Kind.ARRAY:
        if classify(key) is not Kind.NUMBER or not isinstance(key, int):
            return False
        items = elements(container)
        return 0 <= key < len(items) and items[key] is not HOLE
    return isinstance(key, str) and hasattr(container, key)


@operator("=~")
def matches(left: Any, right: Any) -> bool:
    """Containment or pattern match of ``left`` in ``right``.

    Asymmetric: an array or mapping on the right is searched for ``left``; a pattern
    is searched in the text of ``left``; a string or number is a substring of a
    string or number on the left, and otherwise names a member of ``left``. Numbers
    are matched by their text, with integral floats written as ints.
    """
    kind = classify(right)
    if kind is Kind.ARRAY:
        return any(item is not HOLE and strict_equal(left, item) for item in elements(right))
    if kind is Kind.MAPPING:
        return any(strict_equal(left, item) for item in right.values())
    if kind is Kind.REGEXP:
        return right.search(_text(left)) is not None
    if kind in (Kind.STRING, Kind.NUMBER):
        if classify(left) in (Kind.STRING, Kind.NUMBER):
            return _text(right) in _text(left)
        return _has_member(left, right)
    return False


@operator("!~")
def not_matches(left: Any, right: Any) -> bool:
    return not matches(left, right)


__all__ = [
    "Operator",
    "get_operator",
    "get_operator_registry",
    "loose_equal",
    "matches",
    "operator",
    "strict_equal",
]
