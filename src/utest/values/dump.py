"""Deterministic diagnostic rendering of values.

Used only to build verdict messages, never for equality.
"""

from __future__ import annotations

from typing import Any

from utest.types import HOLE, HasCustomDump, Kind
from utest.values.classify import classify, elements

DEFAULT_INDENT = "  "
DEFAULT_MAX_LENGTH = 16

_ESCAPES = str.maketrans({"\\": "\\\\", "'": "\\'", "\r": "\\r", "\n": "\\n"})


def dump(value: Any, indent: str | None = None, max_length: int | None = None) -> str:
    """Render ``value`` as a diagnostic string.

    Args:
        value: Anything.
        indent: Prefix for each line of a folded container. Defaults to two spaces.
        max_length: Single-line renderings of containers longer than this fold to
            one entry per line. Defaults to 16.

    Returns:
        The rendering. Equal inputs always give equal output.
    """
    indent = indent or DEFAULT_INDENT
    max_length = DEFAULT_MAX_LENGTH if max_length is None else max_length
    kind = classify(value)

    if kind in (Kind.ARRAY, Kind.MAPPING, Kind.OBJECT) and isinstance(value, HasCustomDump):
        return str(value.__utest_dump__())

    if kind is Kind.NULL:
        return "None"
    if kind is Kind.UNDEFINED:
        return "undefined"
    if kind in (Kind.BOOLEAN, Kind.NUMBER):
        return str(value)
    if kind is Kind.STRING:
        return "'" + value.translate(_ESCAPES) + "'"
    if kind is Kind.REGEXP:
        return repr(value)
    if kind is Kind.DATE:
        return value.isoformat()
    if kind is Kind.FUNCTION:
        return _dump_callable(value)
    if kind is Kind.ARRAY:
        slots = elements(value)
        items = []
        if any(item is not HOLE for item in slots):
            items = ["" if item is HOLE else dump(item, indent, max_length) for item in slots]
        return _fold("[", "]", items, indent, max_length)
    if kind is Kind.MAPPING:
        if _overrides(value, "__str__"):
            return str(value)
        items = [
            f"{_dump_key(key, indent, max_length)}: {dump(item, indent, max_length)}"
            for key, item in value.items()
        ]
        return _fold("{", "}", items, indent, max_length)
    return _dump_object(value)


def _fold(opening: str, closing: str, items: list[str], indent: str, max_length: int) -> str:
    if not items:
        return opening + closing
    rendered = f"{opening} {', '.join(items)} {closing}"
    if len(rendered) > max_length:
        body = ("\n" + ",\n".join(items)).replace("\n", "\n" + indent)
        rendered = f"{opening}{body}\n{closing}"
    return rendered


def _dump_key(key: Any, indent: str, max_length: int) -> str:
    if isinstance(key, str) and key.isidentifier():
        return key
    return dump(key, indent, max_length)


def _dump_callable(value: Any) -> str:
    name = getattr(value, "__qualname__", None) or type(value).__qualname__
    label = "class" if isinstance(value, type) else "function"
    return f"<{label} {name}>"


def _dump_object(value: Any) -> str:
    if isinstance(value, BaseException):
        text = str(value)
        return f"{type(value).__name__}: {text}" if text else type(value).__name__
    if _overrides(value, "__str__"):
        return str(value)
    if _overrides(value, "__repr__"):
        return repr(value)
    return f"<{type(value).__qualname__}>"


def _overrides(value: Any, method: str) -> bool:
    return getattr(type(value), method) is not getattr(object, method)


__all__ = ["DEFAULT_INDENT", "DEFAULT_MAX_LENGTH", "dump"]
