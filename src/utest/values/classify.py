"""Semantic type classification of arbitrary values."""

from __future__ import annotations

import datetime
import numbers
import re
from collections.abc import Mapping, Sequence
from typing import Any

from utest.types import HOLE, UNDEFINED, Kind


def classify(value: Any) -> Kind:
    """Return the semantic kind of ``value``.

    Total over all inputs and free of side effects beyond probing ``len()`` and the
    last index of array-like objects.

    Parameters
    ----------
    value:
        Anything.

    Returns
    -------
    Kind
        ``Kind.ARRAY`` for sequences and array-likes (objects with an integer length
        whose last index can be read), ``Kind.MAPPING`` for mappings, ``Kind.OBJECT``
        for anything that matches no other kind.
    """
    if value is None:
        return Kind.NULL
    if value is UNDEFINED or value is HOLE:
        return Kind.UNDEFINED
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, numbers.Number):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, re.Pattern):
        return Kind.REGEXP
    if isinstance(value, (datetime.date, datetime.time)):
        return Kind.DATE
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, Sequence):
        return Kind.ARRAY
    if callable(value):
        return Kind.FUNCTION
    if _is_array_like(value):
        return Kind.ARRAY
    return Kind.OBJECT


def _is_array_like(value: Any) -> bool:
    if not hasattr(value, "__getitem__"):
        return False
    try:
        length = len(value)
    except Exception:
        return False
    if not isinstance(length, int) or length < 0:
        return False
    if length == 0:
        return True
    try:
        value[length - 1]
    except Exception:
        return False
    return True


def elements(value: Any) -> list[Any]:
    """Return the items of an array-like value, keeping ``HOLE`` slots in place."""
    return [value[i] for i in range(len(value))]


__all__ = ["classify", "elements"]
