"""Assertion grammar: operator registry, judge and verdicts."""

from .base import Verdict
from .judge import Judge, judge
from .operators import (
    Operator,
    get_operator,
    get_operator_registry,
    loose_equal,
    matches,
    operator,
    strict_equal,
)

__all__ = [
    "Judge",
    "Operator",
    "Verdict",
    "get_operator",
    "get_operator_registry",
    "judge",
    "loose_equal",
    "matches",
    "operator",
    "strict_equal",
]
