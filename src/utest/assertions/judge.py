"""Assertion grammar: turn raw test results into verdicts."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from utest.assertions.base import Verdict
from utest.assertions.operators import Operator, get_operator_registry, strict_equal
from utest.types import UNDEFINED, Kind
from utest.values import DEFAULT_INDENT, DEFAULT_MAX_LENGTH, classify, dump, elements

logger = logging.getLogger(__name__)


class Judge:
    """Interprets a raw result as a verdict.

    Grammar, after wrapping non-mapping input as ``{"expr": raw}``:

    - a truthy ``error`` entry fails with the dumped error;
    - a boolean ``expr`` is the result itself;
    - ``[a]`` passes when ``a === True``;
    - ``[a, b]`` passes when ``a === b``;
    - ``[a, op, b]`` applies the registered operator ``op``; unknown names fail.

    Anything else, including ``None`` and an empty sequence, gives no verdict.
    """

    def __init__(
        self,
        operators: Mapping[str, Operator] | None = None,
        *,
        indent: str = DEFAULT_INDENT,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        self._operators = operators
        self.indent = indent
        self.max_length = max_length

    @property
    def operators(self) -> Mapping[str, Operator]:
        if self._operators is not None:
            return self._operators
        return get_operator_registry()

    def __call__(self, raw: Any) -> Verdict | None:
        if raw is None or raw is UNDEFINED:
            return None
        res = raw if classify(raw) is Kind.MAPPING else {"expr": raw}
        name = res.get("name")
        name = str(name) if name is not None else None

        error = res.get("error")
        if error:
            return Verdict(result=False, message=self.dump(error), name=name)

        expr = res.get("expr", UNDEFINED)
        kind = classify(expr)
        if kind is Kind.BOOLEAN:
            return Verdict(result=expr, message=self.message(expr), name=name)
        if kind is not Kind.ARRAY:
            logger.debug("No verdict for result of kind %s", kind.value)
            return None

        items = elements(expr)
        if not items:
            return None
        if len(items) == 1:
            result = strict_equal(items[0], True)
            message = self.message(items[0])
        elif len(items) == 2:
            result = strict_equal(items[0], items[1])
            message = self.message(items[0], "===", items[1])
        else:
            left, op_name, right = items[:3]
            op = self.operators.get(op_name) if isinstance(op_name, str) else None
            if op is None:
                logger.debug("Unknown operator %r", op_name)
            result = bool(op(left, right)) if op is not None else False
            message = self.message(left, op_name, right)
        return Verdict(result=result, message=message, name=name)

    def dump(self, value: Any) -> str:
        return dump(value, self.indent, self.max_length)

    def message(self, left: Any, op: Any = None, right: Any = None) -> str:
        """Build ``(kind) dump`` or ``(kind) dump op (kind) dump``."""
        described = f"({classify(left).value}) {self.dump(left)}"
        if op is None:
            return described
        return f"{described} {op} ({classify(right).value}) {self.dump(right)}"


judge = Judge()

__all__ = ["Judge", "judge"]
