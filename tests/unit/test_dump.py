import datetime
import re

import pytest

from utest.types import HOLE, UNDEFINED
from utest.values import dump


def module_level_fn():
    pass


class Plain:
    pass


class WithRepr:
    def __repr__(self):
        return "WithRepr(1)"


class WithStr:
    def __str__(self):
        return "with str"


class Custom:
    def __utest_dump__(self):
        return "<custom>"


class Labelled(dict):
    def __str__(self):
        return "labelled"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "None"),
        (UNDEFINED, "undefined"),
        (True, "True"),
        (False, "False"),
        (3, "3"),
        (1.5, "1.5"),
        ("abc", "'abc'"),
        ("it's", "'it\\'s'"),
        ("a\\b", "'a\\\\b'"),
        ("line\r\n", "'line\\r\\n'"),
        (re.compile("ab+"), "re.compile('ab+')"),
        (datetime.date(2024, 1, 2), "2024-01-02"),
        (module_level_fn, "<function module_level_fn>"),
        (ValueError, "<class ValueError>"),
    ],
)
def test_dump_scalars(value, expected):
    assert dump(value) == expected


def test_dump_short_arrays_on_one_line():
    assert dump([]) == "[]"
    assert dump([1, 2]) == "[ 1, 2 ]"
    assert dump(("a",)) == "[ 'a' ]"


def test_dump_sparse_arrays():
    assert dump([1, HOLE, 3]) == "[ 1, , 3 ]"
    assert dump([HOLE, HOLE]) == "[]"


def test_dump_mappings():
    assert dump({}) == "{}"
    assert dump({"a": 1}) == "{ a: 1 }"
    assert dump({"a b": 1}) == "{ 'a b': 1 }"
    assert dump({1: 2}) == "{ 1: 2 }"


def test_dump_folds_long_renderings():
    assert dump([1, 2, 3, 4, 5, 6]) == "[\n  1,\n  2,\n  3,\n  4,\n  5,\n  6\n]"


def test_dump_reindents_nested_folds():
    expected = "{\n  items: [\n    1,\n    2,\n    3,\n    4,\n    5,\n    6\n  ]\n}"
    assert dump({"items": [1, 2, 3, 4, 5, 6]}) == expected


def test_dump_respects_indent_and_max_length():
    assert dump([1, 2, 3, 4, 5, 6], max_length=100) == "[ 1, 2, 3, 4, 5, 6 ]"
    assert dump([1, 2], indent="\t", max_length=4) == "[\n\t1,\n\t2\n]"


def test_dump_exceptions():
    assert dump(ValueError("boom")) == "ValueError: boom"
    assert dump(KeyError()) == "KeyError"


def test_dump_objects():
    assert dump(Plain()) == "<Plain>"
    assert dump(WithRepr()) == "WithRepr(1)"
    assert dump(WithStr()) == "with str"
    assert dump(Custom()) == "<custom>"
    assert dump(Labelled(a=1)) == "labelled"


def test_dump_is_deterministic():
    value = {"b": [1, {"c": "d"}], "a": None}
    assert dump(value) == dump(dict(value))
