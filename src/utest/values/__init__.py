"""Value classification and diagnostic rendering."""

from .classify import classify, elements
from .dump import DEFAULT_INDENT, DEFAULT_MAX_LENGTH, dump

__all__ = ["DEFAULT_INDENT", "DEFAULT_MAX_LENGTH", "classify", "dump", "elements"]
