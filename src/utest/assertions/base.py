"""Verdict model produced by the judge."""

from pydantic import BaseModel


class Verdict(BaseModel):
    """Normalized outcome of one reported result.

    Attributes:
    ----------
    result : bool | None
        True for a pass, False for a failure, None when the result cannot be judged
        yet. A None verdict never changes counters.
    message : str
        Diagnostic built from the operands' kinds and dumps, pass or fail.
    name : str | None
        Optional sub-verdict name given by the reporting test.
    """

    result: bool | None
    message: str
    name: str | None = None

    @property
    def label(self) -> str:
        """Message prefixed with the sub-verdict name, when there is one."""
        return f"{self.name}> {self.message}" if self.name else self.message

    def __bool__(self) -> bool:
        return self.result is True
