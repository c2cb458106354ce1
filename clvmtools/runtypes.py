"""Failures raised while running compiled programs."""

from __future__ import annotations

from .sexp import SExp
from .srcloc import Srcloc


class RunFailure(Exception):
    """Base of every failure that happens while running a program."""

    def __init__(self, loc: Srcloc, *details: object) -> None:
        super().__init__(loc, *details)
        self.loc = loc

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args  # type: ignore[union-attr]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class RunErr(RunFailure):
    """An evaluation error with a message."""

    def __init__(self, loc: Srcloc, message: str) -> None:
        super().__init__(loc, message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.loc}: {self.message}"


class RunExn(RunFailure):
    """A program raised a value with the ``x`` operator."""

    def __init__(self, loc: Srcloc, value: SExp) -> None:
        super().__init__(loc, value)
        self.value = value

    def __str__(self) -> str:
        return f"{self.loc}: throw(x) {self.value}"