"""Source locations attached to parsed expressions."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Srcloc:
    """A position in a named file, optionally spanning to an end position."""

    file: str
    line: int
    col: int
    until: tuple[int, int] | None = None

    def __str__(self) -> str:
        if self.until is None:
            return f"{self.file}({self.line}):{self.col}"
        end_line, end_col = self.until
        return f"{self.file}({self.line}):{self.col}-{self.file}({end_line}):{end_col}"

    def ext(self, other: Srcloc) -> Srcloc:
        """Return a location covering both this one and ``other``."""
        return combine_src_location(self, other)

    def advance(self, ch: int | str) -> Srcloc:
        """Return the location after consuming one character."""
        code = ch if isinstance(ch, int) else ord(ch)
        if code == ord("\n"):
            return replace(self, line=self.line + 1, col=1)
        if code == ord("\t"):
            return replace(self, col=(self.col + 8) & ~7)
        return replace(self, col=self.col + 1)

    @classmethod
    def start(cls, file: str) -> Srcloc:
        """Return the location of the first character of ``file``."""
        return cls(file=file, line=1, col=1)


def src_location_min(a: Srcloc) -> tuple[int, int]:
    return (a.line, a.col)


def src_location_max(a: Srcloc) -> tuple[int, int]:
    if a.until is None:
        return (a.line, a.col + 1)
    return a.until


def _add_onto(x: Srcloc, y: Srcloc) -> Srcloc:
    return Srcloc(file=x.file, line=x.line, col=x.col, until=src_location_max(y))


def combine_src_location(a: Srcloc, b: Srcloc) -> Srcloc:
    """Combine two locations, starting at the earlier one."""
    if (a.line, a.col) == (b.line, b.col):
        return a
    if (a.line, a.col) < (b.line, b.col):
        return _add_onto(a, b)
    return _add_onto(b, a)