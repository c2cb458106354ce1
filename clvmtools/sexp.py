"""S-expressions as seen by the compiler, with source locations and a reader."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from functools import reduce

from .srcloc import Srcloc
from .util import number_from_u8, u8_from_number

_WHITESPACE = frozenset(b" \t\n\v\f\r\x85\xa0")
_HEX_RE = re.compile(r"[+-]?[0-9a-fA-F]+")
_DEC_RE = re.compile(r"[+-]?[0-9]+")


class SExpParseError(Exception):
    """An error tied to a source location: a parse failure or a bad expression."""

    def __init__(self, loc: Srcloc, message: str) -> None:
        super().__init__(f"{loc}: {message}")
        self.loc = loc
        self.message = message


def _int_to_bytes(value: int) -> bytes:
    return b"" if value == 0 else u8_from_number(value)


def _printable(data: bytes) -> bool:
    return all(0x20 <= b < 0x7F for b in data)


def _escape_quote(quote: int, data: bytes) -> str:
    return "".join("\\" + chr(b) if b == quote else chr(b) for b in data)


@dataclass(frozen=True, eq=False)
class SExp:
    """Base of all compiler s-expressions; equality follows CLVM atom semantics."""

    loc: Srcloc

    def _atom_bytes(self) -> bytes:
        raise TypeError("cons cells have no atom value")

    def with_loc(self, loc: Srcloc) -> SExp:
        """Return a copy of this node placed at ``loc``."""
        return replace(self, loc=loc)

    def nilp(self) -> bool:
        """True for every form that CLVM treats as the empty atom."""
        return False

    def listp(self) -> bool:
        return isinstance(self, (Nil, Cons))

    def cons_fst(self) -> SExp:
        return self.first if isinstance(self, Cons) else Nil(self.loc)

    def cons_snd(self) -> SExp:
        return self.rest if isinstance(self, Cons) else Nil(self.loc)

    def encode(self) -> bytes:
        """Serialize the tree: 0xff for pairs, 0x80 for nil, atom bytes otherwise."""
        out = bytearray()
        stack: list[SExp] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Nil):
                out.append(0x80)
            elif isinstance(node, Cons):
                out.append(0xFF)
                stack.append(node.rest)
                stack.append(node.first)
            elif isinstance(node, Integer):
                out += _int_to_bytes(node.value)
            else:
                out += _int_to_bytes(number_from_u8(node._atom_bytes()))
        return bytes(out)

    def to_bigint(self) -> int | None:
        """Return the numeric value of an atom, or None for a cons cell."""
        if isinstance(self, Cons):
            return None
        if isinstance(self, Integer):
            return self.value
        return number_from_u8(self._atom_bytes())

    def equal_to(self, other: SExp) -> bool:
        a, b = self, other
        while True:
            if a.nilp() and b.nilp():
                return True
            if a.nilp() or b.nilp():
                return False
            if isinstance(a, Cons) and isinstance(b, Cons):
                if not a.first.equal_to(b.first):
                    return False
                a, b = a.rest, b.rest
                continue
            if isinstance(a, Cons) or isinstance(b, Cons):
                return False
            return a._atom_bytes() == b._atom_bytes()

    def proper_list(self) -> list[SExp] | None:
        """Return the elements of a nil-terminated list, or None if improper."""
        result: list[SExp] = []
        node: SExp = self
        while not node.nilp():
            if not isinstance(node, Cons):
                return None
            result.append(node.first)
            node = node.rest
        return result

    def get_number(self) -> int:
        value = self.to_bigint()
        if value is None:
            raise SExpParseError(self.loc, f"wanted atom got cons cell {self}")
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SExp):
            return NotImplemented
        return self.equal_to(other)

    def __hash__(self) -> int:
        parts = []
        node: SExp = self
        while isinstance(node, Cons):
            parts.append(hash(node.first))
            node = node.rest
        parts.append(hash(b"" if node.nilp() else node._atom_bytes()))
        return hash(tuple(parts))


@dataclass(frozen=True, eq=False)
class Nil(SExp):
    def _atom_bytes(self) -> bytes:
        return b""

    def nilp(self) -> bool:
        return True

    def __str__(self) -> str:
        return "()"


@dataclass(frozen=True, eq=False)
class Cons(SExp):
    first: SExp = field(default=None)  # type: ignore[assignment]
    rest: SExp = field(default=None)  # type: ignore[assignment]

    def __str__(self) -> str:
        parts = [str(self.first)]
        node = self.rest
        while not node.nilp():
            if isinstance(node, Cons):
                parts.append(str(node.first))
                node = node.rest
            else:
                parts.extend((".", str(node)))
                break
        return "(" + " ".join(parts) + ")"


@dataclass(frozen=True, eq=False)
class Integer(SExp):
    value: int = 0

    def _atom_bytes(self) -> bytes:
        return u8_from_number(self.value)

    def nilp(self) -> bool:
        return self.value == 0

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, eq=False)
class QuotedString(SExp):
    quote: int = ord('"')
    value: bytes = b""

    def _atom_bytes(self) -> bytes:
        return self.value

    def nilp(self) -> bool:
        return not self.value

    def __str__(self) -> str:
        return f'"{_escape_quote(self.quote, self.value)}"'


@dataclass(frozen=True, eq=False)
class Atom(SExp):
    name: bytes = b""

    def _atom_bytes(self) -> bytes:
        return self.name

    def nilp(self) -> bool:
        return not self.name

    def __str__(self) -> str:
        if not self.name:
            return "()"
        if _printable(self.name):
            return decode_string(self.name)
        return str(number_from_u8(self.name))


def atom_from_string(loc: Srcloc, s: str) -> Atom:
    return Atom(loc, s.encode("utf-8"))


def quoted_from_string(loc: Srcloc, s: str) -> QuotedString:
    return QuotedString(loc, ord('"'), s.encode("utf-8"))


def _make_cons(a: SExp, b: SExp) -> Cons:
    return Cons(a.loc.ext(b.loc), a, b)


def enlist(loc: Srcloc, items: Iterable[SExp]) -> SExp:
    """Build a nil-terminated list of ``items``; the nil carries ``loc``."""
    return reduce(lambda acc, item: _make_cons(item, acc), reversed(list(items)), Nil(loc))


def decode_string(data: bytes) -> str:
    return bytes(data).decode("utf-8", errors="replace")


def _parse_int(loc: Srcloc, text: bytes, base: int) -> int:
    s = text.decode("latin-1")
    pattern = _HEX_RE if base == 16 else _DEC_RE
    if not pattern.fullmatch(s):
        raise SExpParseError(loc, f"invalid integer literal {s!r}")
    return int(s, base)


def _is_dec(text: bytes) -> bool:
    if text == b"-":
        return False
    body = text[1:] if text.startswith(b"-") else text
    return all(0x30 <= b <= 0x39 for b in body)


def _make_atom(loc: Srcloc, text: bytes) -> SExp:
    if len(text) > 1 and text[0] == ord("#"):
        return Atom(loc, text[1:])
    if text.startswith(b"0x"):
        return Integer(loc, _parse_int(loc, text[2:], 16))
    if _is_dec(text):
        return Integer(loc, _parse_int(loc, text, 10))
    return Atom(loc, text)


@dataclass(frozen=True)
class _Empty:
    pass


@dataclass(frozen=True)
class _Comment:
    loc: Srcloc


@dataclass(frozen=True)
class _Bareword:
    loc: Srcloc
    text: bytes


@dataclass(frozen=True)
class _Quoted:
    loc: Srcloc
    term: int
    text: bytes


@dataclass(frozen=True)
class _QuotedEscaped:
    loc: Srcloc
    term: int
    text: bytes


@dataclass(frozen=True)
class _OpenList:
    loc: Srcloc


@dataclass(frozen=True)
class _ParsingList:
    loc: Srcloc
    inner: object
    items: list


@dataclass(frozen=True)
class _TermList:
    loc: Srcloc
    inner: object
    items: list


_EMPTY = _Empty()
_State = object


def _step(loc: Srcloc, state: _State, ch: int) -> tuple[SExp | None, _State]:
    """Advance the reader by one byte; returns (emitted expression or None, new state)."""
    match state:
        case _Empty():
            if ch == ord("("):
                return None, _OpenList(loc)
            if ch == ord(";"):
                return None, _Comment(loc)
            if ch == ord(")"):
                raise SExpParseError(loc, "Too many close parens")
            if ch in (ord('"'), ord("'")):
                return None, _Quoted(loc, ch, b"")
            if ch in _WHITESPACE:
                return None, _EMPTY
            return None, _Bareword(loc, bytes([ch]))

        case _Comment(loc=pl):
            if ch == ord("\n"):
                return None, _EMPTY
            if ch == ord("\r"):
                return None, state
            return None, _Comment(pl.ext(loc))

        case _Bareword(loc=pl, text=text):
            if ch in _WHITESPACE:
                return _make_atom(pl, text), _EMPTY
            return None, _Bareword(pl.ext(loc), text + bytes([ch]))

        case _Quoted(loc=pl, term=term, text=text):
            if ch == ord("\\"):
                return None, _QuotedEscaped(pl, term, text)
            if ch == term:
                return QuotedString(pl.ext(loc), term, text), _EMPTY
            return None, _Quoted(pl, term, text + bytes([ch]))

        case _QuotedEscaped(loc=pl, term=term, text=text):
            return None, _Quoted(pl, term, text + bytes([ch]))

        case _OpenList(loc=pl):
            if ch == ord(")"):
                return Nil(pl.ext(loc)), _EMPTY
            if ch == ord("."):
                raise SExpParseError(loc, "Dot can't appear directly after begin paren")
            emitted, inner = _step(loc, _EMPTY, ch)
            items = [] if emitted is None else [emitted]
            return None, _ParsingList(pl.ext(loc), inner, items)

        case _ParsingList(loc=pl, inner=inner, items=items):
            if isinstance(inner, _Empty) and ch == ord("."):
                return None, _TermList(pl.ext(loc), _EMPTY, items)
            if ch == ord(")") and isinstance(inner, _Empty):
                return enlist(pl, items), _EMPTY
            if ch == ord(")") and isinstance(inner, _Bareword):
                items.append(_make_atom(inner.loc, inner.text))
                return enlist(pl, items), _EMPTY
            emitted, new_inner = _step(loc, inner, ch)
            if emitted is not None:
                items.append(emitted)
            return None, _ParsingList(pl.ext(loc), new_inner, items)

        case _TermList(loc=pl, inner=inner, items=items):
            if ch == ord(".") and isinstance(inner, _Empty):
                raise SExpParseError(loc, "Multiple dots in list notation are illegal")
            if ch == ord(")") and isinstance(inner, _Empty):
                if len(items) == 1:
                    return items[0], _EMPTY
                return enlist(pl, items), _EMPTY
            if ch == ord(")") and isinstance(inner, _Bareword):
                parsed = _make_atom(inner.loc, inner.text)
                if not items:
                    raise SExpParseError(loc, "Dot as first element of list?")
                tail = _make_cons(items.pop(), parsed)
                if not items:
                    return tail, _EMPTY
                items.append(tail)
                return enlist(pl.ext(inner.loc), items), _EMPTY
            emitted, new_inner = _step(loc, inner, ch)
            if emitted is not None:
                if not items:
                    raise SExpParseError(loc, "Dot as first element of list?")
                items.append(_make_cons(items.pop(), emitted))
            return None, _TermList(pl.ext(loc), new_inner, items)

    raise AssertionError(f"unknown reader state {state!r}")


def parse_sexp(start: Srcloc, text: str | bytes) -> list[SExp]:
    """Read the s-expressions in ``text``, starting at location ``start``.

    Raises SExpParseError on malformed input.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    loc = start
    state: _State = _EMPTY
    result: list[SExp] = []

    for ch in data:
        next_loc = loc.advance(ch)
        emitted, state = _step(loc, state, ch)
        if emitted is None:
            loc = next_loc
        else:
            result.append(emitted)

    match state:
        case _Empty() | _Comment():
            return result
        case _Bareword(loc=l, text=t):
            return [_make_atom(l, t)]
        case _Quoted(loc=l):
            raise SExpParseError(l, "unterminated quoted string")
        case _QuotedEscaped(loc=l):
            raise SExpParseError(l, "unterminated quoted string with escape")
        case _OpenList(loc=l):
            raise SExpParseError(l, "Unterminated list (empty)")
        case _ParsingList(loc=l):
            raise SExpParseError(l, "Unterminated mid list")
        case _TermList(loc=l):
            raise SExpParseError(l, "Unterminated tail list")
    raise AssertionError(f"unknown reader state {state!r}")