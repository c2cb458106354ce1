"""Primitive operator table and helpers that build primitive calls."""

from __future__ import annotations

from .sexp import Cons, Integer, Nil, SExp
from .srcloc import Srcloc

_PRIM_CODES: tuple[tuple[str, int], ...] = (
    ("q", 1),
    ("a", 2),
    ("i", 3),
    ("c", 4),
    ("f", 5),
    ("r", 6),
    ("l", 7),
    ("x", 8),
    ("=", 9),
    (">s", 10),
    ("sha256", 11),
    ("substr", 12),
    ("strlen", 13),
    ("concat", 14),
    ("+", 16),
    ("-", 17),
    ("*", 18),
    ("/", 19),
    ("divmod", 20),
    (">", 21),
    ("ash", 22),
    ("lsh", 23),
    ("logand", 24),
    ("logior", 25),
    ("logxor", 26),
    ("lognot", 27),
    ("point_add", 29),
    ("pubkey_for_exp", 30),
    ("not", 32),
    ("any", 33),
    ("all", 34),
    ("softfork", 36),
)


def prims() -> list[tuple[bytes, SExp]]:
    """Return the primitive operator names paired with their opcodes, in table order."""
    primloc = Srcloc.start("*prims*")
    return [(name.encode("ascii"), Integer(primloc, code)) for name, code in _PRIM_CODES]


def prim_map() -> dict[bytes, SExp]:
    """Return a mapping from primitive operator name to opcode expression."""
    return dict(prims())


def _call2(loc: Srcloc, opcode: int, a: SExp, b: SExp) -> SExp:
    return Cons(loc, Integer(loc, opcode), Cons(loc, a, Cons(loc, b, Nil(loc))))


def primquote(loc: Srcloc, a: SExp) -> SExp:
    """Build ``(q . a)``."""
    return Cons(loc, Integer(loc, 1), a)


def primcons(loc: Srcloc, a: SExp, b: SExp) -> SExp:
    """Build ``(c a b)``."""
    return _call2(loc, 4, a, b)


def primapply(loc: Srcloc, a: SExp, b: SExp) -> SExp:
    """Build ``(a a b)``."""
    return _call2(loc, 2, a, b)


def primexc(loc: Srcloc, a: SExp, b: SExp) -> SExp:
    """Build ``(x a b)``."""
    return _call2(loc, 8, a, b)


def primop(loc: Srcloc, op: SExp, args: SExp) -> SExp:
    """Build ``(op . args)``."""
    return Cons(loc, op, args)