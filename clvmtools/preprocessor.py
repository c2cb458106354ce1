"""Expansion of ``include`` forms before compilation."""

from __future__ import annotations

from typing import Protocol

from .sexp import (
    Atom,
    Cons,
    Nil,
    QuotedString,
    SExp,
    SExpParseError,
    atom_from_string,
    decode_string,
    enlist,
    parse_sexp,
    quoted_from_string,
)
from .srcloc import Srcloc

_INCLUDE = b"include"


class CompileErr(Exception):
    """A compilation error tied to a source location."""

    def __init__(self, loc: Srcloc, message: str) -> None:
        super().__init__(f"{loc}: {message}")
        self.loc = loc
        self.message = message


class _CompilerOpts(Protocol):
    filename: str
    stdenv: bool

    def read_new_file(self, inc_from: str, filename: str) -> tuple[str, str]: ...


def process_include(opts: _CompilerOpts, name: str) -> list[SExp]:
    """Read the included file ``name`` and return the forms of its top-level list."""
    _, content = opts.read_new_file(opts.filename, name)
    start_of_file = Srcloc.start(name)
    try:
        parsed = parse_sexp(start_of_file, content)
    except SExpParseError as exc:
        raise CompileErr(exc.loc, exc.message) from exc

    forms = parsed[0].proper_list() if parsed else None
    if forms is None:
        raise CompileErr(start_of_file, "Includes should contain a list of forms")
    return forms


def _is_include(expr: SExp) -> bool:
    return isinstance(expr, Atom) and expr.name == _INCLUDE


def _include_target(body: SExp) -> bytes | None:
    items = body.proper_list()
    if not items:
        return None
    match items:
        case [Atom() as head, Atom(name=fname)] | [Atom() as head, QuotedString(value=fname)]:
            return fname if _is_include(head) else None
    if _is_include(items[0]):
        raise CompileErr(body.loc, f"bad tail in include {body}")
    return None


def _process_pp_form(opts: _CompilerOpts, body: SExp) -> list[SExp]:
    target = _include_target(body)
    if target is None:
        return [body]
    return process_include(opts, decode_string(target))


def _preprocess_forms(opts: _CompilerOpts, body: SExp) -> list[SExp]:
    result: list[SExp] = []
    while isinstance(body, Cons):
        result.extend(_process_pp_form(opts, body.first))
        if isinstance(body.rest, Nil):
            return result
        body = body.rest
    result.append(body)
    return result


def _inject_std_macros(body: SExp) -> SExp:
    items = body.proper_list()
    if items is None:
        return body
    loc = body.loc
    include_form = Cons(
        loc,
        atom_from_string(loc, "include"),
        Cons(loc, quoted_from_string(loc, "*macros*"), Nil(loc)),
    )
    return enlist(loc, [include_form, *items])


def preprocess(opts: _CompilerOpts, cmod: SExp) -> list[SExp]:
    """Return the forms of ``cmod`` with every include expanded in place."""
    tocompile = _inject_std_macros(cmod) if opts.stdenv else cmod
    return _preprocess_forms(opts, tocompile)