# clvmtools

Building blocks for a compiler that targets CLVM:

- `clvmtools.srcloc`: source locations
- `clvmtools.sexp`: s-expression nodes, with a reader and printer that track locations
- `clvmtools.prims`: the table of primitive operators
- `clvmtools.runtypes`: failures raised while running a program
- `clvmtools.preprocessor`: the include preprocessor
- `clvmtools.util`: number helpers

The package needs nothing outside the standard library.

## Installation

```
pip install clvmtools
```

## Source locations

`Srcloc(file, line, col, until=None)` is a frozen dataclass.
`Srcloc.start(file)` gives line 1, column 1. `str()` of a location is
`file(line):col`, or `file(line):col-file(line):col` when it spans a range.
`ext(other)` returns a location that covers both. `advance(ch)` returns the
location after one character:

- a newline moves to the next line, column 1;
- a tab moves to the next multiple-of-8 tab stop;
- anything else moves one column.

The module-level functions are `combine_src_location`, `src_location_min`
and `src_location_max`.

## Reading and printing s-expressions

```python
from clvmtools.srcloc import Srcloc
from clvmtools.sexp import parse_sexp

forms = parse_sexp(Srcloc.start("example.cl"), "(hi . 3)")
print(str(forms[0]))               # (hi . 3)

num = parse_sexp(Srcloc.start("example.cl"), "hello")[0].get_number()
print(num)                         # 448378203247
```

`parse_sexp(start, text)` accepts `str` or `bytes` and returns a list of
expressions. The reader handles:

- `;` comments;
- `"` and `'` quoted strings with backslash escapes;
- dotted pairs;
- `0x` hexadecimal and decimal integers;
- `#`-prefixed atoms.

Malformed input raises `SExpParseError`, which carries `loc` and `message`.

Nodes are `Nil`, `Cons` (`first`, `rest`), `Integer` (`value`),
`QuotedString` (`quote`, `value`) and `Atom` (`name`). All of them are
subclasses of `SExp`, and every node has a `loc`. Nodes offer:

- `nilp`, `listp`, `cons_fst` and `cons_snd`;
- `proper_list`, which returns `None` for an improper list;
- `to_bigint`, which returns `None` for a cons cell;
- `get_number`, which raises `SExpParseError` for a cons cell;
- `encode`, the CLVM serialisation;
- `with_loc`.

`==` and `equal_to` compare by CLVM atom value. This means an `Integer`, an
`Atom` and a `QuotedString` with the same bytes are equal, and every empty
form equals nil. Nodes are hashable.

Helper functions are `atom_from_string`, `quoted_from_string`, `enlist`
(builds a proper list from a sequence) and `decode_string`.

## Primitives

```python
from clvmtools.prims import prim_map, primcons
```

- `prims()` lists the operator names, as bytes, paired with their opcodes as `Integer` nodes.
- `prim_map()` gives the same pairs as a dictionary.
- `primquote`, `primcons`, `primapply`, `primexc` and `primop` build the corresponding forms.

## Run failures

`RunFailure` is an exception with two subclasses:

- `RunErr(loc, message)` prints as `loc: message`.
- `RunExn(loc, value)` prints as `loc: throw(x) value`.

## Preprocessing

`preprocess(opts, cmod)` returns the top-level forms of `cmod` with every
`(include name)` form replaced by the forms read from that file.
`process_include(opts, name)` reads and parses a single include.

`opts` is any object that provides:

- a `filename` attribute;
- a `stdenv` attribute; when it is true, `(include "*macros*")` is injected first;
- a `read_new_file(inc_from, filename)` method returning a `(filename, content)` tuple.

A malformed include, or an included file that is not a list of forms,
raises `CompileErr`.

## Number helpers

`clvmtools.util` converts between integers and their minimal signed
big-endian byte strings with `u8_from_number` and `number_from_u8`. It also
provides `index_of_match` and `skip_leading`.

## What this package does not do

This package has no compiler front end, code generator or optimiser. It has
no CLVM interpreter, no command-line tool, and no file loader for includes.
The caller supplies `read_new_file`. It reads, prints and preprocesses
programs, but does not compile or run them.