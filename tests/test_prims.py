from clvmtools.prims import (
    prim_map,
    primapply,
    primcons,
    primexc,
    primop,
    primquote,
    prims,
)
from clvmtools.sexp import Integer, Nil, atom_from_string
from clvmtools.srcloc import Srcloc

LOC = Srcloc.start("*test*")


def test_plus_opcode():
    assert prim_map()[b"+"].value == 16


def test_softfork_opcode():
    assert prim_map()[b"softfork"].value == 36


def test_table_size():
    assert len(prims()) == 32


def test_names_are_unique():
    assert len(prim_map()) == len(prims())


def test_table_order_starts_with_quote():
    names = [name for name, _ in prims()]
    assert names[0] == b"q"
    assert names[-1] == b"softfork"


def test_prims_located_in_prims_file():
    assert all(expr.loc.file == "*prims*" for _, expr in prims())


def test_opcodes_increase_along_table():
    codes = [expr.value for _, expr in prims()]
    assert codes == sorted(codes)


def test_primquote_structure():
    a = Integer(LOC, 5)
    q = primquote(LOC, a)
    assert q.first.value == 1
    assert q.rest is a


def test_primquote_nil_wire_bytes():
    assert primquote(LOC, Nil(LOC)).encode() == b"\xff\x01\x80"


def test_primcons_shape():
    a = Integer(LOC, 2)
    b = Integer(LOC, 5)
    items = primcons(LOC, a, b).proper_list()
    assert items is not None
    assert [x.to_bigint() for x in items] == [prim_map()[b"c"].value, 2, 5]


def test_primapply_and_primexc_use_table_opcodes():
    a = Integer(LOC, 2)
    b = Integer(LOC, 3)
    assert primapply(LOC, a, b).first.value == prim_map()[b"a"].value
    assert primexc(LOC, a, b).first.value == prim_map()[b"x"].value


def test_primop_conses_operator_onto_args():
    op = atom_from_string(LOC, "+")
    args = primcons(LOC, Integer(LOC, 1), Integer(LOC, 2))
    result = primop(LOC, op, args)
    assert result.first is op
    assert result.rest is args