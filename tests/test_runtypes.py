import pytest

from clvmtools.runtypes import RunErr, RunExn, RunFailure
from clvmtools.sexp import Integer, parse_sexp
from clvmtools.srcloc import Srcloc

LOC = Srcloc.start("*test*")


def test_run_err_string():
    assert str(RunErr(LOC, "bad thing")) == f"{LOC}: bad thing"


def test_run_exn_string():
    value = parse_sexp(LOC, "(1 2)")[0]
    assert str(RunExn(LOC, value)) == f"{LOC}: throw(x) {value}"


def test_run_exn_keeps_value():
    value = Integer(LOC, 7)
    assert RunExn(LOC, value).value is value


def test_failures_are_caught_as_run_failure():
    with pytest.raises(RunFailure) as info:
        raise RunErr(LOC, "oops")
    assert info.value.loc == LOC
    assert info.value.message == "oops"


def test_equality():
    assert RunErr(LOC, "a") == RunErr(LOC, "a")
    assert not (RunErr(LOC, "a") == RunErr(LOC, "b"))
    assert not (RunErr(LOC, "a") == RunExn(LOC, Integer(LOC, 1)))