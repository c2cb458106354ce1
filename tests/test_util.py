import pytest

from clvmtools.util import index_of_match, number_from_u8, skip_leading, u8_from_number


def test_number_from_hello():
    assert number_from_u8(b"hello") == 448378203247


def test_number_from_empty_is_zero():
    assert number_from_u8(b"") == number_from_u8(b"\x00")


def test_zero_encodes_as_single_byte():
    assert u8_from_number(0) == b"\x00"


@pytest.mark.parametrize(
    "n", [0, 1, -1, 127, 128, 255, 256, -128, -129, 448378203247, -(2**200), 2**200 + 7]
)
def test_round_trip(n):
    assert number_from_u8(u8_from_number(n)) == n


@pytest.mark.parametrize("n", [1, -1, 127, 128, -128, -129, 65535, -65536, 2**64])
def test_encoding_is_minimal(n):
    encoded = u8_from_number(n)
    assert number_from_u8(encoded[1:]) != n or len(encoded) == 1


def test_positive_high_bit_keeps_sign():
    encoded = u8_from_number(200)
    assert number_from_u8(encoded) > 0
    assert encoded[0] == 0


def test_index_of_match_first():
    haystack = [1, 2, 3, 2]
    idx = index_of_match(lambda x: x == 2, haystack)
    assert haystack[idx] == 2
    assert all(x != 2 for x in haystack[:idx])


def test_index_of_match_missing():
    assert index_of_match(lambda x: x > 10, [1, 2, 3]) == -1


def test_skip_leading():
    assert skip_leading("--foo", "-") == "foo"
    assert skip_leading("foo-", "-") == "foo-"
    assert skip_leading("", "-") == ""


def test_skip_leading_empty_dash():
    assert skip_leading("--foo", "") == "--foo"