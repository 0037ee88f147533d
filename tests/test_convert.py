import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from minissh.convert import (
    cmp_d,
    cmpabs_d,
    export_bytes,
    fits_slong_p,
    fits_ulong_p,
    get_d,
    get_si,
    get_str,
    get_ui,
    import_bytes,
    set_d,
    set_str,
    sizeinbase,
)

big_ints = st.integers(min_value=-(1 << 300), max_value=1 << 300)


# sizeinbase

def test_sizeinbase_zero_is_one_digit():
    assert sizeinbase(0, 10) == 1


@given(big_ints, st.integers(min_value=2, max_value=62))
def test_sizeinbase_matches_string_length(u, base):
    assert sizeinbase(u, base) == len(get_str(abs(u), base))


@pytest.mark.parametrize("base", [1, 63, 0, -10])
def test_sizeinbase_rejects_bad_base(base):
    with pytest.raises(ValueError):
        sizeinbase(5, base)


# get_str

def test_get_str_matches_builtin_formats():
    assert get_str(255, 16) == format(255, "x")
    assert get_str(255, -16) == format(255, "X")
    assert get_str(-255, 2) == format(-255, "b")
    assert get_str(12345, 8) == format(12345, "o")


def test_get_str_small_bases_mean_ten():
    for base in (-1, 0, 1):
        assert get_str(-987654321, base) == str(-987654321)


def test_get_str_zero():
    assert get_str(0, 16) == "0"


def test_get_str_base_62_alphabet():
    alphabet = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    assert "".join(get_str(v, 62) for v in range(62)) == alphabet


@pytest.mark.parametrize("base", [63, 100, -37])
def test_get_str_rejects_bad_base(base):
    with pytest.raises(ValueError):
        get_str(1, base)


@given(big_ints, st.integers(min_value=2, max_value=62))
def test_get_str_round_trip(u, base):
    assert set_str(get_str(u, base), base) == u


@given(big_ints, st.integers(min_value=2, max_value=36))
def test_get_str_upper_round_trip(u, base):
    assert set_str(get_str(u, -base), base) == u


@given(big_ints)
def test_get_str_decimal_matches_str(u):
    assert get_str(u, 10) == str(u)


# set_str

def test_set_str_base_zero_prefixes():
    assert set_str("0x1F", 0) == int("1F", 16)
    assert set_str("0B101", 0) == int("101", 2)
    assert set_str("0755", 0) == int("755", 8)
    assert set_str("-42", 0) == -42
    assert set_str("0", 0) == 0


def test_set_str_whitespace():
    assert set_str("  \t-1 2 3", 10) == -123


def test_set_str_letters_in_large_bases():
    assert set_str("a", 37) == 36
    assert set_str("A", 37) == 10
    assert set_str("ff", 16) == set_str("FF", 16) == 255


@pytest.mark.parametrize(
    "text, base",
    [("", 10), ("   ", 10), ("-", 10), ("12a", 10), ("0x", 0), ("+5", 10), ("19", 8), ("- ", 10)],
)
def test_set_str_rejects_invalid(text, base):
    with pytest.raises(ValueError):
        set_str(text, base)


@pytest.mark.parametrize("base", [1, 63, -2])
def test_set_str_rejects_bad_base(base):
    with pytest.raises(ValueError):
        set_str("1", base)


def test_set_str_rejects_non_string():
    with pytest.raises(TypeError):
        set_str(b"12", 10)


# import / export

def test_export_big_endian_bytes():
    assert export_bytes(0x0102, 1, 1, 1) == (0x0102).to_bytes(2, "big")
    assert export_bytes(0x0102, -1, 1, 1) == (0x0102).to_bytes(2, "little")


def test_export_words_layout():
    value = 0x0102030405
    assert export_bytes(value, 1, 4, 1) == b"\x00\x00\x00\x01\x02\x03\x04\x05"
    assert export_bytes(value, -1, 2, -1) == b"\x05\x04\x03\x02\x01\x00"


def test_export_zero_is_empty():
    assert export_bytes(0, 1, 4, 1) == b""


def test_export_ignores_sign():
    assert export_bytes(-300, 1, 1, 1) == export_bytes(300, 1, 1, 1)


def test_import_empty_is_zero():
    assert import_bytes(b"", 1, 4, 1) == 0


def test_import_matches_from_bytes():
    data = bytes(range(1, 17))
    assert import_bytes(data, 1, 1, 1) == int.from_bytes(data, "big")
    assert import_bytes(data, -1, 1, -1) == int.from_bytes(data, "little")
    assert import_bytes(data, 1, 16, 1) == int.from_bytes(data, "big")


def test_import_rejects_bad_layout():
    with pytest.raises(ValueError):
        import_bytes(b"\x01\x02\x03", 1, 2, 1)
    with pytest.raises(ValueError):
        import_bytes(b"\x01", 0, 1, 1)
    with pytest.raises(ValueError):
        import_bytes(b"\x01", 1, 1, 2)
    with pytest.raises(ValueError):
        import_bytes(b"\x01", 1, 0, 1)


@given(
    st.integers(min_value=0, max_value=1 << 400),
    st.sampled_from([1, -1]),
    st.integers(min_value=1, max_value=9),
    st.sampled_from([1, 0, -1]),
)
def test_export_import_round_trip(u, order, size, endian):
    data = export_bytes(u, order, size, endian)
    assert len(data) % size == 0
    assert import_bytes(data, order, size, endian) == u


# floats

def test_get_d_exact_for_small():
    assert get_d(-(1 << 53)) == -float(1 << 53)
    assert get_d(0) == 0.0


def test_get_d_truncates():
    assert get_d((1 << 54) - 1) == float((1 << 54) - 2)
    assert get_d(-((1 << 54) - 1)) == -float((1 << 54) - 2)


def test_get_d_overflow_gives_infinity():
    assert get_d(1 << 2000) == math.inf
    assert get_d(-(1 << 2000)) == -math.inf


@given(st.integers(min_value=-(1 << 1000), max_value=1 << 1000))
def test_get_d_never_exceeds_magnitude(u):
    x = get_d(u)
    assert abs(x) <= abs(u)
    assert (x < 0) == (u < 0)


def test_set_d_special_values():
    assert set_d(math.nan) == 0
    assert set_d(math.inf) == 0
    assert set_d(-math.inf) == 0
    assert set_d(0.75) == 0


def test_set_d_truncates_towards_zero():
    assert set_d(-2.9) == -2
    assert set_d(2.9) == 2
    assert set_d(float(1 << 70)) == 1 << 70


@given(st.integers(min_value=-(1 << 53), max_value=1 << 53))
def test_set_d_get_d_round_trip(u):
    assert set_d(get_d(u)) == u


def test_cmp_d_basic():
    assert cmp_d(3, 2.5) == 1
    assert cmp_d(-3, 2.5) == -1
    assert cmp_d(2, 2.0) == 0
    assert cmp_d(0, -0.0) == 0
    assert cmp_d(1 << 80, math.inf) == -1
    assert cmp_d(-(1 << 80), -math.inf) == 1


def test_cmpabs_d_basic():
    assert cmpabs_d(-3, 2.5) == 1
    assert cmpabs_d(2, -2.0) == 0
    assert cmpabs_d(0, 0.5) == -1
    assert cmpabs_d(1 << 2000, -math.inf) == -1


def test_compare_with_nan_raises():
    with pytest.raises(ValueError):
        cmp_d(1, math.nan)
    with pytest.raises(ValueError):
        cmpabs_d(1, math.nan)


@given(big_ints, st.floats(allow_nan=False))
def test_cmp_d_antisymmetric_sign(u, d):
    c = cmp_d(u, d)
    assert c in (-1, 0, 1)
    assert cmp_d(-u, -d) == -c


# machine words

def test_get_ui_takes_low_word_of_magnitude():
    assert get_ui(-5) == 5
    assert get_ui((1 << 64) + 7) == 7


def test_get_si_in_range_is_identity():
    for value in (0, 1, -1, (1 << 63) - 1, -(1 << 63)):
        assert get_si(value) == value


def test_get_si_wraps():
    assert get_si(-(1 << 64)) == -(1 << 63)
    assert get_si(1 << 63) == 0


@given(big_ints)
def test_fits_matches_conversion(u):
    if fits_slong_p(u):
        assert get_si(u) == u
    if fits_ulong_p(u):
        assert get_ui(u) == u


def test_fits_bounds():
    assert fits_ulong_p((1 << 64) - 1)
    assert not fits_ulong_p(1 << 64)
    assert not fits_ulong_p(-1)
    assert fits_slong_p(-(1 << 63))
    assert not fits_slong_p(-(1 << 63) - 1)
    assert not fits_slong_p(1 << 63)


def test_type_errors():
    with pytest.raises(TypeError):
        get_ui(1.5)
    with pytest.raises(TypeError):
        get_str(True, 10)
    with pytest.raises(TypeError):
        set_d("1.0")