import pytest

from physkit.rational import Format, RationalConstant, power


def test_reduced_to_lowest_terms():
    r = RationalConstant(2, 4)
    assert r == RationalConstant(1, 2)
    assert (r.num, r.den) == (1, 2)


def test_negative_denominator_moves_sign_to_numerator():
    r = RationalConstant(1, -2)
    assert r.den > 0
    assert r == -RationalConstant(1, 2)


def test_zero_has_unit_denominator():
    z = RationalConstant(0, 7)
    assert z == RationalConstant.zero()
    assert z.den == 1


def test_zero_denominator_rejected():
    with pytest.raises(ZeroDivisionError):
        RationalConstant(1, 0)


def test_float_rejected():
    with pytest.raises(TypeError):
        RationalConstant(1.5)


def test_add_sub_roundtrip():
    a = RationalConstant(3, 7)
    b = RationalConstant(-5, 11)
    assert (a + b) - b == a
    assert a - a == RationalConstant.zero()


def test_mul_div_roundtrip():
    a = RationalConstant(3, 7)
    b = RationalConstant(-5, 11)
    assert (a * b) / b == a
    assert a / a == RationalConstant.one()


def test_int_coercion():
    r = RationalConstant(2)
    assert 1 / r == RationalConstant(1, 2)
    assert r + 1 == RationalConstant(3)
    assert 3 - r == RationalConstant.one()


def test_division_by_zero_rational():
    with pytest.raises(ZeroDivisionError):
        RationalConstant(1) / RationalConstant.zero()


def test_to_string_rat():
    assert RationalConstant(3, 4).to_string() == "3/4"
    assert RationalConstant(6).to_string(Format.RAT) == "6"
    r = RationalConstant(-3, 4)
    assert str(r) == r.to_string()


def test_to_string_float():
    assert RationalConstant(1, 2).to_string(Format.FLOAT) == "0.5"


def test_power_matches_repeated_multiplication():
    x = RationalConstant(2, 3)
    assert power(x, 3) == x * x * x
    assert x ** 2 == power(x, 2)


def test_negative_power_is_inverse():
    x = RationalConstant(-2, 5)
    assert power(x, -2) == RationalConstant.one() / (x * x)


def test_power_zero():
    assert power(RationalConstant(7, 3), 0) == RationalConstant.one()
    with pytest.raises(ValueError):
        power(RationalConstant.zero(), 0)


def test_hash_consistent_with_equality():
    assert RationalConstant(1, 2) in {RationalConstant(2, 4)}