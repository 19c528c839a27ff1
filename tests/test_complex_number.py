import pytest

from csdkit.complex_number import Complex


def test_norm_and_str():
    z = Complex(3, 4)
    assert z.norm() == 5
    assert z.length() == z.norm()
    assert str(z) == "|3 + 4i| = 5"


def test_str_negative_imaginary_uses_minus():
    assert str(Complex(3, -4)).startswith("|3 - 4i|")


def test_add_sub_round_trip():
    a = Complex(1.5, -2.25)
    b = Complex(-0.75, 8)
    assert (a + b) - b == a
    assert (a - b) + b == a


def test_scalar_add_is_commutative():
    z = Complex(2, 7)
    assert 5 + z == z + 5
    assert (z + 5).imag == z.imag


def test_reverse_subtract():
    z = Complex(2, 7)
    assert 5 - z == -(z - 5)


def test_neg_and_pos():
    z = Complex(1.25, -3.5)
    assert -(-z) == z
    assert +z == z
    assert (+z) is not z and (+z).real == z.real


def test_equality_tolerance():
    a = Complex(1, 1)
    assert a == Complex(1 + 1e-7, 1)
    assert not (a == Complex(1 + 1e-3, 1))
    a.delta = 0.01
    assert a == Complex(1 + 1e-3, 1)


def test_float_is_norm():
    z = Complex(3, 4)
    assert float(z) == z.norm()


def test_call_forms():
    z = Complex(3, 4)
    assert z() == z.norm()
    z(7.5, -1.5)
    assert (z.real, z.imag) == (7.5, -1.5)
    z(2.5)
    assert (z.real, z.imag) == (2.5, 0.0)
    with pytest.raises(TypeError):
        z(1, 2, 3)


def test_getitem():
    z = Complex(1.5, 2.5)
    assert z[0] == 1.5
    assert z[1] == 2.5


def test_increment_and_decrement():
    z = Complex(1.5, 2.5)
    assert z.increment() is z
    assert z == Complex(1.5 + 1, 2.5)
    z.decrement()
    z.decrement()
    assert z == Complex(1.5 - 1, 2.5)


def test_parse():
    assert Complex.parse("1.5 -2.5") == Complex(1.5, -2.5)
    with pytest.raises(ValueError):
        Complex.parse("1.5")
    with pytest.raises(ValueError):
        Complex.parse("a b")