import io
import itertools
import math

import pytest

from csdkit.numberutil import (
    count_digits,
    get_prime,
    is_prime,
    main,
    max3,
    min3,
    number_to_text_tr,
    simplify,
)

VOCABULARY = {
    "bir", "iki", "uc", "dort", "bes", "alti", "yedi", "sekiz", "dokuz",
    "on", "yirmi", "otuz", "kirk", "elli", "altmis", "yetmis", "seksen", "doksan",
    "yuz", "bin", "milyon", "milyar", "trilyon", "katrilyon", "katrilyar",
}


def test_zero_text():
    assert number_to_text_tr(0) == "sifir"


def test_one_thousand_has_no_leading_one():
    assert number_to_text_tr(1000) == "bin"


def test_one_hundred_has_no_leading_one():
    assert number_to_text_tr(100) == "yuz"


def test_thousands_prefix():
    text = number_to_text_tr(2000)
    assert text.startswith("iki ")
    assert text.endswith("bin")


@pytest.mark.parametrize("val", [1, 7, 19, 101, 999, 1001, 12345, 1_000_000, 987_654_321, 10**18])
def test_text_uses_only_known_words(val):
    words = number_to_text_tr(val).split()
    assert words
    assert set(words) <= VOCABULARY


@pytest.mark.parametrize("val", [-1, 1000**7])
def test_text_out_of_range(val):
    with pytest.raises(ValueError):
        number_to_text_tr(val)


@pytest.mark.parametrize("k", range(10))
def test_count_digits_powers_of_ten(k):
    assert count_digits(10**k) == k + 1
    assert count_digits(10**k - 1) == max(k, 1)


@pytest.mark.parametrize("val", [0, 5, 42, 123456])
def test_count_digits_ignores_sign(val):
    assert count_digits(-val) == count_digits(val)


def test_count_digits_zero():
    assert count_digits(0) == 1


def test_two_is_prime():
    assert is_prime(2) is True


@pytest.mark.parametrize("val", [-7, 0, 1])
def test_small_values_not_prime(val):
    assert is_prime(val) is False


@pytest.mark.parametrize("a, b", itertools.product([2, 3, 11, 13, 97], [2, 7, 11, 101]))
def test_products_are_not_prime(a, b):
    assert is_prime(a * b) is False


def test_get_prime_first():
    assert get_prime(1) == 2


def test_get_prime_sequence_is_consecutive_primes():
    primes = [get_prime(n) for n in range(1, 40)]
    assert all(is_prime(p) for p in primes)
    for lo, hi in zip(primes, primes[1:]):
        assert lo < hi
        assert not any(is_prime(v) for v in range(lo + 1, hi))


def test_get_prime_invalid():
    with pytest.raises(ValueError):
        get_prime(0)


@pytest.mark.parametrize("values", list(itertools.permutations([3, -1, 8])) + [(4, 4, 1), (2, 2, 2)])
def test_max3_min3(values):
    assert max3(*values) == max(values)
    assert min3(*values) == min(values)


@pytest.mark.parametrize("a, b", [(4, 8), (-6, 9), (12, -18), (35, 49), (7, 13), (100, 25)])
def test_simplify_keeps_ratio_and_reduces(a, b):
    x, y = simplify(a, b)
    assert x * b == y * a
    assert math.gcd(abs(x), abs(y)) == 1


def test_simplify_with_zero_unchanged():
    assert simplify(0, 5) == (0, 5)


def test_main_simplifies_until_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 8\n0 0\n5 10\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    x, y = simplify(4, 8)
    assert f"{x} / {y}" in out
    assert "0 / 0" in out
    assert out.count("Input numerator and denominator:") == 2


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 9\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    x, y = simplify(3, 9)
    assert f"{x} / {y}" in out


def test_main_lists_primes(capsys):
    assert main(["--primes"]) == 0
    lines = capsys.readouterr().out.splitlines()
    numbers = [int(tok) for tok in lines[0].split()]
    assert numbers == [n for n in range(101) if is_prime(n)]
    assert lines[1] == ("Prime" if is_prime(1_000_003) else "Not prime")