"""Number helpers: Turkish number words, digit counting, primes and fractions."""

import argparse
import sys
from collections.abc import Iterable, Iterator

_ONES = ("bir", "iki", "uc", "dort", "bes", "alti", "yedi", "sekiz", "dokuz")
_TENS = ("on", "yirmi", "otuz", "kirk", "elli", "altmis", "yetmis", "seksen", "doksan")
_SCALES = ("bin", "milyon", "milyar", "trilyon", "katrilyon", "katrilyar")
_LIMIT = 1000 ** (len(_SCALES) + 1)


def number_to_text_tr(val: int) -> str:
    """Return the Turkish words for a non-negative integer."""
    if val < 0:
        raise ValueError("value must be non-negative")
    if val >= _LIMIT:
        raise ValueError("value is too large to spell out")
    if val == 0:
        return "sifir"

    groups = []
    while val:
        val, rem = divmod(val, 1000)
        groups.append(rem)

    words = []
    for scale, group in reversed(list(enumerate(groups))):
        if not group:
            continue
        hundreds, rest = divmod(group, 100)
        tens, ones = divmod(rest, 10)
        if hundreds:
            if hundreds != 1:
                words.append(_ONES[hundreds - 1])
            words.append("yuz")
        if tens:
            words.append(_TENS[tens - 1])
        if ones and not (scale == 1 and group == 1):
            words.append(_ONES[ones - 1])
        if scale:
            words.append(_SCALES[scale - 1])

    return " ".join(words)


def count_digits(val: int) -> int:
    """Return the number of decimal digits of ``val``, ignoring the sign."""
    return len(str(abs(val)))


def is_prime(val: int) -> bool:
    """Return whether ``val`` is a prime number."""
    if val <= 1:
        return False
    for small in (2, 3, 5, 7):
        if val % small == 0:
            return val == small
    divisor = 11
    while divisor * divisor <= val:
        if val % divisor == 0:
            return False
        divisor += 2
    return True


def get_prime(n: int) -> int:
    """Return the ``n``-th prime number, counting from 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    count = 0
    val = 2
    while True:
        if is_prime(val):
            count += 1
            if count == n:
                return val
        val += 1


def max3(a, b, c):
    """Return the largest of three values."""
    return (a if a > c else c) if a > b else (b if b > c else c)


def min3(a, b, c):
    """Return the smallest of three values."""
    return (a if a < c else c) if a < b else (b if b < c else c)


def simplify(a: int, b: int) -> tuple[int, int]:
    """Divide numerator and denominator by their largest common divisor."""
    abs_a, abs_b = abs(a), abs(b)
    for divisor in range(min(abs_a, abs_b), 1, -1):
        if abs_a % divisor == 0 and abs_b % divisor == 0:
            return a // divisor, b // divisor
    return a, b


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv=None) -> int:
    """Simplify fractions read from standard input, or list small primes."""
    parser = argparse.ArgumentParser(description="Fraction simplifier and prime lister.")
    parser.add_argument("--primes", action="store_true", help="list the primes up to 100")
    args = parser.parse_args(argv)

    if args.primes:
        print(" ".join(str(i) for i in range(101) if is_prime(i)))
        print("Prime" if is_prime(1_000_003) else "Not prime")
        return 0

    tokens = _tokens(sys.stdin)
    while True:
        print("Input numerator and denominator:", end="", flush=True)
        try:
            a = int(next(tokens))
            b = int(next(tokens))
        except StopIteration:
            print()
            return 0
        except ValueError:
            print("\nInvalid input", file=sys.stderr)
            return 1

        a, b = simplify(a, b)
        print(f"{a} / {b}")

        if a == 0 and b == 0:
            return 0