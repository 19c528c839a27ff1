"""Fractions kept in lowest terms with a positive denominator."""

from __future__ import annotations

import math

_UNSET = object()


def _check(a: int, b: int) -> None:
    if b == 0:
        if a == 0:
            raise ValueError("Indeterminate")
        raise ValueError("Undefined")


class Fraction:
    """A reduced fraction.

    ``Fraction()`` is zero. Given only a numerator the denominator is zero,
    which is rejected as undefined.
    """

    def __init__(self, numerator: int = 0, denominator=_UNSET) -> None:
        if denominator is _UNSET:
            if numerator == 0 and not isinstance(numerator, bool):
                self._a, self._b = 0, 1
                return
            denominator = 0
        _check(numerator, denominator)
        self._set(numerator, denominator)

    def _set(self, a: int, b: int) -> None:
        if a == 0:
            self._a, self._b = 0, 1
            return
        if b < 0:
            a, b = -a, -b
        g = math.gcd(a, b)
        self._a, self._b = a // g, b // g

    @property
    def numerator(self) -> int:
        return self._a

    @numerator.setter
    def numerator(self, a: int) -> None:
        if a != self._a:
            self._set(a, self._b)

    @property
    def denominator(self) -> int:
        return self._b

    @denominator.setter
    def denominator(self, b: int) -> None:
        if b == self._b:
            return
        _check(self._a, b)
        self._set(self._a, b)

    def real_value(self) -> float:
        """Return the value as a float."""
        return self._a / self._b

    def increment(self) -> Fraction:
        """Add one in place and return self."""
        self._a += self._b
        return self

    def decrement(self) -> Fraction:
        """Subtract one in place and return self."""
        self._a -= self._b
        return self

    def __float__(self) -> float:
        return self.real_value()

    def __str__(self) -> str:
        if self._b == 1:
            return str(self._a)
        return f"{self._a} / {self._b} = {self.real_value():f}"

    def __repr__(self) -> str:
        return f"Fraction({self._a}, {self._b})"

    @classmethod
    def parse(cls, text: str) -> Fraction:
        """Build a fraction from two whitespace-separated integers."""
        parts = text.split()
        if len(parts) != 2:
            raise ValueError(f"expected two integers, got {text!r}")
        return cls(int(parts[0]), int(parts[1]))