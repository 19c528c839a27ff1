"""Complex numbers with tolerance-based equality."""

from __future__ import annotations

import math

DEFAULT_DELTA = 0.00001


def _fmt(value: float) -> str:
    return f"{value:g}"


class Complex:
    """A complex number with real and imaginary parts.

    Two values compare equal when both parts differ by less than ``delta``.
    """

    __hash__ = None  # equality is tolerance based

    def __init__(self, real: float = 0.0, imag: float = 0.0) -> None:
        self.real = float(real)
        self.imag = float(imag)
        self.delta = DEFAULT_DELTA

    def norm(self) -> float:
        """Return the modulus."""
        return math.sqrt(self.real * self.real + self.imag * self.imag)

    def length(self) -> float:
        """Return the modulus; same as :meth:`norm`."""
        return self.norm()

    def __add__(self, other):
        if isinstance(other, Complex):
            return Complex(self.real + other.real, self.imag + other.imag)
        if isinstance(other, (int, float)):
            return Complex(self.real + other, self.imag)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, (int, float)):
            return Complex(other + self.real, self.imag)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Complex):
            return Complex(self.real - other.real, self.imag - other.imag)
        if isinstance(other, (int, float)):
            return Complex(self.real - other, self.imag)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, (int, float)):
            return Complex(other - self.real, -self.imag)
        return NotImplemented

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imag)

    def __pos__(self) -> Complex:
        return Complex(self.real, self.imag)

    def __eq__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return (abs(self.real - other.real) < self.delta
                and abs(self.imag - other.imag) < self.delta)

    def __float__(self) -> float:
        return self.norm()

    def __call__(self, *args):
        """With no arguments return the norm; otherwise set real and imaginary parts."""
        if not args:
            return self.norm()
        if len(args) == 1:
            self.real, self.imag = float(args[0]), 0.0
            return None
        if len(args) == 2:
            self.real, self.imag = float(args[0]), float(args[1])
            return None
        raise TypeError(f"expected at most 2 arguments, got {len(args)}")

    def __getitem__(self, idx: int) -> float:
        return self.real if idx == 0 else self.imag

    def __str__(self) -> str:
        sign = " - " if self.imag < 0 else " + "
        return f"|{_fmt(self.real)}{sign}{_fmt(abs(self.imag))}i| = {_fmt(self.norm())}"

    def __repr__(self) -> str:
        return f"Complex({self.real!r}, {self.imag!r})"

    def increment(self) -> Complex:
        """Add one to the real part in place and return self."""
        self.real += 1
        return self

    def decrement(self) -> Complex:
        """Subtract one from the real part in place and return self."""
        self.real -= 1
        return self

    @classmethod
    def parse(cls, text: str) -> Complex:
        """Build a value from two whitespace-separated numbers: real then imaginary."""
        parts = text.split()
        if len(parts) != 2:
            raise ValueError(f"expected two numbers, got {text!r}")
        return cls(float(parts[0]), float(parts[1]))