"""Bit manipulation helpers for 32-bit unsigned values."""

_WIDTH = 32
_MASK = (1 << _WIDTH) - 1


def _check_position(n: int) -> None:
    if not 0 <= n < _WIDTH:
        raise ValueError(f"bit position must be in [0, {_WIDTH}), got {n}")


def _check_count(n: int) -> None:
    if not 0 <= n <= _WIDTH:
        raise ValueError(f"bit count must be in [0, {_WIDTH}], got {n}")


def set_bit(val: int, n: int) -> int:
    """Return ``val`` with bit ``n`` set."""
    _check_position(n)
    return (val | (1 << n)) & _MASK


def clear_bit(val: int, n: int) -> int:
    """Return ``val`` with bit ``n`` cleared."""
    _check_position(n)
    return val & ~(1 << n) & _MASK


def bits_set(n: int) -> int:
    """Return a value whose lowest ``n`` bits are set and the rest clear."""
    _check_count(n)
    return (1 << n) - 1


def bits_clear(n: int) -> int:
    """Return a value whose highest ``n`` bits are set and the rest clear."""
    _check_count(n)
    return (_MASK << (_WIDTH - n)) & _MASK


def count_set_bits(val: int) -> int:
    """Return the number of set bits in the 32-bit representation of ``val``."""
    return bin(val & _MASK).count("1")