"""Small helpers for integer sequences, strings and random data."""

import random
import string
import sys
from collections.abc import Iterable, Sequence


def is_little_endian() -> bool:
    """Return whether the host stores integers least significant byte first."""
    return sys.byteorder == "little"


def display(values: Iterable[int]) -> None:
    """Print the values on one line, each followed by a space."""
    print("".join(f"{v} " for v in values))


def max_value(values: Sequence[int]) -> int:
    """Return the largest value."""
    if not values:
        raise ValueError("sequence is empty")
    return max(values)


def max_index(values: Sequence[int]) -> int:
    """Return the index of the first occurrence of the largest value."""
    if not values:
        raise ValueError("sequence is empty")
    return max(range(len(values)), key=values.__getitem__)


def average(values: Sequence[int]) -> float:
    """Return the arithmetic mean."""
    if not values:
        raise ValueError("sequence is empty")
    return sum(values) / len(values)


def random_int(a: int, b: int) -> int:
    """Return a random integer in the closed range [a, b]."""
    return random.randint(a, b)


def random_ints(size: int, minimum: int, maximum: int) -> list[int]:
    """Return ``size`` random integers in the half-open range [minimum, maximum)."""
    if size < 0:
        raise ValueError("size must be non-negative")
    if maximum <= minimum:
        raise ValueError("maximum must be greater than minimum")
    return [random.randrange(minimum, maximum) for _ in range(size)]


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted in ascending order."""
    return sorted(values)


def reversed_text(s: str) -> str:
    """Return the text with its characters in reverse order."""
    return s[::-1]


def char_count(s: str, ch: str) -> int:
    """Return how many times the character ``ch`` occurs in ``s``."""
    if len(ch) != 1:
        raise ValueError("ch must be a single character")
    return s.count(ch)


def concat_strings(strings: Iterable[str], delim: str) -> str:
    """Join the strings with ``delim`` between them."""
    return delim.join(strings)


def random_text(size: int) -> str:
    """Return ``size`` random ASCII letters of mixed case."""
    if size < 0:
        raise ValueError("size must be non-negative")
    return "".join(random.choices(string.ascii_letters, k=size))