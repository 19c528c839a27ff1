"""Small utility toolkit: numbers, dates, bits, fractions, geometry, containers and small domain models."""

__version__ = "1.0.0"