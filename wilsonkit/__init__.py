"""Parsing of unsigned integers with scale suffixes, and prime sieving, counting and printing."""

__version__ = "0.3.0"
__all__ = ["numparse", "primes"]