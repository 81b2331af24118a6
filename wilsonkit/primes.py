"""Prime number generation, counting and printing with a segmented sieve.

Intervals are closed, ``[start, stop]``, and every bound must fit in an
unsigned 64-bit integer. Errors raise :class:`PrimesieveError`.
"""

from __future__ import annotations

import os
import sys
import threading
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import compress, islice
from math import isqrt

__all__ = [
    "PrimesieveError",
    "generate_primes",
    "generate_n_primes",
    "nth_prime",
    "count_primes",
    "count_twins",
    "count_triplets",
    "count_quadruplets",
    "count_quintuplets",
    "count_sextuplets",
    "print_primes",
    "print_twins",
    "print_triplets",
    "print_quadruplets",
    "print_quintuplets",
    "print_sextuplets",
    "get_max_stop",
    "get_sieve_size",
    "get_num_threads",
    "set_sieve_size",
    "set_num_threads",
    "primesieve_version",
]

_VERSION = "12.3"
_UINT64_MAX = (1 << 64) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_MIN_SIEVE_SIZE = 16
_MAX_SIEVE_SIZE = 8192
_DEFAULT_SIEVE_SIZE = 256

# Offsets of the members of each prime k-tuplet pattern.
_TUPLET_PATTERNS: dict[int, tuple[tuple[int, ...], ...]] = {
    2: ((0, 2),),
    3: ((0, 2, 6), (0, 4, 6)),
    4: ((0, 2, 6, 8),),
    5: ((0, 2, 6, 8, 12), (0, 4, 6, 10, 12)),
    6: ((0, 4, 6, 10, 12, 16),),
}
_TUPLET_SPAN = 16


class PrimesieveError(RuntimeError):
    """Raised for invalid arguments or results beyond 2^64 - 1."""


@dataclass
class _Settings:
    sieve_size: int = _DEFAULT_SIEVE_SIZE
    num_threads: int | None = None


_settings = _Settings()


def _max_threads() -> int:
    return os.cpu_count() or 1


def _simple_sieve(limit: int) -> list[int]:
    if limit < 2:
        return []
    flags = bytearray(b"\x01") * (limit + 1)
    flags[0] = flags[1] = 0
    for p in range(2, isqrt(limit) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes((limit - p * p) // p + 1)
    return list(compress(range(limit + 1), flags))


class _BasePrimes:
    """Lazily grown cache of the sieving primes."""

    def __init__(self) -> None:
        self._limit = 1
        self._primes: list[int] = []
        self._lock = threading.Lock()

    def up_to(self, limit: int) -> list[int]:
        with self._lock:
            if limit > self._limit:
                new_limit = max(limit, 2 * self._limit, 1024)
                self._primes = _simple_sieve(new_limit)
                self._limit = new_limit
            return self._primes


_base_primes = _BasePrimes()


def _sieve_segment(low: int, high: int) -> list[int]:
    low = max(low, 2)
    if low > high:
        return []
    flags = bytearray(b"\x01") * (high - low + 1)
    for p in _base_primes.up_to(isqrt(high)):
        square = p * p
        if square > high:
            break
        first = max(square, -(-low // p) * p)
        if first > high:
            continue
        flags[first - low :: p] = bytes((high - first) // p + 1)
    return list(compress(range(low, high + 1), flags))


def _segment_length() -> int:
    return _settings.sieve_size * 1024


def _ascending(start: int, stop: int) -> Iterator[int]:
    low = max(start, 2)
    while low <= stop:
        high = min(stop, low + _segment_length() - 1)
        yield from _sieve_segment(low, high)
        low = high + 1


def _descending(stop: int) -> Iterator[int]:
    high = stop
    while high >= 2:
        low = max(2, high - _segment_length() + 1)
        yield from reversed(_sieve_segment(low, high))
        high = low - 1


def _check_uint64(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise PrimesieveError(f"{name} must be an integer")
    if not 0 <= value <= _UINT64_MAX:
        raise PrimesieveError(f"{name} must be within [0, 2^64-1]")


def _check_interval(start: int, stop: int) -> None:
    _check_uint64(start, "start")
    _check_uint64(stop, "stop")


def _tuplets(start: int, stop: int, k: int) -> Iterator[tuple[int, ...]]:
    patterns = _TUPLET_PATTERNS[k]
    window: deque[int] = deque()
    members: set[int] = set()

    def settle() -> tuple[int, ...] | None:
        first = window.popleft()
        found = None
        for pattern in patterns:
            if all(first + offset in members for offset in pattern):
                found = tuple(first + offset for offset in pattern)
                break
        members.discard(first)
        return found

    for prime in _ascending(start, stop):
        while window and prime - window[0] > _TUPLET_SPAN:
            found = settle()
            if found:
                yield found
        window.append(prime)
        members.add(prime)
    while window:
        found = settle()
        if found:
            yield found


def _count_tuplets(start: int, stop: int, k: int) -> int:
    _check_interval(start, stop)
    return sum(1 for _ in _tuplets(start, stop, k))


def _print_tuplets(start: int, stop: int, k: int) -> None:
    _check_interval(start, stop)
    out = sys.stdout
    for tuplet in _tuplets(start, stop, k):
        out.write("(" + ", ".join(map(str, tuplet)) + ")\n")


def generate_primes(start: int, stop: int) -> list[int]:
    """Return the primes inside ``[start, stop]`` in ascending order."""
    _check_interval(start, stop)
    return list(_ascending(start, stop))


def generate_n_primes(n: int, start: int = 0) -> list[int]:
    """Return the first ``n`` primes ``>= start``."""
    _check_uint64(n, "n")
    _check_uint64(start, "start")
    primes = list(islice(_ascending(start, _UINT64_MAX), n))
    if len(primes) < n:
        raise PrimesieveError("nth prime > 2^64")
    return primes


def nth_prime(n: int, start: int = 0) -> int:
    """Find the nth prime relative to ``start``.

    ``n == 0`` finds the first prime ``>= start``, ``n > 0`` the nth prime
    ``> start`` and ``n < 0`` the nth prime ``< start``.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise PrimesieveError("n must be an integer")
    if not _INT64_MIN <= n <= _INT64_MAX:
        raise PrimesieveError("n must fit in a signed 64-bit integer")
    _check_uint64(start, "start")

    if n >= 0:
        first = start if n == 0 else start + 1
        position = max(n, 1)
        found = next(islice(_ascending(first, _UINT64_MAX), position - 1, None), None)
        if found is None:
            raise PrimesieveError("nth prime > 2^64")
        return found

    found = None
    if start > 0:
        found = next(islice(_descending(start - 1), -n - 1, None), None)
    if found is None:
        raise PrimesieveError("nth prime < 2 is impossible")
    return found


def count_primes(start: int, stop: int) -> int:
    """Count the primes inside ``[start, stop]``."""
    _check_interval(start, stop)
    return sum(1 for _ in _ascending(start, stop))


def count_twins(start: int, stop: int) -> int:
    """Count the twin primes inside ``[start, stop]``."""
    return _count_tuplets(start, stop, 2)


def count_triplets(start: int, stop: int) -> int:
    """Count the prime triplets inside ``[start, stop]``."""
    return _count_tuplets(start, stop, 3)


def count_quadruplets(start: int, stop: int) -> int:
    """Count the prime quadruplets inside ``[start, stop]``."""
    return _count_tuplets(start, stop, 4)


def count_quintuplets(start: int, stop: int) -> int:
    """Count the prime quintuplets inside ``[start, stop]``."""
    return _count_tuplets(start, stop, 5)


def count_sextuplets(start: int, stop: int) -> int:
    """Count the prime sextuplets inside ``[start, stop]``."""
    return _count_tuplets(start, stop, 6)


def print_primes(start: int, stop: int) -> None:
    """Print the primes inside ``[start, stop]``, one per line."""
    _check_interval(start, stop)
    out = sys.stdout
    for prime in _ascending(start, stop):
        out.write(f"{prime}\n")


def print_twins(start: int, stop: int) -> None:
    """Print the twin primes inside ``[start, stop]``."""
    _print_tuplets(start, stop, 2)


def print_triplets(start: int, stop: int) -> None:
    """Print the prime triplets inside ``[start, stop]``."""
    _print_tuplets(start, stop, 3)


def print_quadruplets(start: int, stop: int) -> None:
    """Print the prime quadruplets inside ``[start, stop]``."""
    _print_tuplets(start, stop, 4)


def print_quintuplets(start: int, stop: int) -> None:
    """Print the prime quintuplets inside ``[start, stop]``."""
    _print_tuplets(start, stop, 5)


def print_sextuplets(start: int, stop: int) -> None:
    """Print the prime sextuplets inside ``[start, stop]``."""
    _print_tuplets(start, stop, 6)


def get_max_stop() -> int:
    """Return the largest valid stop number, 2^64 - 1."""
    return _UINT64_MAX


def get_sieve_size() -> int:
    """Return the current sieve size in KiB."""
    return _settings.sieve_size


def get_num_threads() -> int:
    """Return the current number of threads."""
    if _settings.num_threads is None:
        return _max_threads()
    return _settings.num_threads


def set_sieve_size(sieve_size: int) -> None:
    """Set the sieve size in KiB, clamped to [16, 8192] and rounded down to a power of two."""
    clamped = min(max(int(sieve_size), _MIN_SIEVE_SIZE), _MAX_SIEVE_SIZE)
    _settings.sieve_size = 1 << (clamped.bit_length() - 1)


def set_num_threads(num_threads: int) -> None:
    """Set the number of threads, clamped to [1, number of CPUs]."""
    _settings.num_threads = min(max(int(num_threads), 1), _max_threads())


def primesieve_version() -> str:
    """Return the version number in the form ``i.j``."""
    return _VERSION