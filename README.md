# wilsonkit

Small pure-Python utilities for prime number searches. It has two modules:

- `wilsonkit.numparse` reads unsigned integers that are written with scale suffixes.
- `wilsonkit.primes` generates, counts and prints primes and prime k-tuplets with a segmented sieve.

The package has no third-party dependencies.

## Installation

```
pip install .
```

## Parsing numbers: `wilsonkit.numparse`

`parse_uint64(text, lo=0, hi=2**64 - 1)` reads an unsigned integer and checks
that it lies in `[lo, hi]`. The number can be written in decimal, in hexadecimal
(`0x...`) or in octal (a leading `0`). It can be followed by one optional suffix:

| Suffix | Meaning |
| --- | --- |
| `K`, `M`, `G`, `T`, `P` | multiply by 10^3, 10^6, 10^9, 10^12, 10^15 |
| `k`, `m`, `g`, `t`, `p` | multiply by 2^10, 2^20, 2^30, 2^40, 2^50 |
| `eN` / `EN` | multiply by 10^N |
| `bN` / `BN` | multiply by 2^N |

```python
from wilsonkit.numparse import parse_uint64, NumberRangeError

parse_uint64("3G")       # 3000000000
parse_uint64("4k")       # 4096
parse_uint64("5e6")      # 5000000
parse_uint64("0x10")     # 16

try:
    parse_uint64("2K", 0, 1000)
except NumberRangeError:
    ...
```

`parse_uint(text, lo=0, hi=2**32 - 1)` does the same for 32-bit values.

The functions raise these errors:

- `NumberSyntaxError` when the text cannot be read, for example an unknown suffix or characters after the suffix.
- `NumberRangeError` when the value, or the value after scaling, falls outside `[lo, hi]`.

Both errors derive from `NumberParseError`, which is a `ValueError`. A plain
`ValueError` is raised when `lo` or `hi` does not fit the function's width. The
constants `UINT32_MAX` and `UINT64_MAX` are also exported.

## Primes: `wilsonkit.primes`

All intervals are closed, `[start, stop]`. Every bound must be an integer in
`[0, 2^64 - 1]`.

```python
from wilsonkit import primes

primes.generate_primes(10, 30)     # [11, 13, 17, 19, 23, 29]
primes.generate_n_primes(5, 0)     # [2, 3, 5, 7, 11]
primes.nth_prime(10, 0)            # 29
primes.nth_prime(-1, 10)           # 7
primes.count_primes(1, 100)        # 25
primes.count_twins(1, 100)
primes.print_triplets(1, 20)       # writes "(5, 7, 11)", "(7, 11, 13)", ...
```

- `nth_prime(n, start=0)` behaves as follows:
  - `n == 0` finds the first prime `>= start`.
  - `n > 0` finds the nth prime `> start`.
  - `n < 0` finds the nth prime `< start`.
- `count_twins`, `count_triplets`, `count_quadruplets`, `count_quintuplets` and `count_sextuplets` count the prime k-tuplets that lie wholly inside the interval.
- The matching `print_*` functions write the same tuplets to standard output, one per line, as `(p1, p2, ...)`. `print_primes` writes one prime per line.
- `get_max_stop()` returns `2^64 - 1`.
- `primesieve_version()` returns `"12.3"`.
- `set_sieve_size(kib)` clamps the segment size to `[16, 8192]` KiB and rounds it down to a power of two. The default is 256 KiB, and `get_sieve_size()` reads it back.
- `set_num_threads(n)` stores a thread count clamped to `[1, CPU count]`. `get_num_threads()` reads it back and defaults to the CPU count. The sieve itself runs in a single thread; the setting is only recorded.

Invalid arguments, and results that would go past `2^64 - 1` or below 2, raise
`PrimesieveError`, which is a `RuntimeError`.

## What it does not do

wilsonkit is a library only. It has no command-line program. It does not run
a Wilson prime search itself, and it has no GPU or OpenCL support.

## Running the tests

```
pip install .[test]
pytest
```