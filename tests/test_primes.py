import os

import pytest

from wilsonkit import primes
from wilsonkit.primes import PrimesieveError


@pytest.fixture(autouse=True)
def _restore_settings():
    sieve_size = primes.get_sieve_size()
    threads = primes.get_num_threads()
    yield
    primes.set_sieve_size(sieve_size)
    primes.set_num_threads(threads)


def _is_prime(n):
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


def _parse_tuplets(text):
    result = []
    for line in text.splitlines():
        assert line.startswith("(") and line.endswith(")")
        result.append(tuple(int(x) for x in line[1:-1].split(", ")))
    return result


def test_generate_primes_matches_trial_division():
    assert primes.generate_primes(0, 500) == [n for n in range(501) if _is_prime(n)]


def test_generate_primes_subrange():
    assert primes.generate_primes(100, 300) == [
        n for n in range(100, 301) if _is_prime(n)
    ]


def test_generate_primes_empty_when_start_exceeds_stop():
    assert primes.generate_primes(50, 10) == []


def test_generate_primes_across_segments():
    primes.set_sieve_size(16)
    low, high = 16000, 50000
    result = primes.generate_primes(low, high)
    assert result == [n for n in range(low, high + 1) if _is_prime(n)]


def test_generate_n_primes_prefix():
    assert primes.generate_n_primes(10, 100) == primes.generate_primes(100, 200)[:10]


def test_generate_n_primes_zero():
    assert primes.generate_n_primes(0, 5) == []


def test_nth_prime_forward_from_zero():
    reference = primes.generate_primes(0, 100)
    for n in range(1, 11):
        assert primes.nth_prime(n, 0) == reference[n - 1]


def test_nth_prime_zero_returns_start_when_prime():
    for p in primes.generate_primes(0, 200):
        assert primes.nth_prime(0, p) == p


def test_nth_prime_positive_excludes_start():
    reference = primes.generate_primes(0, 300)
    p = reference[10]
    assert primes.nth_prime(1, p) == reference[11]
    assert primes.nth_prime(3, p) == reference[13]


def test_nth_prime_backwards():
    below = primes.generate_primes(0, 99)
    assert primes.nth_prime(-1, 100) == below[-1]
    assert primes.nth_prime(-5, 100) == below[-5]


def test_nth_prime_backwards_below_two_raises():
    with pytest.raises(PrimesieveError):
        primes.nth_prime(-1, 2)


def test_nth_prime_rejects_out_of_range_n():
    with pytest.raises(PrimesieveError):
        primes.nth_prime(1 << 63, 0)


def test_count_primes_below_hundred():
    assert primes.count_primes(0, 100) == 25


@pytest.mark.parametrize("start,stop", [(0, 1000), (500, 5000), (7, 7), (8, 10)])
def test_count_primes_matches_generation(start, stop):
    assert primes.count_primes(start, stop) == len(primes.generate_primes(start, stop))


def test_count_twins_below_hundred():
    assert primes.count_twins(0, 100) == 8


def test_count_sextuplets_below_hundred():
    assert primes.count_sextuplets(0, 100) == 1


@pytest.mark.parametrize(
    "printer,counter,patterns",
    [
        (primes.print_twins, primes.count_twins, {(2,)}),
        (primes.print_triplets, primes.count_triplets, {(2, 6), (4, 6)}),
        (primes.print_quadruplets, primes.count_quadruplets, {(2, 6, 8)}),
        (
            primes.print_quintuplets,
            primes.count_quintuplets,
            {(2, 6, 8, 12), (4, 6, 10, 12)},
        ),
        (primes.print_sextuplets, primes.count_sextuplets, {(4, 6, 10, 12, 16)}),
    ],
)
def test_tuplet_output_shape_and_count(capsys, printer, counter, patterns):
    printer(0, 3000)
    tuplets = _parse_tuplets(capsys.readouterr().out)
    assert len(tuplets) == counter(0, 3000)
    assert len(tuplets) > 0
    for tuplet in tuplets:
        assert all(_is_prime(x) for x in tuplet)
        assert tuple(x - tuplet[0] for x in tuplet[1:]) in patterns
    assert [t[0] for t in tuplets] == sorted(t[0] for t in tuplets)


def test_tuplets_must_lie_inside_interval(capsys):
    primes.print_triplets(100, 2000)
    tuplets = _parse_tuplets(capsys.readouterr().out)
    assert all(t[0] >= 100 and t[-1] <= 2000 for t in tuplets)


def test_print_primes_lists_generated_primes(capsys):
    primes.print_primes(0, 200)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(p) for p in primes.generate_primes(0, 200)]


def test_max_stop():
    assert primes.get_max_stop() == 2**64 - 1


def test_version():
    assert primes.primesieve_version() == "12.3"


def test_stop_beyond_max_raises():
    with pytest.raises(PrimesieveError):
        primes.count_primes(0, 2**64)


def test_negative_start_raises():
    with pytest.raises(PrimesieveError):
        primes.generate_primes(-1, 5)


def test_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        primes.count_twins(-3, 10)


def test_sieve_size_clamped_to_bounds():
    primes.set_sieve_size(1)
    assert primes.get_sieve_size() == 16
    primes.set_sieve_size(100000)
    assert primes.get_sieve_size() == 8192


def test_sieve_size_power_of_two():
    primes.set_sieve_size(100)
    size = primes.get_sieve_size()
    assert 16 <= size <= 100
    assert size & (size - 1) == 0


def test_num_threads_clamped():
    primes.set_num_threads(0)
    assert primes.get_num_threads() == 1
    primes.set_num_threads(10**6)
    assert primes.get_num_threads() == (os.cpu_count() or 1)


def test_results_independent_of_sieve_size():
    primes.set_sieve_size(16)
    small = primes.count_primes(0, 100000)
    primes.set_sieve_size(1024)
    assert primes.count_primes(0, 100000) == small