"""Number theory: Fibonacci and Lucas terms, triangular steps, binomial divisors, square sums."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from math import isqrt, prod

_TABLE_SIZE = 92


def _recurrence(first: int, second: int, count: int = _TABLE_SIZE) -> tuple[int, ...]:
    terms = [first, second]
    while len(terms) < count:
        terms.append(terms[-1] + terms[-2])
    return tuple(terms)


_FIBONACCI = _recurrence(1, 2)
_LUCAS = _recurrence(2, 1)

_STEP_SEARCH_LIMIT = 50_005
_BINOMIAL_LIMIT = 504
_SIDE_LIMIT = 100_000


def smallest_zeckendorf_term(n: int) -> int:
    """Smallest Fibonacci term in the greedy Zeckendorf representation of n (0 for 0)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    result = n
    while n:
        term = _FIBONACCI[bisect_right(_FIBONACCI, n) - 1]
        n -= term
        result = term
    return result


def _triangular(x: int) -> int:
    return x * (x + 1) // 2


def min_steps_to_equal(a: int, b: int) -> int:
    """Fewest steps, the i-th adding i to either number, to make a and b equal."""
    difference = abs(a - b)
    steps = bisect_left(
        range(_STEP_SEARCH_LIMIT + 1), difference, key=_triangular
    )
    steps = min(steps, _STEP_SEARCH_LIMIT)
    while (difference - _triangular(steps)) % 2:
        steps += 1
    return steps


def _primes_up_to(limit: int) -> list[int]:
    if limit < 2:
        return []
    sieve = [True] * (limit + 1)
    sieve[0] = sieve[1] = False
    for p in range(2, isqrt(limit) + 1):
        if sieve[p]:
            sieve[p * p :: p] = [False] * len(range(p * p, limit + 1, p))
    return [p for p, is_prime in enumerate(sieve) if is_prime]


def _factorial_exponent(n: int, p: int) -> int:
    exponent = 0
    power = p
    while power <= n:
        exponent += n // power
        power *= p
    return exponent


def binomial_divisor_count(n: int, k: int) -> int:
    """Number of divisors of C(n, k), for 0 <= k <= n <= 504."""
    if not 0 <= k <= n <= _BINOMIAL_LIMIT:
        raise ValueError(f"need 0 <= k <= n <= {_BINOMIAL_LIMIT}")
    return prod(
        _factorial_exponent(n, p)
        - _factorial_exponent(k, p)
        - _factorial_exponent(n - k, p)
        + 1
        for p in _primes_up_to(n)
    )


def lucas(n: int) -> int:
    """The n-th Lucas number, for 0 <= n <= 91."""
    if not 0 <= n < _TABLE_SIZE:
        raise ValueError(f"n must be in 0..{_TABLE_SIZE - 1}")
    return _LUCAS[n]


def has_distinct_square_sum(n: int) -> bool:
    """Whether 2*n*n = i*i + c*c for positive i, c distinct from each other and from n."""
    target = 2 * n * n
    for i in range(1, _SIDE_LIMIT + 1):
        rest = target - i * i
        if rest < 0:
            break
        if i == n:
            continue
        c = isqrt(rest)
        if c * c == rest and c != i and c != n and c <= _SIDE_LIMIT:
            return True
    return False