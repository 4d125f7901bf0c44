"""Exponentiation, gcd, linear Diophantine equations and primality."""

from math import isqrt


class NoIntegralSolution(ValueError):
    """Raised when ``a*x + b*y = c`` has no solution in integers."""


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _tdiv(a, b)


def fast_expo(base: int, power: int) -> int:
    """Return ``base ** power`` by repeated squaring."""
    if power < 0:
        raise ValueError(f"power must be non-negative, got {power}")
    if power == 0:
        return 1
    if power % 2:
        return fast_expo(base, power - 1) * base
    half = fast_expo(base, power // 2)
    return half * half


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm with remainders that follow the dividend's sign."""
    while b != 0:
        a, b = b, _tmod(a, b)
    return a


def _extended(a: int, b: int, c: int) -> tuple[int, int, int]:
    if b == 0:
        return a, c, 0
    d, x, y = _extended(b, _tmod(a, b), c)
    return d, y, x - _tdiv(a, b) * y


def solve_diophantine(a: int, b: int, c: int) -> tuple[int, int]:
    """Return one integer pair ``(x, y)`` with ``a*x + b*y == c``."""
    hcf = gcd(a, b)
    if hcf == 0:
        if c != 0:
            raise NoIntegralSolution(f"0x + 0y = {c} has no solution")
        return 0, 0
    if _tmod(c, hcf) != 0:
        raise NoIntegralSolution(
            f"{a}x + {b}y = {c} has no integral solution"
        )
    a, b, c = a // hcf, b // hcf, c // hcf
    d, x, y = _extended(a, b, c)
    if d < 0:
        x, y = -x, -y
    return x, y


def is_prime(n: int) -> bool:
    """Report whether no number in ``2..n//2`` divides ``n``.

    Values below 4 (including 0, 1 and negatives) have no such divisor
    and are reported as prime.
    """
    if n < 4:
        return True
    return all(n % i for i in range(2, isqrt(n) + 1))