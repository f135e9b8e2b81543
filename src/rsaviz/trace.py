"""Step traces explaining how each RSA quantity is reached.

None of these traces feed back into the actual key material; they exist so a caller can show its work. The trial
divisors explain a primality verdict, the extended Euclid table explains the private exponent, and the k-search
explains the textbook identity d = (1 + k * phi) / e.

Typical usage example:

    get_trial_divisors(19)
    steps = get_egcd_steps(17, 416)
    search = get_k_iterations(17, 416)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
from typing import NamedTuple

from rsaviz.numtheory import mod_inverse

K_SEARCH_LIMIT: int = 10


class EgcdStep(NamedTuple):
    """A single row of the extended Euclid table. Seed rows carry a quotient of 0."""
    index: int
    remainder: int
    quotient: int
    x: int
    y: int


class KIteration(NamedTuple):
    """A single trial of the k-search: is (1 + k * phi) divisible by e?"""
    k: int
    e: int
    remainder: int
    is_valid: bool


class KSearch(NamedTuple):
    selected: int
    iterations: list[KIteration]


def get_trial_divisors(n: int) -> list[int]:
    """The divisors `is_prime` tries before reaching a verdict on `n`.

    Args:
        n: The number under test.

    Returns:
        2 followed by the odd integers up to floor(sqrt(n)). Empty for n <= 1.
    """
    if n <= 1:
        return []
    return [2] + list(range(3, math.isqrt(n) + 1, 2))


def get_egcd_steps(a: int, b: int) -> list[EgcdStep]:
    """Tabulates the extended Euclidean algorithm.

    Starts with the seed rows (a, 1, 0) and (b, 0, 1) and then appends one row per iteration of
    q = r0 // r1, r2 = r0 mod r1, x2 = x0 - q*x1, y2 = y0 - q*y1 until a zero remainder is appended.

    Args:
        a: The first natural number, e.g. the public exponent.
        b: The second natural number, e.g. the totient.

    Returns:
        The ordered rows. The last row has remainder 0 and the one before it holds gcd(a, b).
    """
    r0, r1 = a, b
    x0, x1 = 1, 0
    y0, y1 = 0, 1
    steps = [EgcdStep(0, r0, 0, x0, y0), EgcdStep(1, r1, 0, x1, y1)]
    while r1 != 0:
        q = r0 // r1
        r2 = r0 % r1
        x2 = x0 - q * x1
        y2 = y0 - q * y1
        steps.append(EgcdStep(len(steps), r2, q, x2, y2))
        r0, r1 = r1, r2
        x0, x1 = x1, x2
        y0, y1 = y1, y2
    return steps


def get_k_iterations(e: int, phi: int, d: int | None = None) -> KSearch:
    """Searches k such that d = (1 + k * phi) / e is an integer.

    Tries k = 1..K_SEARCH_LIMIT and stops at the first zero remainder. If none of the trials hit, the matching k is
    recovered from the private exponent as (d * e - 1) // phi and appended as the accepted row, which may lie well
    past the trials shown.

    Args:
        e: The public exponent.
        phi: The totient.
        d: The private exponent, only consulted on fallback. Computed via `mod_inverse` if not provided.

    Returns:
        The selected k and every row tried.

    Raises:
        NoInverseError: On fallback without `d`, if `e` has no inverse modulo `phi`.
    """
    iterations = []
    for k in range(1, K_SEARCH_LIMIT + 1):
        remainder = (1 + k * phi) % e
        iterations.append(KIteration(k, e, remainder, remainder == 0))
        if remainder == 0:
            return KSearch(k, iterations)
    if d is None:
        d = mod_inverse(e, phi)
    k = (d * e - 1) // phi
    iterations.append(KIteration(k, e, (1 + k * phi) % e, True))
    return KSearch(k, iterations)
