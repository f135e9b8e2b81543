"""Elementary number theory behind textbook RSA.

Provides the small arithmetic toolkit every other module leans on: trial-division primality, Euclid's algorithm
(plain and extended), the modular inverse and square-and-multiply modular exponentiation. Everything here is pure
and stateless, operating on plain (small) Python integers.

Typical usage example:

    is_prime(19)
    d = mod_inverse(17, 416)
    c = mod_pow(65, 17, 437)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math


class NoInverseError(ArithmeticError):
    """Raised when a modular inverse does not exist, that is gcd(value, modulus) != 1.

    Attributes:
        value: The number we attempted to invert.
        modulus: The modulus the inversion was attempted under.
        divisor: The common divisor that prevented the inversion.
    """

    def __init__(self, value: int, modulus: int, divisor: int) -> None:
        super().__init__(f"Modular inverse of {value} mod {modulus} does not exist (gcd = {divisor}).")
        self.value = value
        self.modulus = modulus
        self.divisor = divisor


def is_prime(n: int) -> bool:
    """Deterministic primality test by trial division.

    Tests 2 separately, then only odd divisors up to and including floor(sqrt(n)).

    Args:
        n: The number to test.

    Returns:
        True if `n` is prime, False otherwise (including all `n` <= 1).
    """
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    for i in range(3, math.isqrt(n) + 1, 2):
        if n % i == 0:
            return False
    return True


def gcd(a: int, b: int) -> int:
    """Greatest common divisor, iterative Euclidean algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*x + b*y = g = gcd(a, b). Follows the abstract recurrence egcd(a, b) = (g, y1, x1 - (a // b) * y1)
    where (g, x1, y1) = egcd(b, a mod b), with egcd(a, 0) = (a, 1, 0), unrolled into a loop.

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of the two integers, as well as the Bezout coefficients.
    """
    r0, r1 = a, b
    x0, x1, y0, y1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return r0, x0, y0


def mod_inverse(e: int, phi: int) -> int:
    """Computes the modular inverse of `e` modulo `phi`.

    Args:
        e: The number to invert, typically the public exponent.
        phi: The modulus, typically the totient of the RSA modulus.

    Returns:
        The unique `d` in [0, phi) such that (e * d) mod phi == 1.

    Raises:
        NoInverseError: If gcd(e, phi) != 1.
    """
    g, x, _ = egcd(e, phi)
    if g != 1:
        raise NoInverseError(e, phi, g)
    return x % phi


def mod_pow(base: int, exp: int, mod: int) -> int:
    """Modular exponentiation via square-and-multiply.

    Walks the exponent from its lowest bit: multiply the accumulator in on set bits, square the base every round.

    Args:
        base: The base.
        exp: The exponent. Must be >= 0.
        mod: The modulus. Must be >= 1.

    Returns:
        (base ** exp) mod mod. Always 0 for mod == 1, always 1 for exp == 0 otherwise.

    Raises:
        ValueError: If `exp` is negative or `mod` is below 1.
    """
    if exp < 0:
        raise ValueError("Exponent must be >= 0")
    if mod < 1:
        raise ValueError("Modulus must be >= 1")
    if mod == 1:
        return 0
    result = 1
    base = base % mod
    while exp > 0:
        if exp & 1:
            result = (result * base) % mod
        base = (base * base) % mod
        exp //= 2
    return result
