"""Validation and derivation of a toy RSA key pair from hand-picked primes and exponent.

This module is the caller-side counterpart of the arithmetic modules: it turns the pure predicates (`is_prime`,
`is_valid_e`) into `InvalidDomainError` failures and collects every intermediate value and trace needed to walk a
learner through the key generation.

Typical usage example:

    validate_primes(19, 23)
    kd = derive_key_pair(19, 23, 17)
    kd.d
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from typing import NamedTuple

from rsaviz.candidates import get_candidate_es
from rsaviz.numtheory import is_prime
from rsaviz.numtheory import mod_inverse
from rsaviz.trace import EgcdStep
from rsaviz.trace import get_egcd_steps
from rsaviz.trace import get_k_iterations
from rsaviz.trace import get_trial_divisors
from rsaviz.trace import KSearch


class InvalidDomainError(ValueError):
    """Raised for semantically invalid key material, such as a composite p or an exponent that is no candidate."""


class PrimeCheck(NamedTuple):
    value: int
    divisors: list[int]
    is_prime: bool


class KeyDerivation(NamedTuple):
    """Everything computed on the way from (p, q, e) to the private exponent.

    Attributes:
        p: Private prime 1.
        q: Private prime 2.
        n: The modulus p * q.
        phi: The totient (p - 1) * (q - 1).
        e: The public exponent.
        d: The private exponent, inverse of `e` modulo `phi`.
        candidates: Every valid public exponent for `phi`.
        egcd_steps: Extended Euclid table for (e, phi).
        k_search: The k-search for d = (1 + k * phi) / e.
        prime_checks: Trial-division checks for p and q.
    """
    p: int
    q: int
    n: int
    phi: int
    e: int
    d: int
    candidates: list[int]
    egcd_steps: list[EgcdStep]
    k_search: KSearch
    prime_checks: tuple[PrimeCheck, PrimeCheck]


def check_prime(value: int) -> PrimeCheck:
    """Checks `value` for primality, keeping the divisors tried for display."""
    return PrimeCheck(value, get_trial_divisors(value), is_prime(value))


def validate_primes(p: int, q: int) -> tuple[PrimeCheck, PrimeCheck]:
    """Validates a hand-picked prime pair.

    Args:
        p: Private prime 1. Must be an integer > 2.
        q: Private prime 2. Must be an integer > 2, different from `p`.

    Returns:
        The prime checks of `p` and `q`, both passed.

    Raises:
        InvalidDomainError: If either value is not an integer > 2, the values are equal, or either is composite.
    """
    if any(isinstance(v, bool) or not isinstance(v, int) for v in (p, q)) or p <= 2 or q <= 2:
        raise InvalidDomainError("p and q must be integers greater than 2")
    if p == q:
        raise InvalidDomainError("p and q must be different")
    checks = check_prime(p), check_prime(q)
    for name, check in zip(("p", "q"), checks):
        if not check.is_prime:
            raise InvalidDomainError(f"{name} = {check.value} is not prime")
    return checks


def derive_key_pair(p: int, q: int, e: int) -> KeyDerivation:
    """Derives the full toy key pair, including all traces.

    Args:
        p: Private prime 1.
        q: Private prime 2.
        e: The public exponent. Must be one of the candidates for (p - 1) * (q - 1).

    Returns:
        The derivation of the key pair.

    Raises:
        InvalidDomainError: If the primes fail validation or `e` is not an integer candidate.
    """
    checks = validate_primes(p, q)
    if isinstance(e, bool) or not isinstance(e, int):
        raise InvalidDomainError("e must be an integer")
    n = p * q
    phi = (p - 1) * (q - 1)
    candidates = get_candidate_es(phi)
    if e not in candidates:
        raise InvalidDomainError(f"e = {e} is not a valid exponent candidate for phi = {phi}")
    d = mod_inverse(e, phi)
    return KeyDerivation(p, q, n, phi, e, d, candidates, get_egcd_steps(e, phi), get_k_iterations(e, phi, d), checks)
