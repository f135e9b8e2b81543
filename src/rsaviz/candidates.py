"""Enumeration and validation of public exponent candidates for a given totient."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsaviz.numtheory import gcd


def get_candidate_es(phi: int) -> list[int]:
    """Lists every valid public exponent for `phi`.

    Odd values are scanned from 3 upwards; even values above 2 share the factor 2 with any even totient, and the
    totient of two odd primes is always even. 2 itself is prepended if it happens to be coprime. An odd `phi` can
    only come from hand-fed input, in which case every value is scanned so the set stays complete.

    Args:
        phi: The totient (p-1)(q-1).

    Returns:
        All `e` with 1 < e < phi and gcd(e, phi) == 1, in ascending order.
    """
    if phi % 2:
        return [e for e in range(2, phi) if gcd(e, phi) == 1]
    candidates = [e for e in range(3, phi, 2) if gcd(e, phi) == 1]
    if phi > 2 and gcd(2, phi) == 1:
        candidates.insert(0, 2)
    return candidates


def is_valid_e(e: int, phi: int) -> bool:
    return 1 < e < phi and gcd(e, phi) == 1
