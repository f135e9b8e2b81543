"""Step-by-step Textbook RSA in an Academic Sense.

Walks through RSA key generation and per-character encoding on small, hand-picked numbers: trial-division primality,
the (extended) Euclidean algorithm, modular inverses and square-and-multiply exponentiation, with traces of every
step for display. Not a cryptographic implementation.

Typical usage example:

    kd = derive_key_pair(19, 23, 17)
    pk = RSAPrivKey.from_derivation(kd)
    ops = pk.pub.encode("Hi there!")
    text, _ = pk.decode([op.output_code for op in ops])
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsaviz.candidates import get_candidate_es
from rsaviz.candidates import is_valid_e
from rsaviz.codec import CharOperation
from rsaviz.codec import decode_char
from rsaviz.codec import decode_message
from rsaviz.codec import encode_char
from rsaviz.codec import encode_message
from rsaviz.codec import render_code
from rsaviz.keygen import check_prime
from rsaviz.keygen import derive_key_pair
from rsaviz.keygen import InvalidDomainError
from rsaviz.keygen import KeyDerivation
from rsaviz.keygen import PrimeCheck
from rsaviz.keygen import validate_primes
from rsaviz.numtheory import egcd
from rsaviz.numtheory import gcd
from rsaviz.numtheory import is_prime
from rsaviz.numtheory import mod_inverse
from rsaviz.numtheory import mod_pow
from rsaviz.numtheory import NoInverseError
from rsaviz.rsa import RSAPrivKey
from rsaviz.rsa import RSAPubKey
from rsaviz.rsa import summary
from rsaviz.trace import EgcdStep
from rsaviz.trace import get_egcd_steps
from rsaviz.trace import get_k_iterations
from rsaviz.trace import get_trial_divisors
from rsaviz.trace import KIteration
from rsaviz.trace import KSearch

__version__ = "0.1.0"
__all__ = [
    "CharOperation",
    "EgcdStep",
    "InvalidDomainError",
    "KeyDerivation",
    "KIteration",
    "KSearch",
    "NoInverseError",
    "PrimeCheck",
    "RSAPrivKey",
    "RSAPubKey",
    "check_prime",
    "decode_char",
    "decode_message",
    "derive_key_pair",
    "egcd",
    "encode_char",
    "encode_message",
    "gcd",
    "get_candidate_es",
    "get_egcd_steps",
    "get_k_iterations",
    "get_trial_divisors",
    "is_prime",
    "is_valid_e",
    "mod_inverse",
    "mod_pow",
    "render_code",
    "summary",
    "validate_primes",
]
