"""Per-character textbook RSA.

Each character is mapped to its code point and run through the RSA primitive on its own. Encoding and decoding (and
likewise signing and verifying) are the very same modular exponentiation, only the exponent differs. Round-trips
hold only for a matching key pair and character codes below the modulus; this is left to the caller.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from typing import Iterable, NamedTuple
import warnings

from rsaviz.numtheory import mod_pow

REPLACEMENT_CHAR = "\ufffd"


class CharOperation(NamedTuple):
    """One row of a message transformation: output_code = input_code ** exponent mod modulus."""
    input_code: int
    exponent: int
    modulus: int
    output_code: int

    @property
    def expression(self) -> str:
        return f"{self.input_code}^{self.exponent} mod {self.modulus}"

    @property
    def output_char(self) -> str:
        """The output as a character if it is printable ASCII territory, else the input character."""
        return render_code(self.output_code if self.output_code < 128 else self.input_code)


def render_code(code: int) -> str:
    """The character for `code`, or U+FFFD if `code` is no encodable code point (surrogates included)."""
    if not 0 <= code < 0x110000 or 0xD800 <= code < 0xE000:
        return REPLACEMENT_CHAR
    return chr(code)


def render_text(operations: Iterable[CharOperation]) -> str:
    return "".join(render_code(op.output_code) for op in operations)


def encode_char(code: int, exponent: int, n: int) -> int:
    return mod_pow(code, exponent, n)


def decode_char(code: int, exponent: int, n: int) -> int:
    return mod_pow(code, exponent, n)


def encode_message(message: str, exponent: int, n: int) -> list[CharOperation]:
    """Encodes a message character by character.

    Args:
        message: The text to encode.
        exponent: The public exponent to encode, or the private one to sign.
        n: The modulus.

    Returns:
        One operation per character, in message order.
    """
    codes = [ord(char) for char in message]
    if any(code >= n for code in codes):
        warnings.warn(f"Message holds character codes >= {n}; these will not survive a round-trip.", RuntimeWarning)
    return [CharOperation(code, exponent, n, encode_char(code, exponent, n)) for code in codes]


def decode_message(codes: Iterable[int], exponent: int, n: int) -> tuple[str, list[CharOperation]]:
    """Decodes a sequence of encoded character codes.

    Args:
        codes: The encoded values.
        exponent: The private exponent to decode, or the public one to verify.
        n: The modulus.

    Returns:
        The recovered text and one operation per value. Values that decode to no valid code point show up as
        U+FFFD in the text, their numeric result is kept in the operation.
    """
    operations = [CharOperation(code, exponent, n, decode_char(code, exponent, n)) for code in codes]
    return render_text(operations), operations
