# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import warnings

import pytest

from rsaviz import codec

# p = 19, q = 23
N = 437
E = 17
D = 233


def test_encode_decode_char_known():
    assert codec.encode_char(65, E, N) == 297
    assert codec.decode_char(297, D, N) == 65


@pytest.mark.parametrize("code", [65, 67, 73, 83, 0, 1, 436])
def test_char_roundtrip(code):
    assert codec.decode_char(codec.encode_char(code, E, N), D, N) == code


@pytest.mark.parametrize("code", [65, 67, 73, 83])
def test_char_sign_verify(code):
    assert codec.decode_char(codec.encode_char(code, D, N), E, N) == code


def test_encode_message_operations():
    ops = codec.encode_message("AC", E, N)
    assert ops[0] == codec.CharOperation(65, E, N, 297)
    assert [op.input_code for op in ops] == [65, 67]
    assert all(op.exponent == E and op.modulus == N for op in ops)
    assert ops[0].expression == "65^17 mod 437"


def test_encode_message_empty():
    assert not codec.encode_message("", E, N)


def test_message_roundtrip():
    message = "Hello, RSA!"
    ops = codec.encode_message(message, E, N)
    text, back = codec.decode_message([op.output_code for op in ops], D, N)
    assert text == message
    assert [op.output_code for op in back] == [ord(c) for c in message]
    assert [op.input_code for op in back] == [op.output_code for op in ops]


def test_message_decode_accepts_generator():
    text, _ = codec.decode_message((c for c in [297]), D, N)
    assert text == "A"


def test_encode_message_warns_on_large_codes():
    with pytest.warns(RuntimeWarning):
        ops = codec.encode_message("ÿ", 3, 187)
    assert ops[0].output_code == pow(255, 3, 187)


def test_encode_message_quiet_in_range():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        codec.encode_message("ACIS", E, N)


def test_output_char():
    assert codec.CharOperation(297, D, N, 65).output_char == "A"
    # Out of ASCII range, falls back to the input character.
    assert codec.CharOperation(65, E, N, 297).output_char == "A"


@pytest.mark.parametrize("code", [-1, 0xD800, 0xDFFF, 0x110000, 10**7])
def test_render_code_replaces_invalid(code):
    assert codec.render_code(code) == codec.REPLACEMENT_CHAR


@pytest.mark.parametrize("code", [0, 65, 0xD7FF, 0xE000, 0x10FFFF])
def test_render_code_valid(code):
    assert codec.render_code(code) == chr(code)


def test_decode_message_beyond_unicode():
    # p = 1201, q = 1213 puts n above the last code point
    n, e = 1201 * 1213, 7
    d = pow(e, -1, 1200 * 1212)
    text, ops = codec.decode_message([pow(0x110000, e, n), pow(65, e, n)], d, n)
    assert text == "\ufffdA"
    assert ops[0].output_code == 0x110000
