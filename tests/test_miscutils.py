from __future__ import annotations

import pytest

from libkstream.miscutils import bytes2display, bytestrxor

# ===========================================================
# DISPLAY RENDERING
# ===========================================================


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", ""),
        (b"\x41", "A"),
        (b"\xff", "ff"),
        (b"\x41\xff", "Aff"),
        (b"\x80", "80"),
        (b"\x7f", "\x7f"),
        (b"line\n", "line\n"),
        (b"\x00\x0a", "\x00\n"),
        (b"\xa0\x0f\xab", "a0\x0fab"),
    ],
)
def test_bytes2display(data, expected):
    assert bytes2display(data) == expected


def test_bytes2display_all_high_bytes_are_two_lowercase_hex_digits():
    rendered = bytes2display(bytes(range(128, 256)))
    assert rendered == "".join(f"{b:02x}" for b in range(128, 256))
    assert rendered == rendered.lower()


def test_bytes2display_accepts_bytes_like():
    assert bytes2display(bytearray(b"A\xff")) == "Aff"
    assert bytes2display([0x41, 0xFF]) == "Aff"


# ===========================================================
# XOR
# ===========================================================


def test_bytestrxor():
    assert bytestrxor(b"\x0f\xf0", b"\xff\xff") == b"\xf0\x0f"


def test_bytestrxor_consumes_iterable():
    assert bytestrxor(b"\x01\x02\x03", iter([1, 2, 3])) == b"\x00\x00\x00"


def test_bytestrxor_length_mismatch():
    with pytest.raises(ValueError):
        bytestrxor(b"abc", b"ab")
