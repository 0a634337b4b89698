"""Tests for strict UTF-8 decoding."""

import logging

import pytest

from filetimes.codepoints import Utf8Decoder, default_decoder, release_default_decoder
from filetimes.errors import InvalidUtf8


def test_decode_returns_codepoints():
    decoder = Utf8Decoder()
    assert decoder.decode("aα\U0001f600".encode("utf-8")) == (0x61, 0x3B1, 0x1F600)


def test_codepoint_count_differs_from_byte_count():
    data = "ΰαβ".encode("utf-8")
    assert len(data) == 6
    assert len(Utf8Decoder().decode(data)) == 3


@pytest.mark.parametrize(
    "data",
    [
        b"\xff",
        b"abc\xce",  # truncated lead byte
        b"\xc0\xaf",  # overlong
        b"\xed\xa0\x80",  # surrogate
        b"\xf4\x90\x80\x80",  # beyond U+10FFFF
    ],
)
def test_invalid_sequences_fail(data):
    with pytest.raises(InvalidUtf8):
        Utf8Decoder().decode(data)


def test_handle_is_reusable_after_failure():
    decoder = Utf8Decoder()
    with pytest.raises(InvalidUtf8):
        decoder.decode(b"abc\xce")
    # the dangling lead byte must not complete a sequence in the next conversion
    with pytest.raises(InvalidUtf8):
        decoder.decode(b"\xb1")
    assert decoder.decode(b"xyz") == (0x78, 0x79, 0x7A)


def test_capacity_is_enforced():
    decoder = Utf8Decoder(capacity=3)
    assert decoder.decode(b"abc") == (0x61, 0x62, 0x63)
    with pytest.raises(InvalidUtf8):
        decoder.decode(b"abcd")


def test_handle_lifecycle():
    decoder = Utf8Decoder()
    assert not decoder.is_open
    decoder.decode(b"a")
    assert decoder.is_open
    decoder.close()
    assert not decoder.is_open
    with Utf8Decoder() as scoped:
        assert scoped.is_open
    assert not scoped.is_open


def test_default_decoder_is_shared_until_released():
    first = default_decoder()
    assert default_decoder() is first
    release_default_decoder()
    assert default_decoder() is not first


def test_debug_reports_failures(caplog):
    with caplog.at_level(logging.WARNING, logger="filetimes"):
        with pytest.raises(InvalidUtf8):
            Utf8Decoder().decode(b"abc\xce", debug=True)
    assert "incomplete" in caplog.text


def test_no_diagnostics_without_debug(caplog):
    with caplog.at_level(logging.WARNING, logger="filetimes"):
        with pytest.raises(InvalidUtf8):
            Utf8Decoder().decode(b"\xff")
    assert caplog.text == ""
