"""Tests for expanding the %N and %:z time format extensions."""

import time

import pytest

from filetimes.errors import TemplateBufferExhausted
from filetimes.time_template import byte_width, colon_offset, expand_template, subsecond_digits

EPOCH_UTC = time.gmtime(0)


def test_subsecond_digits_truncate():
    assert subsecond_digits(1_999_999, 3) == "001"
    assert subsecond_digits(999_999_999, 3) == "999"
    assert subsecond_digits(123_000) == "000123000"
    assert subsecond_digits(5, 12) == "000000005"


def test_nanosecond_directive_widths():
    assert expand_template("%N", 123_456_789, EPOCH_UTC) == "123456789"
    assert expand_template("%3N", 123_456_789, EPOCH_UTC) == "123"
    assert expand_template("%6N", 987_123_000, EPOCH_UTC) == "987123"
    assert expand_template("%1N", 987_123_000, EPOCH_UTC) == "9"


def test_flags_and_modifier_before_n_are_consumed():
    assert expand_template("%-3N", 120_000_000, EPOCH_UTC) == "120"
    assert expand_template("%03N", 120_000_000, EPOCH_UTC) == "120"
    assert expand_template("%4EN", 120_000_000, EPOCH_UTC) == "1200"


def test_modifier_before_width_is_not_a_subsecond_directive():
    # width comes before the modifier, so %E4 is copied and N stays literal
    assert expand_template("%E4N", 120_000_000, EPOCH_UTC) == "%E4N"


def test_zero_is_a_flag_not_a_width():
    assert expand_template("%0N", 123_456_789, EPOCH_UTC) == "123456789"


def test_colon_offset():
    assert colon_offset(EPOCH_UTC) == "+00:00"
    assert expand_template("%T%:z", 0, EPOCH_UTC) == "%T+00:00"


def test_standard_directives_pass_through():
    template = "%FT%T %-d %_5H %Ey %Om %% %:x literal"
    assert expand_template(template, 42, EPOCH_UTC) == template


def test_unterminated_directive_is_copied():
    assert expand_template("abc%", 0, EPOCH_UTC) == "abc%"
    assert expand_template("abc%-0", 0, EPOCH_UTC) == "abc%-0"
    assert expand_template("abc%3", 0, EPOCH_UTC) == "abc%3"
    assert expand_template("abc%:", 0, EPOCH_UTC) == "abc%:"


def test_colon_without_z_is_left_alone():
    assert expand_template("%:Z", 0, EPOCH_UTC) == "%:Z"


def test_non_ascii_literals_survive():
    assert expand_template("время %3N", 5_000_000, EPOCH_UTC) == "время 005"


def test_capacity_is_enforced():
    assert len(expand_template("x" * 1023, 0, EPOCH_UTC)) == 1023
    with pytest.raises(TemplateBufferExhausted):
        expand_template("x" * 1024, 0, EPOCH_UTC)
    with pytest.raises(TemplateBufferExhausted):
        expand_template("x" * 1014 + "%N", 0, EPOCH_UTC)
    assert expand_template("x" * 1013 + "%N", 0, EPOCH_UTC).endswith("000000000")


def test_capacity_counts_utf8_bytes():
    assert byte_width("é") == 2
    # 511 two-byte characters fill 1022 of the 1023 usable bytes
    assert byte_width(expand_template("é" * 511, 0, EPOCH_UTC)) == 1022
    with pytest.raises(TemplateBufferExhausted):
        expand_template("é" * 512, 0, EPOCH_UTC)
    with pytest.raises(TemplateBufferExhausted):
        expand_template("é" * 600, 0, EPOCH_UTC)
