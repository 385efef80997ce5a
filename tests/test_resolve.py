"""Tests for quote classification, escape decoding, and variable expansion."""

from __future__ import annotations

import pytest

from envload.errors import InvalidEscapeSequenceError, TrailingBackslashError
from envload.resolve import (
    QuoteStyle,
    classify_quotes,
    decode_escapes,
    expand_variables,
    resolve_value,
    resolve_values,
    strip_quotes,
)


@pytest.mark.parametrize(
    ("value", "style"),
    [
        ('"quoted"', QuoteStyle.DOUBLE),
        ('""', QuoteStyle.DOUBLE),
        ("'quoted'", QuoteStyle.SINGLE),
        ("''", QuoteStyle.SINGLE),
        ('"', QuoteStyle.NONE),
        ("'", QuoteStyle.NONE),
        ("\"mixed'", QuoteStyle.NONE),
        ("plain", QuoteStyle.NONE),
        ("", QuoteStyle.NONE),
    ],
)
def test_classify_quotes(value, style):
    assert classify_quotes(value) is style


def test_strip_quotes():
    assert strip_quotes('"abc"') == "abc"
    assert strip_quotes("'abc'") == "abc"
    assert strip_quotes('"') == '"'
    assert strip_quotes("abc") == "abc"
    assert strip_quotes('""x""') == '"x"'


def test_decode_known_escapes():
    assert decode_escapes(r"a\nb") == "a\nb"
    assert decode_escapes(r"\t\r") == "\t\r"
    assert decode_escapes(r"\"\'\\") == "\"'\\"


def test_decode_keeps_escaped_dollar():
    assert decode_escapes(r"cost \$5") == r"cost \$5"


def test_decode_passes_multibyte_characters():
    assert decode_escapes("héllo\\n世界") == "héllo\n世界"


def test_decode_trailing_backslash():
    with pytest.raises(TrailingBackslashError):
        decode_escapes("abc\\")


def test_decode_escaped_backslash_at_end():
    assert decode_escapes("abc\\\\") == "abc\\"


def test_decode_invalid_escape():
    with pytest.raises(InvalidEscapeSequenceError) as exc:
        decode_escapes(r"a\qb")
    assert exc.value.char == "q"
    assert exc.value.position == 2


def test_decode_invalid_escape_position_counts_code_points():
    with pytest.raises(InvalidEscapeSequenceError) as exc:
        decode_escapes("é\\x")
    assert exc.value.position == 2


def test_expand_without_dollar_is_unchanged():
    value = "no references here"
    assert expand_variables(value, {}) is value


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("$A", "foo"),
        ("${A}", "foo"),
        ("${A}bar", "foobar"),
        ("$A-bar", "foo-bar"),
        ("$Abar", ""),
        ("$MISSING-x", "-x"),
        ("pre ${A} $B post", "pre foo bar post"),
        ("cost: $", "cost: $"),
        ("a $ b", "a $ b"),
        ("${}x", "x"),
        ("${A", "A"),
        ("$$", "$"),
        ("\\$A", "$A"),
        ("$1st", "st"),
    ],
)
def test_expand_variables(value, expected):
    assert expand_variables(value, {"A": "foo", "B": "bar"}) == expected


def test_expand_strips_quotes_from_unresolved_value():
    assert expand_variables("$A", {"A": '"quoted"'}) == "quoted"
    assert expand_variables("$A", {"A": "'single'"}) == "single"


def test_expand_is_not_recursive():
    assert expand_variables("$A", {"A": "$B", "B": "x"}) == "$B"


def test_resolve_value_styles():
    values = {"X": "1"}
    assert resolve_value('"a\\n$X"', values) == "a\n1"
    assert resolve_value("'a\\n$X'", values) == "a\\n$X"
    assert resolve_value("a\\n$X", values) == "a\\n1"


def test_resolve_newline_in_double_quotes():
    assert resolve_values({"KEY": r'"a\nb"'}) == {"KEY": "a\nb"}


def test_resolve_single_quotes_literal():
    assert resolve_values({"KEY": "'literal $X value'", "X": "x"})["KEY"] == "literal $X value"


def test_resolve_escaped_dollars():
    assert resolve_values({"KEY": r'"p4\$\$w0rd"'}) == {"KEY": "p4$$w0rd"}


def test_resolve_in_mapping_order():
    values = resolve_values({"A": "foo", "B": "$A-bar"})
    assert values["B"] == "foo-bar"


def test_resolve_order_dependent_chain():
    # C is resolved before A in the first map but after it in the second, so
    # A sees either C's resolved value or C's raw reference text.
    forward = resolve_values({"B": "base", "C": "$B", "A": "$C-bar"})
    assert forward["A"] == "base-bar"

    reverse = resolve_values({"A": "$C-bar", "C": "$B", "B": "base"})
    assert reverse["A"] == "$B-bar"
    assert reverse["C"] == "base"


def test_resolve_reference_to_unquoted_later_key():
    # Raw values are already in the map, so a forward reference to a plain value works.
    assert resolve_values({"B": "$A-bar", "A": "foo"})["B"] == "foo-bar"


def test_resolve_undefined_reference_is_empty():
    assert resolve_values({"B": "$A-bar"})["B"] == "-bar"


def test_resolve_error_carries_key_and_value():
    with pytest.raises(InvalidEscapeSequenceError) as exc:
        resolve_values({"OK": "fine", "BAD": r'"bad\q"'})
    assert exc.value.key == "BAD"
    assert exc.value.raw_value == r'"bad\q"'
    assert str(exc.value).startswith("BAD=")


def test_error_message_with_percent_in_value():
    with pytest.raises(TrailingBackslashError) as exc:
        resolve_values({"P": '"100% %d {0}\\"'})
    assert "100% %d {0}" in str(exc.value)
