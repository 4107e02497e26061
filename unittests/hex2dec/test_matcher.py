import pytest

from hex2dec.matcher import HEX_TOKEN, Match, find_tokens


def spans(line):
    return [(m.outer(line), m.inner(line)) for m in find_tokens(line)]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("", []),
        (" a ", []),
        (" 1 ", []),
        ("0x1", []),
        ("  0x1  ", []),
        ("0x12", [("0x12", "12")]),
        ("abc", [("abc", "abc")]),
        ("xabc", []),
        ("abc_", []),
        ("DEADbeef", [("DEADbeef", "DEADbeef")]),
        ("0X12", []),
        ("0X12 ff", [("ff", "ff")]),
        ("(0x7f,0x80)", [("0x7f", "7f"), ("0x80", "80")]),
        ("7f 45 4c", [("7f", "7f"), ("45", "45"), ("4c", "4c")]),
    ],
)
def test_find_tokens(line, expected):
    assert spans(line) == expected


def test_match_offsets_with_prefix():
    (m,) = find_tokens("  0x12\n")
    assert m == Match(outer_start=2, outer_end=6, inner_start=4, inner_end=6)
    assert m.width == 4
    assert m.has_prefix


def test_match_offsets_without_prefix():
    (m,) = find_tokens("abc")
    assert m == Match(0, 3, 0, 3)
    assert m.width == 3
    assert not m.has_prefix


def test_matches_are_non_overlapping_and_ordered():
    line = "0x10 20 0x30ab cafe 1 0x4"
    matches = list(find_tokens(line))
    assert [m.outer(line) for m in matches] == ["0x10", "20", "0x30ab", "cafe"]
    for prev, nxt in zip(matches, matches[1:]):
        assert prev.outer_end <= nxt.outer_start


def test_span_invariants():
    line = "0x00 ab 0xffffffffffffffffffffffffffffffffff 12345"
    for m in find_tokens(line):
        assert m.outer_start <= m.inner_start < m.inner_end == m.outer_end
        assert m.inner_end - m.inner_start >= 2
        assert (m.inner_start - m.outer_start) in (0, 2)


def test_unicode_letters_are_not_word_characters():
    # Word boundaries are ASCII only
    assert spans("é12") == [("12", "12")]


def test_pattern_is_compiled_once():
    from hex2dec import matcher

    assert matcher.HEX_TOKEN is HEX_TOKEN


def test_uppercase_prefix_needs_separator():
    assert spans("0X 12") == [("12", "12")]


def test_find_tokens_with_pattern():
    import re

    pattern = re.compile(r"\b(0x)?([0-9a-fA-F]{4,})\b", re.ASCII)
    assert [m.outer("12 0x1234") for m in find_tokens("12 0x1234", pattern)] == [
        "0x1234"
    ]
