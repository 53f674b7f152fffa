"""Tests for note and chat text helpers."""

import logging

from chatstyle.config import Settings
from chatstyle.text import (
    convert_to_single_line,
    decode_note_content,
    encode_note_content,
    parse_data_from_content,
)


class TestEncodeDecode:
    def test_encode(self):
        assert encode_note_content("a <b> & 'c'\nd") == (
            "a&nbsp;&lt;b&gt;&nbsp;&amp;&nbsp;&#39;c&#39;<br>d"
        )

    def test_encode_custom_line_break(self):
        assert encode_note_content("one\ntwo", line_break=" ") == "one two"

    def test_decode(self):
        assert decode_note_content("&lt;b&gt;&nbsp;&quot;hi&quot;<br>x") == '<b> "hi"\nx'

    def test_decode_ampersand_last(self):
        assert decode_note_content("&amp;lt;") == "&lt;"

    def test_decode_inverts_encode(self):
        text = "Line <1> & \"two\"\nit's"
        assert decode_note_content(encode_note_content(text)) == text


class TestConvertToSingleLine:
    def test_collapses_whitespace(self):
        assert convert_to_single_line("a   b\n\t c") == "a b c"

    def test_quoted_runs_are_kept(self):
        assert convert_to_single_line('a   "x   y"\n  \'p  q\'') == 'a "x   y" \'p  q\''


class TestParseDataFromContent:
    def test_first_group_of_each_match(self):
        assert parse_data_from_content("HP: 10\nMP: 5", r"(\w+):") == ["HP", "MP"]

    def test_empty_captures_are_dropped(self):
        assert parse_data_from_content("[a][][b]", r"\[(.*?)\]") == ["a", "b"]

    def test_dot_matches_newline(self):
        assert parse_data_from_content("<n>a\nb</n>", r"<n>(.*?)</n>") == ["a\nb"]

    def test_pattern_without_group(self):
        assert parse_data_from_content("a1b22", r"\d+") == ["1", "22"]


class TestNonStringInput:
    def test_returned_unchanged(self):
        assert encode_note_content(None) is None
        assert decode_note_content(5) == 5
        assert convert_to_single_line(["x"]) == ["x"]
        assert parse_data_from_content(b"raw", r"(.)") == b"raw"

    def test_debug_logged_when_verbose(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="chatstyle"):
            convert_to_single_line(7, Settings(verbose=True))
        assert any("'multiline' is not a string" in r.getMessage() for r in caplog.records)

    def test_silent_when_not_verbose(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="chatstyle"):
            convert_to_single_line(7)
        assert caplog.records == []
