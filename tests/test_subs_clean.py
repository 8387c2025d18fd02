"""Tests for cue markup stripping."""

import pytest

from subprogress.subs_clean import clean_text


class TestCleanText:
    """Brace overrides and angle-bracket tags are removed, then whitespace trimmed."""

    @pytest.mark.parametrize("text", ["碧蓝档案", "ブルーアーカイブ", "Hello world", ""])
    def test_plain_text_is_unchanged(self, text):
        assert clean_text(text) == text

    def test_plain_text_is_trimmed(self):
        assert clean_text("  \t你好 \n") == "你好"

    def test_removes_brace_overrides(self):
        assert clean_text("{\\i1}Hello{\\i0} world") == "Hello world"

    def test_removes_adjacent_brace_groups(self):
        assert clean_text("{\\an8}{\\fad(200,200)}字幕{\\c&H00FF00&}") == "字幕"

    def test_removes_html_tags(self):
        assert clean_text("<i>Hello</i> world") == "Hello world"

    def test_removes_tags_with_attributes(self):
        assert clean_text('<font color="#ffffff">こんにちは</font>') == "こんにちは"

    def test_removes_both_markup_families(self):
        assert clean_text("{\\b1}<i>老师</i>{\\b0}") == "老师"

    def test_markup_only_cue_becomes_empty(self):
        assert clean_text("{\\an8}{\\i1}{\\i0}") == ""
        assert clean_text(" <br> ") == ""

    def test_drawing_commands_outside_braces_are_kept(self):
        assert clean_text("{\\p1}m 0 0 l 100 0{\\p0}") == "m 0 0 l 100 0"

    def test_entities_are_not_unescaped(self):
        assert clean_text("Tom &amp; Jerry") == "Tom &amp; Jerry"

    def test_unclosed_brace_is_kept(self):
        assert clean_text("{unclosed text") == "{unclosed text"

    def test_empty_angle_brackets_are_kept(self):
        assert clean_text("a <> b") == "a <> b"
