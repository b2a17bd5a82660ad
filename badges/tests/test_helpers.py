"""Tests for HTML escaping and label helpers."""

from __future__ import annotations

from badges.components.helpers import escape_attr, escape_text, format_label


class TestEscaping:
    def test_escape_text(self):
        assert escape_text("<b>Tom & Jerry</b>") == "&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;"

    def test_escape_text_quotes(self):
        assert escape_text('O\'Neil "VIP"') == "O&#039;Neil &quot;VIP&quot;"

    def test_escape_attr_matches_text(self):
        assert escape_attr('a"b\'c<&>') == escape_text('a"b\'c<&>')

    def test_escape_attr_quotes(self):
        assert escape_attr('a"b\'c') == "a&quot;b&#039;c"

    def test_escape_attr_no_double_escape_of_entities_it_creates(self):
        assert escape_attr("<&>") == "&lt;&amp;&gt;"

    def test_plain_text_unchanged(self):
        assert escape_text("dashicons-yes-alt") == "dashicons-yes-alt"
        assert escape_attr("dashicons-yes-alt") == "dashicons-yes-alt"


class TestFormatLabel:
    def test_tabs_and_newlines_are_word_boundaries(self):
        assert format_label("first\tsecond\nthird") == "First\tSecond\nThird"

    def test_non_letters_untouched(self):
        assert format_label("2fa_enabled") == "2fa Enabled"

    def test_deterministic(self):
        assert format_label("on_hold") == format_label("on_hold")

    def test_only_ascii_letters_are_capitalised(self):
        assert format_label("ßtraße_ǆungla") == "ßtraße ǆungla"
        assert format_label("éclair_ready") == "éclair Ready"

    def test_length_preserved(self):
        status = "ß_straße-ﬁne"
        assert len(format_label(status)) == len(status)
