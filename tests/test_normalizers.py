"""Tests for value normalizers."""

from fieldcheck.logic.validators.normalizers import strip_slashes


class TestStripSlashes:
    def test_escaped_apostrophe(self):
        assert strip_slashes("O\\'Brien") == "O'Brien"

    def test_escaped_double_quote(self):
        assert strip_slashes('say \\"hi\\"') == 'say "hi"'

    def test_escaped_backslash(self):
        assert strip_slashes("a\\\\b") == "a\\b"

    def test_escaped_zero_is_nul(self):
        assert strip_slashes("a\\0b") == "a\0b"

    def test_trailing_backslash_dropped(self):
        assert strip_slashes("abc\\") == "abc"

    def test_plain_value_untouched(self):
        assert strip_slashes("Jean-Luc Picard") == "Jean-Luc Picard"

    def test_idempotent_on_single_escape(self):
        once = strip_slashes("O\\'Brien")
        assert strip_slashes(once) == once
