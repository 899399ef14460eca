"""Tests for safe text helpers (escaping, line breaks, markup templates)."""

from markupsafe import Markup, escape

from jirabridge.safe_text import escape_and_add_line_breaks, presentation_format, safe_replace


def test_escape_and_add_line_breaks() -> None:
    """Special characters are escaped and newlines become <br/>."""
    result = escape_and_add_line_breaks("a < b\nc & d\n\n\"q\"")
    assert isinstance(result, Markup)
    assert result == "a &lt; b<br/>c &amp; d<br/><br/>&#34;q&#34;"


def test_escape_and_add_line_breaks_empty() -> None:
    assert escape_and_add_line_breaks("") == ""
    assert escape_and_add_line_breaks(None) == ""


def test_safe_text_is_not_escaped_twice() -> None:
    """Escaping safe text again is a no-op."""
    safe = escape_and_add_line_breaks("x & y\nz")
    assert escape(safe) == "x &amp; y<br/>z"


def test_presentation_format_escapes_arguments() -> None:
    result = presentation_format('<mention username="{}"/>', 'a"<b')
    assert result == '<mention username="a&#34;&lt;b"/>'


def test_safe_replace_matches_escaped_token() -> None:
    """Tokens are matched in their escaped form."""
    safe = escape_and_add_line_breaks("hi [~jdoe] & [~jdoe]")
    result = safe_replace(safe, "[~jdoe]", Markup("<m/>"))
    assert isinstance(result, Markup)
    assert result == "hi <m/> &amp; <m/>"
