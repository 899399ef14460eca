"""Safe text for chat message markup.

markupsafe.Markup is the safe string type: its content is already
escaped and it is never escaped again, so callers must not build it
from untrusted text directly.
"""

from markupsafe import Markup, escape

LINE_BREAK = Markup("<br/>")
EMPTY = Markup("")


def escape_and_add_line_breaks(text: str | None) -> Markup:
    """Escape text and turn each newline into a <br/> tag."""
    if not text:
        return EMPTY
    return LINE_BREAK.join(escape(line) for line in text.split("\n"))


def presentation_format(template: str, *args: object) -> Markup:
    """Fill a trusted markup template with escaped arguments."""
    return Markup(template).format(*args)


def safe_replace(safe: Markup, token: str, replacement: Markup) -> Markup:
    """Replace plain token text inside already escaped markup.

    The token is escaped first so it matches what escaping produced.
    """
    return Markup(str(safe).replace(str(escape(token)), str(replacement)))
