"""Strip JIRA wiki markup from comment bodies.

Chat templates do not support JIRA's rich text syntax, so formatting is
removed rather than translated. Paragraph structure and user mention
tokens ([~username]) are kept.
"""

import re

_BLOCK_MACRO_RE = re.compile(r"\{(?:code|noformat|quote|panel|color)(?::[^}]*)?\}")
_HEADING_RE = re.compile(r"^[ \t]*(?:h[1-6]|bq)\.[ \t]*", re.MULTILINE)
_RULE_RE = re.compile(r"^[ \t]*-{4,}[ \t]*$", re.MULTILINE)
_LIST_RE = re.compile(r"^[ \t]*[*#-]+[ \t]+", re.MULTILINE)
_IMAGE_RE = re.compile(r"!([^!\s|]+\.\w{2,5})(?:\|[^!\n]*)?!")
# [~user] is a mention token, not a link
_LINK_RE = re.compile(r"\[(?!~)([^\[\]\n|]*)\|([^\[\]\n]+)\]")
_BARE_LINK_RE = re.compile(r"\[(?!~)([^\[\]\n|]+)\]")
_MONOSPACE_RE = re.compile(r"\{\{(.+?)\}\}")
_CITATION_RE = re.compile(r"\?\?(?=\S)(.+?)(?<=\S)\?\?")
_FORCED_BREAK_RE = re.compile(r"[ \t]*\\\\[ \t]*")
_TRAILING_SPACE_RE = re.compile(r"[ \t]+$", re.MULTILINE)
_EXTRA_NEWLINES_RE = re.compile(r"\n{3,}")

# *bold* _italic_ -deleted- +inserted+ ^superscript^ ~subscript~
_EFFECT_CHARS = "*_-+^~"
_EFFECT_RES = [
    re.compile(r"(?<![\w\[{c}]){c}(?=\S)(.+?)(?<=\S){c}(?![\w{c}])".format(c=re.escape(char)))
    for char in _EFFECT_CHARS
]


def _strip_table_row(line: str) -> str:
    """Drop the cell separators of a table row (|a|b| or ||h1||h2||)."""
    stripped = line.strip()
    if not stripped.startswith("|"):
        return line
    cells = [cell.strip() for cell in re.split(r"\|\|?", stripped)]
    return " ".join(cell for cell in cells if cell)


def _replace_link(match: re.Match) -> str:
    text, url = match.group(1).strip(), match.group(2).strip()
    return text or url


def strip_jira_formatting(text: str) -> str:
    """Remove JIRA wiki markup, keeping plain text and paragraphs.

    Args:
        text: Raw comment body in JIRA wiki syntax.

    Returns:
        Plain text with newlines between lines and paragraphs. Blank
        input is returned unchanged.
    """
    if not text or not text.strip():
        return text

    s = text.replace("\r\n", "\n").replace("\r", "\n")
    s = _MONOSPACE_RE.sub(r"\1", s)
    s = _BLOCK_MACRO_RE.sub("", s)
    s = _HEADING_RE.sub("", s)
    s = _RULE_RE.sub("", s)
    s = _LIST_RE.sub("", s)
    s = "\n".join(_strip_table_row(line) for line in s.split("\n"))
    s = _IMAGE_RE.sub("", s)
    s = _LINK_RE.sub(_replace_link, s)
    s = _BARE_LINK_RE.sub(r"\1", s)
    for effect_re in _EFFECT_RES:
        s = effect_re.sub(r"\1", s)
    s = _CITATION_RE.sub(r"\1", s)
    s = _FORCED_BREAK_RE.sub("\n", s)
    s = _TRAILING_SPACE_RE.sub("", s)
    s = _EXTRA_NEWLINES_RE.sub("\n\n", s)
    return s.strip()
