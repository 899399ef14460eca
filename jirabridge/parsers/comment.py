"""Parser for JIRA comment events (added, edited, deleted).

Adds to the comment subtree:
- action: label of the performed comment action
- link: permalink to the comment on the issue page
- body: comment text without JIRA markup, escaped, with <br/> line breaks
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from markupsafe import Markup

from jirabridge.errors import PayloadError
from jirabridge.events import (
    ACTION_ENTITY_FIELD,
    BODY_PATH,
    ID_PATH,
    JIRA_COMMENT_CREATED,
    JIRA_COMMENT_DELETED,
    JIRA_COMMENT_UPDATED,
    JIRA_ISSUE_COMMENT_DELETED,
    JIRA_ISSUE_COMMENT_EDITED,
    JIRA_ISSUE_COMMENTED,
    LINK_ENTITY_FIELD,
    VISIBILITY_PATH,
    event_type,
)
from jirabridge.markup import strip_jira_formatting
from jirabridge.mentions import DisabledMentionResolver, MentionResolver
from jirabridge.models import NormalizedComment
from jirabridge.parsers.base import JiraMetadataParser, get_comment_node, get_issue_link, get_issue_node
from jirabridge.safe_text import EMPTY, escape_and_add_line_breaks

LOG = logging.getLogger("jirabridge.parsers.comment")

METADATA_FILE = "metadataIssueCommented.xml"
TEMPLATE_FILE = "templateIssueCommented.xml"
COMMENT_LINK_SUFFIX = (
    "focusedCommentId={id}&amp;page=com.atlassian.jira.plugin.system"
    ".issuetabpanels%3Acomment-tabpanel#comment-{id}"
)

ACTION_LABELS: Mapping[str, str] = MappingProxyType(
    {
        JIRA_ISSUE_COMMENTED: "Commented",
        JIRA_ISSUE_COMMENT_EDITED: "Edited Comment",
        JIRA_ISSUE_COMMENT_DELETED: "Deleted Comment",
        JIRA_COMMENT_CREATED: "Commented",
        JIRA_COMMENT_UPDATED: "Edited Comment",
        JIRA_COMMENT_DELETED: "Deleted Comment",
    }
)


def action_label(event: str) -> str | None:
    """Return the label for a comment event type, None when unmapped."""
    label = ACTION_LABELS.get(event)
    if label is None:
        LOG.debug("No action label for event type %r", event)
    return label


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_comment_link(issue_link: str, comment_id: Any) -> str:
    """Append the focused-comment query to the issue link.

    An empty comment id returns the issue link as is; an empty issue
    link still gets the query appended.
    """
    comment_id = _as_text(comment_id)
    if not comment_id:
        return issue_link
    return f"{issue_link}?{COMMENT_LINK_SUFFIX.format(id=comment_id)}"


def is_comment_restricted(payload: Mapping[str, Any]) -> bool:
    """Whether the comment carries a visibility restriction.

    Any "visibility" attribute counts, whatever its content: the JIRA
    group or role it names cannot be checked against the chat rooms the
    message goes to.
    """
    comment = get_comment_node(payload)
    return comment is not None and VISIBILITY_PATH in comment


class CommentFormatter:
    """Turns a raw JIRA comment into safe chat text."""

    def __init__(self, mention_resolver: MentionResolver | None = None) -> None:
        self._mention_resolver = mention_resolver or DisabledMentionResolver()

    def format(self, comment: str | None) -> Markup:
        if not comment:
            return EMPTY
        safe_comment = escape_and_add_line_breaks(strip_jira_formatting(comment))
        return self._mention_resolver.apply(comment, safe_comment)


class CommentMetadataParser(JiraMetadataParser):
    """Handles 'jira:issue_updated' comment events and Cloud comment_* events."""

    def __init__(self, mention_resolver: MentionResolver | None = None) -> None:
        self._formatter = CommentFormatter(mention_resolver)

    @property
    def events(self) -> List[str]:
        return [
            JIRA_ISSUE_COMMENTED,
            JIRA_ISSUE_COMMENT_DELETED,
            JIRA_ISSUE_COMMENT_EDITED,
            JIRA_COMMENT_CREATED,
            JIRA_COMMENT_UPDATED,
            JIRA_COMMENT_DELETED,
        ]

    @property
    def template_file(self) -> str:
        return TEMPLATE_FILE

    @property
    def metadata_file(self) -> str:
        return METADATA_FILE

    def normalize(self, payload: Mapping[str, Any]) -> NormalizedComment | None:
        """Derive the display fields of the comment without touching payload.

        Returns None when the payload has no comment.

        Raises:
            PayloadError: payload is not a JSON object.
        """
        if not isinstance(payload, Mapping):
            raise PayloadError(f"Expected a JSON object, got {type(payload).__name__}")
        comment = get_comment_node(payload)
        if comment is None:
            LOG.debug("Payload has no comment, nothing to normalize")
            return None

        comment_id = _as_text(comment.get(ID_PATH))
        restricted = is_comment_restricted(payload)
        if restricted:
            LOG.info("Comment %s is restricted, body suppressed", comment_id or "<no id>")
            body = ""
        else:
            body = str(self._formatter.format(_as_text(comment.get(BODY_PATH))))

        return NormalizedComment(
            id=comment_id,
            action=action_label(event_type(payload)),
            link=build_comment_link(get_issue_link(get_issue_node(payload)), comment_id),
            body=body,
            restricted=restricted,
        )

    def pre_process_input_data(self, payload: Dict[str, Any]) -> None:
        record = self.normalize(payload)
        if record is None:
            return
        comment = get_comment_node(payload)
        comment[LINK_ENTITY_FIELD] = record.link
        comment[ACTION_ENTITY_FIELD] = record.action
        comment[BODY_PATH] = record.body
