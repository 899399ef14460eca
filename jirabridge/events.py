"""JIRA webhook event names and payload field names.

Server and Data Center send 'jira:issue_updated' with the comment
flavour in issue_event_type_name. Cloud sends standalone comment_*
webhooks where webhookEvent carries the type.
"""

from typing import Any, Mapping

ISSUE_EVENT_TYPE_NAME = "issue_event_type_name"
WEBHOOK_EVENT = "webhookEvent"

JIRA_ISSUE_COMMENTED = "issue_commented"
JIRA_ISSUE_COMMENT_EDITED = "issue_comment_edited"
JIRA_ISSUE_COMMENT_DELETED = "issue_comment_deleted"

JIRA_COMMENT_CREATED = "comment_created"
JIRA_COMMENT_UPDATED = "comment_updated"
JIRA_COMMENT_DELETED = "comment_deleted"

ISSUE_PATH = "issue"
COMMENT_PATH = "comment"
ID_PATH = "id"
BODY_PATH = "body"
VISIBILITY_PATH = "visibility"
SELF_PATH = "self"
KEY_PATH = "key"

LINK_ENTITY_FIELD = "link"
ACTION_ENTITY_FIELD = "action"


def event_type(payload: Mapping[str, Any]) -> str:
    """Return the comment event type of a payload, or empty string."""
    for field in (ISSUE_EVENT_TYPE_NAME, WEBHOOK_EVENT):
        value = payload.get(field)
        if isinstance(value, str) and value:
            return value
    return ""
