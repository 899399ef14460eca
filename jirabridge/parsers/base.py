"""Abstract base for JIRA webhook metadata parsers."""

import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping
from urllib.parse import urlsplit

from jirabridge.errors import PayloadError
from jirabridge.events import COMMENT_PATH, ISSUE_PATH, KEY_PATH, LINK_ENTITY_FIELD, SELF_PATH

_REST_API_MARKER = "/rest/api/"


def get_issue_link(issue: Any) -> str:
    """Return the browse URL of an issue, or empty string.

    Uses issue.link when set; otherwise derives <base>/browse/<key> from
    the REST self URL (https://host/jira/rest/api/2/issue/10001).
    """
    if not isinstance(issue, Mapping):
        return ""
    link = issue.get(LINK_ENTITY_FIELD)
    if isinstance(link, str) and link:
        return link
    self_url = issue.get(SELF_PATH)
    key = issue.get(KEY_PATH)
    if not isinstance(self_url, str) or not self_url or not key:
        return ""
    try:
        parts = urlsplit(self_url)
    except ValueError:
        return ""
    if not parts.scheme or not parts.netloc:
        return ""
    context_path = parts.path.split(_REST_API_MARKER, 1)[0].rstrip("/")
    return f"{parts.scheme}://{parts.netloc}{context_path}/browse/{key}"


def get_comment_node(payload: Mapping[str, Any]) -> Dict[str, Any] | None:
    """Return the comment subtree, or None when absent or not an object."""
    comment = payload.get(COMMENT_PATH)
    return comment if isinstance(comment, dict) else None


def get_issue_node(payload: Mapping[str, Any]) -> Mapping[str, Any]:
    issue = payload.get(ISSUE_PATH)
    return issue if isinstance(issue, Mapping) else {}


class JiraMetadataParser(ABC):
    """Prepares a webhook payload for a message template.

    parse() never mutates the caller's payload: it works on a deep copy
    owned by the call.
    """

    @property
    @abstractmethod
    def events(self) -> List[str]:
        """Event types this parser handles."""
        ...

    @property
    @abstractmethod
    def template_file(self) -> str:
        """Message template file name for the renderer."""
        ...

    @property
    @abstractmethod
    def metadata_file(self) -> str:
        """Template metadata file name for the renderer."""
        ...

    @abstractmethod
    def pre_process_input_data(self, payload: Dict[str, Any]) -> None:
        """Derive template fields on a payload owned by this call."""
        ...

    def supports(self, event_type: str) -> bool:
        return event_type in self.events

    def parse(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Return a processed copy of payload.

        Raises:
            PayloadError: payload is not a JSON object.
        """
        if not isinstance(payload, Mapping):
            raise PayloadError(f"Expected a JSON object, got {type(payload).__name__}")
        document = copy.deepcopy(dict(payload))
        self.pre_process_input_data(document)
        return document
