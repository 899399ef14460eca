"""Shared fixtures: JIRA comment webhook payloads."""

from typing import Any, Dict

import pytest

ISSUE_LINK = "https://jira.example.com/browse/ABC-1"


@pytest.fixture
def comment_payload() -> Dict[str, Any]:
    """jira:issue_updated payload for a new comment (Server/Data Center shape)."""
    return {
        "timestamp": 1493130360000,
        "webhookEvent": "jira:issue_updated",
        "issue_event_type_name": "issue_commented",
        "user": {"name": "jdoe", "emailAddress": "jdoe@example.com"},
        "issue": {
            "id": "10001",
            "self": "https://jira.example.com/rest/api/2/issue/10001",
            "key": "ABC-1",
            "link": ISSUE_LINK,
            "fields": {"summary": "Deploy pipeline"},
        },
        "comment": {
            "id": "123",
            "self": "https://jira.example.com/rest/api/2/issue/10001/comment/123",
            "author": {"name": "jdoe", "displayName": "John Doe"},
            "body": "*Deploy* finished.\n\nCheck [~ann.lee] please & thanks <3",
            "created": "2017-04-25T11:26:00.000-0300",
        },
    }
