"""Parsers turning JIRA webhook payloads into template-ready JSON."""

from jirabridge.parsers.base import JiraMetadataParser
from jirabridge.parsers.comment import ACTION_LABELS, CommentFormatter, CommentMetadataParser

__all__ = ["ACTION_LABELS", "CommentFormatter", "CommentMetadataParser", "JiraMetadataParser"]
