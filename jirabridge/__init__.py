"""Normalize JIRA comment webhook payloads for chat message templates."""

__version__ = "0.1.0"
