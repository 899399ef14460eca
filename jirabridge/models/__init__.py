"""Data models for users and normalized comments (Pydantic)."""

from jirabridge.models.comment import NormalizedComment
from jirabridge.models.user import User

__all__ = ["NormalizedComment", "User"]
