"""User directory lookup used to resolve JIRA mentions."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping

from jirabridge.models import User

LOG = logging.getLogger("jirabridge.users")


class UserLookup(ABC):
    """Resolves JIRA usernames to directory users."""

    @abstractmethod
    def resolve(self, username: str) -> User | None:
        """Return the user for username, or None when not found.

        Raises UserLookupError when the directory cannot be queried.
        """
        ...


class StaticUserLookup(UserLookup):
    """Directory backed by a fixed set of users (config or tests)."""

    def __init__(self, users: Iterable[User]) -> None:
        self._users = {user.username: user for user in users}

    @classmethod
    def from_entries(cls, entries: Iterable[Mapping[str, Any]]) -> "StaticUserLookup":
        """Build from config entries (username, email_address, display_name)."""
        return cls(User(**dict(entry)) for entry in entries)

    def resolve(self, username: str) -> User | None:
        user = self._users.get(username)
        if user is None:
            LOG.debug("User %s not found in static directory", username)
        return user
