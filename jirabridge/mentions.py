"""Resolution of JIRA user mentions ([~username]) to chat mentions.

Off by default (DisabledMentionResolver). DirectoryMentionResolver
looks users up and swaps each mention token for mention markup.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Dict, Set

from markupsafe import Markup

from jirabridge.config import DEFAULT_MENTION_MARKUP, MentionsConfig
from jirabridge.errors import UserLookupError
from jirabridge.models import User
from jirabridge.safe_text import presentation_format, safe_replace
from jirabridge.users import StaticUserLookup, UserLookup

LOG = logging.getLogger("jirabridge.mentions")

USER_MENTION_RE = re.compile(r"(\[~)([\w.]+)(])")


def mention_token(username: str) -> str:
    return f"[~{username}]"


def find_mentions(comment: str) -> Set[str]:
    """Return the distinct usernames mentioned in a raw comment."""
    if not comment:
        return set()
    return {match.group(2) for match in USER_MENTION_RE.finditer(comment)}


class MentionResolver(ABC):
    """Rewrites mention tokens in formatted comment text."""

    @abstractmethod
    def apply(self, raw_comment: str, safe_comment: Markup) -> Markup:
        """Return safe_comment with resolvable mentions rewritten.

        Args:
            raw_comment: Comment body before markup stripping; mentions
                are detected here.
            safe_comment: Stripped and escaped comment text.
        """
        ...


class DisabledMentionResolver(MentionResolver):
    """Leaves mention tokens as plain text."""

    def apply(self, raw_comment: str, safe_comment: Markup) -> Markup:
        return safe_comment


class DirectoryMentionResolver(MentionResolver):
    """Replaces tokens of users that resolve with an email address."""

    def __init__(self, lookup: UserLookup, markup: str = DEFAULT_MENTION_MARKUP) -> None:
        self._lookup = lookup
        self._markup = markup

    def _resolve(self, username: str) -> User | None:
        try:
            return self._lookup.resolve(username)
        except UserLookupError as e:
            LOG.warning("User lookup failed for %s: %s", username, e)
            return None

    def determine_user_mentions(self, comment: str) -> Dict[str, User]:
        """Map each mentioned username to its user, skipping users without email."""
        users: Dict[str, User] = {}
        for username in sorted(find_mentions(comment)):
            user = self._resolve(username)
            if user is not None and user.email_address:
                users[username] = user
            else:
                LOG.debug("Mention %s left as plain text", username)
        return users

    def apply(self, raw_comment: str, safe_comment: Markup) -> Markup:
        for username, user in self.determine_user_mentions(raw_comment).items():
            safe_comment = safe_replace(
                safe_comment,
                mention_token(username),
                presentation_format(self._markup, user.username),
            )
        return safe_comment


def make_mention_resolver(config: MentionsConfig | None, lookup: UserLookup | None = None) -> MentionResolver:
    """Build the resolver for config; disabled unless enabled with a directory."""
    if config is None or not config.enabled:
        return DisabledMentionResolver()
    if lookup is None and config.users:
        lookup = StaticUserLookup.from_entries(config.users)
    if lookup is None:
        LOG.warning("Mention resolution enabled but no user directory configured; disabled")
        return DisabledMentionResolver()
    return DirectoryMentionResolver(lookup, markup=config.markup or DEFAULT_MENTION_MARKUP)
