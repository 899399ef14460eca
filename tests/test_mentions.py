"""Tests for mention detection and resolution."""

from unittest.mock import MagicMock

from markupsafe import Markup

from jirabridge.config import MentionsConfig
from jirabridge.errors import UserLookupError
from jirabridge.mentions import (
    DirectoryMentionResolver,
    DisabledMentionResolver,
    find_mentions,
    make_mention_resolver,
)
from jirabridge.models import User
from jirabridge.safe_text import escape_and_add_line_breaks
from jirabridge.users import StaticUserLookup, UserLookup


def _lookup() -> StaticUserLookup:
    return StaticUserLookup(
        [
            User(username="jdoe", email_address="jdoe@example.com"),
            User(username="ann.lee", email_address=""),
        ]
    )


def test_find_mentions_deduplicates() -> None:
    """Only [~name] tokens count; repeated names appear once."""
    raw = "[~jdoe] and [~ann.lee], again [~jdoe]; not [~] nor [jdoe] nor [~bad name]"
    assert find_mentions(raw) == {"jdoe", "ann.lee"}


def test_find_mentions_empty() -> None:
    assert find_mentions("") == set()


def test_disabled_resolver_returns_input() -> None:
    safe = Markup("hi [~jdoe]")
    assert DisabledMentionResolver().apply("hi [~jdoe]", safe) is safe


def test_determine_user_mentions_requires_email() -> None:
    """Unknown users and users without email are skipped."""
    resolver = DirectoryMentionResolver(_lookup())
    users = resolver.determine_user_mentions("[~jdoe] [~ann.lee] [~ghost]")
    assert list(users) == ["jdoe"]


def test_directory_resolver_replaces_tokens() -> None:
    raw = "*Hey* [~jdoe] and [~ann.lee]\n[~jdoe] again"
    safe = escape_and_add_line_breaks("Hey [~jdoe] and [~ann.lee]\n[~jdoe] again")
    result = DirectoryMentionResolver(_lookup()).apply(raw, safe)
    assert result == (
        'Hey <mention username="jdoe"/> and [~ann.lee]<br/><mention username="jdoe"/> again'
    )


def test_directory_resolver_custom_markup() -> None:
    resolver = DirectoryMentionResolver(_lookup(), markup="<at>{}</at>")
    assert resolver.apply("[~jdoe]", Markup("[~jdoe]")) == "<at>jdoe</at>"


def test_lookup_failure_leaves_plain_text() -> None:
    """UserLookupError is logged and the mention stays plain text."""
    lookup = MagicMock(spec=UserLookup)
    lookup.resolve.side_effect = UserLookupError("directory down")
    result = DirectoryMentionResolver(lookup).apply("[~jdoe]", Markup("[~jdoe]"))
    assert result == "[~jdoe]"
    lookup.resolve.assert_called_once_with("jdoe")


def test_make_resolver_disabled_by_default() -> None:
    assert isinstance(make_mention_resolver(None), DisabledMentionResolver)
    assert isinstance(make_mention_resolver(MentionsConfig()), DisabledMentionResolver)
    assert isinstance(make_mention_resolver(MentionsConfig(), _lookup()), DisabledMentionResolver)


def test_make_resolver_enabled_with_config_users() -> None:
    config = MentionsConfig(enabled=True, users=[{"username": "jdoe", "email_address": "jdoe@example.com"}])
    resolver = make_mention_resolver(config)
    assert isinstance(resolver, DirectoryMentionResolver)
    assert resolver.apply("[~jdoe]", Markup("[~jdoe]")) == '<mention username="jdoe"/>'


def test_make_resolver_enabled_with_lookup() -> None:
    resolver = make_mention_resolver(MentionsConfig(enabled=True), _lookup())
    assert isinstance(resolver, DirectoryMentionResolver)


def test_make_resolver_enabled_without_directory_stays_disabled() -> None:
    assert isinstance(make_mention_resolver(MentionsConfig(enabled=True)), DisabledMentionResolver)
