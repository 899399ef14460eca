"""Errors raised by jirabridge."""


class JiraBridgeError(Exception):
    """Base error for jirabridge."""

    pass


class PayloadError(JiraBridgeError):
    """Raised when a webhook payload is not a JSON object."""

    pass


class UserLookupError(JiraBridgeError):
    """Raised by a user directory when a lookup fails."""

    pass
