"""Directory user model."""

from pydantic import BaseModel


class User(BaseModel):
    """User resolved from the directory by JIRA username."""

    username: str
    email_address: str | None = None
    display_name: str | None = None
