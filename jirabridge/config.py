"""Configuration loading from YAML and environment.

Mention resolution stays off unless explicitly enabled: the chat
markup it produces is not rendered by every consumer yet.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MENTION_MARKUP = '<mention username="{}"/>'


def _is_placeholder(value: Any) -> bool:
    return isinstance(value, str) and value.startswith("$")


class MentionsConfig(BaseSettings):
    """User mention resolution settings."""

    model_config = SettingsConfigDict(env_prefix="MENTIONS_", extra="ignore")

    enabled: bool = Field(default=False, description="Replace [~user] tokens with mention markup")
    markup: str = Field(default=DEFAULT_MENTION_MARKUP, description="Mention marker template, {} is the username")
    users: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Static user directory: entries with username, email_address, display_name",
    )

    @field_validator("users")
    @classmethod
    def drop_unresolved_emails(cls, users: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """An email still holding a $VAR placeholder means the variable was unset."""
        return [
            {**user, "email_address": None} if _is_placeholder(user.get("email_address")) else user
            for user in users
        ]


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    mentions: MentionsConfig = Field(default_factory=MentionsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _substitute_env(value: Any, env: dict[str, str]) -> Any:
    """Replace ${VAR} and $VAR strings with values from env."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            return env.get(value[2:-1].strip(), value)
        if value.startswith("$") and len(value) > 1:
            return env.get(value[1:].strip(), value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v, env) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file yields defaults (env variables still apply).
    """
    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(raw, dict(os.environ))

    return AppConfig(
        mentions=MentionsConfig(**(raw.get("mentions") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
