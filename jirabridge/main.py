"""jirabridge entry point.

Reads a JIRA comment webhook payload (file or stdin), prints the
template-ready JSON. Usage: jirabridge [--config PATH] [PAYLOAD].
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from jirabridge.config import load_config
from jirabridge.errors import PayloadError
from jirabridge.events import event_type
from jirabridge.logging import BridgeLogging
from jirabridge.mentions import make_mention_resolver
from jirabridge.parsers import CommentMetadataParser

LOG = logging.getLogger("jirabridge")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jirabridge",
        description="Normalize a JIRA comment webhook payload for a chat message template",
    )
    parser.add_argument(
        "payload",
        nargs="?",
        type=Path,
        default=None,
        help="Path to the webhook JSON payload (default: stdin)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def _read_payload(path: Path | None, stdin: TextIO) -> Any:
    text = path.read_text(encoding="utf-8") if path is not None else stdin.read()
    return json.loads(text)


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Entry point: load config, normalize one payload, print JSON."""
    args = parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    config = load_config(args.config)
    BridgeLogging(config.logging).setup()

    if args.check:
        print("Config OK: mentions", "enabled" if config.mentions.enabled else "disabled", file=stdout)
        return 0

    try:
        payload = _read_payload(args.payload, stdin)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        LOG.error("Cannot read payload: %s", e)
        return 1

    parser = CommentMetadataParser(make_mention_resolver(config.mentions))
    try:
        event = event_type(payload) if isinstance(payload, dict) else ""
        if parser.supports(event):
            result = parser.parse(payload)
        elif isinstance(payload, dict):
            LOG.info("Event type %r is not a comment event, payload left unchanged", event)
            result = payload
        else:
            raise PayloadError(f"Expected a JSON object, got {type(payload).__name__}")
    except PayloadError as e:
        LOG.error("Invalid payload: %s", e)
        return 1

    json.dump(result, stdout, indent=2, ensure_ascii=False)
    stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
