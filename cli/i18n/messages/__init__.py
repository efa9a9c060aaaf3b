"""
cli/i18n/messages/__init__.py - cnd message registry

Registers the ko/en texts of the two cnd namespaces under "namespace.key":
    cli      help text, regions command, regions file errors
    network  operation results and CommandError descriptions

    MESSAGES["network.invalid_region"]["en"] == "Invalid region: {region}"
"""

from __future__ import annotations

from typing import TypedDict


class MessageDict(TypedDict):
    """Message dictionary type."""

    ko: str
    en: str


# Master message registry
MESSAGES: dict[str, MessageDict] = {}


def register_messages(namespace: str, messages: dict[str, MessageDict]) -> None:
    """Register messages for a namespace.

    Args:
        namespace: Namespace prefix (e.g., "cli", "network")
        messages: Dictionary of message key -> translations
    """
    for key, value in messages.items():
        MESSAGES[f"{namespace}.{key}"] = value


# Import and register all message modules
# These imports must come after register_messages is defined
from cli.i18n.messages.cli_commands import CLI_MESSAGES  # noqa: E402
from cli.i18n.messages.network import NETWORK_MESSAGES  # noqa: E402

register_messages("cli", CLI_MESSAGES)
register_messages("network", NETWORK_MESSAGES)

__all__ = ["MESSAGES", "register_messages", "MessageDict"]
