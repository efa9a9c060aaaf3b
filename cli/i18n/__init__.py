"""
cli/i18n/__init__.py - Internationalization (i18n) Module

Localized CLI messages for cnd. Korean (ko) is the default, English (en) optional.

Architecture:
    - Messages are registered per namespace (cli, network) in cli.i18n.messages
    - The active language lives in a ContextVar so concurrent CLI invocations
      (e.g. CliRunner in tests) do not leak into each other
    - The initial language comes from CND_LANG, then the `--lang` option

Usage:
    from cli.i18n import t, set_lang, use_lang

    print(t("network.failed", operation="query", message="..."))

    set_lang("en")
    print(t("cli.regions_title"))  # "Registered Regions"

    with use_lang("ko"):
        print(t("cli.regions_title"))  # "등록된 리전"
"""

from __future__ import annotations

import contextlib
import os
from contextvars import ContextVar
from typing import Any, Iterator

SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"
LANG_ENV_VAR = "CND_LANG"

_current_lang: ContextVar[str | None] = ContextVar("cnd_lang", default=None)


def normalize_lang(lang: str | None) -> str:
    """Map a language tag or locale string to a supported language.

    "en", "EN", "en_US.UTF-8" and "en-GB" all map to "en".
    Anything unsupported maps to DEFAULT_LANG.
    """
    if not lang:
        return DEFAULT_LANG
    code = lang.strip().lower().replace("-", "_").split("_", 1)[0].split(".", 1)[0]
    return code if code in SUPPORTED_LANGS else DEFAULT_LANG


def get_default_lang() -> str:
    """Language used before `--lang` is applied (CND_LANG or ko)."""
    return normalize_lang(os.environ.get(LANG_ENV_VAR))


def get_lang() -> str:
    """Active language for the current context."""
    lang = _current_lang.get()
    return lang if lang is not None else get_default_lang()


def set_lang(lang: str | None) -> None:
    """Set the active language for the current context."""
    _current_lang.set(normalize_lang(lang))


def reset_lang() -> None:
    """Drop the explicit language so CND_LANG applies again."""
    _current_lang.set(None)


@contextlib.contextmanager
def use_lang(lang: str | None) -> Iterator[str]:
    """Temporarily switch the active language."""
    token = _current_lang.set(normalize_lang(lang))
    try:
        yield get_lang()
    finally:
        _current_lang.reset(token)


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """Translate a message key.

    Args:
        key: "namespace.key" (e.g. "network.failed")
        lang: Optional override of the active language
        **kwargs: Values for str.format placeholders

    Returns:
        The translated text. Unknown keys are returned unchanged, and a
        template whose placeholders do not match kwargs is returned unformatted.

    Examples:
        >>> t("network.invalid_region", lang="en", region="r1")
        "Invalid region: r1"
    """
    from cli.i18n.messages import MESSAGES

    entry = MESSAGES.get(key)
    if entry is None:
        return key

    lang = normalize_lang(lang) if lang is not None else get_lang()
    text = entry.get(lang) or entry.get(DEFAULT_LANG, key)

    if kwargs:
        with contextlib.suppress(KeyError, IndexError, ValueError):
            text = text.format(**kwargs)

    return text


__all__ = [
    "t",
    "get_lang",
    "set_lang",
    "reset_lang",
    "use_lang",
    "normalize_lang",
    "get_default_lang",
    "SUPPORTED_LANGS",
    "DEFAULT_LANG",
    "LANG_ENV_VAR",
]
