"""Compose a single candidate handle."""

from __future__ import annotations

import re

from handle_agent.core.data_models import BaseTokens, HandleStyle

MAX_HANDLE_LENGTH = 20
MIN_HANDLE_LENGTH = 4

_NON_ALNUM = re.compile(r"[^a-z0-9]", re.IGNORECASE | re.ASCII)


def clean_affix(affix: str) -> str:
    """Keep only ASCII letters and digits of a prefix or suffix."""
    return _NON_ALNUM.sub("", affix) if affix else ""


def salt_padding(salt: int) -> str:
    """Decimal ``salt mod 1000`` with the sign following the salt."""
    remainder = abs(salt) % 1000
    return str(-remainder if salt < 0 else remainder)


def compose_handle(
    tokens: BaseTokens,
    prefix: str,
    suffix: str,
    style: HandleStyle,
    salt: int,
) -> str:
    """Build ``prefix + base + suffix`` as a lowercase handle.

    The result is cut to ``MAX_HANDLE_LENGTH`` characters.  Anything shorter
    than ``MIN_HANDLE_LENGTH`` gets ``salt_padding(salt)`` appended; the padded
    value is not checked again, so very short names can still come back
    under the minimum.
    """
    base = tokens.base_for(HandleStyle(style))
    raw_handle = f"{clean_affix(prefix)}{base}{clean_affix(suffix)}".lower()
    trimmed = raw_handle[:MAX_HANDLE_LENGTH]

    if len(trimmed) >= MIN_HANDLE_LENGTH:
        return trimmed

    return f"{trimmed}{salt_padding(salt)}"
