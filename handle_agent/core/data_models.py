"""Data models used throughout Handle Agent.

All models are immutable value objects.  They are built fresh for every
generation request and carry no identity beyond their contents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

HANDLE_DISPLAY_PREFIX = "@"


class HandleStyle(str, Enum):
    """Base spellings a handle can be built from, in cycling order."""

    COMPACT = "compact"
    SNAKE = "snake"
    HYBRID = "hybrid"


@dataclass(frozen=True)
class BaseTokens:
    """Tokenized name plus its three precomputed base spellings.

    Attributes
    ----------
    raw: str
        The normalized name the tokens were taken from.
    tokens: Tuple[str, ...]
        Word tokens in input order.  Never empty.
    compact: str
        Tokens concatenated and lowercased (``lunarlabs``).
    snake: str
        Lowercased tokens joined by underscores (``lunar_labs``).
    hybrid: str
        camelCase join (``lunarLabs``).
    """

    raw: str
    tokens: Tuple[str, ...]
    compact: str
    snake: str
    hybrid: str

    def __post_init__(self) -> None:
        if not self.tokens:
            raise ValueError("tokens cannot be empty")

    def base_for(self, style: HandleStyle) -> str:
        """Return the base spelling for ``style``."""
        if style == HandleStyle.SNAKE:
            return self.snake
        if style == HandleStyle.HYBRID:
            return self.hybrid
        return self.compact


def decorate_handle(handle: str) -> str:
    """Add the display ``@`` to a bare handle."""
    return f"{HANDLE_DISPLAY_PREFIX}{handle}"


def undecorate_handle(handle: str) -> str:
    """Strip one leading display ``@`` if present."""
    if handle.startswith(HANDLE_DISPLAY_PREFIX):
        return handle[len(HANDLE_DISPLAY_PREFIX):]
    return handle


@dataclass(frozen=True)
class PlatformSuggestion:
    """Handle suggestions for one platform.

    ``handles`` holds display strings (``@lunarlabsgram``) in the order they
    were found.
    """

    platform: str
    handles: Tuple[str, ...] = field(default_factory=tuple)
    highlight: str = ""

    @property
    def bare_handles(self) -> Tuple[str, ...]:
        """Handles without the display decoration."""
        return tuple(undecorate_handle(h) for h in self.handles)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the suggestion to a JSON-serialisable dictionary."""
        return {
            "platform": self.platform,
            "handles": list(self.handles),
            "highlight": self.highlight,
        }
