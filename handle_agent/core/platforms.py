"""Static platform catalog.

Each entry lists the prefixes and suffixes the generator may wrap a name in
for that platform, plus a short tip shown next to the suggestions.  The order
of entries and of the affix lists is part of the deterministic output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class PlatformConfig:
    """Read-only affix table for one platform."""

    platform: str
    prefixes: Tuple[str, ...]
    suffixes: Tuple[str, ...]
    highlight: str

    def __post_init__(self) -> None:
        if not self.platform:
            raise ValueError("platform cannot be empty")
        if not self.prefixes or not self.suffixes:
            raise ValueError(f"{self.platform}: prefixes and suffixes cannot be empty")


PLATFORM_CONFIGS: Tuple[PlatformConfig, ...] = (
    PlatformConfig(
        platform="Instagram",
        prefixes=("", "its", "hello", "meet"),
        suffixes=("gram", "daily", "studio", "journal", "pixels"),
        highlight="Keep it aesthetic and easy to read.",
    ),
    PlatformConfig(
        platform="TikTok",
        prefixes=("", "hey", "go", "watch"),
        suffixes=("tok", "loops", "clips", "beats", "motion"),
        highlight="Short, punchy names work best here.",
    ),
    PlatformConfig(
        platform="X (Twitter)",
        prefixes=("", "real", "the", "its"),
        suffixes=("hq", "updates", "live", "now", "feed"),
        highlight="Fast takes + credibility are key.",
    ),
    PlatformConfig(
        platform="YouTube",
        prefixes=("", "watch", "team", "channel"),
        suffixes=("tv", "studio", "lab", "vision", "vault"),
        highlight="Think long-form and memorable.",
    ),
    PlatformConfig(
        platform="Threads",
        prefixes=("", "join", "hello", "with"),
        suffixes=("threads", "loop", "lane", "space", "waves"),
        highlight="Friendly conversational handles stand out.",
    ),
)


def platform_names() -> Tuple[str, ...]:
    return tuple(config.platform for config in PLATFORM_CONFIGS)


def get_platform(name: str) -> Optional[PlatformConfig]:
    """Look up a catalog entry by name, ignoring case."""
    wanted = name.strip().lower()
    for config in PLATFORM_CONFIGS:
        if config.platform.lower() == wanted:
            return config
    return None
