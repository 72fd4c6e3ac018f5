"""Per-platform handle suggestion generation.

For every platform in the catalog a seed is derived from the platform name,
the normalized input and the caller's salt.  The seed walks the style, prefix
and suffix lists with different strides so that successive attempts produce
different combinations.  The loop stops at ``TARGET_HANDLES`` unique handles
or after ``MAX_ATTEMPTS`` tries; if it came up short, one plain compact
candidate is forced in.  Passing a new salt ("remix") yields a different,
equally reproducible set.
"""

from __future__ import annotations

import logging
import time
from typing import List, Sequence

from handle_agent.core.composer import MIN_HANDLE_LENGTH, compose_handle
from handle_agent.core.data_models import HandleStyle, PlatformSuggestion, decorate_handle
from handle_agent.core.hashing import hash_string
from handle_agent.core.logging_setup import timing_decorator
from handle_agent.core.platforms import PLATFORM_CONFIGS, PlatformConfig
from handle_agent.core.tokenizer import to_base_tokens

logger = logging.getLogger(__name__)

TARGET_HANDLES = 3
MAX_ATTEMPTS = 15
SEED_MODULUS = 9973
STYLES = (HandleStyle.COMPACT, HandleStyle.SNAKE, HandleStyle.HYBRID)


def new_salt() -> int:
    """Current time in milliseconds, the default salt for submit and remix."""
    return time.time_ns() // 1_000_000


@timing_decorator
def generate_suggestions(
    name: str,
    salt: int,
    platforms: Sequence[PlatformConfig] = PLATFORM_CONFIGS,
) -> List[PlatformSuggestion]:
    """Generate handle suggestions for every platform.

    Parameters
    ----------
    name: str
        Raw display name.
    salt: int
        Seed mixed into every platform hash.
    platforms: Sequence[PlatformConfig]
        Catalog to generate for, in output order.

    Returns
    -------
    List[PlatformSuggestion]
        One entry per platform, or an empty list when the name normalizes to
        nothing.
    """
    parsed = to_base_tokens(name)
    if parsed is None:
        logger.debug("Name %r has no usable characters, no suggestions", name)
        return []

    suggestions: List[PlatformSuggestion] = []

    for config in platforms:
        platform_seed = hash_string(f"{config.platform}:{parsed.raw}", salt) % SEED_MODULUS
        # list rather than set: output keeps discovery order
        handles: List[str] = []

        attempt = 0
        while len(handles) < TARGET_HANDLES and attempt < MAX_ATTEMPTS:
            style = STYLES[(platform_seed + attempt) % len(STYLES)]
            prefix = config.prefixes[(platform_seed + attempt * 3) % len(config.prefixes)]
            suffix = config.suffixes[(platform_seed + attempt * 5) % len(config.suffixes)]

            candidate = compose_handle(parsed, prefix, suffix, style, salt)
            if len(candidate) >= MIN_HANDLE_LENGTH and candidate not in handles:
                handles.append(candidate)

            attempt += 1

        if len(handles) < TARGET_HANDLES:
            fallback = compose_handle(parsed, "", "", HandleStyle.COMPACT, salt + 1)
            logger.debug(
                "%s: only %d unique handles after %d attempts, adding %r",
                config.platform,
                len(handles),
                attempt,
                fallback,
            )
            if fallback not in handles:
                handles.append(fallback)

        suggestions.append(
            PlatformSuggestion(
                platform=config.platform,
                handles=tuple(decorate_handle(handle) for handle in handles),
                highlight=config.highlight,
            )
        )

    return suggestions
