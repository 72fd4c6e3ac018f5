"""Core functionality for Handle Agent.

This package contains the handle generation pipeline and the pieces shared by
every front end:
- normalizer / tokenizer: turn a display name into base spellings
- hashing: seeded 32-bit string hash
- composer: build one candidate handle
- generator: per-platform suggestion sets
- platforms: the static platform catalog
- session: submitted name, salt and remix
- clipboard: copy-button state and the Tk clipboard writer
- config / logging_setup: ambient configuration and logging
"""

from .clipboard import ClipboardWriter, CopyState, TkClipboard  # noqa: F401
from .composer import compose_handle  # noqa: F401
from .config import Config, ValidationResult, get_config  # noqa: F401
from .data_models import BaseTokens, HandleStyle, PlatformSuggestion  # noqa: F401
from .generator import generate_suggestions, new_salt  # noqa: F401
from .hashing import hash_string  # noqa: F401
from .logging_setup import configure_logging  # noqa: F401
from .normalizer import normalize_name  # noqa: F401
from .platforms import PLATFORM_CONFIGS, PlatformConfig  # noqa: F401
from .session import SuggestionSession  # noqa: F401
from .tokenizer import to_base_tokens  # noqa: F401

__all__ = [
    # Pipeline
    "normalize_name",
    "to_base_tokens",
    "hash_string",
    "compose_handle",
    "generate_suggestions",
    "new_salt",
    # Models
    "BaseTokens",
    "HandleStyle",
    "PlatformSuggestion",
    "PlatformConfig",
    "PLATFORM_CONFIGS",
    # Front-end state
    "SuggestionSession",
    "ClipboardWriter",
    "CopyState",
    "TkClipboard",
    # Config
    "Config",
    "get_config",
    "ValidationResult",
    "configure_logging",
]
