"""Handle Agent - social handle suggestions from a display name.

Normalizes a name, derives several spellings and picks platform-flavored
prefixes and suffixes with a seeded hash, so the same name and salt always
give the same suggestions.
"""

__version__ = "0.1.0"
__author__ = "Handle Agent Contributors"

from handle_agent.core.data_models import PlatformSuggestion
from handle_agent.core.generator import generate_suggestions

__all__ = ["generate_suggestions", "PlatformSuggestion", "__version__"]
