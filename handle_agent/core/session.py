"""Caller-side suggestion state.

A session remembers the last submitted name and the salt it was generated
with.  Submitting refreshes the salt, "remix" refreshes it again for the same
name, and the suggestion list is recomputed only when either value changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from handle_agent.core.data_models import PlatformSuggestion
from handle_agent.core.generator import generate_suggestions, new_salt

logger = logging.getLogger(__name__)


@dataclass
class SuggestionSession:
    """Submitted name, current salt and the memoized suggestions for them.

    Attributes
    ----------
    submitted_name: Optional[str]
        Trimmed name of the last non-blank submission, or ``None``.
    salt: int
        Salt used for the current suggestion set.
    salt_source: Callable[[], int]
        Produces fresh salts; defaults to the millisecond clock.
    """

    submitted_name: Optional[str] = None
    salt: int = field(default_factory=new_salt)
    salt_source: Callable[[], int] = field(default=new_salt, repr=False)
    _cache_key: Optional[Tuple[str, int]] = field(default=None, init=False, repr=False)
    _cache: List[PlatformSuggestion] = field(default_factory=list, init=False, repr=False)

    def submit(self, name: str, salt: Optional[int] = None) -> bool:
        """Submit a name.

        Blank or whitespace-only names clear the session.  Returns ``True``
        when a name was accepted.
        """
        if not name or not name.strip():
            logger.debug("Blank submission, clearing suggestions")
            self.submitted_name = None
            return False

        self.submitted_name = name.strip()
        self.salt = self.salt_source() if salt is None else salt
        logger.info(f"Submitted {self.submitted_name!r} with salt {self.salt}")
        return True

    def remix(self, salt: Optional[int] = None) -> bool:
        """Pick a new salt for the current name.  No-op without a submission."""
        if self.submitted_name is None:
            return False

        self.salt = self.salt_source() if salt is None else salt
        logger.info(f"Remixed {self.submitted_name!r} with salt {self.salt}")
        return True

    @property
    def suggestions(self) -> List[PlatformSuggestion]:
        if self.submitted_name is None:
            return []

        key = (self.submitted_name, self.salt)
        if key != self._cache_key:
            self._cache = generate_suggestions(self.submitted_name, self.salt)
            self._cache_key = key
        return list(self._cache)
