"""Name normalization.

Turns free-text display names into plain ASCII words separated by single
spaces.  Accented Latin letters are reduced to their base letter; everything
else that is not a letter, digit or whitespace becomes a separator.
"""

from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_name(raw_name: str) -> str:
    """Normalize a raw display name.

    ``"  José -- Núñez "`` becomes ``"Jose Nunez"``.  Always returns a string,
    which is empty when nothing usable is left.
    """
    if not raw_name:
        return ""
    decomposed = unicodedata.normalize("NFD", raw_name)
    stripped = _COMBINING_MARKS.sub("", decomposed)
    spaced = _NON_ALNUM.sub(" ", stripped)
    return _WHITESPACE.sub(" ", spaced).strip()
