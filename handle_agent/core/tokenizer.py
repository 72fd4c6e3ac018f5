"""Split normalized names into tokens and base spellings."""

from __future__ import annotations

from typing import Optional

from handle_agent.core.data_models import BaseTokens
from handle_agent.core.normalizer import normalize_name


def _capitalize(token: str) -> str:
    return token[:1].upper() + token[1:].lower()


def to_base_tokens(name: str) -> Optional[BaseTokens]:
    """Tokenize ``name`` and derive the compact, snake and hybrid spellings.

    The name is normalized first.  Returns ``None`` when nothing is left,
    which callers treat as "no suggestions possible".
    """
    normalized = normalize_name(name)
    if not normalized:
        return None

    tokens = tuple(normalized.split(" "))
    lowered = [token.lower() for token in tokens]

    return BaseTokens(
        raw=normalized,
        tokens=tokens,
        compact="".join(lowered),
        snake="_".join(lowered),
        hybrid=lowered[0] + "".join(_capitalize(token) for token in tokens[1:]),
    )
