from __future__ import annotations

import string
from typing import List

from support_assistant.services.matching.lexicon import STOP_WORDS

_EDGE_PUNCTUATION = string.punctuation + "‘’“”"


def normalize(text: str) -> str:
    return (text or "").lower().strip()


def words(text: str) -> List[str]:
    """Lowercased whitespace words with edge punctuation removed ("policy?" -> "policy")."""
    out: List[str] = []
    for raw in normalize(text).split():
        word = raw.strip(_EDGE_PUNCTUATION)
        if word:
            out.append(word)
    return out


def content_tokens(text: str) -> List[str]:
    """Tokens used for lexical and keyword scoring: no stop words, length > 2."""
    return [w for w in words(text) if len(w) > 2 and w not in STOP_WORDS]


def semantic_tokens(text: str) -> List[str]:
    """Tokens used for semantic scoring: length > 2, stop words kept."""
    return [w for w in words(text) if len(w) > 2]
