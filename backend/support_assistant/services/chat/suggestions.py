from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from support_assistant.core.config import settings
from support_assistant.schemas.knowledge import FaqEntry


DEFAULT_SUGGESTIONS = (
    "How do I track my order?",
    "What is the warranty policy?",
    "How do I contact customer support?",
)
MAX_SUGGESTIONS = 3


class SuggestionGenerator:
    """Follow-up questions: FAQ questions sharing a word with the query, padded with generic ones.

    Uses plain whitespace tokens without stop-word filtering, unlike the matcher,
    so common words such as "how" still pull in related questions.
    """

    def __init__(self, *, limit: Optional[int] = None, defaults: Sequence[str] = DEFAULT_SUGGESTIONS):
        limit = int(limit if limit is not None else settings.SUGGESTION_LIMIT)
        self.limit = max(0, min(limit, MAX_SUGGESTIONS))
        self.defaults = tuple(defaults)

    def generate(self, query: str, entries: Iterable[FaqEntry]) -> List[str]:
        suggestions: List[str] = []
        if self.limit <= 0:
            return suggestions

        query_words = set((query or "").lower().split())
        if query_words:
            for entry in entries:
                if len(suggestions) >= self.limit:
                    break
                question = entry.question or ""
                if question in suggestions:
                    continue
                if query_words.intersection(question.lower().split()):
                    suggestions.append(question)

        for default in self.defaults:
            if len(suggestions) >= self.limit:
                break
            if default not in suggestions:
                suggestions.append(default)
        return suggestions
