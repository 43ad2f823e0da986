from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Tuple

from support_assistant.core.exceptions import KnowledgeBaseUnavailableError
from support_assistant.core.logging import get_logger
from support_assistant.schemas.knowledge import FaqEntry, IntentPattern
from support_assistant.services.contracts import FaqEntryStore, IntentPatternStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class KnowledgeBaseSnapshot:
    entries: Tuple[FaqEntry, ...]
    intent_patterns: Tuple[IntentPattern, ...]


class KnowledgeBaseLoader:
    """Fetches the active FAQ entries and intent patterns for a single request."""

    def __init__(self, faq_store: FaqEntryStore, intent_store: IntentPatternStore):
        self._faq_store = faq_store
        self._intent_store = intent_store

    async def load(self) -> KnowledgeBaseSnapshot:
        entries_result, patterns_result = await asyncio.gather(
            self._faq_store.list_active(),
            self._intent_store.list_active(),
            return_exceptions=True,
        )
        # Cancellation propagates unchanged
        for result in (entries_result, patterns_result):
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result
        if isinstance(entries_result, Exception):
            logger.error(f"Failed to load FAQ entries: {entries_result}")
            raise KnowledgeBaseUnavailableError("qa_items", entries_result) from entries_result
        if isinstance(patterns_result, Exception):
            logger.error(f"Failed to load intent patterns: {patterns_result}")
            raise KnowledgeBaseUnavailableError("intent_patterns", patterns_result) from patterns_result

        entries = tuple(e for e in entries_result or [] if e.is_active)
        return KnowledgeBaseSnapshot(entries=entries, intent_patterns=tuple(patterns_result or []))
