from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from support_assistant.core.config import settings
from support_assistant.core.logging import get_logger
from support_assistant.schemas.knowledge import FaqEntry, IntentPattern
from support_assistant.services.chat.fallback import GenerativeFallback
from support_assistant.services.chat.intent_detector import IntentDetector
from support_assistant.services.contracts import FaqEntryStore
from support_assistant.services.matching.matcher import MatchResult

logger = get_logger(__name__)

SOURCE_FAQ = "qa_database"
SOURCE_AI = "ai"
MAX_RELATED_ITEMS = 3


@dataclass(frozen=True)
class RouteDecision:
    response: str
    confidence: float
    response_source: str
    matched_intent: str = ""
    related_items: List[str] = field(default_factory=list)
    qa_item_id: Optional[str] = None
    # None on the FAQ path
    fallback_succeeded: Optional[bool] = None


def find_related_entries(entry: FaqEntry, entries: Sequence[FaqEntry], limit: int = 3) -> List[str]:
    """Ids of other entries in the same category, in input order.

    Entries without a category are grouped together.
    """
    if limit <= 0:
        return []
    related: List[str] = []
    for other in entries:
        if other.id == entry.id or other.category_id != entry.category_id:
            continue
        related.append(other.id)
        if len(related) >= limit:
            break
    return related


class ResponseRouter:
    def __init__(
        self,
        *,
        faq_store: FaqEntryStore,
        fallback: GenerativeFallback,
        threshold: Optional[float] = None,
        related_limit: Optional[int] = None,
    ):
        self._faq_store = faq_store
        self._fallback = fallback
        self.threshold = float(threshold if threshold is not None else settings.FAQ_CONFIDENCE_THRESHOLD)
        limit = int(related_limit if related_limit is not None else settings.RELATED_ITEMS_LIMIT)
        self.related_limit = max(0, min(limit, MAX_RELATED_ITEMS))

    def is_confident(self, match: Optional[MatchResult]) -> bool:
        return match is not None and match.confidence > self.threshold

    async def route(
        self,
        *,
        query: str,
        match: Optional[MatchResult],
        entries: Sequence[FaqEntry],
        intent_patterns: Sequence[IntentPattern],
        has_files: bool = False,
        file_types: Sequence[str] = (),
    ) -> RouteDecision:
        if match is not None and self.is_confident(match):
            return await self._serve_faq(match, entries)

        fallback = await self._fallback.answer(
            query=query,
            entries=entries,
            has_files=has_files,
            file_types=file_types,
        )
        return RouteDecision(
            response=fallback.answer,
            confidence=fallback.confidence,
            response_source=SOURCE_AI,
            matched_intent=IntentDetector.detect(query, intent_patterns),
            fallback_succeeded=fallback.succeeded,
        )

    async def _serve_faq(self, match: MatchResult, entries: Sequence[FaqEntry]) -> RouteDecision:
        entry = match.entry
        try:
            await self._faq_store.increment_view_count(entry.id)
        except Exception as exc:
            # View counts are advisory analytics.
            logger.warning(
                "view count increment failed",
                extra={"event": "faq_view_count_failed", "qa_item_id": entry.id, "error": str(exc)},
            )
        return RouteDecision(
            response=entry.answer,
            confidence=match.confidence,
            response_source=SOURCE_FAQ,
            matched_intent="",
            related_items=find_related_entries(entry, entries, self.related_limit),
            qa_item_id=entry.id,
        )
