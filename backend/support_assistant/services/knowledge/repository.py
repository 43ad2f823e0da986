from __future__ import annotations

import uuid
from typing import List

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from support_assistant.core.logging import get_logger
from support_assistant.models.faq import FaqCategory, FaqItem, IntentPatternRecord
from support_assistant.schemas.knowledge import FaqEntry, IntentPattern

logger = get_logger(__name__)


def _clean_keywords(raw: List[str] | None) -> List[str]:
    seen = set()
    out: List[str] = []
    for kw in raw or []:
        k = (kw or "").strip().lower()
        if not k or k in seen:
            continue
        seen.add(k)
        out.append(k)
    return out


def to_faq_entry(item: FaqItem, category_name: str | None = None) -> FaqEntry:
    return FaqEntry(
        id=str(item.id),
        question=item.question or "",
        answer=item.answer or "",
        keywords=_clean_keywords(item.keywords),
        category_id=str(item.category_id) if item.category_id else None,
        category_name=category_name,
        view_count=int(item.view_count or 0),
        is_active=bool(item.is_active),
    )


class SqlFaqEntryStore:
    """FAQ store over qa_items. Each call uses its own session so reads can run concurrently."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def list_active(self) -> List[FaqEntry]:
        stmt = (
            select(FaqItem, FaqCategory.name)
            .outerjoin(FaqCategory, FaqItem.category_id == FaqCategory.id)
            .where(FaqItem.is_active.is_(True))
            .order_by(FaqItem.created_at, FaqItem.id)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [to_faq_entry(item, category_name) for item, category_name in result.all()]

    async def increment_view_count(self, entry_id: str) -> None:
        stmt = (
            update(FaqItem)
            .where(FaqItem.id == uuid.UUID(str(entry_id)))
            .values(view_count=FaqItem.view_count + 1)
        )
        async with self._session_factory() as session:
            await session.execute(stmt)
            await session.commit()


class SqlIntentPatternStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def list_active(self) -> List[IntentPattern]:
        stmt = (
            select(IntentPatternRecord)
            .where(IntentPatternRecord.is_active.is_(True))
            .order_by(IntentPatternRecord.created_at, IntentPatternRecord.id)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [
                IntentPattern(
                    pattern=row.pattern,
                    intent=row.intent,
                    confidence_threshold=float(row.confidence_threshold or 0.0),
                )
                for row in result.scalars().all()
            ]
