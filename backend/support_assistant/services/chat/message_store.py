from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from support_assistant.models.chat import Message, MessageType


class SqlMessageStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def insert_assistant_message(
        self,
        *,
        session_id: str,
        content: str,
        qa_item_id: Optional[str],
        metadata: Dict[str, Any],
    ) -> str:
        msg = Message(
            session_id=uuid.UUID(str(session_id)),
            message_type=MessageType.ASSISTANT,
            content=content,
            qa_item_id=uuid.UUID(str(qa_item_id)) if qa_item_id else None,
            message_metadata=metadata,
        )
        async with self._session_factory() as session:
            try:
                session.add(msg)
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            return str(msg.id)
