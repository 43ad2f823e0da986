from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from support_assistant.schemas.knowledge import FaqEntry, IntentPattern


class FaqEntryStore(Protocol):
    async def list_active(self) -> List[FaqEntry]:
        ...

    async def increment_view_count(self, entry_id: str) -> None:
        ...


class IntentPatternStore(Protocol):
    async def list_active(self) -> List[IntentPattern]:
        ...


class MessageStore(Protocol):
    async def insert_assistant_message(
        self,
        *,
        session_id: str,
        content: str,
        qa_item_id: Optional[str],
        metadata: Dict[str, Any],
    ) -> str:
        ...


class FallbackGenerator(Protocol):
    async def complete(self, prompt: str) -> str:
        ...
