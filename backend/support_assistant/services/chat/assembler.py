from __future__ import annotations

from typing import Any, Dict, List

from support_assistant.core.logging import get_logger
from support_assistant.schemas.chat import AssistantResponse
from support_assistant.services.chat.router import RouteDecision
from support_assistant.services.contracts import MessageStore

logger = get_logger(__name__)


class ResponseAssembler:
    def __init__(self, message_store: MessageStore):
        self._message_store = message_store

    @staticmethod
    def build_metadata(*, query: str, decision: RouteDecision, suggestions: List[str]) -> Dict[str, Any]:
        return {
            "query": query,
            "suggested_questions": list(suggestions),
            "confidence_score": decision.confidence,
            "matched_intent": decision.matched_intent,
            "related_qa_items": list(decision.related_items),
            "response_source": decision.response_source,
        }

    async def assemble(
        self,
        *,
        session_id: str,
        query: str,
        decision: RouteDecision,
        suggestions: List[str],
    ) -> AssistantResponse:
        response = AssistantResponse(
            response=decision.response,
            confidence=decision.confidence,
            response_source=decision.response_source,
            matched_intent=decision.matched_intent,
            related_items=list(decision.related_items),
            suggested_questions=list(suggestions),
            qa_item_id=decision.qa_item_id,
        )

        try:
            response.message_id = await self._message_store.insert_assistant_message(
                session_id=session_id,
                content=decision.response,
                qa_item_id=decision.qa_item_id,
                metadata=self.build_metadata(query=query, decision=decision, suggestions=suggestions),
            )
        except Exception as exc:
            # The caller still gets the computed reply; storage may lag behind.
            logger.warning(
                "assistant message save failed; returning response without message id",
                extra={"event": "assistant_message_save_failed", "session_id": session_id, "error": str(exc)},
            )
        return response
