from __future__ import annotations

import time
import uuid
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from support_assistant.core.config import settings
from support_assistant.core.logging import get_logger
from support_assistant.schemas.chat import AssistantRequest, AssistantResponse
from support_assistant.services.chat.assembler import ResponseAssembler
from support_assistant.services.chat.fallback import GenerativeFallback
from support_assistant.services.chat.message_store import SqlMessageStore
from support_assistant.services.chat.router import ResponseRouter
from support_assistant.services.chat.suggestions import SuggestionGenerator
from support_assistant.services.contracts import (
    FaqEntryStore,
    FallbackGenerator,
    IntentPatternStore,
    MessageStore,
)
from support_assistant.services.knowledge.repository import SqlFaqEntryStore, SqlIntentPatternStore
from support_assistant.services.knowledge.snapshot import KnowledgeBaseLoader
from support_assistant.services.llm_service import llm_service
from support_assistant.services.matching.lexicon import ScoringWeights
from support_assistant.services.matching.matcher import FaqMatcher
from support_assistant.utils.debug_log import debug_log as _debug_log

logger = get_logger(__name__)


class AssistantService:
    """One assistant turn: load knowledge base -> match -> route -> suggest -> persist."""

    def __init__(
        self,
        *,
        loader: KnowledgeBaseLoader,
        matcher: FaqMatcher,
        router: ResponseRouter,
        suggestions: SuggestionGenerator,
        assembler: ResponseAssembler,
    ):
        self._loader = loader
        self._matcher = matcher
        self._router = router
        self._suggestions = suggestions
        self._assembler = assembler

    @classmethod
    def build(
        cls,
        *,
        faq_store: FaqEntryStore,
        intent_store: IntentPatternStore,
        message_store: MessageStore,
        generator: FallbackGenerator,
        threshold: Optional[float] = None,
        weights: Optional[ScoringWeights] = None,
    ) -> "AssistantService":
        return cls(
            loader=KnowledgeBaseLoader(faq_store, intent_store),
            matcher=FaqMatcher(weights or ScoringWeights.from_settings()),
            router=ResponseRouter(
                faq_store=faq_store,
                fallback=GenerativeFallback(generator),
                threshold=threshold,
            ),
            suggestions=SuggestionGenerator(),
            assembler=ResponseAssembler(message_store),
        )

    @classmethod
    def from_session_factory(
        cls,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        generator: Optional[FallbackGenerator] = None,
    ) -> "AssistantService":
        return cls.build(
            faq_store=SqlFaqEntryStore(session_factory),
            intent_store=SqlIntentPatternStore(session_factory),
            message_store=SqlMessageStore(session_factory),
            generator=generator or llm_service,
        )

    async def answer(self, req: AssistantRequest) -> AssistantResponse:
        run_id = uuid.uuid4().hex
        started = time.perf_counter()
        query = req.query or ""

        snapshot = await self._loader.load()
        match = self._matcher.best_match(query, snapshot.entries)

        logger.info(
            f"Query: {query!r} best match: "
            + (f"{match.confidence:.3f} - {match.entry.question}" if match else "None")
        )

        decision = await self._router.route(
            query=query,
            match=match,
            entries=snapshot.entries,
            intent_patterns=snapshot.intent_patterns,
            has_files=req.has_files,
            file_types=req.file_types,
        )
        suggestions = self._suggestions.generate(query, snapshot.entries)

        response = await self._assembler.assemble(
            session_id=req.session_id,
            query=query,
            decision=decision,
            suggestions=suggestions,
        )

        if settings.MATCH_DEBUG_LOG_ENABLED:
            _debug_log(
                {
                    "runId": run_id,
                    "sessionId": req.session_id,
                    "query": query,
                    "threshold": self._router.threshold,
                    "candidates": [
                        {"id": m.entry.id, "question": m.entry.question, "score": round(m.confidence, 4)}
                        for m in self._matcher.rank(query, snapshot.entries, limit=3)
                    ],
                    "route": decision.response_source,
                    "confidence": decision.confidence,
                    "matched_intent": decision.matched_intent,
                    "fallback_succeeded": decision.fallback_succeeded,
                    "elapsed_ms": int((time.perf_counter() - started) * 1000),
                    "timestamp": int(time.time() * 1000),
                }
            )
        return response
