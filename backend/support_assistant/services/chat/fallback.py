from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional, Sequence

from support_assistant.core.config import settings
from support_assistant.core.logging import get_logger
from support_assistant.prompts.system_prompts import fallback_answer_prompt
from support_assistant.schemas.knowledge import FaqEntry
from support_assistant.services.contracts import FallbackGenerator

logger = get_logger(__name__)

TECHNICAL_DIFFICULTIES_REPLY = (
    "I apologize, but I am experiencing technical difficulties. Please try again later."
)


@dataclass(frozen=True)
class FallbackAnswer:
    answer: str
    confidence: float
    succeeded: bool


class GenerativeFallback:
    """Wraps the generative collaborator; any failure becomes a low-confidence apology."""

    def __init__(
        self,
        generator: FallbackGenerator,
        *,
        context_limit: Optional[int] = None,
        timeout_seconds: Optional[float] = None,
        success_confidence: Optional[float] = None,
        failure_confidence: Optional[float] = None,
    ):
        self._generator = generator
        self.context_limit = int(context_limit if context_limit is not None else settings.FALLBACK_CONTEXT_LIMIT)
        self.timeout_seconds = float(timeout_seconds if timeout_seconds is not None else settings.FALLBACK_TIMEOUT_SECONDS)
        self.success_confidence = float(
            success_confidence if success_confidence is not None else settings.FALLBACK_SUCCESS_CONFIDENCE
        )
        self.failure_confidence = float(
            failure_confidence if failure_confidence is not None else settings.FALLBACK_FAILURE_CONFIDENCE
        )

    def build_prompt(
        self,
        *,
        query: str,
        entries: Sequence[FaqEntry],
        has_files: bool,
        file_types: Sequence[str],
    ) -> str:
        return fallback_answer_prompt(
            query=query,
            entries=entries,
            has_files=has_files,
            file_types=file_types,
            context_limit=self.context_limit,
        )

    async def answer(
        self,
        *,
        query: str,
        entries: Sequence[FaqEntry],
        has_files: bool = False,
        file_types: Sequence[str] = (),
    ) -> FallbackAnswer:
        prompt = self.build_prompt(query=query, entries=entries, has_files=has_files, file_types=file_types)
        try:
            text = await asyncio.wait_for(self._generator.complete(prompt), timeout=self.timeout_seconds)
        except Exception as exc:
            logger.warning(
                "generative fallback failed; returning apology",
                extra={"event": "fallback_failed", "error_type": type(exc).__name__, "error": str(exc)},
            )
            return FallbackAnswer(TECHNICAL_DIFFICULTIES_REPLY, self.failure_confidence, False)

        if not isinstance(text, str) or not text.strip():
            logger.warning("generative fallback returned an empty payload", extra={"event": "fallback_empty"})
            return FallbackAnswer(TECHNICAL_DIFFICULTIES_REPLY, self.failure_confidence, False)
        return FallbackAnswer(text.strip(), self.success_confidence, True)
