from __future__ import annotations

import re
from typing import Iterable

from support_assistant.core.logging import get_logger
from support_assistant.schemas.knowledge import IntentPattern

logger = get_logger(__name__)

DEFAULT_INTENT = "general_inquiry"


class IntentDetector:
    @staticmethod
    def detect(query: str, patterns: Iterable[IntentPattern]) -> str:
        """Label of the first pattern matching the query (case-insensitive), else general_inquiry."""
        text = query or ""
        for pattern in patterns:
            try:
                if re.search(pattern.pattern, text, re.IGNORECASE):
                    return pattern.intent
            except re.error as exc:
                logger.warning(
                    "skipping invalid intent pattern",
                    extra={"event": "intent_pattern_invalid", "intent": pattern.intent, "error": str(exc)},
                )
        return DEFAULT_INTENT
