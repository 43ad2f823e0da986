import asyncio
from typing import Any, Dict, List, Optional

import pytest

from support_assistant.schemas.knowledge import FaqEntry, IntentPattern


class FakeFaqStore:
    """In-memory qa_items table."""

    def __init__(self, entries: Optional[List[FaqEntry]] = None, fail_with: Optional[Exception] = None):
        self.entries = list(entries or [])
        self.view_counts: Dict[str, int] = {e.id: e.view_count for e in self.entries}
        self.fail_with = fail_with
        self.increment_calls: List[str] = []

    async def list_active(self) -> List[FaqEntry]:
        await asyncio.sleep(0)
        if self.fail_with is not None:
            raise self.fail_with
        return [
            e.model_copy(update={"view_count": self.view_counts.get(e.id, 0)})
            for e in self.entries
            if e.is_active
        ]

    async def increment_view_count(self, entry_id: str) -> None:
        self.increment_calls.append(entry_id)
        self.view_counts[entry_id] = self.view_counts.get(entry_id, 0) + 1


class FakeIntentStore:
    def __init__(self, patterns: Optional[List[IntentPattern]] = None, fail_with: Optional[Exception] = None):
        self.patterns = list(patterns or [])
        self.fail_with = fail_with

    async def list_active(self) -> List[IntentPattern]:
        await asyncio.sleep(0)
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.patterns)


class FakeMessageStore:
    def __init__(self, fail_with: Optional[Exception] = None):
        self.fail_with = fail_with
        self.saved: List[Dict[str, Any]] = []

    async def insert_assistant_message(self, *, session_id, content, qa_item_id, metadata) -> str:
        if self.fail_with is not None:
            raise self.fail_with
        self.saved.append(
            {
                "session_id": session_id,
                "content": content,
                "qa_item_id": qa_item_id,
                "metadata": metadata,
            }
        )
        return f"msg-{len(self.saved)}"


class FakeGenerator:
    def __init__(self, reply: str = "Our scooters ship within 3 business days.", fail_with: Optional[Exception] = None, delay: float = 0.0):
        self.reply = reply
        self.fail_with = fail_with
        self.delay = delay
        self.prompts: List[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_with is not None:
            raise self.fail_with
        return self.reply


def make_entry(
    entry_id: str,
    question: str,
    answer: str = "",
    keywords: Optional[List[str]] = None,
    category_id: Optional[str] = None,
    view_count: int = 0,
    is_active: bool = True,
) -> FaqEntry:
    return FaqEntry(
        id=entry_id,
        question=question,
        answer=answer or f"Answer for: {question}",
        keywords=keywords or [],
        category_id=category_id,
        view_count=view_count,
        is_active=is_active,
    )


@pytest.fixture
def scooter_faq() -> List[FaqEntry]:
    return [
        make_entry("faq-return", "What is the return policy?", "You can return any scooter within 30 days.", ["return", "refund"], "cat-policy"),
        make_entry("faq-warranty", "How long is the warranty?", "Every scooter has a 2 year warranty.", ["warranty", "guarantee"], "cat-policy"),
        make_entry("faq-speed", "What is the top speed of the scooter?", "Our scooters reach 25 km/h.", ["speed"], "cat-specs"),
        make_entry("faq-range", "How far can I ride on one charge?", "Up to 40 km per charge.", ["range", "battery"], "cat-specs"),
        make_entry("faq-payment", "Which payment methods do you accept?", "Cards and bank transfer.", ["payment"], "cat-policy"),
        make_entry("faq-models", "What scooter models are available?", "City, Trail and Cargo.", ["models"], "cat-products"),
    ]


@pytest.fixture
def intent_patterns() -> List[IntentPattern]:
    return [
        IntentPattern(pattern=r"\b(track|tracking|where is my order)\b", intent="order_tracking", confidence_threshold=0.7),
        IntentPattern(pattern=r"\b(broken|repair|fix)\b", intent="service_request", confidence_threshold=0.6),
    ]
