import asyncio

import pytest

from conftest import FakeFaqStore, FakeIntentStore, make_entry
from support_assistant.core.exceptions import KnowledgeBaseUnavailableError
from support_assistant.services.knowledge.snapshot import KnowledgeBaseLoader


@pytest.mark.asyncio
async def test_load_fetches_entries_and_patterns_concurrently(intent_patterns) -> None:
    both_started = asyncio.Event()
    started = []

    class RendezvousFaqStore(FakeFaqStore):
        async def list_active(self):
            started.append("faq")
            if len(started) == 2:
                both_started.set()
            await both_started.wait()
            return await super().list_active()

    class RendezvousIntentStore(FakeIntentStore):
        async def list_active(self):
            started.append("intent")
            if len(started) == 2:
                both_started.set()
            await both_started.wait()
            return await super().list_active()

    loader = KnowledgeBaseLoader(
        RendezvousFaqStore([make_entry("faq-1", "What is the warranty?")]),
        RendezvousIntentStore(intent_patterns),
    )

    # Sequential fetching would never release the first read.
    snapshot = await asyncio.wait_for(loader.load(), timeout=1.0)

    assert [e.id for e in snapshot.entries] == ["faq-1"]
    assert len(snapshot.intent_patterns) == 2


@pytest.mark.asyncio
async def test_load_drops_inactive_entries() -> None:
    class LeakyStore(FakeFaqStore):
        async def list_active(self):
            return list(self.entries)

    loader = KnowledgeBaseLoader(
        LeakyStore([make_entry("on", "On?"), make_entry("off", "Off?", is_active=False)]),
        FakeIntentStore(),
    )
    snapshot = await loader.load()
    assert [e.id for e in snapshot.entries] == ["on"]


@pytest.mark.regression
@pytest.mark.asyncio
async def test_store_failure_is_fatal() -> None:
    loader = KnowledgeBaseLoader(FakeFaqStore(fail_with=ConnectionError("db down")), FakeIntentStore())

    with pytest.raises(KnowledgeBaseUnavailableError) as exc_info:
        await loader.load()
    assert exc_info.value.source == "qa_items"


@pytest.mark.asyncio
async def test_intent_store_failure_is_fatal() -> None:
    loader = KnowledgeBaseLoader(FakeFaqStore([]), FakeIntentStore(fail_with=TimeoutError("slow")))

    with pytest.raises(KnowledgeBaseUnavailableError) as exc_info:
        await loader.load()
    assert exc_info.value.source == "intent_patterns"


@pytest.mark.asyncio
async def test_cancellation_is_not_reported_as_outage(intent_patterns) -> None:
    class CancelledStore(FakeFaqStore):
        async def list_active(self):
            raise asyncio.CancelledError()

    loader = KnowledgeBaseLoader(CancelledStore(), FakeIntentStore(intent_patterns))

    with pytest.raises(asyncio.CancelledError):
        await loader.load()
