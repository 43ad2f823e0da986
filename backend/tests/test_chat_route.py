import pytest

pytest.importorskip("httpx")

from fastapi.testclient import TestClient

from conftest import FakeFaqStore, FakeGenerator, FakeIntentStore, FakeMessageStore
from support_assistant.dependencies import get_assistant_service
from support_assistant.main import app
from support_assistant.services.chat.service import AssistantService


@pytest.fixture
def client_factory():
    def _make(service: AssistantService) -> TestClient:
        app.dependency_overrides[get_assistant_service] = lambda: service
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


def _service(faq_store, message_store=None) -> AssistantService:
    return AssistantService.build(
        faq_store=faq_store,
        intent_store=FakeIntentStore(),
        message_store=message_store or FakeMessageStore(),
        generator=FakeGenerator(),
        threshold=0.4,
    )


def test_health() -> None:
    r = TestClient(app).get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


@pytest.mark.regression
def test_assistant_route_uses_camel_case_contract(client_factory, scooter_faq) -> None:
    client = client_factory(_service(FakeFaqStore(scooter_faq)))

    r = client.post(
        "/api/v1/chat/assistant",
        json={"query": "how fast can it go", "sessionId": "session-1", "userId": "user-1"},
    )

    assert r.status_code == 200
    data = r.json()
    assert set(data) == {"response", "confidence", "suggestedQuestions", "relatedItems", "messageId"}
    assert data["response"] == "Our scooters reach 25 km/h."
    assert data["messageId"] == "msg-1"
    assert len(data["suggestedQuestions"]) <= 3


def test_assistant_route_requires_session_id(client_factory, scooter_faq) -> None:
    client = client_factory(_service(FakeFaqStore(scooter_faq)))

    r = client.post("/api/v1/chat/assistant", json={"query": "hello"})

    assert r.status_code == 422


def test_assistant_route_requires_query(client_factory, scooter_faq) -> None:
    client = client_factory(_service(FakeFaqStore(scooter_faq)))

    r = client.post("/api/v1/chat/assistant", json={"sessionId": "session-1"})

    assert r.status_code == 422


def test_assistant_route_reports_knowledge_base_outage(client_factory) -> None:
    client = client_factory(_service(FakeFaqStore(fail_with=ConnectionError("db down"))))

    r = client.post("/api/v1/chat/assistant", json={"query": "hello", "sessionId": "session-1"})

    assert r.status_code == 503
    assert "detail" in r.json()


def test_assistant_route_hides_unexpected_errors(client_factory) -> None:
    class ExplodingService:
        async def answer(self, request):
            raise ValueError("secret internals")

    client = client_factory(ExplodingService())

    r = client.post("/api/v1/chat/assistant", json={"query": "hello", "sessionId": "session-1"})

    assert r.status_code == 500
    assert r.json() == {"detail": "Error processing chat request"}
