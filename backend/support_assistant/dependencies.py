from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from support_assistant.db.session import AsyncSessionLocal
from support_assistant.services.chat.service import AssistantService


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory; stores open one session per call so reads can run concurrently."""
    return AsyncSessionLocal


def get_assistant_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AssistantService:
    return AssistantService.from_session_factory(session_factory)
