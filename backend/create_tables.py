import asyncio

from support_assistant.db.session import engine
from support_assistant.db.base import Base
# Import all models to ensure they are registered with Base metadata
from support_assistant.models import (  # noqa: F401
    FaqCategory, FaqItem, IntentPatternRecord,
    ChatSession, Message,
)

async def create_tables():
    print("Creating tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("Tables created successfully.")

if __name__ == "__main__":
    asyncio.run(create_tables())
