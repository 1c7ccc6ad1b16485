import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import payreport.db.models  # noqa: F401  registers all models
from payreport.db.session import Base
from payreport.lang.strings import StringManager
from payreport.session.sesskey import SessionKey


@pytest.fixture()
async def engine():
    eng = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest.fixture()
async def session(engine) -> AsyncSession:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as sess:
        yield sess


@pytest.fixture()
def strings() -> StringManager:
    return StringManager()


@pytest.fixture()
def session_key() -> SessionKey:
    return SessionKey("test-secret", "session-1")
