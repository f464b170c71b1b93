import asyncio
import os
from collections.abc import AsyncGenerator, Iterator
from pathlib import Path

# Settings はimport時に読み込まれるため、アプリのimportより先に設定する
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("POSTGRES_HOST", "localhost")
os.environ.setdefault("POSTGRES_PORT", "5432")
os.environ.setdefault("POSTGRES_USER", "hero")
os.environ.setdefault("POSTGRES_PASSWORD", "hero")
os.environ.setdefault("POSTGRES_DATABASE", "heroes")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from app.database.database import create_tables, get_async_db_session  # noqa: E402
from app.main import app  # noqa: E402


def _sqlite_engine(path: Path) -> AsyncEngine:
    return create_async_engine(f"sqlite+aiosqlite:///{path}", poolclass=NullPool)


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    engine = _sqlite_engine(tmp_path / "heroes.db")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    async with AsyncSession(engine) as session:
        yield session


@pytest.fixture
def client(tmp_path: Path) -> Iterator[TestClient]:
    engine = _sqlite_engine(tmp_path / "api.db")
    asyncio.run(create_tables(engine))

    async def override_session() -> AsyncGenerator[AsyncSession]:
        async with AsyncSession(engine) as session:
            yield session

    app.dependency_overrides[get_async_db_session] = override_session
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
