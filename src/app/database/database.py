"""データベース接続とセッション管理を提供するモジュール."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.settings.settings import get_settings

settings = get_settings()

async_engine = create_async_engine(
    url=settings.async_database_url,
    echo=settings.sql_log,
)


async def get_async_db_session() -> AsyncGenerator[AsyncSession]:
    """非同期データベースセッションを生成する.

    FastAPIの依存性注入で使用されるジェネレーター関数。
    セッションのライフサイクルを管理し、リクエスト終了時に自動的にクローズする。

    Yields
    ------
        AsyncSession: 非同期データベースセッション

    """
    async with AsyncSession(async_engine) as session:
        yield session


async def create_tables(
    engine: AsyncEngine = async_engine,
    *,
    drop_first: bool = False,
) -> None:
    """登録済みモデルのテーブルを作成する.

    Args:
    ----
        engine: 対象の非同期エンジン
        drop_first: Trueの場合、作成前に既存テーブルを削除する

    """
    # モデル定義をメタデータへ登録するためのimport
    import app.database.model  # noqa: F401

    async with engine.begin() as conn:
        if drop_first:
            await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
