"""FastAPIアプリケーションのメインエントリーポイント."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.common.exception_handlers import register_exception_handlers
from app.database.database import create_tables
from app.hero.router import router as hero_router
from app.settings.settings import get_settings

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """起動時の初期化処理.

    auto_create_tables が有効な場合のみテーブルを作成する。
    """
    logger.info(f"Starting Hero API environment={settings.environment}")
    if settings.auto_create_tables:
        logger.info("Creating tables on startup")
        await create_tables()
    yield


app = FastAPI(title="Hero API", lifespan=lifespan)

register_exception_handlers(app)
app.include_router(hero_router)
