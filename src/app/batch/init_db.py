"""テーブル作成バッチジョブ.

登録済みモデル(app.database.model)のテーブルを
設定されたデータベース上に作成する。
"""

import asyncio
import logging
from typing import Annotated

import typer

from app.common.log_prefix import LogPrefix
from app.database.database import async_engine, create_tables
from app.settings.settings import get_settings

app = typer.Typer()

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@app.command()
def main(
    drop: Annotated[
        bool,
        typer.Option(help="作成前に既存テーブルを削除する"),
    ] = False,
) -> None:
    """テーブルを作成する.

    Args:
    ----
        drop: 作成前に既存テーブルを削除するか

    """
    asyncio.run(init_db(drop=drop))


async def init_db(drop: bool) -> None:
    """テーブルを非同期で作成.

    Args:
    ----
        drop: 作成前に既存テーブルを削除するか

    """
    logger.info(f"{LogPrefix.BATCH_JOB} Starting with drop={drop}")

    try:
        await create_tables(async_engine, drop_first=drop)
    finally:
        await async_engine.dispose()

    logger.info(f"{LogPrefix.BATCH_JOB} Completed")


if __name__ == "__main__":
    app()
