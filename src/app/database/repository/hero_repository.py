"""Heroテーブルのリポジトリモジュール."""

import logging
from collections.abc import Sequence
from typing import Annotated

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.common.exceptions import HeroNotFoundError
from app.common.log_prefix import LogPrefix
from app.database.database import get_async_db_session
from app.database.model.hero import Hero

logger = logging.getLogger(__name__)


class HeroRepository:
    """Heroテーブルへのデータアクセスを提供するリポジトリ.

    Attributes
    ----------
        session: 非同期DBセッション

    """

    def __init__(self, session: AsyncSession) -> None:
        """HeroRepositoryを初期化.

        Args:
        ----
            session: 非同期DBセッション

        """
        self.session = session

    async def get_by_id(self, hero_id: int) -> Hero:
        """IDでヒーローを取得.

        Args:
        ----
            hero_id: ヒーローID

        Returns:
        -------
            Heroオブジェクト

        Raises:
        ------
            HeroNotFoundError: 該当IDが存在しない場合

        """
        hero = await self.session.get(Hero, hero_id)
        if hero is None:
            raise HeroNotFoundError(hero_id)
        return hero

    async def get_all(self) -> Sequence[Hero]:
        """全ヒーローを登録順で取得.

        Returns
        -------
            Heroオブジェクトのリスト

        """
        result = await self.session.exec(select(Hero).order_by(col(Hero.id)))
        return result.all()

    async def find_by_name(self, name: str) -> Sequence[Hero]:
        """名前が完全一致するヒーローを取得(大文字小文字を区別).

        Args:
        ----
            name: ヒーロー名

        Returns:
        -------
            一致したHeroオブジェクトのリスト(該当なしは空)

        """
        stmt = select(Hero).where(col(Hero.name) == name).order_by(col(Hero.id))
        result = await self.session.exec(stmt)
        return result.all()

    async def insert(self, hero: Hero) -> Hero:
        """ヒーローを新規登録.

        入力のidは無視し、DB側で採番する。

        Args:
        ----
            hero: 登録内容

        Returns:
        -------
            採番済みのHeroオブジェクト

        """
        record = Hero(name=hero.name)
        self.session.add(record)
        await self._commit("insert", record.id)
        await self.session.refresh(record)
        logger.debug(f"{LogPrefix.HERO_STORE} inserted id={record.id}")
        return record

    async def update(self, hero: Hero) -> Hero:
        """既存ヒーローを更新.

        Args:
        ----
            hero: 更新内容(idは既存レコードを指す必要がある)

        Returns:
        -------
            更新後のHeroオブジェクト

        Raises:
        ------
            HeroNotFoundError: 該当IDが存在しない場合

        """
        if hero.id is None:
            raise HeroNotFoundError(None)

        record = await self.get_by_id(hero.id)
        record.sqlmodel_update(hero.model_dump(exclude={"id"}))
        self.session.add(record)
        await self._commit("update", record.id)
        await self.session.refresh(record)
        return record

    async def delete(self, hero_id: int) -> None:
        """IDでヒーローを削除.

        Raises
        ------
            HeroNotFoundError: 該当IDが存在しない場合

        """
        record = await self.get_by_id(hero_id)
        await self.session.delete(record)
        await self._commit("delete", hero_id)

    async def _commit(self, operation: str, hero_id: int | None) -> None:
        """コミットし、失敗時はロールバックしてログ出力後に再送出."""
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                f"{LogPrefix.HERO_STORE} {operation} failed "
                "id=%s message=%s",
                hero_id,
                str(e),
            )
            raise


async def get_hero_repository(
    session: Annotated[AsyncSession, Depends(get_async_db_session)],
) -> HeroRepository:
    """FastAPI DI用のHeroRepositoryファクトリ.

    Returns
    -------
        HeroRepository

    """
    return HeroRepository(session)
