"""ヒーローのサービスモジュール."""

from collections.abc import Sequence
from typing import Annotated

from fastapi import Depends

from app.database.model.hero import Hero
from app.database.repository.hero_repository import (
    HeroRepository,
    get_hero_repository,
)
from app.hero.protocol import HeroStore


class HeroService:
    """ヒーローに関するビジネスロジックを提供するサービス.

    現状はストアへの委譲のみ。入力検証などを追加する場合はここに置く。

    Attributes
    ----------
        store: ヒーローストア

    """

    def __init__(self, store: HeroStore) -> None:
        """HeroServiceを初期化.

        Args:
        ----
            store: ヒーローストア

        """
        self.store = store

    async def get_hero(self, hero_id: int) -> Hero:
        """IDでヒーローを取得."""
        return await self.store.get_by_id(hero_id)

    async def get_heroes(self) -> Sequence[Hero]:
        """全ヒーローを取得."""
        return await self.store.get_all()

    async def add_hero(self, hero: Hero) -> Hero:
        """ヒーローを登録."""
        return await self.store.insert(hero)

    async def update_hero(self, hero: Hero) -> Hero:
        """ヒーローを更新."""
        return await self.store.update(hero)

    async def delete_hero(self, hero_id: int) -> None:
        """ヒーローを削除."""
        await self.store.delete(hero_id)

    async def search_heroes(self, name: str) -> Sequence[Hero]:
        """名前でヒーローを検索."""
        return await self.store.find_by_name(name)


async def get_hero_service(
    repo: Annotated[HeroRepository, Depends(get_hero_repository)],
) -> HeroService:
    """FastAPI DI用のHeroServiceファクトリ.

    Returns
    -------
        HeroService

    """
    return HeroService(store=repo)
