"""ヒーロー永続化のプロトコル定義."""

from collections.abc import Sequence
from typing import Protocol

from app.database.model.hero import Hero


class HeroStore(Protocol):
    """ヒーロー永続化のインターフェース.

    id を参照する操作で該当レコードがない場合は HeroNotFoundError を送出する。
    """

    async def get_by_id(self, hero_id: int) -> Hero:
        """IDでヒーローを取得."""
        ...

    async def get_all(self) -> Sequence[Hero]:
        """全ヒーローを取得."""
        ...

    async def find_by_name(self, name: str) -> Sequence[Hero]:
        """名前が完全一致するヒーローを取得."""
        ...

    async def insert(self, hero: Hero) -> Hero:
        """ヒーローを新規登録し、採番済みのレコードを返す."""
        ...

    async def update(self, hero: Hero) -> Hero:
        """既存ヒーローを更新."""
        ...

    async def delete(self, hero_id: int) -> None:
        """IDでヒーローを削除."""
        ...
