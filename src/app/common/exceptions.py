"""アプリケーション共通の例外定義."""


class HeroNotFoundError(Exception):
    """指定IDのヒーローが存在しないことを表す例外.

    Attributes
    ----------
        hero_id: 見つからなかったヒーローのID

    """

    def __init__(self, hero_id: int | None) -> None:
        """HeroNotFoundErrorを初期化.

        Args:
        ----
            hero_id: 見つからなかったヒーローのID

        """
        super().__init__(f"Hero not found: id={hero_id}")
        self.hero_id = hero_id
