"""アプリケーション設定を管理するモジュール."""

from functools import lru_cache

from pydantic import computed_field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """アプリケーション全体の設定を管理するクラス.

    環境変数から設定値を読み込み、データベース接続情報などを提供する。

    Attributes
    ----------
        environment: 実行環境(development, production等)
        postgres_host: PostgreSQLホスト名
        postgres_port: PostgreSQLポート番号
        postgres_user: PostgreSQLユーザー名
        postgres_password: PostgreSQLパスワード
        postgres_database: PostgreSQLデータベース名
        database_url: 接続URLの上書き(例: sqlite+aiosqlite:///./heroes.db)
        sql_log: SQLログの出力有無(デフォルト: False)
        log_level: ログレベル(デフォルト: INFO)
        auto_create_tables: 起動時にテーブルを作成するか(デフォルト: False)

    """

    environment: str = "development"

    # database_url 指定時は未使用
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_database: str = "heroes"

    database_url: str | None = None

    sql_log: bool = False
    log_level: str = "INFO"
    auto_create_tables: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def postgres_driver_url(self) -> str:
        """PostgreSQLの非同期接続URLを生成する.

        Returns
        -------
            str: asyncpg用のPostgreSQL接続URL

        """
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_database}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def async_database_url(self) -> str:
        """実際に接続に使う非同期URLを返す.

        database_url が設定されていればそれを優先し、
        未設定ならPostgreSQLの接続URLを使う。

        Returns
        -------
            str: SQLAlchemy非同期エンジン用の接続URL

        """
        return self.database_url or self.postgres_driver_url


@lru_cache
def get_settings() -> Settings:
    """アプリケーション設定のシングルトンインスタンスを取得する.

    LRUキャッシュにより同一インスタンスを再利用し、
    環境変数の読み込みコストを削減する。

    Returns
    -------
        Settings: アプリケーション設定オブジェクト

    """
    return Settings()
