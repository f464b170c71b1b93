"""ログプレフィックス定数."""


class LogPrefix:
    """ロギング用プレフィックス定数."""

    BATCH_JOB = "[BATCH_JOB]"
    HERO_API = "[HERO_API]"
    HERO_STORE = "[HERO_STORE]"
