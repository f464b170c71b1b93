"""ヒーローAPIのスキーマ."""

from .hero import (
    HERO_ID_MAX,
    HERO_ID_MIN,
    HeroCreate,
    HeroId,
    HeroResponse,
    HeroUpdate,
)

__all__ = [
    "HERO_ID_MAX",
    "HERO_ID_MIN",
    "HeroCreate",
    "HeroId",
    "HeroResponse",
    "HeroUpdate",
]
