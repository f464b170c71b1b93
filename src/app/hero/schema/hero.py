"""ヒーローのリクエスト/レスポンススキーマ."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# heroes.id (INTEGER) の値域
HERO_ID_MIN = -2_147_483_648
HERO_ID_MAX = 2_147_483_647

HeroId = Annotated[int, Field(ge=HERO_ID_MIN, le=HERO_ID_MAX)]


class HeroCreate(BaseModel):
    """ヒーロー登録リクエスト. idは受け付けるが採番には使わない."""

    id: int | None = None
    name: str | None = None


class HeroUpdate(BaseModel):
    """ヒーロー更新リクエスト."""

    id: HeroId
    name: str | None = None


class HeroResponse(BaseModel):
    """ヒーローレスポンススキーマ."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None
