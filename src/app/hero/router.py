"""ヒーローAPIのルーター定義."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.common.log_prefix import LogPrefix
from app.database.model.hero import Hero
from app.hero.schema import (
    HERO_ID_MAX,
    HERO_ID_MIN,
    HeroCreate,
    HeroResponse,
    HeroUpdate,
)
from app.hero.service import HeroService, get_hero_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/heroes", tags=["heroes"])

HeroServiceDep = Annotated[HeroService, Depends(get_hero_service)]
HeroIdPath = Annotated[int, Path(ge=HERO_ID_MIN, le=HERO_ID_MAX)]

_BAD_REQUEST: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"description": "リクエストが不正"},
}
_NOT_FOUND: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"description": "指定IDのヒーローが存在しない"},
}
_INTERNAL_ERROR: dict[int | str, dict[str, Any]] = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "内部エラー"},
}


@router.get(
    "",
    response_model=list[HeroResponse],
    responses={**_INTERNAL_ERROR},
)
async def get_heroes(service: HeroServiceDep) -> list[HeroResponse]:
    """登録済みのヒーロー一覧を返す. 0件の場合は空リスト."""
    logger.info(f"{LogPrefix.HERO_API} list heroes")
    heroes = await service.get_heroes()
    return [HeroResponse.model_validate(h) for h in heroes]


# "/{hero_id}" より先に登録しないと "name" がIDとして解釈される
@router.get(
    "/name",
    response_model=list[HeroResponse],
    responses={**_BAD_REQUEST, **_INTERNAL_ERROR},
)
async def search_heroes(
    service: HeroServiceDep,
    name: Annotated[str, Query(description="完全一致で検索するヒーロー名")],
) -> list[HeroResponse]:
    """名前が完全一致するヒーローを返す. 0件の場合は空リスト."""
    logger.info(f"{LogPrefix.HERO_API} search heroes by name: {name}")
    heroes = await service.search_heroes(name)
    return [HeroResponse.model_validate(h) for h in heroes]


@router.get(
    "/{hero_id}",
    response_model=HeroResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_INTERNAL_ERROR},
)
async def get_hero(hero_id: HeroIdPath, service: HeroServiceDep) -> HeroResponse:
    """IDでヒーローを返す."""
    logger.info(f"{LogPrefix.HERO_API} get hero by id: {hero_id}")
    hero = await service.get_hero(hero_id)
    return HeroResponse.model_validate(hero)


@router.post(
    "",
    response_model=HeroResponse,
    responses={**_BAD_REQUEST, **_INTERNAL_ERROR},
)
async def add_hero(body: HeroCreate, service: HeroServiceDep) -> HeroResponse:
    """ヒーローを登録する. IDはサーバー側で採番する."""
    logger.info(f"{LogPrefix.HERO_API} add new hero")
    hero = await service.add_hero(Hero(name=body.name))
    return HeroResponse.model_validate(hero)


@router.put(
    "",
    response_model=HeroResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_INTERNAL_ERROR},
)
async def update_hero(body: HeroUpdate, service: HeroServiceDep) -> HeroResponse:
    """ヒーローを更新する."""
    logger.info(f"{LogPrefix.HERO_API} update hero id: {body.id}")
    hero = await service.update_hero(Hero(id=body.id, name=body.name))
    return HeroResponse.model_validate(hero)


@router.delete(
    "/{hero_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_INTERNAL_ERROR},
)
async def delete_hero(hero_id: HeroIdPath, service: HeroServiceDep) -> Response:
    """IDでヒーローを削除する."""
    logger.info(f"{LogPrefix.HERO_API} delete hero id: {hero_id}")
    await service.delete_hero(hero_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
