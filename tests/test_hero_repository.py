import pytest
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.common.exceptions import HeroNotFoundError
from app.database.model.hero import Hero
from app.database.repository.hero_repository import HeroRepository


@pytest.fixture
def repo(session: AsyncSession) -> HeroRepository:
    return HeroRepository(session)


async def test_insert_then_get_by_id_round_trips(repo: HeroRepository):
    created = await repo.insert(Hero(name="Superman"))

    assert created.id is not None
    fetched = await repo.get_by_id(created.id)
    assert (fetched.id, fetched.name) == (created.id, "Superman")


async def test_insert_ignores_client_supplied_id(repo: HeroRepository):
    first = await repo.insert(Hero(name="Batman"))
    second = await repo.insert(Hero(id=500, name="Robin"))

    assert second.id != 500
    assert second.id > first.id


async def test_insert_allows_null_name(repo: HeroRepository):
    created = await repo.insert(Hero())

    assert created.id is not None
    assert created.name is None


async def test_get_by_id_unknown_raises(repo: HeroRepository):
    with pytest.raises(HeroNotFoundError) as exc_info:
        await repo.get_by_id(42)

    assert exc_info.value.hero_id == 42


async def test_get_all_returns_insertion_order(repo: HeroRepository):
    assert await repo.get_all() == []

    names = ["Superman", "Batman", "Wonder Woman"]
    for name in names:
        await repo.insert(Hero(name=name))

    heroes = await repo.get_all()
    assert [h.name for h in heroes] == names


async def test_find_by_name_is_exact_and_case_sensitive(repo: HeroRepository):
    await repo.insert(Hero(name="Flash"))
    await repo.insert(Hero(name="flash"))
    await repo.insert(Hero(name="Flash"))
    await repo.insert(Hero(name="Flashpoint"))

    found = await repo.find_by_name("Flash")

    assert [h.name for h in found] == ["Flash", "Flash"]
    assert await repo.find_by_name("Aquaman") == []


async def test_update_replaces_name(repo: HeroRepository):
    created = await repo.insert(Hero(name="Superman"))

    updated = await repo.update(Hero(id=created.id, name="Clark Kent"))

    assert (updated.id, updated.name) == (created.id, "Clark Kent")
    assert (await repo.get_by_id(created.id)).name == "Clark Kent"


async def test_update_unknown_id_raises_and_inserts_nothing(
    repo: HeroRepository,
    session: AsyncSession,
):
    with pytest.raises(HeroNotFoundError):
        await repo.update(Hero(id=99, name="Ghost"))

    result = await session.exec(select(Hero))
    assert result.all() == []


async def test_update_without_id_raises(repo: HeroRepository):
    with pytest.raises(HeroNotFoundError):
        await repo.update(Hero(name="Nobody"))


async def test_delete_then_get_raises(repo: HeroRepository):
    hero_id = (await repo.insert(Hero(name="Superman"))).id

    await repo.delete(hero_id)

    with pytest.raises(HeroNotFoundError):
        await repo.get_by_id(hero_id)


async def test_delete_unknown_id_raises(repo: HeroRepository):
    with pytest.raises(HeroNotFoundError):
        await repo.delete(7)


async def test_count_tracks_inserts_minus_deletes(repo: HeroRepository):
    ids = [(await repo.insert(Hero(name=f"hero-{i}"))).id for i in range(5)]
    await repo.delete(ids[1])
    await repo.delete(ids[3])

    assert len(await repo.get_all()) == 3
