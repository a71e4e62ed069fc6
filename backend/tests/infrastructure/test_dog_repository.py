"""Dog Repository — SQLAlchemy store behavior against in-memory SQLite.

Invariants:
    - list_all orders by ascending id
    - update raises DogNotFoundError for unknown or None ids
    - update raises DogIntegrityError for wrong-typed or null fields, storing nothing
    - delete returns the prior record once, then None
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from app.core.domain_types import DogId
from app.core.errors import DogIntegrityError, DogNotFoundError
from app.db.base import Base
from app.infrastructure.dog_repository import SqlDogRepository


@pytest.fixture
async def repository():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield SqlDogRepository(session)
    await engine.dispose()


def _fields(name: str = "Rex", age: float = 3) -> dict:
    return {"name": name, "breed": "Lab", "age": age, "description": "friendly"}


async def test_create_assigns_increasing_ids(repository):
    first = await repository.create(_fields("Rex"))
    second = await repository.create(_fields("Bella"))

    assert first.id is not None
    assert second.id > first.id


async def test_create_ignores_keys_outside_allow_list(repository):
    dog = await repository.create({**_fields(), "color": "brown"})

    assert not hasattr(dog, "color")
    assert dog.name == "Rex"


async def test_list_all_orders_by_id(repository):
    created = [await repository.create(_fields(n)) for n in ("A", "B", "C")]

    dogs = await repository.list_all()

    assert [d.id for d in dogs] == sorted(d.id for d in created)


async def test_get_by_id_returns_none_for_missing(repository):
    assert await repository.get_by_id(DogId(12345)) is None


async def test_update_applies_partial_changes(repository):
    dog = await repository.create(_fields())

    updated = await repository.update(DogId(dog.id), {"age": 4})

    assert updated.age == 4
    assert updated.name == "Rex"


async def test_update_unknown_id_raises_not_found(repository):
    with pytest.raises(DogNotFoundError) as exc_info:
        await repository.update(DogId(999), {"age": 4})
    assert exc_info.value.http_status == 404


async def test_update_without_id_raises_not_found(repository):
    with pytest.raises(DogNotFoundError):
        await repository.update(None, {"age": 4})


async def test_update_refuses_null_field(repository):
    dog = await repository.create(_fields())

    with pytest.raises(DogIntegrityError) as exc_info:
        await repository.update(DogId(dog.id), {"name": None})

    assert exc_info.value.problems == ["name should be a string"]
    assert (await repository.get_by_id(DogId(dog.id))).name == "Rex"


async def test_delete_returns_prior_record_once(repository):
    dog = await repository.create(_fields())

    deleted = await repository.delete(DogId(dog.id))
    assert deleted is not None
    assert deleted.name == "Rex"
    assert deleted.id == dog.id

    assert await repository.delete(DogId(dog.id)) is None
    assert await repository.get_by_id(DogId(dog.id)) is None
