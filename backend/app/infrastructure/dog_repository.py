"""Dog Repository — SQLAlchemy implementation of the DogRepository protocol.

Invariants:
    - Each write commits before returning; reads never commit
    - list_all orders by ascending id
    - update refuses to store a wrong-typed or null field (DogIntegrityError):
      every stored dog keeps all four fields populated
    - update on an unknown or unstorable id raises DogNotFoundError; get/delete
      return None instead and let the route decide the status

Design Decisions:
    - Repository takes an AsyncSession per request (from get_db), never a
      global client
    - Field type checks reuse core/dog_validation so the store and the routes
      agree on what a number and a string are
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dog_validation import field_type_errors, present_fields, select_dog_fields
from app.core.domain_types import DogId
from app.core.errors import DogIntegrityError, DogNotFoundError, ErrorContext
from app.models.dog import Dog


class SqlDogRepository:
    """Dog persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, fields: dict[str, Any]) -> Dog:
        dog = Dog(**select_dog_fields(fields))
        self._db.add(dog)
        await self._db.commit()
        await self._db.refresh(dog)
        return dog

    async def list_all(self) -> list[Dog]:
        result = await self._db.execute(select(Dog).order_by(Dog.id.asc()))
        return list(result.scalars().all())

    async def get_by_id(self, dog_id: DogId) -> Dog | None:
        return await self._db.get(Dog, dog_id)

    async def update(
        self, dog_id: DogId | None, changes: dict[str, Any],
    ) -> Dog:
        """Apply the allow-listed fields in changes to an existing dog."""
        context = ErrorContext(dog_id=dog_id, operation="update")
        dog = await self._db.get(Dog, dog_id) if dog_id is not None else None
        if dog is None:
            raise DogNotFoundError(dog_id, context)

        changes = select_dog_fields(changes)
        problems = field_type_errors(changes, present_fields(changes))
        if problems:
            raise DogIntegrityError(problems, context)

        for key, value in changes.items():
            setattr(dog, key, value)
        await self._db.commit()
        await self._db.refresh(dog)
        return dog

    async def delete(self, dog_id: DogId) -> Dog | None:
        """Remove a dog, returning its last stored state (None if absent)."""
        dog = await self._db.get(Dog, dog_id)
        if dog is None:
            return None
        await self._db.delete(dog)
        await self._db.commit()
        return dog
