"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection (FastAPI Depends)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - DogLike instead of the ORM class: routes and tests can pass any object
      carrying the five attributes
"""

from typing import Any, Protocol

from app.core.domain_types import DogId


class DogLike(Protocol):
    """Structural contract for Dog records returned by the store."""
    id: int
    name: str
    breed: str
    age: float
    description: str


class DogRepository(Protocol):
    """Contract for dog persistence — implemented by shell."""
    async def create(self, fields: dict[str, Any]) -> DogLike: ...
    async def list_all(self) -> list[DogLike]: ...
    async def get_by_id(self, dog_id: DogId) -> DogLike | None: ...
    async def update(
        self, dog_id: DogId | None, changes: dict[str, Any],
    ) -> DogLike: ...
    async def delete(self, dog_id: DogId) -> DogLike | None: ...
