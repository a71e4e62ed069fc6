"""Dog ORM — persists the single domain entity.

Invariants:
    - id is an autoincrement INTEGER primary key assigned by the database
    - name, breed, age, description are all non-nullable (no partial records)

Design Decisions:
    - Text for string fields: no length limits on the API surface
    - Float for age: the API accepts any JSON number, not only integers
"""

from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Dog(Base):
    """Dog entity — one row per dog."""
    __tablename__ = "dogs"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    breed: Mapped[str] = mapped_column(Text, nullable=False)
    age: Mapped[float] = mapped_column(Float, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Dog id={self.id} name={self.name!r}>"
