from datetime import date
from typing import List, Optional

from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field

# hard limits enforced by the table; service-level bounds come from Settings
NAME_MIN_LEN = 1
NAME_MAX_LEN = 150
RATING_MIN = 0
RATING_MAX = 10


class FilmBase(SQLModel):
    name: str
    description: str = ""
    release_date: date
    rating: int


class Film(FilmBase, table=True):
    __tablename__ = "films"
    __table_args__ = (
        CheckConstraint(
            f"length(name) BETWEEN {NAME_MIN_LEN} AND {NAME_MAX_LEN}",
            name="films_name_check",
        ),
        CheckConstraint(
            f"rating BETWEEN {RATING_MIN} AND {RATING_MAX}",
            name="films_rating_check",
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)


class FilmActor(SQLModel, table=True):
    __tablename__ = "film_actor"

    film_id: int = Field(foreign_key="films.id", primary_key=True, ondelete="CASCADE")
    actor_id: int = Field(foreign_key="actors.id", primary_key=True, ondelete="CASCADE")


class FilmCreate(FilmBase):
    actor_ids: List[int] = Field(default_factory=list)


class FilmUpdate(FilmBase):
    pass


class FilmRead(FilmBase):
    id: int


class DescriptionUpdate(SQLModel):
    description: str
