from datetime import date
from enum import Enum
from typing import List, Optional

from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field

from film_library.models.films import FilmRead


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def is_valid(cls, value) -> bool:
        return value in {member.value for member in cls}


class ActorBase(SQLModel):
    full_name: str
    gender: str
    birthday: date


class Actor(ActorBase, table=True):
    __tablename__ = "actors"
    __table_args__ = (
        CheckConstraint(
            "gender IN ({})".format(", ".join(f"'{g.value}'" for g in Gender)),
            name="actors_gender_check",
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)


class ActorCreate(ActorBase):
    pass


class ActorRead(ActorBase):
    id: int


class ActorWithFilms(ActorRead):
    films: List[FilmRead] = Field(default_factory=list)
