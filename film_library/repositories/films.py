import logging
from datetime import date
from typing import Any, List

from sqlalchemy import Date, Integer, String, text
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from film_library.database import violated_constraint
from film_library.errors import AlreadyExistsError, ConstraintError, NotFoundError
from film_library.models import Film, FilmBase, FilmRead
from film_library.pagination import FilmFilter
from film_library.query_builder import SelectQueryBuilder

logger = logging.getLogger(__name__)

FILM_NAME_UNIQUE = ("films_name_key", "films.name")
FILM_NAME_CHECK = ("films_name_check",)
FILM_RATING_CHECK = ("films_rating_check",)

FILM_COLUMNS = {
    "id": Integer,
    "name": String,
    "description": String,
    "release_date": Date,
    "rating": Integer,
}


def contains_pattern(value: str) -> str:
    return f"%{value.lower()}%"


class FilmRepository:
    def __init__(self, session: Session):
        self.session = session

    def add_film(self, film: FilmBase) -> int:
        record = Film(
            name=film.name,
            description=film.description,
            release_date=film.release_date,
            rating=film.rating,
        )
        self.session.add(record)
        self._commit()
        self.session.refresh(record)
        logger.info(f"A new film has been added: ID {record.id}, {record.name}")
        return record.id

    def update_film_name(self, film_id: int, name: str) -> None:
        self._update_fields(film_id, name=name)

    def update_film_description(self, film_id: int, description: str) -> None:
        self._update_fields(film_id, description=description)

    def update_film_release_date(self, film_id: int, release_date: date) -> None:
        self._update_fields(film_id, release_date=release_date)

    def update_film_rating(self, film_id: int, rating: int) -> None:
        self._update_fields(film_id, rating=rating)

    def update_film(self, film_id: int, film: FilmBase) -> None:
        self._update_fields(
            film_id,
            name=film.name,
            description=film.description,
            release_date=film.release_date,
            rating=film.rating,
        )

    def delete_film(self, film_id: int) -> None:
        film = self.session.get(Film, film_id)
        if not film:
            raise NotFoundError("film not found")
        self.session.delete(film)
        self._commit()
        logger.info(f"Deleted film ID {film_id}: {film.name}")

    def get_films(self, film_filter: FilmFilter) -> List[FilmRead]:
        # the sort column is formatted into the SQL, so only whitelisted fields get through
        film_filter.validate()
        query = SelectQueryBuilder(
            "SELECT DISTINCT f.id, f.name, f.description, f.release_date, f.rating FROM films AS f"
        )
        if film_filter.actor_name_contains:
            query.join("film_actor AS fa ON f.id = fa.film_id") \
                .join("actors AS a ON a.id = fa.actor_id") \
                .where("LOWER(a.full_name) LIKE :actor_name",
                       actor_name=contains_pattern(film_filter.actor_name_contains))
        if film_filter.name_contains:
            query.where("LOWER(f.name) LIKE :film_name",
                        film_name=contains_pattern(film_filter.name_contains))

        query.order_by(f"f.{film_filter.order_by}", film_filter.direction) \
            .add_pagination(film_filter.pagination)

        stmt = text(query.build()).bindparams(**query.params).columns(**FILM_COLUMNS)
        rows = self.session.execute(stmt).mappings().all()
        return [FilmRead(**row) for row in rows]

    def _update_fields(self, film_id: int, **values: Any) -> None:
        film = self.session.get(Film, film_id)
        if not film:
            raise NotFoundError("film not found")
        for field, value in values.items():
            setattr(film, field, value)
        self.session.add(film)
        self._commit()
        logger.info(f"Updated film ID {film_id}: {', '.join(values)}")

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            constraint = violated_constraint(e)
            if any(marker in constraint for marker in FILM_NAME_UNIQUE):
                raise AlreadyExistsError("film already exists") from e
            if any(marker in constraint for marker in FILM_NAME_CHECK):
                raise ConstraintError("invalid film name length") from e
            if any(marker in constraint for marker in FILM_RATING_CHECK):
                raise ConstraintError("invalid film rating") from e
            raise ConstraintError("invalid film data") from e
