import logging
from datetime import date
from typing import Any, Dict, List

from sqlalchemy import Date, Integer, String, text
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from film_library.database import violated_constraint
from film_library.errors import AlreadyExistsError, ConstraintError, NotFoundError
from film_library.models import Actor, ActorBase, ActorWithFilms, Film, FilmActor, FilmRead
from film_library.pagination import ActorFilter
from film_library.query_builder import SelectQueryBuilder
from film_library.repositories.films import contains_pattern

logger = logging.getLogger(__name__)

GENDER_CHECK = ("actors_gender_check",)
FILM_ACTOR_UNIQUE = ("film_actor_pkey", "film_actor.film_id, film_actor.actor_id")
FOREIGN_KEY = ("film_actor_film_id_fkey", "film_actor_actor_id_fkey", "FOREIGN KEY")

ACTOR_COLUMNS = {
    "id": Integer,
    "full_name": String,
    "gender": String,
    "birthday": Date,
}


class ActorRepository:
    def __init__(self, session: Session):
        self.session = session

    def add_actor(self, actor: ActorBase) -> int:
        record = Actor(full_name=actor.full_name, gender=actor.gender, birthday=actor.birthday)
        self.session.add(record)
        self._commit()
        self.session.refresh(record)
        logger.info(f"A new actor has been added: ID {record.id}, {record.full_name}")
        return record.id

    def add_actors_to_film(self, film_id: int, actor_ids: List[int]) -> None:
        if not actor_ids:
            return
        if len(set(actor_ids)) != len(actor_ids):
            raise AlreadyExistsError("actors must be unique")

        if not self.session.get(Film, film_id):
            raise NotFoundError("film not found")
        found = set(self.session.exec(select(Actor.id).where(col(Actor.id).in_(actor_ids))).all())
        if found != set(actor_ids):
            raise NotFoundError("actor not found")
        linked = self.session.exec(
            select(FilmActor.actor_id)
            .where(FilmActor.film_id == film_id)
            .where(col(FilmActor.actor_id).in_(actor_ids))
        ).first()
        if linked is not None:
            raise AlreadyExistsError("actors must be unique")

        self.session.add_all([FilmActor(film_id=film_id, actor_id=actor_id) for actor_id in actor_ids])
        self._commit()
        logger.info(f"Added actors {actor_ids} to film ID {film_id}")

    def update_actor_full_name(self, actor_id: int, full_name: str) -> None:
        self._update_fields(actor_id, full_name=full_name)

    def update_actor_gender(self, actor_id: int, gender: str) -> None:
        self._update_fields(actor_id, gender=gender)

    def update_actor_birthday(self, actor_id: int, birthday: date) -> None:
        self._update_fields(actor_id, birthday=birthday)

    def update_actor(self, actor_id: int, actor: ActorBase) -> None:
        self._update_fields(
            actor_id,
            full_name=actor.full_name,
            gender=actor.gender,
            birthday=actor.birthday,
        )

    def delete_actor(self, actor_id: int) -> None:
        actor = self.session.get(Actor, actor_id)
        if not actor:
            raise NotFoundError("actor not found")
        self.session.delete(actor)
        self._commit()
        logger.info(f"Deleted actor ID {actor_id}: {actor.full_name}")

    def delete_actor_from_film(self, actor_id: int, film_id: int) -> None:
        link = self.session.get(FilmActor, {"film_id": film_id, "actor_id": actor_id})
        if not link:
            raise NotFoundError("actor not found")
        self.session.delete(link)
        self._commit()
        logger.info(f"Removed actor ID {actor_id} from film ID {film_id}")

    def get_actors_with_films(self, actor_filter: ActorFilter) -> List[ActorWithFilms]:
        # the page is taken over actors, films are attached afterwards
        query = SelectQueryBuilder("SELECT a.id, a.full_name, a.gender, a.birthday FROM actors AS a")
        if actor_filter.full_name_contains:
            query.where("LOWER(a.full_name) LIKE :full_name",
                        full_name=contains_pattern(actor_filter.full_name_contains))
        query.order_by("a.id").add_pagination(actor_filter.pagination)

        stmt = text(query.build()).bindparams(**query.params).columns(**ACTOR_COLUMNS)
        actors: Dict[int, ActorWithFilms] = {}
        for row in self.session.execute(stmt).mappings():
            actors[row["id"]] = ActorWithFilms(**row)

        if actors:
            films = self.session.exec(
                select(FilmActor.actor_id, Film)
                .join(Film, col(Film.id) == col(FilmActor.film_id))
                .where(col(FilmActor.actor_id).in_(list(actors)))
                .order_by(col(Film.id))
            ).all()
            for actor_id, film in films:
                actors[actor_id].films.append(FilmRead.model_validate(film))

        return list(actors.values())

    def _update_fields(self, actor_id: int, **values: Any) -> None:
        actor = self.session.get(Actor, actor_id)
        if not actor:
            raise NotFoundError("actor not found")
        for field, value in values.items():
            setattr(actor, field, value)
        self.session.add(actor)
        self._commit()
        logger.info(f"Updated actor ID {actor_id}: {', '.join(values)}")

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            constraint = violated_constraint(e)
            if any(marker in constraint for marker in GENDER_CHECK):
                raise ConstraintError("invalid actor gender") from e
            if any(marker in constraint for marker in FILM_ACTOR_UNIQUE):
                raise AlreadyExistsError("actors must be unique") from e
            if any(marker in constraint for marker in FOREIGN_KEY):
                raise NotFoundError("actor not found") from e
            raise ConstraintError("invalid actor data") from e
