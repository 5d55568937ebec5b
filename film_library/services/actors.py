import logging
from datetime import date
from typing import List, Protocol

from film_library.errors import InvalidValueError
from film_library.models import ActorBase, ActorWithFilms, Gender
from film_library.pagination import ActorFilter
from film_library.validation import Validator

logger = logging.getLogger(__name__)

ERR_INVALID_FULL_NAME = "full name must be at least 1 letter long"
ERR_INVALID_GENDER = "gender must be male or female"


class ActorRepo(Protocol):
    def add_actor(self, actor: ActorBase) -> int: ...

    def add_actors_to_film(self, film_id: int, actor_ids: List[int]) -> None: ...

    def update_actor_full_name(self, actor_id: int, full_name: str) -> None: ...

    def update_actor_gender(self, actor_id: int, gender: str) -> None: ...

    def update_actor_birthday(self, actor_id: int, birthday: date) -> None: ...

    def update_actor(self, actor_id: int, actor: ActorBase) -> None: ...

    def delete_actor(self, actor_id: int) -> None: ...

    def delete_actor_from_film(self, actor_id: int, film_id: int) -> None: ...

    def get_actors_with_films(self, actor_filter: ActorFilter) -> List[ActorWithFilms]: ...


def validate_actor(actor: ActorBase) -> None:
    Validator(actor) \
        .must(lambda a: len(a.full_name) > 0, ERR_INVALID_FULL_NAME) \
        .must(lambda a: Gender.is_valid(a.gender), ERR_INVALID_GENDER) \
        .validate()


class ActorService:
    def __init__(self, repo: ActorRepo):
        self.repo = repo

    def create_actor(self, actor: ActorBase) -> int:
        fn = "actorService.create_actor"
        self._call(fn, validate_actor, actor)
        return self._call(fn, self.repo.add_actor, actor)

    def add_actors_to_film(self, film_id: int, actor_ids: List[int]) -> None:
        self._call("actorService.add_actors_to_film", self.repo.add_actors_to_film, film_id, actor_ids)

    def update_actor_full_name(self, actor_id: int, full_name: str) -> None:
        fn = "actorService.update_actor_full_name"
        if not full_name:
            logger.error(f"{fn}: {ERR_INVALID_FULL_NAME}")
            raise InvalidValueError(ERR_INVALID_FULL_NAME)
        self._call(fn, self.repo.update_actor_full_name, actor_id, full_name)

    def update_actor_gender(self, actor_id: int, gender: str) -> None:
        fn = "actorService.update_actor_gender"
        if not Gender.is_valid(gender):
            logger.error(f"{fn}: {ERR_INVALID_GENDER}: {gender}")
            raise InvalidValueError(ERR_INVALID_GENDER)
        self._call(fn, self.repo.update_actor_gender, actor_id, gender)

    def update_actor_birthday(self, actor_id: int, birthday: date) -> None:
        self._call("actorService.update_actor_birthday", self.repo.update_actor_birthday, actor_id, birthday)

    def update_actor(self, actor_id: int, actor: ActorBase) -> None:
        fn = "actorService.update_actor"
        self._call(fn, validate_actor, actor)
        self._call(fn, self.repo.update_actor, actor_id, actor)

    def delete_actor(self, actor_id: int) -> None:
        self._call("actorService.delete_actor", self.repo.delete_actor, actor_id)

    def delete_actor_from_film(self, actor_id: int, film_id: int) -> None:
        self._call("actorService.delete_actor_from_film", self.repo.delete_actor_from_film, actor_id, film_id)

    def get_actors_with_films(self, actor_filter: ActorFilter) -> List[ActorWithFilms]:
        return self._call("actorService.get_actors_with_films", self.repo.get_actors_with_films, actor_filter)

    @staticmethod
    def _call(fn: str, method, *args):
        try:
            return method(*args)
        except Exception as e:
            logger.error(f"{fn}: {e}")
            raise
