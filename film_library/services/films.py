import logging
from datetime import date
from typing import List, Protocol

from film_library.config import Settings
from film_library.errors import InvalidValueError
from film_library.models import FilmBase, FilmRead
from film_library.pagination import FilmFilter
from film_library.validation import Validator

logger = logging.getLogger(__name__)

ERR_INVALID_NAME = "invalid film name"
ERR_INVALID_DESCRIPTION = "invalid film description"
ERR_INVALID_RATING = "invalid film rating"


class FilmRepo(Protocol):
    def add_film(self, film: FilmBase) -> int: ...

    def update_film_name(self, film_id: int, name: str) -> None: ...

    def update_film_description(self, film_id: int, description: str) -> None: ...

    def update_film_release_date(self, film_id: int, release_date: date) -> None: ...

    def update_film_rating(self, film_id: int, rating: int) -> None: ...

    def update_film(self, film_id: int, film: FilmBase) -> None: ...

    def delete_film(self, film_id: int) -> None: ...

    def get_films(self, film_filter: FilmFilter) -> List[FilmRead]: ...


class ActorLinker(Protocol):
    def add_actors_to_film(self, film_id: int, actor_ids: List[int]) -> None: ...


class FilmService:
    def __init__(self, repo: FilmRepo, actor_service: ActorLinker, settings: Settings):
        self.repo = repo
        self.actor_service = actor_service
        self.settings = settings

    def create_film(self, film: FilmBase, actor_ids: List[int]) -> int:
        fn = "filmService.create_film"

        self._validate_film(fn, film)
        try:
            film_id = self.repo.add_film(film)
        except Exception as e:
            logger.error(f"{fn}: {e}")
            raise

        self.actor_service.add_actors_to_film(film_id, actor_ids)
        return film_id

    def update_film_name(self, film_id: int, name: str) -> None:
        fn = "filmService.update_film_name"
        s = self.settings
        self._check(fn, s.film_min_name_len <= len(name) <= s.film_max_name_len, ERR_INVALID_NAME)
        self._call(fn, self.repo.update_film_name, film_id, name)

    def update_film_description(self, film_id: int, description: str) -> None:
        fn = "filmService.update_film_description"
        s = self.settings
        self._check(
            fn,
            s.film_min_description_len <= len(description) <= s.film_max_description_len,
            ERR_INVALID_DESCRIPTION,
        )
        self._call(fn, self.repo.update_film_description, film_id, description)

    def update_film_release_date(self, film_id: int, release_date: date) -> None:
        self._call("filmService.update_film_release_date", self.repo.update_film_release_date, film_id, release_date)

    def update_film_rating(self, film_id: int, rating: int) -> None:
        fn = "filmService.update_film_rating"
        s = self.settings
        self._check(fn, s.film_min_rating <= rating <= s.film_max_rating, ERR_INVALID_RATING)
        self._call(fn, self.repo.update_film_rating, film_id, rating)

    def update_film(self, film_id: int, film: FilmBase) -> None:
        fn = "filmService.update_film"
        self._validate_film(fn, film)
        self._call(fn, self.repo.update_film, film_id, film)

    def delete_film(self, film_id: int) -> None:
        self._call("filmService.delete_film", self.repo.delete_film, film_id)

    def get_films(self, film_filter: FilmFilter) -> List[FilmRead]:
        film_filter.validate()
        return self._call("filmService.get_films", self.repo.get_films, film_filter)

    def _validate_film(self, fn: str, film: FilmBase) -> None:
        s = self.settings
        try:
            Validator(film) \
                .between(lambda f: len(f.name), s.film_min_name_len, s.film_max_name_len, ERR_INVALID_NAME) \
                .between(lambda f: len(f.description), s.film_min_description_len, s.film_max_description_len,
                         ERR_INVALID_DESCRIPTION) \
                .between(lambda f: f.rating, s.film_min_rating, s.film_max_rating, ERR_INVALID_RATING) \
                .validate()
        except Exception as e:
            logger.error(f"{fn}: {e}")
            raise

    @staticmethod
    def _check(fn: str, ok: bool, message: str) -> None:
        if not ok:
            logger.error(f"{fn}: {message}")
            raise InvalidValueError(message)

    @staticmethod
    def _call(fn: str, method, *args):
        try:
            return method(*args)
        except Exception as e:
            logger.error(f"{fn}: {e}")
            raise
