import logging
from datetime import date
from typing import List

from fastapi import Depends

from film_library.handlers.dependencies import get_film_service, get_pagination
from film_library.models import DescriptionUpdate, FilmCreate, FilmRead, FilmUpdate
from film_library.pagination import FilmFilter, Pagination
from film_library.services import FilmService

logger = logging.getLogger(__name__)


def create_film(film: FilmCreate, service: FilmService = Depends(get_film_service)):
    """Add a new film and link the given actors to it."""
    film_id = service.create_film(film, film.actor_ids)
    return {"id": film_id}


def get_films(
        film: str = "",
        actor: str = "",
        sort: str = "",
        direct: str = "",
        pagination: Pagination = Depends(get_pagination),
        service: FilmService = Depends(get_film_service)
) -> List[FilmRead]:
    """List films filtered by name and actor name, sorted and paginated."""
    film_filter = FilmFilter(
        pagination=pagination,
        name_contains=film,
        actor_name_contains=actor,
        order_by=sort,
        direction=direct,
    )
    films = service.get_films(film_filter)
    logger.info(f"A list of films was requested, {len(films)} entries were found")
    return films


def update_film_name(film_id: int, name: str, service: FilmService = Depends(get_film_service)):
    service.update_film_name(film_id, name)
    return {"detail": "The film was updated successfully"}


def update_film_description(
        film_id: int,
        body: DescriptionUpdate,
        service: FilmService = Depends(get_film_service)
):
    service.update_film_description(film_id, body.description)
    return {"detail": "The film was updated successfully"}


def update_film_release_date(
        film_id: int,
        release_date: date,
        service: FilmService = Depends(get_film_service)
):
    service.update_film_release_date(film_id, release_date)
    return {"detail": "The film was updated successfully"}


def update_film_rating(film_id: int, rating: int, service: FilmService = Depends(get_film_service)):
    service.update_film_rating(film_id, rating)
    return {"detail": "The film was updated successfully"}


def update_film(film_id: int, film: FilmUpdate, service: FilmService = Depends(get_film_service)):
    service.update_film(film_id, film)
    return {"detail": "The film was updated successfully"}


def delete_film(film_id: int, service: FilmService = Depends(get_film_service)):
    service.delete_film(film_id)
    return {"detail": "The film was deleted successfully"}
