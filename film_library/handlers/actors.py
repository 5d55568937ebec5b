from datetime import date
from typing import List

from fastapi import Body, Depends

from film_library.handlers.dependencies import get_actor_service, get_pagination
from film_library.models import ActorCreate, ActorWithFilms
from film_library.pagination import ActorFilter, Pagination
from film_library.services import ActorService


def get_actors_with_films(
        actor: str = "",
        pagination: Pagination = Depends(get_pagination),
        service: ActorService = Depends(get_actor_service)
) -> List[ActorWithFilms]:
    """List actors whose full name contains ``actor``, each with its films."""
    return service.get_actors_with_films(ActorFilter(pagination=pagination, full_name_contains=actor))


def create_actor(actor: ActorCreate, service: ActorService = Depends(get_actor_service)):
    actor_id = service.create_actor(actor)
    return {"id": actor_id}


def add_actors_to_film(
        film_id: int,
        actor_ids: List[int] = Body(...),
        service: ActorService = Depends(get_actor_service)
):
    service.add_actors_to_film(film_id, actor_ids)
    return {"detail": "The actors were added to the film"}


def update_actor_full_name(actor_id: int, name: str, service: ActorService = Depends(get_actor_service)):
    service.update_actor_full_name(actor_id, name)
    return {"detail": "The actor was updated successfully"}


def update_actor_gender(actor_id: int, gender: str, service: ActorService = Depends(get_actor_service)):
    service.update_actor_gender(actor_id, gender)
    return {"detail": "The actor was updated successfully"}


def update_actor_birthday(
        actor_id: int,
        birthday: date,
        service: ActorService = Depends(get_actor_service)
):
    service.update_actor_birthday(actor_id, birthday)
    return {"detail": "The actor was updated successfully"}


def update_actor(actor_id: int, actor: ActorCreate, service: ActorService = Depends(get_actor_service)):
    service.update_actor(actor_id, actor)
    return {"detail": "The actor was updated successfully"}


def delete_actor(actor_id: int, service: ActorService = Depends(get_actor_service)):
    service.delete_actor(actor_id)
    return {"detail": "The actor was deleted successfully"}


def delete_actor_from_film(
        actor_id: int,
        film_id: int,
        service: ActorService = Depends(get_actor_service)
):
    service.delete_actor_from_film(actor_id, film_id)
    return {"detail": "The actor was removed from the film"}
