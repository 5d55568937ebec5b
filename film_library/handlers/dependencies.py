from typing import Optional

from fastapi import Depends, Request
from sqlmodel import Session

from film_library.config import Settings
from film_library.database import get_session
from film_library.pagination import Pagination, parse_int
from film_library.repositories import ActorRepository, FilmRepository, UserRepository
from film_library.services import ActorService, FilmService, UserService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_pagination(
        page: Optional[str] = None,
        size: Optional[str] = None,
        settings: Settings = Depends(get_app_settings)
) -> Pagination:
    return Pagination(
        parse_int(page),
        parse_int(size),
        default_size=settings.default_page_size,
        max_size=settings.max_page_size,
    )


def get_actor_service(session: Session = Depends(get_session)) -> ActorService:
    return ActorService(ActorRepository(session))


def get_film_service(
        session: Session = Depends(get_session),
        settings: Settings = Depends(get_app_settings)
) -> FilmService:
    return FilmService(FilmRepository(session), ActorService(ActorRepository(session)), settings)


def get_user_service(
        session: Session = Depends(get_session),
        settings: Settings = Depends(get_app_settings)
) -> UserService:
    return UserService(UserRepository(session), settings)
