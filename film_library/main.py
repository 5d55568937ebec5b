import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from sqlalchemy.engine import Engine

from film_library import __version__
from film_library.config import Settings, get_settings
from film_library.database import new_engine, wait_for_db
from film_library.handlers import actors, films, register_exception_handlers, users
from film_library.middlewares import admin, auth, logger as logger_mw
from film_library.mux import Mux

logger = logging.getLogger(__name__)


def register_routes(router: Mux, settings: Settings) -> None:
    """Public routes get request logging, the rest add auth and then the admin gate."""
    router.use(logger_mw.new())
    router.handle("POST", "/api/register", users.register, status_code=201,
                  summary="Register a new user")
    router.handle("POST", "/api/login", users.login, summary="Log in and get an access token")

    authenticated = router.group()
    authenticated.use(auth.new(settings))
    authenticated.handle("GET", "/api/me", users.read_me, summary="Current principal")
    authenticated.handle("GET", "/api/actors", actors.get_actors_with_films, summary="List actors with their films")
    authenticated.handle("GET", "/api/films", films.get_films, summary="List films")

    admins = authenticated.group()
    admins.use(admin.new(settings.admin_role))

    admins.handle("POST", "/api/actor", actors.create_actor, status_code=201, summary="Add a new actor")
    admins.handle("POST", "/api/actors/{film_id}", actors.add_actors_to_film, summary="Add actors to a film")
    admins.handle("PUT", "/api/actor/name/{actor_id}/{name}", actors.update_actor_full_name)
    admins.handle("PUT", "/api/actor/gender/{actor_id}/{gender}", actors.update_actor_gender)
    admins.handle("PUT", "/api/actor/birthday/{actor_id}/{birthday}", actors.update_actor_birthday)
    admins.handle("PUT", "/api/actor/{actor_id}", actors.update_actor, summary="Replace actor data")
    admins.handle("DELETE", "/api/actor/{actor_id}", actors.delete_actor, summary="Delete an actor")
    admins.handle("DELETE", "/api/actor/{actor_id}/{film_id}", actors.delete_actor_from_film,
                  summary="Remove an actor from a film")

    admins.handle("POST", "/api/film", films.create_film, status_code=201, summary="Add a new film")
    admins.handle("PUT", "/api/film/name/{film_id}/{name}", films.update_film_name)
    # registered before the rating route, which would otherwise match it
    admins.handle("PUT", "/api/film/description/{film_id}", films.update_film_description)
    admins.handle("PUT", "/api/film/date/{film_id}/{release_date}", films.update_film_release_date)
    admins.handle("PUT", "/api/film/{film_id}/{rating}", films.update_film_rating)
    admins.handle("PUT", "/api/film/{film_id}", films.update_film, summary="Replace film data")
    admins.handle("DELETE", "/api/film/{film_id}", films.delete_film, summary="Delete a film")


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="Film library service",
        description="API for managing films, actors and their casts",
        version=__version__
    )
    app.state.settings = settings
    app.state.engine = engine if engine is not None else new_engine(settings)

    @app.on_event("startup")
    async def startup_event():
        logger.info("Launching the film library service...")
        wait_for_db(app.state.engine, settings.db_max_retries, settings.db_retry_delay)
        logger.info("The service is ready to work")

    register_exception_handlers(app)
    register_routes(Mux(app.router), settings)
    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run("film_library.main:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
