from .films import FilmService
from .actors import ActorService
from .users import UserService

__all__ = ["FilmService", "ActorService", "UserService"]
