from .films import FilmRepository
from .actors import ActorRepository
from .users import UserRepository

__all__ = ["FilmRepository", "ActorRepository", "UserRepository"]
