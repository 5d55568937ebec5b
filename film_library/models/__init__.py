from .films import FilmBase, Film, FilmActor, FilmCreate, FilmUpdate, FilmRead, DescriptionUpdate
from .actors import ActorBase, Actor, ActorCreate, ActorRead, ActorWithFilms, Gender
from .users import User, UserCreate, UserLogin, Token, Principal, Role

__all__ = [
    "FilmBase", "Film", "FilmActor", "FilmCreate", "FilmUpdate", "FilmRead", "DescriptionUpdate",
    "ActorBase", "Actor", "ActorCreate", "ActorRead", "ActorWithFilms", "Gender",
    "User", "UserCreate", "UserLogin", "Token", "Principal", "Role",
]
