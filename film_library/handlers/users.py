from fastapi import Depends

from film_library.handlers.dependencies import get_user_service
from film_library.middlewares import current_principal
from film_library.models import Principal, Token, UserCreate, UserLogin
from film_library.services import UserService


def register(user: UserCreate, service: UserService = Depends(get_user_service)) -> Token:
    """Register a new user and return an access token."""
    return Token(token=service.create_user(user))


def login(credentials: UserLogin, service: UserService = Depends(get_user_service)) -> Token:
    """Exchange login and password for an access token."""
    return Token(token=service.login(credentials.login, credentials.password))


def read_me(principal: Principal = Depends(current_principal)) -> Principal:
    """The principal encoded in the caller's token."""
    return principal
