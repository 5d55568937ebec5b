from fastapi import Request

from film_library.errors import AuthorizationError
from film_library.middlewares.auth import get_principal


def new(required_role: str):
    """Only let through principals with ``required_role``.

    Must be registered after the auth middleware.
    """

    async def require_role(request: Request) -> None:
        principal = get_principal(request)
        if principal is None or principal.role != required_role:
            raise AuthorizationError("forbidden")

    return require_role
