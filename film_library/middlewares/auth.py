import logging
from typing import Optional

from fastapi import Request

from film_library.config import Settings
from film_library.errors import AuthenticationError
from film_library.models import Principal
from film_library.services.security import decode_access_token

logger = logging.getLogger(__name__)

AUTH_SCHEME = "bearer"


def new(settings: Settings):
    """Verify the bearer token and attach its principal to the request."""

    async def authenticate(request: Request) -> None:
        parts = request.headers.get("Authorization", "").split(" ")
        if len(parts) < 2 or parts[0].lower() != AUTH_SCHEME or not parts[1]:
            raise AuthenticationError("unauthorized")

        try:
            principal = decode_access_token(parts[1], settings.secret_key)
        except AuthenticationError as e:
            logger.warning(f"Token validation failed: {e}")
            raise

        request.state.principal = principal

    return authenticate


def get_principal(request: Request) -> Optional[Principal]:
    principal = getattr(request.state, "principal", None)
    return principal if isinstance(principal, Principal) else None


def current_principal(request: Request) -> Principal:
    principal = get_principal(request)
    if principal is None:
        raise AuthenticationError("unauthorized")
    return principal
