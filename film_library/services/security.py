from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError as PayloadError

from film_library.config import ALGORITHM
from film_library.errors import AuthenticationError
from film_library.models import Principal, User

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against its stored hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password for storage."""
    return pwd_context.hash(password)


def create_access_token(user: User, secret_key: str, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token carrying the user's id, login and role."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=30))
    claims = {
        "id": user.id,
        "login": user.login,
        "role": user.role,
        "exp": expire,
    }
    return jwt.encode(claims, secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str, secret_key: str) -> Principal:
    """Verify a token signed with the pinned algorithm and return its principal."""
    try:
        payload = jwt.decode(token, secret_key, algorithms=[ALGORITHM])
    except JWTError:
        raise AuthenticationError("bad token")

    try:
        return Principal.model_validate(payload)
    except PayloadError:
        raise AuthenticationError("no payload")
