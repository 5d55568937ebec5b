import logging
from datetime import timedelta
from typing import Protocol

from film_library.config import Settings
from film_library.errors import InvalidCredentialsError, NotFoundError
from film_library.models import Role, User, UserCreate
from film_library.services.security import create_access_token, get_password_hash, verify_password
from film_library.validation import Validator

logger = logging.getLogger(__name__)

ERR_INVALID_ROLE = "invalid role"
ERR_INVALID_LOGIN_LEN = "invalid login length"
ERR_INVALID_PASSWORD_LEN = "invalid password length"
ERR_ADMIN_REGISTRATION_DISABLED = "admin registration is disabled"


class UserRepo(Protocol):
    def add_user(self, user: User) -> User: ...

    def get_user_by_login(self, login: str) -> User: ...


class UserService:
    def __init__(self, repo: UserRepo, settings: Settings):
        self.repo = repo
        self.settings = settings

    def create_user(self, user: UserCreate) -> str:
        """Register a user and return an access token for it."""
        fn = "userService.create_user"
        s = self.settings

        try:
            Validator(user) \
                .between(lambda u: len(u.login), s.min_login_len, s.max_login_len, ERR_INVALID_LOGIN_LEN) \
                .between(lambda u: len(u.password), s.min_password_len, s.max_password_len,
                         ERR_INVALID_PASSWORD_LEN) \
                .must(lambda u: Role.is_valid(u.role), ERR_INVALID_ROLE) \
                .must(lambda u: s.allow_admin_registration or u.role != s.admin_role,
                      ERR_ADMIN_REGISTRATION_DISABLED) \
                .validate()
        except Exception as e:
            logger.error(f"{fn}: {e}")
            raise

        record = User(login=user.login, hashed_password=get_password_hash(user.password), role=user.role)
        try:
            record = self.repo.add_user(record)
        except Exception as e:
            logger.error(f"{fn}: {e}")
            raise

        return self._generate_token(record)

    def login(self, login: str, password: str) -> str:
        fn = "userService.login"

        try:
            user = self.repo.get_user_by_login(login)
        except NotFoundError as e:
            logger.error(f"{fn}: {e}")
            raise InvalidCredentialsError("invalid login or password") from e

        if not verify_password(password, user.hashed_password):
            logger.warning(f"{fn}: invalid password for {login}")
            raise InvalidCredentialsError("invalid login or password")

        return self._generate_token(user)

    def _generate_token(self, user: User) -> str:
        return create_access_token(
            user,
            self.settings.secret_key,
            timedelta(minutes=self.settings.access_token_expire_minutes),
        )
