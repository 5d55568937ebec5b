import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from film_library.database import violated_constraint
from film_library.errors import AlreadyExistsError, ConstraintError, NotFoundError
from film_library.models import User

logger = logging.getLogger(__name__)

LOGIN_UNIQUE = ("users_login_key", "ix_users_login", "users.login")
ROLE_CHECK = ("users_role_check",)


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def add_user(self, user: User) -> User:
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            constraint = violated_constraint(e)
            if any(marker in constraint for marker in LOGIN_UNIQUE):
                raise AlreadyExistsError("user already exists") from e
            if any(marker in constraint for marker in ROLE_CHECK):
                raise ConstraintError("invalid user role") from e
            raise
        self.session.refresh(user)
        logger.info(f"New user registered: {user.login}")
        return user

    def get_user_by_login(self, login: str) -> User:
        user = self.session.exec(select(User).where(User.login == login)).first()
        if user is None:
            raise NotFoundError("user not found")
        return user
