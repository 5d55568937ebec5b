from enum import Enum
from typing import Optional

from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field


class Role(str, Enum):
    ADMIN = "admin"
    VIEWER = "viewer"

    @classmethod
    def is_valid(cls, value) -> bool:
        return value in {member.value for member in cls}


class User(SQLModel, table=True):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "role IN ({})".format(", ".join(f"'{r.value}'" for r in Role)),
            name="users_role_check",
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    login: str = Field(unique=True, index=True)
    hashed_password: str
    role: str = Role.VIEWER.value


class UserCreate(SQLModel):
    login: str
    password: str
    role: str = Role.VIEWER.value


class UserLogin(SQLModel):
    login: str
    password: str


class Token(SQLModel):
    token: str


class Principal(SQLModel):
    """Identity decoded from a verified access token."""

    id: int
    login: str
    role: str
