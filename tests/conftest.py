from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from film_library.config import Settings
from film_library.database import create_tables, new_engine
from film_library.main import create_app
from film_library.models import FilmBase, User
from film_library.services.security import create_access_token

SECRET = "test-secret"


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        secret_key=SECRET,
        film_min_name_len=2,
        film_max_name_len=50,
        film_max_description_len=200,
        film_min_rating=0,
        film_max_rating=10,
        min_login_len=3,
        max_login_len=16,
        min_password_len=6,
        max_password_len=32,
        default_page_size=10,
    )


@pytest.fixture
def engine(settings):
    engine = new_engine(settings)
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def app(settings, engine):
    return create_app(settings, engine)


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    return bearer(create_access_token(User(id=1, login="admin", hashed_password="", role="admin"), SECRET))


@pytest.fixture
def viewer_headers():
    return bearer(create_access_token(User(id=2, login="viewer", hashed_password="", role="viewer"), SECRET))


def make_film(name="Oppenheimer", description="A film about the bomb", release_date=date(2023, 7, 21), rating=8):
    return FilmBase(name=name, description=description, release_date=release_date, rating=rating)
