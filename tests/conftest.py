from datetime import date
import pytest
from fastapi.testclient import TestClient
from films.database.store import FilmStore, get_store as get_film_store
from films.main import app as films_app
from films.models.films import Film
from users.database.store import UserStore, get_store as get_user_store
from users.main import app as users_app
from users.models.users import User


@pytest.fixture
def film_store():
    return FilmStore()


@pytest.fixture
def user_store():
    return UserStore()


@pytest.fixture
def valid_film():
    return Film(name="Matrix", description="Sci-fi", releaseDate=date(1999, 3, 31), duration=120)


@pytest.fixture
def valid_user():
    return User(email="user@mail.ru", login="login", name="Name", birthday=date(2000, 1, 1))


@pytest.fixture
def films_client(film_store):
    films_app.dependency_overrides[get_film_store] = lambda: film_store
    with TestClient(films_app) as client:
        yield client
    films_app.dependency_overrides.clear()


@pytest.fixture
def users_client(user_store):
    users_app.dependency_overrides[get_user_store] = lambda: user_store
    with TestClient(users_app) as client:
        yield client
    users_app.dependency_overrides.clear()
