import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from facade.game_store_facade import GameStoreFacade

SECRET = "s3cret-key"


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "DATABASE_URL": f"sqlite:///{tmp_path / 'catalog.db'}",
        "ADMIN_SECRET_KEY": SECRET,
        "EXPOSE_ERROR_DETAILS": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def store(settings):
    s = GameStoreFacade.from_settings(settings)
    yield s
    s.close()


@pytest.fixture
def session(store):
    with store.session() as s:
        yield s


def game_payload(title: str = "Chess", **overrides) -> dict:
    payload = {"title": title, "image": "img.png", "platform": "PC", "link": "http://x"}
    payload.update(overrides)
    return payload


def post_game(client, payload: dict, secret: str | None = SECRET):
    headers = {} if secret is None else {"x-admin-secret-key": secret}
    return client.post("/api/games", json=payload, headers=headers)
