from __future__ import annotations

import random

import pytest
from flask import Flask
from flask.testing import FlaskClient

from jokes_app.app import create_app
from jokes_app.container import Container
from jokes_app.infrastructure.db.models import Joke, User
from jokes_app.shared.config import DatabaseConfig, load_config
from jokes_app.shared.logging import logger

JOKE = {"name": "Road worker", "content": "I never wanted to believe that my Dad was stealing."}


@pytest.fixture()
def container(database_config: DatabaseConfig) -> Container:
    config = load_config().model_copy(update={"database": database_config})
    container = Container(config, rng=random.Random(7))
    yield container
    container.session_factory.remove()
    container.engine.dispose()


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def _register(client: FlaskClient, username: str = "kody", redirect_to: str = "/jokes/new"):
    return client.post(
        "/login",
        data={
            "loginType": "register",
            "username": username,
            "password": "twixrox",
            "redirectTo": redirect_to,
        },
    )


def _count(container: Container, model) -> int:
    session = container.session_factory()
    try:
        return session.query(model).count()
    finally:
        session.close()


def test_register_create_and_view_joke(client: FlaskClient) -> None:
    register = _register(client)
    assert register.status_code == 302
    assert register.headers["Location"] == "/jokes/new"
    assert client.get_cookie("RJ_session") is not None

    assert client.get("/jokes/new").status_code == 200

    created = client.post("/jokes/new", data=JOKE)
    assert created.status_code == 302
    location = created.headers["Location"]
    assert location.startswith("/jokes/")

    detail = client.get(location)
    assert detail.status_code == 200
    joke = detail.get_json()["joke"]
    assert joke["name"] == JOKE["name"]
    assert joke["content"] == JOKE["content"]

    index = client.get("/jokes")
    assert index.status_code == 200
    data = index.get_json()
    assert data["randomJoke"]["id"] == joke["id"]
    assert data["jokeListItems"] == [{"id": joke["id"], "name": JOKE["name"]}]
    assert data["user"]["username"] == "kody"


def test_app_uses_container_database(
    client: FlaskClient, container: Container, database_config: DatabaseConfig
) -> None:
    _register(client)

    assert container.engine.url.database == database_config.url.removeprefix("sqlite:///")
    assert _count(container, User) == 1


def test_create_without_session_is_unauthorized(client: FlaskClient, container: Container) -> None:
    response = client.post("/jokes/new", data=JOKE)

    assert response.status_code == 401
    assert response.get_json()["login"] == "/login?redirectTo=/jokes/new"
    assert _count(container, Joke) == 0


def test_token_for_unknown_user_cannot_create(client: FlaskClient, container: Container) -> None:
    client.set_cookie("RJ_session", container.session_service.mint_token("no-such-user"))

    assert client.get("/jokes/new").status_code == 401
    response = client.post("/jokes/new", data=JOKE)

    assert response.status_code == 401
    assert _count(container, Joke) == 0


def test_invalid_joke_is_bad_request(client: FlaskClient, container: Container) -> None:
    _register(client)

    response = client.post("/jokes/new", data={"name": "Road worker", "content": "short"})

    assert response.status_code == 400
    assert response.get_json()["fieldErrors"] == {"content": "That joke is too short"}
    assert _count(container, Joke) == 0


def test_empty_store_and_missing_joke(client: FlaskClient) -> None:
    empty = client.get("/jokes")
    assert empty.status_code == 404
    assert empty.get_json()["message"] == "There are no jokes to display."

    missing = client.get("/jokes/does-not-exist")
    assert missing.status_code == 404
    assert missing.get_json()["message"] == "What a joke! Not found."


def test_duplicate_registration_keeps_single_user(
    client: FlaskClient, app: Flask, container: Container
) -> None:
    _register(client)
    response = app.test_client().post(
        "/login",
        data={"loginType": "register", "username": "kody", "password": "another1"},
    )

    assert response.status_code == 400
    assert response.get_json()["fieldErrors"]["username"] == "User with username kody already exists"
    assert _count(container, User) == 1


def test_login_and_logout(client: FlaskClient, app: Flask) -> None:
    _register(client)
    other = app.test_client()

    wrong = other.post(
        "/login", data={"loginType": "login", "username": "kody", "password": "wrong-pass"}
    )
    assert wrong.status_code == 400
    assert wrong.get_json()["formError"] == "Username/Password combination is incorrect"

    ok = other.post(
        "/login", data={"loginType": "login", "username": "kody", "password": "twixrox"}
    )
    assert ok.status_code == 302
    assert ok.headers["Location"] == "/jokes"

    logout = other.post("/logout")
    assert logout.status_code == 302
    assert logout.headers["Location"] == "/"
    assert "Max-Age=0" in logout.headers["Set-Cookie"]
    assert other.get_cookie("RJ_session") is None
    assert other.post("/jokes/new", data=JOKE).status_code == 401


def test_response_log_names_session_user(client: FlaskClient, container: Container) -> None:
    _register(client)
    user_id = container.user_repository.find_by_username("kody").id
    messages: list[str] = []
    sink_id = logger.add(messages.append, format="{message}")
    try:
        client.get("/jokes/new")
    finally:
        logger.remove(sink_id)

    assert any(
        line.startswith("Response: GET /jokes/new") and f"user={user_id}" in line
        for line in messages
    )


def test_home_and_health(client: FlaskClient) -> None:
    home = client.get("/")
    assert home.status_code == 200
    assert home.get_json()["links"]["jokes"] == "/jokes"

    health = client.get("/api/health")
    assert health.get_json() == {"ok": True, "database": "ok", "backend": "sqlite"}
    assert health.headers["X-Frame-Options"] == "DENY"
