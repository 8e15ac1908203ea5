from datetime import UTC, datetime

import pytest

from jokes_app.domain import InvariantViolation, Joke, User

NOW = datetime(2024, 1, 1, tzinfo=UTC)


def test_joke_serializes_for_pages() -> None:
    joke = Joke(
        id="j1",
        name="Road worker",
        content="I never wanted to believe that my Dad was stealing.",
        jokester_id="u1",
        created_at=NOW,
    )

    assert joke.to_dict() == {
        "id": "j1",
        "name": "Road worker",
        "content": "I never wanted to believe that my Dad was stealing.",
        "jokesterId": "u1",
        "createdAt": "2024-01-01T00:00:00+00:00",
    }
    assert joke.list_item() == {"id": "j1", "name": "Road worker"}


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"name": "   "}, "name"),
        ({"content": ""}, "content"),
        ({"jokester_id": ""}, "jokester_id"),
    ],
)
def test_joke_rejects_invalid_fields(overrides, field) -> None:
    values = {"id": "", "name": "Road worker", "content": "Frisbee story", "jokester_id": "u1"}
    values.update(overrides)

    with pytest.raises(InvariantViolation) as exc_info:
        Joke(created_at=NOW, **values)

    assert exc_info.value.field == field


def test_user_requires_username_and_hash() -> None:
    with pytest.raises(InvariantViolation):
        User(id="", username="", password_hash="h", created_at=NOW)
    with pytest.raises(InvariantViolation):
        User(id="", username="kody", password_hash="", created_at=NOW)
