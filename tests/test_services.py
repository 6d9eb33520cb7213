import asyncio

import pytest

from wrua_forum_api.app.core.db import Database
from wrua_forum_api.app.core.errors import ConflictError, ForumError
from wrua_forum_api.app.schemas.newsletter import SubscriberCreate
from wrua_forum_api.app.schemas.project import ProjectCreate
from wrua_forum_api.app.schemas.user import UserCreate
from wrua_forum_api.app.services.project_service import ProjectService
from wrua_forum_api.app.services.subscriber_service import SubscriberService
from wrua_forum_api.app.services.user_service import UserService


@pytest.fixture
def db(tmp_path) -> Database:
    database = Database(str(tmp_path / "services.db"))
    database.init_db()
    return database


def test_init_db_is_repeatable(db: Database) -> None:
    db.init_db()
    conn = db.connect()
    try:
        versions = [row["version"] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
    finally:
        conn.close()
    assert versions == [1, 2]


def test_user_lookup_and_password_reset(db: Database) -> None:
    users = UserService(db)
    created = asyncio.run(users.create_user(UserCreate(username="admin", password="admin123")))

    assert asyncio.run(users.get_user_by_id(created.id)) == created
    assert asyncio.run(users.get_by_username("admin")) == created
    assert asyncio.run(users.get_by_username("ghost")) is None

    assert asyncio.run(users.set_password("admin", "n3w-pass"))
    assert asyncio.run(users.authenticate("admin", "admin123")) is None
    assert asyncio.run(users.authenticate("admin", "n3w-pass")) == created
    assert not asyncio.run(users.set_password("ghost", "whatever"))


def test_subscriber_conflict_keeps_count(db: Database) -> None:
    subscribers = SubscriberService(db)
    asyncio.run(subscribers.create(SubscriberCreate(email="reader@example.org")))
    with pytest.raises(ConflictError):
        asyncio.run(subscribers.create(SubscriberCreate(email="READER@example.org")))
    assert asyncio.run(subscribers.count()) == 1


def test_unreadable_json_column_falls_back_to_empty(db: Database) -> None:
    projects = ProjectService(db)
    created = asyncio.run(
        projects.create(
            ProjectCreate(title="Wetlands", description="d", location="Awach Region", category="Water Conservation")
        )
    )
    with db.cursor() as cursor:
        cursor.execute("UPDATE projects SET sdgs = 'not json' WHERE id = ?", (created.id,))

    project = asyncio.run(projects.get(created.id))
    assert project.sdgs == []
    assert asyncio.run(projects.delete(created.id))
    assert not asyncio.run(projects.delete(created.id))


def test_create_fails_loudly_when_row_cannot_be_read_back(db: Database, monkeypatch) -> None:
    subscribers = SubscriberService(db)

    async def missing(record_id):
        return None

    monkeypatch.setattr(subscribers, "get", missing)
    with pytest.raises(ForumError) as excinfo:
        asyncio.run(subscribers.create(SubscriberCreate(email="reader@example.org")))
    assert excinfo.value.status_code == 500
    assert "could not be read back" in excinfo.value.message
