import pytest
from sqlalchemy.exc import OperationalError

from swadesh.core.errors import StorageUnavailable
from swadesh.services import storage


async def _user(db, user_id="u1"):
    return await storage.upsert_user(db, user_id, email=f"{user_id}@example.in", first_name="Asha")


async def test_upsert_user_creates_then_refreshes(db):
    user = await _user(db)
    assert user.first_name == "Asha"
    assert user.setup_completed is False

    await storage.upsert_user(db, "u1", first_name="Asha Rani")
    fetched = await storage.get_user(db, "u1")
    assert fetched.first_name == "Asha Rani"
    assert fetched.email == "u1@example.in"


async def test_complete_setup(db):
    await _user(db)
    assert await storage.complete_setup(db, "u1") is True
    assert await storage.complete_setup(db, "u1") is True
    assert (await storage.get_user(db, "u1")).setup_completed is True
    assert await storage.complete_setup(db, "nobody") is False


async def test_create_and_list_memories(db):
    await _user(db)
    created = await storage.create_memory(db, "u1", "I live in Delhi", category="personal")
    assert created.id
    assert created.category == "personal"
    assert created.tags == ""
    assert created.is_pinned is False

    memories = await storage.list_memories(db, "u1")
    assert [m.content for m in memories] == ["I live in Delhi"]
    assert await storage.count_memories(db, "u1") == 1


async def test_unknown_category_is_rejected(db):
    await _user(db)
    with pytest.raises(ValueError):
        await storage.create_memory(db, "u1", "x", category="gossip")


async def test_memories_are_scoped_to_owner(db):
    await _user(db, "u1")
    await _user(db, "u2")
    mine = await storage.create_memory(db, "u1", "mine")
    await storage.create_memory(db, "u2", "theirs")

    assert [m.content for m in await storage.list_memories(db, "u1")] == ["mine"]
    assert await storage.get_memory(db, mine.id, "u2") is None
    assert (await storage.get_memory(db, mine.id, "u1")).content == "mine"


async def test_update_memory(db):
    await _user(db)
    memory = await storage.create_memory(db, "u1", "old")

    updated = await storage.update_memory(db, memory.id, "u1", content="new", is_pinned=True)
    assert updated.content == "new"
    assert updated.is_pinned is True
    assert updated.category == "general"


async def test_update_foreign_memory_changes_nothing(db):
    await _user(db, "u1")
    await _user(db, "u2")
    memory = await storage.create_memory(db, "u1", "original")

    assert await storage.update_memory(db, memory.id, "u2", content="hacked") is None
    assert (await storage.get_memory(db, memory.id, "u1")).content == "original"


async def test_delete_memory(db):
    await _user(db, "u1")
    await _user(db, "u2")
    memory = await storage.create_memory(db, "u1", "bye")

    assert await storage.delete_memory(db, memory.id, "u2") is False
    assert await storage.count_memories(db, "u1") == 1

    assert await storage.delete_memory(db, memory.id, "u1") is True
    assert await storage.count_memories(db, "u1") == 0
    assert await storage.delete_memory(db, memory.id, "u1") is False


def test_require_db():
    with pytest.raises(StorageUnavailable):
        storage.require_db(None)


async def test_database_errors_become_storage_unavailable(db, monkeypatch):
    async def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "execute", broken_execute)
    with pytest.raises(StorageUnavailable):
        await storage.list_memories(db, "u1")
