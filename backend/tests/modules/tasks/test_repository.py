"""Tests for the task repository."""

from datetime import datetime, timedelta, timezone

import pytest

from modules.tasks.models import TaskStatus
from modules.tasks.repository import TaskRepository
from shared.database import JsonDatabase


@pytest.fixture
def database() -> JsonDatabase:
    return JsonDatabase()


@pytest.fixture
def repo(database) -> TaskRepository:
    return TaskRepository(database)


class TestTaskRepository:
    def test_create_defaults(self, repo):
        task = repo.create(user_id="u1", title="Write tests")
        assert task.status == TaskStatus.ACTIVE
        assert task.description is None
        assert task.user_id == "u1"

    def test_empty_description_is_stored_as_none(self, repo):
        assert repo.create(user_id="u1", title="x", description="").description is None

    def test_list_by_user_only_returns_owned_newest_first(self, repo, database):
        first = repo.create(user_id="u1", title="first")
        repo.create(user_id="u2", title="someone else's")
        second = repo.create(user_id="u1", title="second")

        # Make the ordering independent of clock resolution
        rows = database.collection("tasks")
        rows[0]["created_at"] = (datetime.now(timezone.utc) - timedelta(days=1)).isoformat()

        tasks = repo.list_by_user("u1")
        assert [t.id for t in tasks] == [second.id, first.id]

    def test_find_by_id(self, repo):
        task = repo.create(user_id="u1", title="x")
        assert repo.find_by_id(task.id).title == "x"
        assert repo.find_by_id("missing") is None

    def test_update_only_given_fields(self, repo):
        task = repo.create(user_id="u1", title="x", description="d")
        updated = repo.update(task.id, {"status": TaskStatus.COMPLETED})
        assert updated.status == TaskStatus.COMPLETED
        assert updated.title == "x"
        assert updated.description == "d"
        assert updated.updated_at >= task.updated_at

    def test_update_can_clear_description(self, repo):
        task = repo.create(user_id="u1", title="x", description="d")
        assert repo.update(task.id, {"description": None}).description is None

    def test_update_ignores_unknown_fields(self, repo):
        task = repo.create(user_id="u1", title="x")
        updated = repo.update(task.id, {"user_id": "u2"})
        assert updated.user_id == "u1"

    def test_update_missing(self, repo):
        assert repo.update("missing", {"title": "y"}) is None

    def test_delete(self, repo):
        task = repo.create(user_id="u1", title="x")
        assert repo.delete(task.id) is True
        assert repo.find_by_id(task.id) is None
        assert repo.delete(task.id) is False

    def test_status_is_stored_as_plain_value(self, repo, database):
        task = repo.create(user_id="u1", title="x")
        repo.update(task.id, {"status": TaskStatus.ARCHIVED})
        assert database.collection("tasks")[0]["status"] == "archived"
