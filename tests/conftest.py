# tests/conftest.py

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_task_store
from app.models.task import Task

from .fakes import FakeTaskStore


@pytest.fixture()
def make_task() -> Callable[..., Task]:
    """
    Factory for Task records.

    Ids are assigned sequentially unless given; times may be passed as
    naive ISO strings, which read as local wall time.
    """
    ids = itertools.count(1)

    def _make(**fields) -> Task:
        data = {"id": next(ids), "title": "Task", "due_date": "2024-01-01"}
        data.update(fields)
        return Task(**data)

    return _make


@pytest.fixture()
def store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def client(store: FakeTaskStore) -> Iterator[TestClient]:
    """TestClient with the Supabase-backed store replaced by the fake"""
    from app.main import app

    app.dependency_overrides[get_task_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
