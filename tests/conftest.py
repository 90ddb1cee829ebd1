# tests/conftest.py

from __future__ import annotations

import mongomock
import pytest

from todolist.app import create_app
from todolist.models.task_store import TaskStore
from todolist.utils.db import get_collection


@pytest.fixture()
def mongo_client() -> mongomock.MongoClient:
    """In-process MongoDB; a fresh one per test."""
    return mongomock.MongoClient()


@pytest.fixture()
def app(mongo_client):
    return create_app({"TESTING": True}, mongo_client=mongo_client)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def collection(app):
    return get_collection(app)


@pytest.fixture()
def store(collection) -> TaskStore:
    return TaskStore(collection)
