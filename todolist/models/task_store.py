import logging
from contextlib import contextmanager
from typing import Any, Dict, List

from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from todolist.errors import NotFoundError, StoreError
from todolist.models.task_model import Task, utcnow, validate_changes, validate_title
from todolist.utils.db import to_object_id

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(operation: str):
    try:
        yield
    except PyMongoError as exc:
        logger.error("MongoDB %s failed: %s", operation, exc)
        raise StoreError() from exc


class TaskStore:
    """Task persistence over a single MongoDB collection."""

    def __init__(self, collection):
        self.collection = collection

    def list_all(self) -> List[Task]:
        """All tasks, newest created first."""
        with _store_errors("find"):
            cursor = self.collection.find().sort([("createdAt", DESCENDING), ("_id", DESCENDING)])
            return [Task.from_doc(doc) for doc in cursor]

    def create(self, title: Any) -> Task:
        task = Task(title=validate_title(title))
        # Both timestamps start out identical
        task.updated_at = task.created_at
        with _store_errors("insert"):
            res = self.collection.insert_one(task.to_doc())
            created = self.collection.find_one({"_id": res.inserted_id})
        logger.debug("Created task %s", res.inserted_id)
        return Task.from_doc(created)

    def update_by_id(self, task_id: str, payload: Dict[str, Any]) -> Task:
        """Apply the updatable fields of ``payload`` and return the stored result.

        Raises InvalidIdentifierError for a malformed id, NotFoundError when
        no task matches, ValidationError for bad field values.
        """
        oid = to_object_id(task_id)
        changes = validate_changes(payload)
        changes["updatedAt"] = utcnow()
        with _store_errors("update"):
            doc = self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        if doc is None:
            raise NotFoundError()
        logger.debug("Updated task %s: %s", task_id, sorted(changes))
        return Task.from_doc(doc)

    def delete_by_id(self, task_id: str) -> Task:
        oid = to_object_id(task_id)
        with _store_errors("delete"):
            doc = self.collection.find_one_and_delete({"_id": oid})
        if doc is None:
            raise NotFoundError()
        logger.debug("Deleted task %s", task_id)
        return Task.from_doc(doc)
