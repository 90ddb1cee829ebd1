"""Request handlers for the Task resource.

Each handler makes one store call and turns the result into a JSON
response. Failures are raised as ``todolist.errors`` exceptions and
answered by the app's error handlers.
"""
from flask import current_app, jsonify, request

from todolist.models.task_store import TaskStore
from todolist.utils.db import get_collection


def _store():
    return TaskStore(get_collection())


def _payload():
    # A missing or malformed JSON body behaves like an empty object
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def list_tasks():
    tasks = _store().list_all()
    return jsonify(tasks=[t.to_json() for t in tasks]), 200


def create_task():
    task = _store().create(_payload().get("title"))
    current_app.logger.info("Task %s created", task.id)
    return jsonify(task=task.to_json()), 201


def update_task(task_id):
    task = _store().update_by_id(task_id, _payload())
    return jsonify(task=task.to_json()), 200


def delete_task(task_id):
    _store().delete_by_id(task_id)
    current_app.logger.info("Task %s deleted", task_id)
    return jsonify(message="Tâche supprimée"), 200
