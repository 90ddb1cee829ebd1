from flask import Blueprint

from todolist.controllers import task_controller

tasks_bp = Blueprint("tasks", __name__)

# strict_slashes=False: "/api/tasks" and "/api/tasks/" reach the same handler


@tasks_bp.get("/", strict_slashes=False)
def list_tasks():
    return task_controller.list_tasks()


@tasks_bp.post("/", strict_slashes=False)
def create_task():
    return task_controller.create_task()


@tasks_bp.put("/<task_id>/", strict_slashes=False)
def update_task(task_id):
    return task_controller.update_task(task_id)


@tasks_bp.delete("/<task_id>/", strict_slashes=False)
def delete_task(task_id):
    return task_controller.delete_task(task_id)
