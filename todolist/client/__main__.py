"""Entry point for the todo list client: ``python -m todolist.client``.

TODOLIST_API_URL points at the tasks endpoint; TODOLIST_TIMEOUT (seconds)
bounds each request.
"""
import os

from todolist.client.api import DEFAULT_API_URL, TaskApiClient
from todolist.client.cli import CLI
from todolist.client.view import TodoView


def main():
    timeout = os.environ.get("TODOLIST_TIMEOUT")
    client = TaskApiClient(
        os.environ.get("TODOLIST_API_URL", DEFAULT_API_URL),
        timeout=float(timeout) if timeout else None,
    )
    CLI(TodoView(client)).run()


if __name__ == "__main__":
    main()
