"""Client UI state and its transitions.

``ViewState`` is immutable; every transition returns the next state from
the previous one plus whatever the server answered. List mutations only
happen after the server confirmed them.
"""
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

TaskJson = Dict[str, Any]


@dataclass(frozen=True)
class ViewState:
    tasks: Tuple[TaskJson, ...] = ()
    input_text: str = ""
    loading: bool = True
    error: Optional[str] = None
    theme: str = "light"


def tasks_loaded(state: ViewState, tasks) -> ViewState:
    # Server order is kept as is
    return replace(state, tasks=tuple(tasks), loading=False)


def load_failed(state: ViewState, message: str) -> ViewState:
    return replace(state, error=message, loading=False)


def input_changed(state: ViewState, text: str) -> ViewState:
    return replace(state, input_text=text)


def task_created(state: ViewState, task: TaskJson) -> ViewState:
    return replace(state, tasks=(task,) + state.tasks, input_text="")


def task_updated(state: ViewState, task: TaskJson) -> ViewState:
    tasks = tuple(task if t["id"] == task["id"] else t for t in state.tasks)
    return replace(state, tasks=tasks)


def task_removed(state: ViewState, task_id: str) -> ViewState:
    return replace(state, tasks=tuple(t for t in state.tasks if t["id"] != task_id))


def request_failed(state: ViewState, message: str) -> ViewState:
    return replace(state, error=message)


def theme_toggled(state: ViewState) -> ViewState:
    return replace(state, theme="light" if state.theme == "dark" else "dark")


def remaining(state: ViewState) -> int:
    return sum(1 for t in state.tasks if not t["completed"])
