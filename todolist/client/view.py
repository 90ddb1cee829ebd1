from typing import Optional

from todolist.client import state as st
from todolist.client.api import ApiError, TaskApiClient
from todolist.client.theme import ThemeStore


class TodoView:
    """Todo list screen: drives the API client and renders the state as text."""

    def __init__(self, client: Optional[TaskApiClient] = None, theme_store: Optional[ThemeStore] = None):
        self.client = client or TaskApiClient()
        self.theme_store = theme_store or ThemeStore()
        self.state = st.ViewState(theme=self.theme_store.load())

    def mount(self):
        try:
            tasks = self.client.list_tasks()
        except ApiError:
            self.state = st.load_failed(self.state, "Impossible de charger les tâches")
        else:
            self.state = st.tasks_loaded(self.state, tasks)
        return self.state

    def set_input(self, text: str):
        self.state = st.input_changed(self.state, text)
        return self.state

    def submit(self):
        if not self.state.input_text.strip():
            return self.state
        try:
            task = self.client.create_task(self.state.input_text)
        except ApiError:
            self.state = st.request_failed(self.state, "Impossible de créer la tâche")
        else:
            self.state = st.task_created(self.state, task)
        return self.state

    def toggle(self, task_id: str):
        current = next((t for t in self.state.tasks if t["id"] == task_id), None)
        if current is None:
            raise KeyError(task_id)
        try:
            task = self.client.update_task(task_id, completed=not current["completed"])
        except ApiError:
            self.state = st.request_failed(self.state, "Impossible de modifier la tâche")
        else:
            self.state = st.task_updated(self.state, task)
        return self.state

    def delete(self, task_id: str):
        try:
            self.client.delete_task(task_id)
        except ApiError:
            self.state = st.request_failed(self.state, "Impossible de supprimer la tâche")
        else:
            self.state = st.task_removed(self.state, task_id)
        return self.state

    def toggle_theme(self):
        self.state = st.theme_toggled(self.state)
        self.theme_store.save(self.state.theme)
        return self.state

    def render(self) -> str:
        state = self.state
        if state.loading:
            return "Chargement..."

        lines = [
            "[Mode clair]" if state.theme == "dark" else "[Mode sombre]",
            "Todo List",
            "",
        ]
        if state.error:
            lines += [f"! {state.error}", ""]
        if not state.tasks:
            lines.append("Aucune tâche. Ajoutes-en une !")
        for number, task in enumerate(state.tasks, start=1):
            mark = "[x]" if task["completed"] else "[ ]"
            lines.append(f"{number:>2}. {mark} {task['title']}")
        lines += ["", f"{st.remaining(state)} tâche(s) restante(s)"]
        return "\n".join(lines)
