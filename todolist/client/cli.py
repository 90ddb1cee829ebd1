"""Interactive loop for the todo list client.

Rows are addressed by the number shown in front of them (1 = first row).
A line that is not a command is added as a new task, like pressing Enter
in the input box.
"""
from typing import Callable, Optional

from todolist.client.view import TodoView

HELP = """Commands:
  add <title>     add a task (a bare line does the same)
  toggle <n>      check / uncheck task n
  delete <n>      delete task n
  theme           switch light / dark
  help            show this help
  quit            leave"""


class CLI:
    def __init__(self, view: TodoView, read: Callable[[str], str] = input, write: Callable[[str], None] = print):
        self.view = view
        self.read = read
        self.write = write

    def run(self) -> None:
        """Load the list, then redraw after every command until quit/EOF."""
        self.view.mount()
        try:
            while True:
                self.write(self.view.render())
                line = self.read("\n> ").strip()
                if not line:
                    continue
                if line.lower() in ("quit", "exit", "q"):
                    break
                self._handle_command(line)
        except (KeyboardInterrupt, EOFError):
            pass
        self.write("Au revoir.")

    # -------------------- command dispatch --------------------
    def _handle_command(self, line: str) -> None:
        cmd, _, arg = line.partition(" ")
        cmd = cmd.lower()
        arg = arg.strip()
        if cmd == "add":
            self._add(arg)
        elif cmd in ("toggle", "t"):
            task_id = self._task_id(arg)
            if task_id:
                self.view.toggle(task_id)
        elif cmd in ("delete", "rm", "d"):
            task_id = self._task_id(arg)
            if task_id:
                self.view.delete(task_id)
        elif cmd == "theme":
            self.view.toggle_theme()
        elif cmd == "help":
            self.write(HELP)
        else:
            self._add(line)

    def _add(self, title: str) -> None:
        self.view.set_input(title)
        self.view.submit()

    def _task_id(self, arg: str) -> Optional[str]:
        tasks = self.view.state.tasks
        if not arg.isdigit() or not 1 <= int(arg) <= len(tasks):
            self.write(f"Numéro de tâche invalide : {arg or '?'}")
            return None
        return tasks[int(arg) - 1]["id"]
