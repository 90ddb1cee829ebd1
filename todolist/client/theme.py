"""Theme preference, persisted apart from the task data.

A saved "light"/"dark" wins; otherwise the terminal's background decides
(COLORFGBG="fg;bg", background 0-6 or 8 is dark). Light when unknown.
"""
import json
import os
from pathlib import Path
from typing import Optional

THEMES = ("light", "dark")
THEME_FILE = Path(os.environ.get("TODOLIST_THEME_FILE", Path.home() / ".todolist" / "theme.json"))

_DARK_BACKGROUNDS = {"0", "1", "2", "3", "4", "5", "6", "8"}


def system_theme(environ=None) -> str:
    environ = os.environ if environ is None else environ
    colorfgbg = environ.get("COLORFGBG", "")
    if colorfgbg and colorfgbg.split(";")[-1] in _DARK_BACKGROUNDS:
        return "dark"
    return "light"


class ThemeStore:
    def __init__(self, path: Optional[Path] = None, environ=None):
        self.path = Path(path) if path is not None else THEME_FILE
        self.environ = environ

    def load(self) -> str:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                saved = json.load(f).get("theme")
        except (OSError, ValueError, AttributeError):
            saved = None
        if saved in THEMES:
            return saved
        return system_theme(self.environ)

    def save(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme}")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({"theme": theme}, f)
