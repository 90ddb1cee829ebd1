"""Client side of the todo list: API wrapper, UI state, theme and text view."""
