"""todolist: a single-window desktop task list."""

__version__ = "0.1.0"
