"""Core models for todolist.

This module defines the core data structures for task management:
- Task: A dataclass representing a single to-do item
- TaskForm: The fields collected by the add/edit form
"""

from dataclasses import dataclass
from typing import Optional

from todolist.errors import EMPTY_TITLE_MESSAGE, ValidationError

MIN_PRIORITY = 1
MAX_PRIORITY = 5
DEFAULT_PRIORITY = MIN_PRIORITY

CHECKMARK = "✓ "


def validate_fields(title: str, priority: int) -> None:
    """Check the user-editable fields of a task.

    Args:
        title: Task title, must be non-empty
        priority: Task priority, must lie in [MIN_PRIORITY, MAX_PRIORITY]

    Raises:
        ValidationError: If either field is invalid
    """
    if not title:
        raise ValidationError(EMPTY_TITLE_MESSAGE)
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise ValidationError(f"Priority must be a whole number, got {priority!r}!")
    if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        raise ValidationError(
            f"Priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}!"
        )


@dataclass
class Task:
    """Task model representing a single to-do item.

    Attributes:
        title: Display title, never empty
        description: Free-form text, may be empty
        priority: Integer priority from 1 to 5
        completed: Whether the task has been marked complete
        id: Identifier assigned by the repository (None until stored)
    """

    title: str
    description: str = ""
    priority: int = DEFAULT_PRIORITY
    completed: bool = False
    id: Optional[int] = None

    @property
    def status_label(self) -> str:
        return "Completed" if self.completed else "Incomplete"

    def label(self) -> str:
        """Return the text shown for this task in the list."""
        prefix = CHECKMARK if self.completed else ""
        return f"{prefix}{self.title} (Priority: {self.priority})"

    def details(self) -> str:
        """Return the full field dump shown in the detail pane."""
        return (
            f"Title: {self.title}\n\n"
            f"Description: {self.description}\n\n"
            f"Priority: {self.priority}\n\n"
            f"Status: {self.status_label}"
        )


@dataclass
class TaskForm:
    """Values collected from the add/edit dialog."""

    title: str = ""
    description: str = ""
    priority: int = DEFAULT_PRIORITY

    @classmethod
    def from_task(cls, task: Task) -> "TaskForm":
        return cls(title=task.title, description=task.description, priority=task.priority)
