"""Exceptions raised by the task store and the controller.

Every error here is recoverable: the controller catches them at the
operation boundary and shows the message in a dialog.
"""

EMPTY_TITLE_MESSAGE = "Title cannot be empty!"
NO_SELECTION_MESSAGE = "No task selected!"


class TaskError(Exception):
    """Base class for task list errors."""


class ValidationError(TaskError, ValueError):
    """Raised when task fields are invalid (empty title, bad priority)."""


class NotFoundError(TaskError, LookupError):
    """Raised when a task ID does not exist in the store."""

    def __init__(self, task_id: int):
        super().__init__(f"Task #{task_id} not found!")
        self.task_id = task_id


class NoSelectionError(TaskError):
    """Raised when an operation needs a selected task and there is none."""

    def __init__(self, message: str = NO_SELECTION_MESSAGE):
        super().__init__(message)
