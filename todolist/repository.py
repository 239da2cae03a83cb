"""Task repository holding the in-memory task list.

This module provides the TaskRepository class, the only owner of Task
instances. Tasks are kept in insertion order and addressed by an integer ID
that is never reused, so a stale ID simply resolves to nothing.
"""

import logging
from typing import Dict, List, Optional

from todolist.errors import NotFoundError
from todolist.models import DEFAULT_PRIORITY, Task, validate_fields

logger = logging.getLogger(__name__)


class TaskRepository:
    """Ordered, in-memory store of tasks.

    Attributes:
        _tasks: Mapping of task ID to Task, in insertion order
        _next_id: ID handed to the next created task
    """

    def __init__(self):
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._tasks)

    def create_task(
        self,
        title: str,
        description: str = "",
        priority: int = DEFAULT_PRIORITY,
    ) -> Task:
        """Create a new task and append it to the list.

        Args:
            title: Task title (must be non-empty)
            description: Task description
            priority: Task priority from 1 to 5 (default: 1)

        Returns:
            The created Task object with assigned ID

        Raises:
            ValidationError: If the title is empty or priority out of range
        """
        validate_fields(title, priority)

        task = Task(
            id=self._next_id,
            title=title,
            description=description,
            priority=priority,
            completed=False,
        )
        self._tasks[task.id] = task
        self._next_id += 1

        logger.debug("Task created id=%s priority=%s", task.id, task.priority)
        return task

    def get_all_tasks(self) -> List[Task]:
        """Get all tasks in insertion order.

        Returns:
            A new list of Task objects; mutating the list does not affect
            the repository
        """
        return list(self._tasks.values())

    def get_task(self, task_id: int) -> Optional[Task]:
        """Get a specific task by ID.

        Args:
            task_id: ID of the task to retrieve

        Returns:
            Task object if found, None otherwise
        """
        return self._tasks.get(task_id)

    def _require(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def update_task(
        self,
        task_id: int,
        title: str,
        description: str,
        priority: int,
    ) -> Task:
        """Overwrite the editable fields of an existing task.

        The completion flag is left untouched.

        Args:
            task_id: ID of the task to update
            title: New title (must be non-empty)
            description: New description
            priority: New priority from 1 to 5

        Returns:
            The updated Task object

        Raises:
            NotFoundError: If the task doesn't exist
            ValidationError: If the title is empty or priority out of range
        """
        task = self._require(task_id)
        validate_fields(title, priority)

        task.title = title
        task.description = description
        task.priority = priority

        logger.debug("Task updated id=%s priority=%s", task.id, task.priority)
        return task

    def delete_task(self, task_id: int) -> Task:
        """Delete a task by ID.

        Args:
            task_id: ID of the task to delete

        Returns:
            The removed Task object

        Raises:
            NotFoundError: If the task doesn't exist (e.g. already deleted)
        """
        task = self._require(task_id)
        del self._tasks[task_id]

        logger.debug("Task deleted id=%s remaining=%s", task_id, len(self._tasks))
        return task

    def mark_complete(self, task_id: int) -> Task:
        """Mark a task as complete. Calling it again is a no-op.

        Args:
            task_id: ID of the task to mark as complete

        Returns:
            The updated Task object

        Raises:
            NotFoundError: If the task doesn't exist
        """
        task = self._require(task_id)
        task.completed = True

        logger.debug("Task marked complete id=%s", task_id)
        return task
