"""Controller tying the task repository to a view.

The controller owns the repository and the current selection. Every user
operation is a request/response pair: ask the view for input, validate,
then commit to the repository or report the error. The view is an abstract
interface so the same controller drives the tkinter window and the tests.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from todolist.errors import NoSelectionError, TaskError, ValidationError
from todolist.models import Task, TaskForm
from todolist.repository import TaskRepository

logger = logging.getLogger(__name__)

ADD_HEADING = "Add Task"
EDIT_HEADING = "Edit Task"
COMPLETED_MESSAGE = "Task marked as complete!"


class TaskView(ABC):
    """Abstract base class for anything that can display the task list."""

    @abstractmethod
    def prompt_task(self, heading: str, form: TaskForm) -> Optional[TaskForm]:
        """Show a modal task form.

        Args:
            heading: Dialog title
            form: Initial field values

        Returns:
            The confirmed values, or None if the form was cancelled
        """
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Show a modal error dialog."""
        pass

    @abstractmethod
    def show_info(self, message: str) -> None:
        """Show a modal confirmation dialog."""
        pass

    @abstractmethod
    def render(self, rows: List[str], selected: Optional[int]) -> None:
        """Redraw the task list.

        Args:
            rows: One label per task, in list order
            selected: Index of the selected row, or None
        """
        pass

    @abstractmethod
    def show_details(self, text: str) -> None:
        """Replace the detail pane contents. An empty string clears it."""
        pass


class TaskController:
    """Runs the add/edit/delete/mark-complete operations.

    Attributes:
        repository: The task store
        view: The view the controller reports to
        selection: ID of the selected task, or None
    """

    def __init__(self, view: TaskView, repository: Optional[TaskRepository] = None):
        self.view = view
        self.repository = repository or TaskRepository()
        self.selection: Optional[int] = None

    # ---- selection ----

    @property
    def selected_task(self) -> Optional[Task]:
        """The selected task, or None if nothing is selected.

        A selection whose task has been deleted resolves to None.
        """
        if self.selection is None:
            return None
        return self.repository.get_task(self.selection)

    def _require_selection(self) -> Task:
        task = self.selected_task
        if task is None:
            self.selection = None
            raise NoSelectionError()
        return task

    def select(self, task_id: Optional[int]) -> None:
        """Select a task by ID (None deselects) and refresh the detail pane."""
        if task_id is not None and self.repository.get_task(task_id) is None:
            task_id = None
        self.selection = task_id
        self._show_selected_details()

    def select_index(self, index: Optional[int]) -> None:
        """Select the task shown at a given row of the list."""
        tasks = self.repository.get_all_tasks()
        if index is None or not 0 <= index < len(tasks):
            self.select(None)
        else:
            self.select(tasks[index].id)

    def _show_selected_details(self) -> None:
        task = self.selected_task
        self.view.show_details(task.details() if task is not None else "")

    def refresh(self) -> None:
        """Push the current rows, selection and details to the view."""
        tasks = self.repository.get_all_tasks()
        selected = self.selected_task
        index = None
        if selected is not None:
            index = next(i for i, task in enumerate(tasks) if task.id == selected.id)
        self.view.render([task.label() for task in tasks], index)
        self._show_selected_details()

    def _report(self, operation: str, error: TaskError) -> None:
        logger.warning("%s rejected: %s", operation, error)
        self.view.show_error(str(error))

    # ---- operations ----

    def add_task(self) -> Optional[Task]:
        """Ask for a new task and append it.

        Returns:
            The created Task, or None if cancelled or rejected
        """
        form = self.view.prompt_task(ADD_HEADING, TaskForm())
        if form is None:
            return None

        try:
            task = self.repository.create_task(form.title, form.description, form.priority)
        except ValidationError as e:
            self._report("add", e)
            return None

        logger.info("Added task #%s", task.id)
        self.refresh()
        return task

    def edit_task(self) -> Optional[Task]:
        """Edit the selected task's title, description and priority.

        Returns:
            The updated Task, or None if cancelled or rejected
        """
        try:
            task = self._require_selection()
        except NoSelectionError as e:
            self._report("edit", e)
            return None

        form = self.view.prompt_task(EDIT_HEADING, TaskForm.from_task(task))
        if form is None:
            return None

        try:
            task = self.repository.update_task(
                task.id, form.title, form.description, form.priority
            )
        except TaskError as e:
            self._report("edit", e)
            return None

        logger.info("Edited task #%s", task.id)
        self.refresh()
        return task

    def delete_task(self) -> Optional[Task]:
        """Delete the selected task and clear the selection.

        Returns:
            The removed Task, or None if nothing was selected
        """
        try:
            task = self.repository.delete_task(self._require_selection().id)
        except TaskError as e:
            self._report("delete", e)
            return None

        logger.info("Deleted task #%s", task.id)
        self.selection = None
        self.refresh()
        return task

    def mark_complete(self) -> Optional[Task]:
        """Mark the selected task complete and confirm it to the user.

        Returns:
            The completed Task, or None if nothing was selected
        """
        try:
            task = self.repository.mark_complete(self._require_selection().id)
        except TaskError as e:
            self._report("mark complete", e)
            return None

        logger.info("Completed task #%s", task.id)
        self.view.show_info(COMPLETED_MESSAGE)
        self.refresh()
        return task
