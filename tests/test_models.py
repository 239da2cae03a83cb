"""Tests for core models."""

import pytest

from todolist.errors import ValidationError
from todolist.models import (
    DEFAULT_PRIORITY,
    MAX_PRIORITY,
    MIN_PRIORITY,
    Task,
    TaskForm,
    validate_fields,
)


class TestValidateFields:
    """Tests for validate_fields."""

    def test_valid_fields_pass(self):
        """Test that a title and in-range priority are accepted."""
        validate_fields("Buy milk", 3)

    def test_priority_bounds_are_inclusive(self):
        """Test that both ends of the priority range are accepted."""
        validate_fields("Task", MIN_PRIORITY)
        validate_fields("Task", MAX_PRIORITY)

    def test_empty_title_rejected(self):
        """Test that an empty title raises ValidationError."""
        with pytest.raises(ValidationError, match="Title cannot be empty!"):
            validate_fields("", 1)

    @pytest.mark.parametrize("priority", [0, 6, -1])
    def test_out_of_range_priority_rejected(self, priority):
        """Test that priorities outside 1-5 raise ValidationError."""
        with pytest.raises(ValidationError, match="between 1 and 5"):
            validate_fields("Task", priority)

    @pytest.mark.parametrize("priority", [2.5, "3", True])
    def test_non_integer_priority_rejected(self, priority):
        """Test that only real ints are accepted as a priority."""
        with pytest.raises(ValidationError, match="whole number"):
            validate_fields("Task", priority)

    def test_validation_error_is_value_error(self):
        """Test that ValidationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_fields("", 1)


class TestTask:
    """Tests for Task dataclass."""

    def test_task_creation_with_title_only(self):
        """Test creating a task with only title."""
        task = Task(title="Test task")

        assert task.title == "Test task"
        assert task.description == ""
        assert task.priority == DEFAULT_PRIORITY == 1
        assert task.completed is False
        assert task.id is None

    def test_label_incomplete(self):
        """Test row label of an incomplete task."""
        task = Task(title="Buy milk", priority=3)
        assert task.label() == "Buy milk (Priority: 3)"

    def test_label_completed_has_checkmark(self):
        """Test row label of a completed task starts with a checkmark."""
        task = Task(title="Buy oat milk", priority=4, completed=True)
        assert task.label() == "✓ Buy oat milk (Priority: 4)"

    def test_details(self):
        """Test the detail pane text."""
        task = Task(title="Buy milk", description="2%, from store", priority=3)
        assert task.details() == (
            "Title: Buy milk\n\n"
            "Description: 2%, from store\n\n"
            "Priority: 3\n\n"
            "Status: Incomplete"
        )

    def test_details_completed_status(self):
        """Test that a completed task reports Status: Completed."""
        task = Task(title="Done", completed=True)
        assert task.details().endswith("Status: Completed")
        assert task.status_label == "Completed"

    def test_task_equality(self):
        """Test that tasks with same data are equal."""
        task1 = Task(id=1, title="Task", priority=2)
        task2 = Task(id=1, title="Task", priority=2)
        assert task1 == task2


class TestTaskForm:
    """Tests for TaskForm."""

    def test_defaults(self):
        """Test that a blank form has empty text and priority 1."""
        form = TaskForm()
        assert form.title == ""
        assert form.description == ""
        assert form.priority == 1

    def test_from_task(self):
        """Test that a form can be pre-filled from a task."""
        task = Task(id=7, title="Call mom", description="Sunday", priority=5, completed=True)
        form = TaskForm.from_task(task)
        assert form == TaskForm(title="Call mom", description="Sunday", priority=5)
