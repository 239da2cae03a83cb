"""Test doubles for the controller's view interface."""

from typing import List, Optional

from todolist.controller import TaskView
from todolist.models import TaskForm


class FakeView(TaskView):
    """Records everything the controller shows and answers forms from a script.

    Queue answers with ``answer()``; each prompt pops the next one. An
    answer of None behaves like pressing Cancel.
    """

    def __init__(self):
        self.answers: List[Optional[TaskForm]] = []
        self.prompts: List[tuple] = []
        self.errors: List[str] = []
        self.infos: List[str] = []
        self.rows: List[str] = []
        self.selected: Optional[int] = None
        self.details = ""

    def answer(self, form: Optional[TaskForm]) -> "FakeView":
        self.answers.append(form)
        return self

    def prompt_task(self, heading, form):
        self.prompts.append((heading, form))
        return self.answers.pop(0)

    def show_error(self, message):
        self.errors.append(message)

    def show_info(self, message):
        self.infos.append(message)

    def render(self, rows, selected):
        self.rows = list(rows)
        self.selected = selected

    def show_details(self, text):
        self.details = text
