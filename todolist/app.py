"""tkinter window for todolist.

TaskListApp builds the main window (task list, detail pane, buttons) and
implements TaskView so the controller can drive it. TaskDialog is the modal
add/edit form.
"""

import logging
import tkinter as tk
from tkinter import messagebox, simpledialog
from typing import List, Optional

from todolist.controller import TaskController, TaskView
from todolist.models import DEFAULT_PRIORITY, MAX_PRIORITY, MIN_PRIORITY, TaskForm
from todolist.repository import TaskRepository

logger = logging.getLogger(__name__)

WINDOW_TITLE = "TODO List Application"
WINDOW_GEOMETRY = "600x400"
FONT = ("Arial", 14)
BUTTON_LABELS = ("Add Task", "Edit Task", "Delete Task", "Mark Complete")


def parse_priority(raw: str, default: int = DEFAULT_PRIORITY) -> int:
    """Read a spinbox value, clamping it into the allowed priority range."""
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return max(MIN_PRIORITY, min(MAX_PRIORITY, value))


class TaskDialog(simpledialog.Dialog):
    """Modal form with title, description and priority fields.

    After the dialog closes, ``result`` holds a TaskForm if the user pressed
    OK, or None if the dialog was cancelled.
    """

    def __init__(self, parent: tk.Misc, heading: str, form: TaskForm):
        self.form = form
        self.result: Optional[TaskForm] = None
        super().__init__(parent, title=heading)

    def body(self, master):
        tk.Label(master, text="Title:").grid(row=0, column=0, sticky=tk.W)
        self.title_entry = tk.Entry(master, width=40)
        self.title_entry.insert(0, self.form.title)
        self.title_entry.grid(row=1, column=0, sticky=tk.EW, pady=(0, 6))

        tk.Label(master, text="Description:").grid(row=2, column=0, sticky=tk.W)
        self.description_entry = tk.Entry(master, width=40)
        self.description_entry.insert(0, self.form.description)
        self.description_entry.grid(row=3, column=0, sticky=tk.EW, pady=(0, 6))

        tk.Label(master, text=f"Priority ({MIN_PRIORITY}-{MAX_PRIORITY}):").grid(
            row=4, column=0, sticky=tk.W
        )
        self.priority_var = tk.StringVar(master, value=str(self.form.priority))
        self.priority_spinbox = tk.Spinbox(
            master,
            from_=MIN_PRIORITY,
            to=MAX_PRIORITY,
            increment=1,
            width=5,
            textvariable=self.priority_var,
        )
        self.priority_spinbox.grid(row=5, column=0, sticky=tk.W)

        return self.title_entry

    def apply(self):
        self.result = TaskForm(
            title=self.title_entry.get(),
            description=self.description_entry.get(),
            priority=parse_priority(self.priority_var.get(), self.form.priority),
        )


class TaskListApp(TaskView):
    """Main application window.

    Attributes:
        root: The Tk root window
        controller: Controller running the task operations
    """

    def __init__(self, root: tk.Tk, repository: Optional[TaskRepository] = None):
        self.root = root
        self.root.title(WINDOW_TITLE)
        self.root.geometry(WINDOW_GEOMETRY)

        self._build_list()
        self._build_details()
        self._build_controls()

        self.controller = TaskController(self, repository)
        self.controller.refresh()

    # ---- layout ----

    def _build_list(self) -> None:
        frame = tk.Frame(self.root)
        frame.grid(row=0, column=0, sticky=tk.NSEW)

        scrollbar = tk.Scrollbar(frame, orient=tk.VERTICAL)
        self.task_list = tk.Listbox(
            frame,
            selectmode=tk.SINGLE,
            exportselection=False,
            font=FONT,
            yscrollcommand=scrollbar.set,
        )
        scrollbar.config(command=self.task_list.yview)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.task_list.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.task_list.bind("<<ListboxSelect>>", self._on_select)

        self.root.rowconfigure(0, weight=1)
        self.root.columnconfigure(0, weight=2)

    def _build_details(self) -> None:
        frame = tk.Frame(self.root)
        frame.grid(row=0, column=1, sticky=tk.NSEW)

        scrollbar = tk.Scrollbar(frame, orient=tk.VERTICAL)
        self.details = tk.Text(
            frame,
            wrap=tk.WORD,
            width=24,
            font=FONT,
            state=tk.DISABLED,
            yscrollcommand=scrollbar.set,
        )
        scrollbar.config(command=self.details.yview)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.details.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self.root.columnconfigure(1, weight=1)

    def _build_controls(self) -> None:
        frame = tk.Frame(self.root)
        frame.grid(row=1, column=0, columnspan=2, pady=6)

        handlers = (
            self._on_add,
            self._on_edit,
            self._on_delete,
            self._on_complete,
        )
        for label, handler in zip(BUTTON_LABELS, handlers):
            tk.Button(frame, text=label, command=handler).pack(side=tk.LEFT, padx=4)

    # ---- event handlers ----

    def _on_select(self, event=None) -> None:
        chosen = self.task_list.curselection()
        # A click on empty space leaves nothing selected.
        if not chosen:
            return
        self.controller.select_index(chosen[0])

    def _on_add(self) -> None:
        self.controller.add_task()

    def _on_edit(self) -> None:
        self.controller.edit_task()

    def _on_delete(self) -> None:
        self.controller.delete_task()

    def _on_complete(self) -> None:
        self.controller.mark_complete()

    # ---- TaskView ----

    def prompt_task(self, heading: str, form: TaskForm) -> Optional[TaskForm]:
        dialog = TaskDialog(self.root, heading, form)
        return dialog.result

    def show_error(self, message: str) -> None:
        messagebox.showerror("Error", message, parent=self.root)

    def show_info(self, message: str) -> None:
        messagebox.showinfo("Success", message, parent=self.root)

    def render(self, rows: List[str], selected: Optional[int]) -> None:
        self.task_list.delete(0, tk.END)
        for row in rows:
            self.task_list.insert(tk.END, row)
        if selected is not None:
            self.task_list.selection_set(selected)
            self.task_list.see(selected)

    def show_details(self, text: str) -> None:
        self.details.config(state=tk.NORMAL)
        self.details.delete("1.0", tk.END)
        self.details.insert("1.0", text)
        self.details.config(state=tk.DISABLED)

    def run(self) -> None:
        """Run the Tk main loop until the window is closed."""
        logger.info("Window opened")
        self.root.mainloop()
        logger.info("Window closed")
