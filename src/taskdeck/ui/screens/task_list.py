"""Main task list screen."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Select

from ...models import PriorityLevel, Task
from ..widgets.task_list import TaskList
from ..widgets.task_row import TaskRow


class TaskListScreen(Screen):
    """Entry row on top, ordered task list below."""

    DEFAULT_PRIORITY = PriorityLevel.MEDIUM

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_task = 0

    def compose(self) -> ComposeResult:
        yield Header()

        with Horizontal(id="entry-row"):
            yield Input(placeholder="Task name", id="task-name")
            yield Select(
                [(priority.label, priority) for priority in PriorityLevel],
                value=self.DEFAULT_PRIORITY,
                allow_blank=False,
                id="task-priority",
            )
            yield Button("Add", id="add-task", variant="primary")

        yield TaskList(id="task-list")
        yield Footer()

    def on_mount(self) -> None:
        """Render the loaded tasks and put the cursor in the input."""
        self.load_tasks()
        self.focus_input()

    @property
    def task_list(self) -> TaskList:
        return self.query_one("#task-list", TaskList)

    def load_tasks(self, focus_index: int | None = None) -> None:
        """Render the current snapshot from the task service."""
        self.show_tasks(self.app.task_service.tasks, focus_index)

    def show_tasks(self, tasks: list[Task], focus_index: int | None = None) -> None:
        """
        Render a snapshot returned by the task service.

        Args:
            tasks: Ordered snapshot to render
            focus_index: If provided, focus this row after rendering
        """
        if focus_index is not None:
            self._current_task = focus_index
        if tasks:
            self._current_task = max(0, min(self._current_task, len(tasks) - 1))
        else:
            self._current_task = 0
        self.task_list.set_tasks(tasks, focus_index=focus_index)

    # --- Entry row ---

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "task-name":
            self.submit_task()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-task":
            self.submit_task()

    def submit_task(self) -> None:
        """Add a task from the entry row, then reset it."""
        name_input = self.query_one("#task-name", Input)
        priority_select = self.query_one("#task-priority", Select)

        priority = priority_select.value
        if not isinstance(priority, PriorityLevel):
            priority = self.DEFAULT_PRIORITY

        if not name_input.value.strip():
            return

        tasks = self.app.task_service.add_task(name_input.value, priority)
        name_input.value = ""
        priority_select.value = self.DEFAULT_PRIORITY
        self.show_tasks(tasks)

    def focus_input(self) -> None:
        self.query_one("#task-name", Input).focus()

    # --- Navigation ---

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        """Track the row focused by mouse or tab."""
        if isinstance(event.widget, TaskRow):
            self._current_task = event.widget.list_index

    def focus_list(self) -> None:
        """Move focus from the entry row to the current task."""
        if not self.task_list.focus_task(self._current_task):
            self.set_focus(None)

    def navigate_task(self, delta: int) -> None:
        """Move focus up or down the list."""
        count = self.task_list.task_count
        if count == 0:
            return
        new_task = max(0, min(self._current_task + delta, count - 1))
        self._current_task = new_task
        self.task_list.focus_task(new_task)

    @property
    def current_task_index(self) -> int | None:
        """Index of the task under the cursor, or None if the list is empty."""
        if self.task_list.task_count == 0:
            return None
        return self._current_task

    def get_current_task(self) -> Task | None:
        """Get the task under the cursor."""
        index = self.current_task_index
        if index is None:
            return None
        return self.task_list.get_task(index)

    @property
    def input_has_focus(self) -> bool:
        """Whether the entry row owns focus (task keys are then ignored)."""
        focused = self.focused
        return focused is not None and focused.id in ("task-name", "task-priority", "add-task")
