"""Task row widget."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import PriorityLevel, Task


class TaskRow(Widget, can_focus=True):
    """A single task in the list."""

    # Priority display mapping: (symbol, color)
    PRIORITY_DISPLAY: dict[PriorityLevel, tuple[str, str]] = {
        PriorityLevel.HIGH: ("▲", "red"),
        PriorityLevel.MEDIUM: ("●", "yellow"),
        PriorityLevel.LOW: ("▼", "green"),
    }

    def __init__(self, task_data: Task, list_index: int, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data
        self.list_index = list_index
        if task_data.completed:
            self.add_class("-completed")

    @property
    def task(self) -> Task:
        """Get the task for this row."""
        return self._task_data

    def compose(self) -> ComposeResult:
        yield Static(self._format_mark(), classes="task-mark")
        yield Static(self._format_name(), classes="task-name")
        yield Static(self._format_priority(), classes="task-priority")

    def _format_mark(self) -> str:
        return "[b]\\[x][/]" if self._task_data.completed else "\\[ ]"

    def _format_name(self) -> Text:
        """Task name, struck through when completed. Never parsed as markup."""
        style = "strike dim" if self._task_data.completed else ""
        return Text(self._task_data.name, style=style)

    def _format_priority(self) -> str:
        symbol, color = self.PRIORITY_DISPLAY[self._task_data.priority]
        return f"[{color}]{symbol}[/] {self._task_data.priority.label}"
