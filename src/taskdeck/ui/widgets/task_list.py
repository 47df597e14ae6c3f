"""Scrollable task list widget."""

from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task
from .task_row import TaskRow


class TaskListScroll(VerticalScroll):
    """Scroll container for task rows.

    Raises SkipAction for navigation keys so they bubble up to the App
    for task navigation instead of being handled as scroll actions.
    """

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()


class EmptyListMessage(Static):
    """Displayed when there are no tasks."""

    pass


class TaskList(Widget):
    """The ordered list of task rows."""

    EMPTY_TEXT = "No tasks yet - add one!"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._tasks: list[Task] = []
        self._pending_focus: int | None = None

    def compose(self) -> ComposeResult:
        yield Static(self._header_text, classes="list-header", id="list-header")
        yield TaskListScroll(id="list-content")

    @property
    def _header_text(self) -> str:
        """Header text with open/total counts."""
        open_count = sum(1 for task in self._tasks if not task.completed)
        return f"Tasks [dim]({open_count} open / {len(self._tasks)})[/]"

    def set_tasks(self, tasks: list[Task], focus_index: int | None = None) -> None:
        """Replace the displayed tasks.

        Args:
            tasks: Ordered snapshot to display
            focus_index: Row to focus once rendered, if any
        """
        self._tasks = tasks
        self._pending_focus = focus_index
        self.call_after_refresh(self._refresh_rows)

    async def _refresh_rows(self) -> None:
        """Rebuild the task rows."""
        content = self.query_one("#list-content", TaskListScroll)

        await content.remove_children()

        if not self._tasks:
            await content.mount(EmptyListMessage(self.EMPTY_TEXT))
        else:
            await content.mount_all(
                TaskRow(task, index, id=f"task-{index}") for index, task in enumerate(self._tasks)
            )

        self.query_one("#list-header", Static).update(self._header_text)

        if self._pending_focus is not None:
            self.focus_task(self._pending_focus)
            self._pending_focus = None

    @property
    def tasks(self) -> list[Task]:
        return self._tasks

    @property
    def task_count(self) -> int:
        return len(self._tasks)

    def focus_task(self, index: int) -> bool:
        """
        Focus the row at the given index.

        Returns:
            True if a row was focused, False otherwise
        """
        if not 0 <= index < len(self._tasks):
            return False
        rows = self.query(f"#task-{index}")
        if not rows:
            return False
        row = rows.first(TaskRow)
        row.focus()
        row.scroll_visible()
        return True

    def get_task(self, index: int) -> Task | None:
        """Get task at index."""
        if 0 <= index < len(self._tasks):
            return self._tasks[index]
        return None
