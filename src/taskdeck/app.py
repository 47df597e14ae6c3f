"""taskdeck TUI Application."""

import logging
import threading

from textual.app import App
from textual.binding import Binding
from textual.screen import ModalScreen

from .config import Settings
from .errors import TaskIndexError
from .models import PriorityLevel, Task
from .repositories import TaskStore
from .services import TaskListService
from .services.task_list_service import PersistJob
from .storage import build_storage
from .ui.screens.task_list import TaskListScreen
from .ui.widgets import ClearCompletedModal, HelpScreen, PrioritySelectorModal

logger = logging.getLogger(__name__)

LIGHT_THEME = "textual-light"
DARK_THEME = "textual-dark"


class TaskdeckApp(App):
    """taskdeck - prioritized task list."""

    TITLE = "Task Manager"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        Binding("t", "toggle_theme", "Theme", show=True),
        Binding("i", "focus_input", "New", show=True),
        # Navigation
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        # Task actions
        Binding("space", "toggle_task", "Done", show=True),
        Binding("p", "change_priority", "Priority", show=True),
        Binding("d", "delete_task", "Delete", show=True),
        Binding("c", "clear_completed", "Clear done", show=True),
        Binding("escape", "escape", "Back", show=False),
    ]

    SCREENS = {
        "tasks": TaskListScreen,
    }

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._ui_thread_id = threading.get_ident()
        self._pending_priority_index: int | None = None
        self._init_services()

    def _init_services(self) -> None:
        """Initialize storage and services."""
        on_error = self._report_storage_error if self.settings.strict else None
        self.store = TaskStore(
            build_storage(self.settings),
            key=self.settings.storage_key,
            on_error=on_error,
        )
        self.task_service = TaskListService(self.store, dispatch=self._dispatch_persist)

    def _dispatch_persist(self, job: PersistJob) -> None:
        """Run a save in a worker thread so the UI never waits on disk."""
        self.run_worker(job, name="persist", group="persist", thread=True, exit_on_error=False)

    def _report_storage_error(self, operation: str, exc: Exception) -> None:
        """Surface a swallowed load/save failure as a notification (--strict)."""
        message = f"Could not {operation} tasks: {exc}"
        if threading.get_ident() == self._ui_thread_id:
            self.notify(message, severity="warning")
        else:
            self.call_from_thread(self.notify, message, severity="warning")

    def on_mount(self) -> None:
        """Load tasks before the list screen accepts any input."""
        self.theme = DARK_THEME if self.settings.dark else LIGHT_THEME
        self.task_service.load()
        self.push_screen("tasks")

    async def action_quit(self) -> None:
        """Wait for pending saves, then exit."""
        await self.workers.wait_for_complete()
        self.exit()

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    def action_toggle_theme(self) -> None:
        """Switch between light and dark themes."""
        self.theme = LIGHT_THEME if self.theme == DARK_THEME else DARK_THEME

    def action_focus_input(self) -> None:
        screen = self.screen
        if isinstance(screen, TaskListScreen):
            screen.focus_input()

    def action_escape(self) -> None:
        """Dismiss a modal, or move focus from the entry row to the list."""
        screen = self.screen

        if isinstance(screen, ModalScreen):
            screen.dismiss()
            return

        if isinstance(screen, TaskListScreen) and screen.input_has_focus:
            screen.focus_list()

    # Navigation actions
    def action_nav_up(self) -> None:
        """Navigate to previous task."""
        screen = self.screen
        if isinstance(screen, TaskListScreen):
            screen.navigate_task(-1)

    def action_nav_down(self) -> None:
        """Navigate to next task."""
        screen = self.screen
        if isinstance(screen, TaskListScreen):
            screen.navigate_task(1)

    # Task actions
    def action_toggle_task(self) -> None:
        """Flip the completed flag of the current task."""
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        index = screen.current_task_index
        task = screen.get_current_task()
        if index is None or task is None:
            return

        try:
            tasks = self.task_service.toggle_completed(index, not task.completed)
        except TaskIndexError as e:
            self._reject(screen, e)
            return

        # No re-sort on toggle, so the row stays where it is
        screen.show_tasks(tasks, focus_index=index)

    def action_delete_task(self) -> None:
        """Delete the current task."""
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        index = screen.current_task_index
        if index is None:
            return

        try:
            tasks = self.task_service.delete_task(index)
        except TaskIndexError as e:
            self._reject(screen, e)
            return

        screen.show_tasks(tasks, focus_index=min(index, len(tasks) - 1) if tasks else None)
        self.notify("Task deleted", timeout=2)

    def action_change_priority(self) -> None:
        """Show the priority picker for the current task."""
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        index = screen.current_task_index
        task = screen.get_current_task()
        if index is None or task is None:
            return

        self._pending_priority_index = index
        self.push_screen(
            PrioritySelectorModal(task.priority, task.name),
            callback=self._handle_priority_selection,
        )

    def _handle_priority_selection(self, priority: PriorityLevel | None) -> None:
        """Apply the picked priority; the list re-sorts so focus follows the task."""
        index = self._pending_priority_index
        self._pending_priority_index = None
        if priority is None or index is None:
            return

        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        try:
            tasks = self.task_service.change_priority(index, priority)
        except TaskIndexError as e:
            self._reject(screen, e)
            return

        moved = screen.task_list.get_task(index)
        focus_index = _find_task(tasks, moved, priority) if moved is not None else None
        screen.show_tasks(tasks, focus_index=focus_index)
        self.notify(f"Priority: {priority.label}", timeout=2)

    def action_clear_completed(self) -> None:
        """Remove completed tasks after confirmation."""
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        if not self.task_service.has_completed:
            self.notify("No completed tasks", timeout=2)
            return

        completed = [task.name for task in self.task_service.tasks if task.completed]
        self.push_screen(
            ClearCompletedModal(completed),
            callback=self._handle_clear_confirm,
        )

    def _handle_clear_confirm(self, confirmed: bool | None) -> None:
        """Handle clear-completed confirmation result."""
        if not confirmed:
            return

        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        tasks = self.task_service.clear_completed()
        screen.show_tasks(tasks, focus_index=0 if tasks else None)
        self.notify("Completed tasks cleared", timeout=2)

    def _reject(self, screen: TaskListScreen, exc: TaskIndexError) -> None:
        """Report a stale position and redraw from the service."""
        logger.warning("Rejected task operation: %s", exc)
        self.notify("That task is no longer in the list", severity="warning")
        screen.load_tasks()


def _find_task(tasks: list[Task], before: Task, priority: PriorityLevel) -> int | None:
    """Find where a task landed after its priority changed and the list re-sorted."""
    for index, task in enumerate(tasks):
        if (
            task.name == before.name
            and task.completed == before.completed
            and task.priority == priority
        ):
            return index
    return None


def run(settings: Settings | None = None) -> None:
    """Run the taskdeck application."""
    app = TaskdeckApp(settings)
    app.run()
