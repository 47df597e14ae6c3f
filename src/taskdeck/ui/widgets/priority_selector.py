"""Priority selector modal."""

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, OptionList
from textual.widgets.option_list import Option

from ...models import PriorityLevel
from .task_row import TaskRow


class PrioritySelectorModal(ModalScreen[PriorityLevel | None]):
    """Modal for picking a new priority for the focused task.

    Dismisses with the chosen PriorityLevel, or None when cancelled.
    """

    DEFAULT_CSS = """
    PrioritySelectorModal {
        align: center middle;
    }

    PrioritySelectorModal > Vertical {
        width: 36;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    PrioritySelectorModal Label {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
        text-style: bold;
    }

    PrioritySelectorModal OptionList {
        height: auto;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    # Highest first, matching list order
    CHOICES = [PriorityLevel.HIGH, PriorityLevel.MEDIUM, PriorityLevel.LOW]

    def __init__(self, current: PriorityLevel, task_name: str = "") -> None:
        """Initialize the selector.

        Args:
            current: Priority to highlight initially
            task_name: Name shown in the title
        """
        super().__init__()
        self._current = current
        self._task_name = task_name

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("Change priority", id="priority-title")
            option_list = OptionList(id="priority-list")
            for priority in self.CHOICES:
                symbol, color = TaskRow.PRIORITY_DISPLAY[priority]
                option_list.add_option(
                    Option(f"[{color}]{symbol}[/] Set {priority.label}", id=priority.value)
                )
            yield option_list

    def on_mount(self) -> None:
        """Highlight the current priority and focus the list."""
        if self._task_name:
            self.query_one("#priority-title", Label).update(
                Text(f"Change priority: {self._task_name}")
            )
        option_list = self.query_one(OptionList)
        option_list.highlighted = self.CHOICES.index(self._current)
        option_list.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Handle option selection via click or enter."""
        self.dismiss(PriorityLevel(event.option.id))

    def action_cancel(self) -> None:
        self.dismiss(None)
