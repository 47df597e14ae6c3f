"""Confirmation dialog for clearing completed tasks."""

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static


class ClearCompletedModal(ModalScreen[bool]):
    """Lists the completed tasks and asks before removing them.

    Dismisses with True to clear, False (or None on escape) to keep them.
    """

    DEFAULT_CSS = """
    ClearCompletedModal {
        align: center middle;
    }

    ClearCompletedModal > Vertical {
        width: 56;
        height: auto;
        max-height: 80%;
        padding: 1 2;
        background: $surface;
        border: solid $warning;
    }

    ClearCompletedModal #clear-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    ClearCompletedModal .cleared-name {
        color: $text-muted;
        text-style: strike;
    }

    ClearCompletedModal .cleared-more {
        color: $text-muted;
    }

    ClearCompletedModal .buttons {
        width: 100%;
        height: auto;
        margin-top: 1;
        align: center middle;
    }

    ClearCompletedModal Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("y", "confirm", "Clear"),
        Binding("n", "cancel", "Keep"),
        Binding("escape", "cancel", "Cancel"),
    ]

    MAX_LISTED = 8

    def __init__(self, task_names: list[str]) -> None:
        """Initialize the dialog.

        Args:
            task_names: Names of the completed tasks, in list order
        """
        super().__init__()
        self.task_names = task_names

    @staticmethod
    def title_for(count: int) -> str:
        noun = "task" if count == 1 else "tasks"
        return f"Clear {count} completed {noun}?"

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self.title_for(len(self.task_names)), id="clear-title")
            for name in self.task_names[: self.MAX_LISTED]:
                yield Static(Text(f"✓ {name}"), classes="cleared-name")
            hidden = len(self.task_names) - self.MAX_LISTED
            if hidden > 0:
                yield Static(f"+{hidden} more", classes="cleared-more")
            with Center(classes="buttons"):
                yield Button("Clear", id="clear", variant="warning")
                yield Button("Keep", id="keep", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "clear")

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
