"""ANSI rendering of the task list for plain terminals."""

import sys

from ..models import PriorityLevel, Task

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"

DONE_MARK = "\u2713"  # ✓
OPEN_MARK = "\u2022"  # •
ERROR_MARK = "\u2717"  # ✗

# Same colors as the TUI rows
PRIORITY_COLORS = {
    PriorityLevel.HIGH: RED,
    PriorityLevel.MEDIUM: YELLOW,
    PriorityLevel.LOW: GREEN,
}


def _supports_color() -> bool:
    """Check if stdout is a terminal."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _colorize(text: str, color: str) -> str:
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def task_line(task: Task) -> str:
    """One line per task: completion mark, name, priority label."""
    if task.completed:
        mark = _colorize(DONE_MARK, GREEN)
        name = _colorize(task.name, DIM)
    else:
        mark = _colorize(OPEN_MARK, YELLOW)
        name = task.name
    priority = _colorize(f"[{task.priority.label}]", PRIORITY_COLORS[task.priority])
    return f"{mark} {name} {priority}"


def print_tasks(tasks: list[Task]) -> None:
    """Print a header with the open/total counts, then one line per task."""
    open_count = sum(1 for task in tasks if not task.completed)
    print(_colorize(f"Tasks ({open_count} open / {len(tasks)})", BLUE))
    if not tasks:
        print(_colorize("No tasks yet - add one!", DIM))
        return
    for task in tasks:
        print(task_line(task))


def print_error(message: str) -> None:
    print(f"{_colorize(ERROR_MARK, RED)} {message}")
