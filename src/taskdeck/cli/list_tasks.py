"""Print the stored task list without starting the TUI."""

from ..config import Settings
from ..models import sort_tasks
from ..repositories import TaskStore
from ..storage import build_storage
from .output import print_error, print_tasks


def run_list(settings: Settings) -> int:
    """Print stored tasks in display order.

    Returns:
        Exit code: 0 on success, 1 if the stored list could not be read.
    """
    failures: list[Exception] = []
    store = TaskStore(
        build_storage(settings),
        key=settings.storage_key,
        on_error=lambda _operation, exc: failures.append(exc),
    )
    tasks = store.load()
    if failures:
        print_error(f"Could not read tasks: {failures[0]}")
        return 1

    sort_tasks(tasks)
    print_tasks(tasks)
    return 0
