"""CLI entry point for taskdeck."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="taskdeck",
        description="Terminal task list with priorities",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding preferences.yaml (default: $XDG_DATA_HOME/taskdeck)",
    )
    parser.add_argument(
        "--dark",
        action="store_true",
        help="Start with the dark theme",
    )
    parser.add_argument(
        "--ephemeral",
        action="store_true",
        help="Keep tasks in memory only; nothing is written to disk",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Show storage errors as notifications instead of only logging them",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print stored tasks and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings from CLI args; unset flags fall back to TASKDECK_* env vars."""
    settings_kwargs: dict = {}
    if args.data_dir:
        settings_kwargs["data_dir"] = args.data_dir
    if args.dark:
        settings_kwargs["dark"] = True
    if args.ephemeral:
        settings_kwargs["ephemeral"] = True
    if args.strict:
        settings_kwargs["strict"] = True
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    settings = build_settings(args)

    setup_logging(settings.verbose, settings.log_file)

    if args.list:
        from .cli.list_tasks import run_list

        raise SystemExit(run_list(settings))

    # Textual is only needed for the interactive UI
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
