#!/usr/bin/env python3
"""
TASKCLI - CLI Interface
=======================
Command-line tool for managing a persistent task list.

Usage:
    taskcli add --description="Water plants"
    taskcli remove --id=1
    taskcli complete --id=1
    taskcli list
    taskcli clear
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pydantic

from .config import Settings
from .errors import TaskError
from .logging_setup import setup_logging
from .manager import TaskManager, format_tasks
from .schema import TaskSummary
from .store import TaskStore

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskcli",
        description="Manage a simple task list stored in a JSON file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  taskcli add --description="Water plants"   Add a new task
  taskcli list                               List all tasks
  taskcli complete --id=1                    Mark task 1 as completed
  taskcli remove --id=1                      Remove task 1 (ids are renumbered)
  taskcli clear                              Remove every task
        """
    )
    parser.add_argument(
        "-f", "--file",
        type=Path,
        default=settings.tasks_file,
        help=f"Path to tasks file (default: {settings.tasks_file})",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Add a new task")
    add_parser.add_argument("--description", required=True, help="Task description")

    # REMOVE command
    remove_parser = subparsers.add_parser("remove", help="Remove a task by id")
    remove_parser.add_argument("--id", dest="task_id", type=int, required=True, help="Task id")

    # COMPLETE command
    complete_parser = subparsers.add_parser("complete", help="Mark a task as completed")
    complete_parser.add_argument("--id", dest="task_id", type=int, required=True, help="Task id")

    # LIST command
    list_parser = subparsers.add_parser("list", help="List all tasks")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # CLEAR command
    subparsers.add_parser("clear", help="Clear all tasks")

    # PATH command
    subparsers.add_parser("path", help="Show the absolute path to the tasks file")

    return parser


def _log_level(args: argparse.Namespace, settings: Settings) -> str:
    if args.verbose:
        return "DEBUG"
    if args.quiet:
        return "WARNING"
    return settings.log_level


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = Settings.from_env()
    except pydantic.ValidationError as e:
        print(f"❌ Invalid TASKCLI_* environment settings: {e}", file=sys.stderr)
        return 2

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    setup_logging(_log_level(args, settings))

    if not args.command:
        parser.print_help()
        print("\nYou need to specify at least one command", file=sys.stderr)
        return 2

    manager = TaskManager(TaskStore(args.file))

    # Execute command
    try:
        if args.command == "add":
            task = manager.add_task(args.description)
            print(f'Task added: "{task.description}"')

        elif args.command == "remove":
            manager.remove_task(args.task_id)
            print(f"Task with ID {args.task_id} removed.")

        elif args.command == "complete":
            manager.complete_task(args.task_id)
            print(f"Task with ID {args.task_id} marked as completed.")

        elif args.command == "list":
            tasks = manager.list_tasks()
            if args.json:
                print(json.dumps({
                    "tasks": [task.model_dump(mode="json") for task in tasks],
                    "summary": TaskSummary.from_tasks(tasks).as_dict(),
                }, indent=2, ensure_ascii=False))
            else:
                print(format_tasks(tasks))

        elif args.command == "clear":
            manager.clear_tasks()
            print("All tasks have been cleared.")

        elif args.command == "path":
            print(args.file.resolve())

    except TaskError as e:
        logger.debug(f"{args.command} failed: {e!r}")
        print(f"❌ {e}")
        return 1
    finally:
        _report_load_error(manager.store)

    return 0


def _report_load_error(store: TaskStore) -> None:
    """Show a corrupt snapshot even when logging would hide it"""
    if store.load_error is None:
        return
    if logging.getLogger("taskcli.store").isEnabledFor(logging.ERROR):
        return  # already logged by the store
    print(f"❌ {store.load_error}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
