#!/usr/bin/env python3
"""
TODOLIST - CLI Interface
========================
One-shot command-line tool: run a single command against the task file
and exit.

Usage:
    todo add Buy milk
    todo list
    todo complete 1
    todo delete 1
    todo shell
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .manager import DEFAULT_TASKS_FILE, TaskError, TaskManager

COMMANDS = ("add", "list", "complete", "delete", "help", "shell")


def default_tasks_file() -> str:
    """Task file used when --file is not given"""
    return os.environ.get("TODO_FILE") or DEFAULT_TASKS_FILE


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def argv_text(text: str) -> str:
    """Undo surrogateescape on argv so undecodable bytes become U+FFFD"""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def parse_task_id(raw: str) -> Optional[int]:
    """Integer task id, or None when the text is not one"""
    try:
        return int(raw.strip())
    except ValueError:
        return None


def load_tasks(manager: TaskManager) -> None:
    """Startup load; a failure is reported and the store stays empty"""
    try:
        manager.load()
    except TaskError as e:
        print(f"Error loading tasks: {e}")


def save_tasks(manager: TaskManager) -> bool:
    try:
        manager.save()
    except TaskError as e:
        print(f"Warning: could not save tasks: {e}")
        return False
    return True


def _global_options() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "-f", "--file", default=default_tasks_file(),
        help="Task file (default: $TODO_FILE or todo.json)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log store activity")
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="Todo CLI - A simple task manager",
        parents=[_global_options()],
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  todo add "Buy groceries"    Add a new task
  todo list                   List all tasks
  todo complete 2             Mark task 2 as completed
  todo delete 3               Delete task 3
  todo shell                  Start the interactive shell
        """
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Add a new task")
    add_parser.add_argument("title", nargs=argparse.REMAINDER, help="Task description")

    # LIST command
    list_parser = subparsers.add_parser("list", help="List all tasks")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")
    list_parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)

    # COMPLETE command
    complete_parser = subparsers.add_parser("complete", help="Mark a task as completed")
    complete_parser.add_argument("task_ids", nargs="*", metavar="task_id", help="Task ID to complete")

    # DELETE command
    delete_parser = subparsers.add_parser("delete", help="Delete a task")
    delete_parser.add_argument("task_ids", nargs="*", metavar="task_id", help="Task ID to delete")

    subparsers.add_parser("help", help="Show this help message")
    subparsers.add_parser("shell", help="Start the interactive shell")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()

    # Reject unknown commands with our own message before argparse sees them
    _, rest = _global_options().parse_known_args(argv)
    if not rest:
        parser.print_help()
        return 1
    if not rest[0].startswith("-") and rest[0] not in COMMANDS:
        print(f"Unknown command: {argv_text(rest[0])}")
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "help":
        parser.print_help()
        return 0

    manager = TaskManager(tasks_file=args.file)
    load_tasks(manager)

    # Execute command
    if args.command == "shell":
        from .shell import run_shell

        return run_shell(manager)

    elif args.command == "add":
        title = argv_text(" ".join(args.title))
        if not title.strip():
            print("Error: Task description required")
            return 1
        task = manager.add_task(title)
        print(f"Added task: {task.title} (ID: {task.id})")
        return 0 if save_tasks(manager) else 1

    elif args.command == "list":
        if args.json:
            print(json.dumps(manager.to_dict(), indent=2, ensure_ascii=False))
        else:
            print(manager.get_report())

    elif args.command in ("complete", "delete"):
        if len(args.task_ids) != 1:
            print("Error: Task ID required")
            return 1
        raw_id = argv_text(args.task_ids[0])
        task_id = parse_task_id(raw_id)
        if task_id is None:
            print(f"Error: Invalid task ID '{raw_id}'")
            return 1

        try:
            if args.command == "complete":
                task = manager.complete_task(task_id)
                print(f"Marked task {task_id} as completed: {task.title}")
            else:
                task = manager.delete_task(task_id)
                print(f"Deleted task {task_id}: {task.title}")
        except TaskError as e:
            print(f"Error: {e}")
            return 1
        return 0 if save_tasks(manager) else 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
