"""
TODOLIST - Interactive Shell
============================
Line-oriented prompt over the same task file as the one-shot CLI.
Reads commands until 'exit' or end of input, saving after each change.
"""

import argparse
import sys
from typing import List, Optional, TextIO

from .cli import (
    configure_logging,
    default_tasks_file,
    load_tasks,
    parse_task_id,
    save_tasks,
)
from .manager import TaskError, TaskManager

PROMPT = "> "


def print_help() -> None:
    """Displays the available commands"""
    print("Todo List Application")
    print("---------------------")
    print("Commands:")
    print("  add <task>       - Add a new task")
    print("  list             - List all tasks")
    print("  complete <id>    - Mark a task as completed")
    print("  delete <id>      - Delete a task")
    print("  help             - Show this help message")
    print("  exit             - Exit the application")


def _change_task(manager: TaskManager, command: str, arg: str) -> None:
    if not arg.strip():
        print("Error: Please specify a task ID")
        return
    task_id = parse_task_id(arg)
    if task_id is None:
        print(f"Error: Invalid task ID '{arg}'")
        return

    try:
        if command == "complete":
            task = manager.complete_task(task_id)
            print(f"Marked task {task_id} as completed: {task.title}")
        else:
            task = manager.delete_task(task_id)
            print(f"Deleted task {task_id}: {task.title}")
    except TaskError as e:
        print(f"Error: {e}")
        return
    save_tasks(manager)


def run_shell(manager: TaskManager, stdin: Optional[TextIO] = None) -> int:
    """Run the prompt loop until 'exit' or end of input"""
    stdin = stdin if stdin is not None else sys.stdin

    print("Welcome to the Todo List Application!")
    print("Type 'help' for a list of commands.")

    while True:
        print(PROMPT, end="", flush=True)
        try:
            line = stdin.readline()
        except UnicodeDecodeError as e:
            print(f"Error: could not read input line ({e.reason})")
            continue
        if not line:
            # End of input
            print()
            return 0

        line = line.rstrip("\r\n")
        if not line.strip():
            continue

        parts = line.split(" ", 1)
        command = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else ""

        if command == "add":
            if not arg.strip():
                print("Error: Task description cannot be empty")
                continue
            task = manager.add_task(arg)
            print(f"Added task: {task.title} (ID: {task.id})")
            save_tasks(manager)

        elif command == "list":
            print(manager.get_report())

        elif command in ("complete", "delete"):
            _change_task(manager, command, arg)

        elif command == "help":
            print_help()

        elif command == "exit":
            print("Goodbye!")
            return 0

        else:
            print("Unknown command. Type 'help' for available commands.")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="todo-shell",
        description="Interactive todo list shell",
    )
    parser.add_argument(
        "-f", "--file", default=default_tasks_file(),
        help="Task file (default: $TODO_FILE or todo.json)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log store activity")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    manager = TaskManager(tasks_file=args.file)
    load_tasks(manager)
    return run_shell(manager)


if __name__ == "__main__":
    sys.exit(main())
