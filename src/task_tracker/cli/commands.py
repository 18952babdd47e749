# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.errors import TaskTrackerError, UsageError
from ..core.ports import Emitter
from ..tasks.task_manager import TaskManager
from ..tasks.task_models import TaskStatus

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


@dataclass(slots=True)
class CommandContext:
    manager: TaskManager
    emit: Emitter


CommandHandler = Callable[[CommandContext, list[str]], None]


class CommandRegistry:
    """Maps `task-cli <command>` names to handlers and their help texts."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text.strip()
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def help_for(self, name: str) -> str | None:
        return self._help.get(name.lower())

    def dispatch(self, ctx: CommandContext, argv: list[str]) -> int:
        """
        Run one command line (without the program name).
        Returns the process exit code; never raises TaskTrackerError.
        """
        if not argv:
            ctx.emit(GENERAL_HELP.strip())
            return EXIT_ERROR

        name = argv[0].lower()
        args = argv[1:]

        if name == "help":
            return self._dispatch_help(ctx, args)

        handler = self._handlers.get(name)
        if handler is None:
            ctx.emit(f"Error: unknown command '{name}'")
            ctx.emit("Run 'task-cli help' for usage instructions.")
            return EXIT_ERROR

        try:
            handler(ctx, args)
        except UsageError as e:
            ctx.emit(f"Error: {e}")
            help_text = self.help_for(name)
            if help_text and e.show_help:
                ctx.emit(help_text)
            return EXIT_ERROR
        except TaskTrackerError as e:
            logger.debug("Command %s failed", name, exc_info=True)
            ctx.emit(f"Error: {e}")
            return EXIT_ERROR

        return EXIT_OK

    def _dispatch_help(self, ctx: CommandContext, args: list[str]) -> int:
        if not args:
            ctx.emit(GENERAL_HELP.strip())
            return EXIT_OK

        sub = args[0].lower()
        if sub == "help":
            ctx.emit(HELP_HELP.strip())
            return EXIT_OK

        help_text = self.help_for(sub)
        if help_text is None:
            ctx.emit(f"Error: no help available for unknown command '{sub}'")
            ctx.emit("Run 'task-cli help' for a list of valid commands")
            return EXIT_ERROR

        ctx.emit(help_text)
        return EXIT_OK


def parse_id(raw: str) -> int:
    try:
        return int(raw.strip(), 10)
    except ValueError:
        raise UsageError(f"invalid ID format: {raw!r}", show_help=False) from None


def _require(args: list[str], count: int, message: str) -> None:
    if len(args) < count:
        raise UsageError(message)


def cmd_add(ctx: CommandContext, args: list[str]) -> None:
    _require(args, 1, "add command requires a description")
    ctx.manager.add_task(args[0])


def cmd_update(ctx: CommandContext, args: list[str]) -> None:
    _require(args, 2, "update command requires an ID and description")
    ctx.manager.update_task(parse_id(args[0]), args[1])


def cmd_delete(ctx: CommandContext, args: list[str]) -> None:
    _require(args, 1, "delete command requires an ID")
    ctx.manager.delete_task(parse_id(args[0]))


def cmd_list(ctx: CommandContext, args: list[str]) -> None:
    status: TaskStatus | None = None
    if args:
        try:
            status = TaskStatus(args[0])
        except ValueError:
            raise UsageError("invalid status. Use 'todo', 'in-progress', or 'done'.") from None
    ctx.manager.list_tasks(status)


def cmd_mark_todo(ctx: CommandContext, args: list[str]) -> None:
    _require(args, 1, "mark-todo command requires an ID")
    ctx.manager.mark_task_todo(parse_id(args[0]))


def cmd_mark_in_progress(ctx: CommandContext, args: list[str]) -> None:
    _require(args, 1, "mark-in-progress command requires an ID")
    ctx.manager.mark_task_in_progress(parse_id(args[0]))


def cmd_mark_done(ctx: CommandContext, args: list[str]) -> None:
    _require(args, 1, "mark-done command requires an ID")
    ctx.manager.mark_task_done(parse_id(args[0]))


GENERAL_HELP = """
NAME:
   task-cli - A command-line tool for managing tasks

USAGE:
   task-cli [command] [arguments]

COMMANDS:
   add <description>            Add a new task with the given description
   update <id> <description>    Update the description of a task with the given ID
   delete <id>                  Delete a task with the given ID
   mark-todo <id>               Mark a task with the given ID as todo
   mark-in-progress <id>        Mark a task with the given ID as in-progress
   mark-done <id>               Mark a task with the given ID as done
   list                         List all tasks
   list <status>                List tasks filtered by status (todo, in-progress, done)
   help [command]               Display help for a specific command

DESCRIPTION:
   task-cli is a simple tool to manage your tasks from the command line. You can add, update,
   delete, and mark tasks as in-progress or done. Use the list command to view all tasks or
   filter them by status.

EXAMPLES:
   Add a task:              task-cli add "Finish project report"
   Update a task:           task-cli update 1 "Finish project report and submit"
   Mark task as done:       task-cli mark-done 1
   List in-progress tasks:  task-cli list in-progress
"""

HELP_HELP = """
NAME:
   task-cli help - Display help information

USAGE:
   task-cli help [command]

DESCRIPTION:
   Displays general help for task-cli or detailed help for a specific command.

EXAMPLES:
   task-cli help
   task-cli help add
"""

ADD_HELP = """
NAME:
   task-cli add - Add a new task

USAGE:
   task-cli add <description>

DESCRIPTION:
   Adds a new task with the provided description to the task list.

EXAMPLES:
   task-cli add "Buy groceries"
   task-cli add "Finish project report"

OUTPUT:
   Task added successfully (ID: <id>)
"""

UPDATE_HELP = """
NAME:
   task-cli update - Update an existing task

USAGE:
   task-cli update <id> <description>

DESCRIPTION:
   Updates the description of the task with the specified ID.

EXAMPLES:
   task-cli update 1 "Buy groceries and cook dinner"
"""

DELETE_HELP = """
NAME:
   task-cli delete - Delete a task

USAGE:
   task-cli delete <id>

DESCRIPTION:
   Deletes the task with the specified ID from the task list.

EXAMPLES:
   task-cli delete 1
"""

LIST_HELP = """
NAME:
   task-cli list - List tasks

USAGE:
   task-cli list [todo|in-progress|done]

DESCRIPTION:
   Lists all tasks or tasks filtered by status (todo, in-progress, or done).
   If no status is provided, all tasks are listed.

EXAMPLES:
   task-cli list
   task-cli list done
"""


def _mark_help(status: str) -> str:
    return f"""
NAME:
   task-cli mark-{status} - Mark a task as {status}

USAGE:
   task-cli mark-{status} <id>

DESCRIPTION:
   Marks the task with the specified ID as {status}.

EXAMPLES:
   task-cli mark-{status} 1
"""


def build_registry() -> CommandRegistry:
    reg = CommandRegistry()
    reg.register("add", cmd_add, ADD_HELP)
    reg.register("update", cmd_update, UPDATE_HELP)
    reg.register("delete", cmd_delete, DELETE_HELP, aliases=["rm"])
    reg.register("list", cmd_list, LIST_HELP, aliases=["ls"])
    reg.register("mark-todo", cmd_mark_todo, _mark_help("todo"))
    reg.register("mark-in-progress", cmd_mark_in_progress, _mark_help("in-progress"))
    reg.register("mark-done", cmd_mark_done, _mark_help("done"))
    return reg


registry = build_registry()
