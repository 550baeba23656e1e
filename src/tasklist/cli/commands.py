# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..connectors.theme import color_enabled, render_task_list
from ..core.controller import EditIntent
from ..core.state import AppState
from ..tasks.task_models import Priority, Task

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, list[str], CommandEmitter | None], Awaitable[str]]

logger = logging.getLogger(__name__)

_YES = ("yes", "y")


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

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
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        # A pending delete-all confirmation only survives until the next command.
        if handler is not cmd_clear:
            state.clear_pending = False

        return await handler(state, args, emit)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def render(state: AppState) -> str:
    ctrl = state.controller
    mode = str(getattr(state.settings, "color", "auto"))
    return render_task_list(ctrl.tasks, dark=ctrl.is_dark_mode, use_color=color_enabled(mode))


def _task_at(state: AppState, raw: str) -> Task | None:
    """Resolve a 1-based row number from the last rendered list."""
    try:
        idx = int(raw)
    except ValueError:
        return None
    tasks = state.controller.tasks
    if 1 <= idx <= len(tasks):
        return tasks[idx - 1]
    return None


def _priority_word(word: str) -> Priority | None:
    """Only the full words low / medium / high select a priority inside a command."""
    w = word.strip().lower()
    for p in Priority:
        if w == p.name.lower():
            return p
    return None


def _split_priority(args: list[str]) -> tuple[Priority | None, list[str]]:
    """Leading priority word is optional: "/add high buy milk" or "/add buy milk"."""
    if len(args) >= 2:
        p = _priority_word(args[0])
        if p is not None:
            return p, args[1:]
    return None, args


async def cmd_help(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


async def cmd_list(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return render(state)


async def cmd_refresh(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    await state.controller.refresh()
    return render(state)


async def cmd_add(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /add buy milk          -> Medium priority
    /add high buy milk     -> explicit priority (low | medium | high)
    """
    priority, words = _split_priority(args)
    created = await state.controller.add(" ".join(words), priority)
    if created is None:
        return ""
    return render(state)


async def add_plain(state: AppState, text: str) -> str:
    """Plain console text (no leading "/") is always the whole task name."""
    state.clear_pending = False
    created = await state.controller.add(text)
    if created is None:
        return ""
    return render(state)


async def cmd_done(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    task = _task_at(state, args[0]) if args else None
    if task is None:
        return "Usage: /done N (row number from /list)."
    await state.controller.toggle_done(task)
    return render(state)


async def cmd_edit(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /edit N new name           -> keep priority
    /edit N high new name      -> change priority too
    /edit N high               -> change priority only
    """
    task = _task_at(state, args[0]) if args else None
    if task is None:
        return "Usage: /edit N [low|medium|high] [new name]."

    rest = args[1:]
    priority, words = _split_priority(rest)
    if priority is None and len(rest) == 1:
        priority = _priority_word(rest[0])
        if priority is not None:
            words = []
    if priority is None and not words:
        return "Usage: /edit N [low|medium|high] [new name]."

    intent = EditIntent(name=" ".join(words) or task.name, priority=priority or task.priority)
    await state.controller.apply_edit(task, intent)
    return render(state)


async def cmd_rm(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    task = _task_at(state, args[0]) if args else None
    if task is None:
        return "Usage: /rm N (row number from /list)."
    await state.controller.remove(task)
    return render(state)


async def cmd_clear(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /clear       -> ask for confirmation
    /clear yes   -> delete every task
    /clear no    -> cancel
    """
    if not args:
        state.clear_pending = True
        return (
            "Delete all tasks? This will permanently remove all tasks.\n"
            "Type /clear yes to confirm or /clear no to cancel."
        )

    pending = state.clear_pending
    state.clear_pending = False
    if not pending:
        return "Nothing to confirm. Use /clear first."

    accepted = args[0].lower() in _YES
    n = await state.controller.remove_all(lambda: accepted)
    if not accepted:
        return "Cancelled."
    return f"Deleted {n} task(s).\n" + render(state)


async def cmd_theme(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    dark = state.controller.toggle_theme()
    return f"Theme: {'dark' if dark else 'light'}.\n" + render(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("refresh", cmd_refresh, help_text="Reload tasks from storage.")
registry.register("add", cmd_add, help_text="Add a task: /add [low|medium|high] name.")
registry.register("done", cmd_done, help_text="Toggle done: /done N.", aliases=["toggle"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit N [low|medium|high] [name].")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm N.", aliases=["delete", "del"])
registry.register("clear", cmd_clear, help_text="Delete all tasks (asks for confirmation).")
registry.register("theme", cmd_theme, help_text="Toggle light/dark theme.")
