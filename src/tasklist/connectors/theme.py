# src/tasklist/connectors/theme.py

"""Light/dark palettes and list rendering for the console.

- Colors are 256-color approximations of hex values (works on most terminals).
- Color is used only when enabled: "always", or "auto" on a TTY.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from datetime import datetime

from ..tasks.task_models import Priority, Task

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
STRIKE = "\033[9m"

LIGHT_PALETTE: dict[str, str] = {
    "header": "#303F9F",
    "muted": "#616161",
    Priority.HIGH.name: "#D32F2F",
    Priority.MEDIUM.name: "#EF6C00",
    Priority.LOW.name: "#2E7D32",
}

DARK_PALETTE: dict[str, str] = {
    "header": "#9FA8DA",
    "muted": "#BDBDBD",
    Priority.HIGH.name: "#FF8A80",
    Priority.MEDIUM.name: "#FFB74D",
    Priority.LOW.name: "#A5D6A7",
}

EMPTY_TEXT = "No tasks yet. Use /add <name> to create one."


def color_enabled(mode: str) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    return sys.stdout.isatty()


def _fg_256(hex_code: str) -> str:
    """Approximate RGB to the xterm 256-color cube."""
    h = hex_code.lstrip("#")
    r, g, b = (int(round(int(h[i : i + 2], 16) / 255 * 5)) for i in (0, 2, 4))
    return f"\033[38;5;{16 + 36 * r + 6 * g + b}m"


def _paint(text: str, *styles: str, enabled: bool) -> str:
    if not enabled or not styles:
        return text
    return "".join(styles) + text + RESET


def format_created_at(created_at_ms: int) -> str:
    """Local time, or the raw millisecond value when it is outside the datetime range."""
    try:
        return datetime.fromtimestamp(created_at_ms / 1000).strftime("%Y-%m-%d %H:%M:%S")
    except (ValueError, OverflowError, OSError):
        return f"{created_at_ms} ms"


def render_task_list(tasks: Sequence[Task], *, dark: bool, use_color: bool) -> str:
    palette = DARK_PALETTE if dark else LIGHT_PALETTE
    header = _paint("Tasks", BOLD, _fg_256(palette["header"]), enabled=use_color)

    if not tasks:
        return header + "\n  " + _paint(EMPTY_TEXT, DIM, enabled=use_color)

    width = max(len(t.name) for t in tasks)
    lines = [header]
    for i, t in enumerate(tasks, start=1):
        box = "[x]" if t.done else "[ ]"
        name = t.name.ljust(width)
        if t.done:
            name = _paint(name, STRIKE, DIM, enabled=use_color)
        chip = _paint(f"{t.priority.label:<6}", _fg_256(palette[t.priority.name]), enabled=use_color)
        when = _paint(format_created_at(t.created_at), _fg_256(palette["muted"]), enabled=use_color)
        lines.append(f"{i:>3}. {box} {name}  {chip}  {when}")
    return "\n".join(lines)
