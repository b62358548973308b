from __future__ import annotations

import os
import shutil
from dataclasses import dataclass

from rich.console import Console
from rich.theme import Theme as RichTheme

# Styles used by log markup and the debug tables.
STYLES = {
    "info": "cyan",
    "ok": "green",
    "warn": "yellow",
    "err": "red",
    "dim": "dim",
    "k": "bold",
    "tag": "magenta",
    "attr": "blue",
}


@dataclass(frozen=True)
class ConsoleOptions:
    # None means: env override, else terminal size.
    width: int | None = None
    no_color: bool = False
    stderr: bool = False


def _env_width() -> int | None:
    raw = os.getenv("BS_WIDGETS_CONSOLE_WIDTH")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def make_console(opts: ConsoleOptions | None = None) -> Console:
    opts = opts or ConsoleOptions()

    width = opts.width if opts.width is not None else _env_width()
    if width is None:
        width = shutil.get_terminal_size(fallback=(120, 40)).columns

    return Console(
        width=width,
        theme=RichTheme(STYLES),
        color_system=None if opts.no_color else "auto",
        stderr=opts.stderr,
        # Markup columns get truncated, never wrapped.
        soft_wrap=False,
        highlight=False,
    )
