from __future__ import annotations

import logging
from pathlib import Path

from rich.logging import RichHandler

from .console import ConsoleOptions, make_console

FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    *,
    level: str = "INFO",
    log_file: str | None = None,
    console_width: int | None = None,
    no_color: bool = False,
) -> None:
    """
    Configure root logging: RichHandler on stderr, so rendered HTML piped to
    stdout stays clean, plus an optional plain-text log file.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    console = make_console(ConsoleOptions(width=console_width, no_color=no_color, stderr=True))
    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            markup=True,
            show_path=False,
        )
    ]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(numeric_level)
        fh.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(fh)

    logging.basicConfig(level=numeric_level, handlers=handlers, force=True)
