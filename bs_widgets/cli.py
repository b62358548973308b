# # CLI entrypoint: parse args, load config/layout, render the page.

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .config import load_config
from .debug_views import render_debug_view
from .layout import load_layout
from .logging_setup import setup_logging
from .orchestrator import render_view, run


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("bs-widgets")

    # # Core IO
    p.add_argument("--config", default="config.json")
    p.add_argument("--layout", default="layout.json")
    p.add_argument("--out", default=None, help="Output directory")
    p.add_argument("--out-file", default=None)
    p.add_argument("--title", default=None)

    # # CLI
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--log-file", default=None)
    p.add_argument("--console-width", type=int, default=None)
    p.add_argument("--no-color", action="store_true")
    p.add_argument("--debug-view", action="store_true", help="Prints rendered widgets and scripts and exits")

    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    cfg = load_config(Path(args.config))
    layout = load_layout(Path(args.layout))

    setup_logging(
        level=args.log_level,
        log_file=args.log_file,
        console_width=args.console_width,
        no_color=args.no_color,
    )

    # # Overrides
    if args.out is not None:
        cfg.out_dir = args.out
    if args.out_file is not None:
        cfg.out_file = args.out_file
    if args.title is not None:
        layout.title = args.title
    if args.debug_view:
        render_debug_view(render_view(cfg, layout), width=args.console_width, no_color=args.no_color)
        raise SystemExit(0)

    run(cfg=cfg, layout=layout)
