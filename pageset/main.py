#!/usr/bin/env python3
# File: pageset/main.py

import logging
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .config import load_config, LOG_FORMAT
from .core.page_set import PageSet
from .errors import ConfigError, OutOfBoundError, RenderError
from .ui.components import create_page_panel, create_pages_table
from .utils.html_links import link_renderer

logger = logging.getLogger("pageset.main")

EXIT_OK = 0
EXIT_OUT_OF_BOUND = 1
EXIT_CONFIG_ERROR = 2
EXIT_RENDER_ERROR = 3


def setup_logging_config(log_level_str: str, log_file_path: Optional[Path] = None):
    numeric_log_level = getattr(logging, log_level_str.upper(), logging.INFO)
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    if log_file_path:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers = [logging.FileHandler(log_file_path, mode='w')]
    else:
        handlers = [logging.StreamHandler(sys.stderr)]
    logging.basicConfig(level=numeric_log_level, format=LOG_FORMAT, handlers=handlers)
    logger.info(f"Logging configured. Level: {log_level_str}. File: {log_file_path or 'stderr'}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pageset",
        description="Show page boundaries for a collection of a given size.",
    )
    parser.add_argument("--length", type=int, required=True,
                        help="Total number of items in the collection")
    parser.add_argument("--capacity", type=int, default=None,
                        help="Items per page (default: from configuration)")
    parser.add_argument("--page", type=int, default=None,
                        help="Show a single page instead of the whole table")
    parser.add_argument("--base-url", default=None,
                        help="Prefix for rendered item links (default: from configuration)")
    parser.add_argument("--no-render", action="store_true",
                        help="Do not render item links")
    parser.add_argument("--config", type=Path, default=None,
                        help="Path to a JSON configuration file")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--log-file", type=Path, default=None,
                        help="Write logs to this file instead of stderr")
    return parser


def run(args: argparse.Namespace, console: Console) -> int:
    """Execute the command described by parsed arguments and return an exit code."""
    try:
        config = load_config(args.config)
    except ConfigError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        return EXIT_CONFIG_ERROR

    setup_logging_config(args.log_level or config["logging"]["level"],
                         args.log_file or (Path(config["logging"]["file"])
                                           if config["logging"]["file"] else None))

    capacity = args.capacity if args.capacity is not None else config["pagination"]["capacity"]
    render = None
    if not args.no_render:
        render = link_renderer(args.base_url or config["render"]["base_url"])

    try:
        page_set = PageSet(args.length, capacity, render)
    except ConfigError as e:
        logger.error(f"Invalid pagination settings: {e}")
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        return EXIT_CONFIG_ERROR

    logger.info(f"Paginating {page_set!r}")

    try:
        if args.page is None:
            title = f"{page_set.total_length()} items, {page_set.page_capacity()} per page, " \
                    f"{page_set.page_count()} pages"
            console.print(create_pages_table(page_set.sequence(), title=title))
        else:
            console.print(create_page_panel(page_set.lookup(args.page)))
    except OutOfBoundError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        return EXIT_OUT_OF_BOUND
    except RenderError as e:
        logger.error(f"Rendering failed: {e}")
        console.print(f"[bold red]Render error:[/bold red] {e}")
        return EXIT_RENDER_ERROR

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return run(args, Console())


if __name__ == "__main__":
    sys.exit(main())
