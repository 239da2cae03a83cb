"""Command-line entry point for todolist.

Parses the logging options, configures logging and opens the task list
window. The call blocks until the window is closed.
"""

import argparse
import logging
import os
import sys
import tkinter as tk
from typing import List, Optional

from todolist.app import TaskListApp
from todolist.logging_setup import setup_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Defaults come from the TODOLIST_LOG_LEVEL and TODOLIST_LOG_FILE
    environment variables.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="todolist",
        description="Desktop to-do list"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get("TODOLIST_LOG_LEVEL", "WARNING").upper(),
        help="Console log level (default: WARNING)"
    )
    parser.add_argument(
        "--log-file",
        default=os.environ.get("TODOLIST_LOG_FILE") or None,
        help="Also write debug logs to this file"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:]

    Returns:
        Exit code (0 once the window is closed, 1 if it cannot be opened)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level, logging.WARNING), args.log_file)

    try:
        root = tk.Tk()
    except tk.TclError as e:
        logger.error("Cannot open window: %s", e)
        print(f"Error: cannot open window: {e}", file=sys.stderr)
        return 1

    app = TaskListApp(root)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
