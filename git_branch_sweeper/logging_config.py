"""Logging configuration for git-branch-sweeper"""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


PACKAGE_PREFIX = 'git_branch_sweeper.'
LOG_DIR_NAME = '.git-branch-sweeper'
LOG_FILE_NAME = 'sweep.log'


def get_log_file() -> Path:
    """Path of the log file written while the TUI is up or with --debug."""
    return Path.home() / LOG_DIR_NAME / LOG_FILE_NAME


def setup_logging(verbose: bool = False, debug: bool = False, tui_mode: bool = False) -> Optional[Path]:
    """
    Configure logging for a sweep.

    While the TUI owns the terminal nothing may be written to stderr, so
    records only go to the log file. Outside the TUI they are rendered on
    stderr by Rich, and --debug additionally keeps a file copy.

    Args:
        verbose: If True, show INFO level messages
        debug: If True, show DEBUG level messages, including GitPython's
        tui_mode: If True, log to file only

    Returns:
        The log file path, or None when no file is written
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if tui_mode else level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # GitPython logs every command it spawns at DEBUG
    logging.getLogger('git').setLevel(logging.DEBUG if debug else logging.WARNING)

    log_file = None
    if tui_mode or debug:
        log_file = get_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s %(levelname)-7s %(name)s: %(message)s',
            datefmt='%H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    if not tui_mode:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=debug,
            show_path=False,
        )
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('[%(name)s] %(message)s'))
        root_logger.addHandler(console_handler)

    return log_file


def get_logger(name: str) -> logging.Logger:
    """Get a logger named after the module, without the package prefix."""
    if name.startswith(PACKAGE_PREFIX):
        name = name[len(PACKAGE_PREFIX):]
    return logging.getLogger(name)
