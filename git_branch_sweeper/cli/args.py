"""Command-line argument parsing for git-branch-sweeper."""

import argparse
from typing import List, Optional

from git_branch_sweeper.__version__ import __version__
from git_branch_sweeper.config import DELETION_ORDERS


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-branch-sweeper",
        description="Pick local git branches in a terminal UI and delete them in bulk",
        epilog="Remote branches are only deleted when their tip commit was authored "
        "by your configured user.email.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-branch-sweeper {__version__}")
    parser.add_argument(
        "--local-only",
        action="store_true",
        help="Never delete remote branches, even ones you authored",
    )
    parser.add_argument(
        "--order",
        choices=DELETION_ORDERS,
        default="lifo",
        help="Deletion order: lifo deletes the last selected branch first, "
        "fifo follows selection order (default: lifo)",
    )
    parser.add_argument(
        "--stop-on-error",
        action="store_true",
        help="Stop the batch at the first failed deletion instead of continuing",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview mode - walk through the deletion without touching any branch",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the branch list and exit without starting the TUI",
    )
    parser.add_argument(
        "--date-format",
        default="%Y-%m-%d %H:%M",
        help="strftime format for author dates (default: %%Y-%%m-%%d %%H:%%M)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    return parser.parse_args(argv)
