"""Shared constants for git-branch-sweeper."""

from dataclasses import dataclass
from typing import List


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


# Column definitions shared by the TUI table and the --list output
COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("branch", "Branch", 30),
    ColumnDefinition("title", "Title", 50),
    ColumnDefinition("date", "Date", 16),
    ColumnDefinition("author", "Author", 20),
    ColumnDefinition("email", "Email", 30),
    ColumnDefinition("remote", "Upstream", 30),
]


# Symbol constants
SYMBOL_SELECTED = "✓"
SYMBOL_UNSELECTED = " "
SYMBOL_DELETED = "✗"
SYMBOL_FAILED = "!"


class RowStyleType:
    """Style types for rows."""

    SELECTED = "selected"
    DELETED = "deleted"
    FAILED = "failed"
    NORMAL = "normal"


# TUI styles (Rich style strings)
TUI_STYLES = {
    RowStyleType.SELECTED: "bold red",
    RowStyleType.DELETED: "dim strike",
    RowStyleType.FAILED: "yellow",
    RowStyleType.NORMAL: "",
}


HELP_LINES = [
    "Press j/k or ↑/↓ to navigate up and down",
    "Press space to select/deselect a branch (a: select all, c: clear)",
    "Press enter to delete all selected branches",
    "Press q to quit",
]
