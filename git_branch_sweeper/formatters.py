"""Formatting helpers shared by the TUI and the console output."""

from typing import Collection, List, Optional

from rich.text import Text

from git_branch_sweeper.constants import (
    HELP_LINES,
    SYMBOL_DELETED,
    SYMBOL_FAILED,
    SYMBOL_SELECTED,
    SYMBOL_UNSELECTED,
    RowStyleType,
)
from git_branch_sweeper.models.branch import Branch, SessionPhase, SweepReport


def format_remote(branch: Branch) -> str:
    return branch.remote if branch.has_remote else "-"


def get_row_style_type(
    branch: Branch,
    selected: bool,
    deleted_names: Collection[str],
    failed_names: Collection[str],
) -> str:
    """Pick the style type for a row."""
    if branch.name in failed_names:
        return RowStyleType.FAILED
    if branch.name in deleted_names:
        return RowStyleType.DELETED
    if selected:
        return RowStyleType.SELECTED
    return RowStyleType.NORMAL


def format_mark(style_type: str) -> Text:
    """Return the mark column symbol for a row style type."""
    symbols = {
        RowStyleType.SELECTED: Text(SYMBOL_SELECTED, justify="center", style="bold red"),
        RowStyleType.DELETED: Text(SYMBOL_DELETED, justify="center", style="dim"),
        RowStyleType.FAILED: Text(SYMBOL_FAILED, justify="center", style="bold yellow"),
    }
    return symbols.get(style_type, Text(SYMBOL_UNSELECTED, justify="center"))


def format_help_text() -> str:
    return "\n".join(HELP_LINES)


def format_status_line(
    phase: SessionPhase, total: int, selected: int, completed: int, initial_count: int
) -> str:
    """Build the status bar text."""
    if phase == SessionPhase.BROWSING:
        return f"Total: {total} | Selected: {selected}"
    return f"Total: {total} | Deleting: {completed}/{initial_count}"


def format_failure_lines(report: SweepReport) -> List[str]:
    """One line per failed branch, noting when the local branch is already gone."""
    lines = []
    for failure in report.failures:
        note = " (local branch deleted)" if failure.local_deleted else ""
        lines.append(f"{failure.branch.name}: {failure.error}{note}")
    return lines


def pluralize(count: int, word: str, plural: Optional[str] = None) -> str:
    if count == 1:
        return f"{count} {word}"
    return f"{count} {plural or word + 's'}"
