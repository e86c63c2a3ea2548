"""Custom widgets for git-branch-sweeper TUI."""

from typing import Collection, Sequence

from rich.text import Text
from textual.widgets import DataTable, ProgressBar

from git_branch_sweeper.constants import COLUMNS, SYMBOL_UNSELECTED, TUI_STYLES
from git_branch_sweeper.formatters import format_mark, format_remote, get_row_style_type
from git_branch_sweeper.models.branch import Branch


class BranchTable(DataTable, can_focus=False):
    """Branch list whose cursor is driven by the app, not by its own key bindings."""

    def add_branch_columns(self) -> None:
        """Add the mark column followed by the shared branch columns."""
        self.add_column(Text(SYMBOL_UNSELECTED, justify="center"), width=None, key="mark")
        for col in COLUMNS:
            self.add_column(col.label, width=None, key=col.key)

    def populate(
        self,
        branches: Sequence[Branch],
        cursor: int,
        selected: Collection[int],
        deleted_names: Collection[str] = (),
        failed_names: Collection[str] = (),
    ) -> None:
        """Redraw all rows and put the cursor on the given row."""
        self.clear()
        for index, branch in enumerate(branches):
            style_type = get_row_style_type(
                branch, index in selected, deleted_names, failed_names
            )
            style = TUI_STYLES[style_type]
            self.add_row(
                format_mark(style_type),
                Text(branch.name, style=style),
                Text(branch.title, style=style),
                Text(branch.date, style=style),
                Text(branch.author, style=style),
                Text(branch.email, style=style),
                Text(format_remote(branch), style=style),
                key=str(index),
            )
        if branches:
            self.move_cursor(row=cursor)


class DeletionProgress(ProgressBar):
    """Progress gauge that stays hidden until deletion starts."""

    DEFAULT_CSS = """
    DeletionProgress {
        display: none;
        height: auto;
        padding: 0 1;
    }
    """

    def start(self, total: int) -> None:
        self.update(total=max(total, 1), progress=0)
        self.display = True

    def set_fraction(self, fraction: float) -> None:
        """Show the fraction of the batch that is done."""
        total = self.total or 1
        self.update(progress=fraction * total)
