"""Interactive TUI for git-branch-sweeper using Textual."""

from typing import Optional, Union, TYPE_CHECKING

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.timer import Timer
from textual.widgets import Footer, Header, Static

from .__version__ import __version__
from .core.session import SweepSession
from .formatters import format_help_text, format_status_line
from .logging_config import get_logger
from .models.branch import SessionPhase, SweepReport
from .ui.widgets import BranchTable, DeletionProgress

if TYPE_CHECKING:
    from .config import Config

logger = get_logger(__name__)


class BranchSweeperApp(App[SweepReport]):
    """Interactive TUI for git-branch-sweeper.

    The session is the single source of truth: key bindings call into it,
    then the view is redrawn from it. While deleting, a timer ticks the
    session once per interval and the key bindings are disabled.
    """

    TITLE = "Git Branch Sweeper"
    SUB_TITLE = f"v{__version__}"

    CSS = """
    Screen {
        background: $surface;
    }

    BranchTable {
        height: 1fr;
    }

    #help {
        height: auto;
        padding: 0 1;
        color: $text-muted;
    }

    #status-bar {
        height: auto;
        background: $panel;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("j,down", "cursor_down", "Down", show=False),
        Binding("k,up", "cursor_up", "Up", show=False),
        Binding("space", "toggle_select", "Select/Deselect"),
        Binding("a", "select_all", "Select All"),
        Binding("c", "clear_selection", "Clear"),
        Binding("enter", "confirm", "Delete Selected"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, session: SweepSession, config: Union["Config", dict]):
        super().__init__()
        self.session = session
        self.tick_interval = config.get("tick_interval", 0.016)
        self._tick_timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header(show_clock=False)
        yield BranchTable(id="branch-table", cursor_type="row", zebra_stripes=True)
        yield Static(format_help_text(), id="help")
        yield DeletionProgress(id="progress", show_eta=False)
        yield Static(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Fill the table once the widgets exist."""
        table = self.query_one(BranchTable)
        table.add_branch_columns()
        self._refresh_view()

    def check_action(self, action: str, parameters: tuple) -> Optional[bool]:
        """Only accept key actions while browsing."""
        if action in {
            "cursor_down",
            "cursor_up",
            "toggle_select",
            "select_all",
            "clear_selection",
            "confirm",
            "quit",
        }:
            return self.session.phase == SessionPhase.BROWSING
        return True

    def _refresh_view(self) -> None:
        """Redraw the table, status bar and progress from the session."""
        session = self.session
        table = self.query_one(BranchTable)
        table.populate(
            session.branches,
            session.cursor,
            set(session.selection),
            deleted_names={b.name for b in session.deleted},
            failed_names={f.branch.name for f in session.failures},
        )
        self.query_one("#status-bar", Static).update(
            format_status_line(
                session.phase,
                len(session.branches),
                len(session.selection),
                session.completed,
                session.initial_count,
            )
        )
        if session.phase != SessionPhase.BROWSING:
            self.query_one(DeletionProgress).set_fraction(session.progress)

    def _move_cursor(self) -> None:
        self.query_one(BranchTable).move_cursor(row=self.session.cursor)

    def action_cursor_down(self) -> None:
        if self.session.move_down():
            self._move_cursor()

    def action_cursor_up(self) -> None:
        if self.session.move_up():
            self._move_cursor()

    def action_toggle_select(self) -> None:
        if self.session.toggle_select():
            self._refresh_view()

    def action_select_all(self) -> None:
        if self.session.select_all():
            self._refresh_view()

    def action_clear_selection(self) -> None:
        if self.session.clear_selection():
            self._refresh_view()

    def action_confirm(self) -> None:
        """Start draining the selection, one branch per tick."""
        if not self.session.confirm():
            return
        self.query_one(DeletionProgress).start(self.session.initial_count)
        self.refresh_bindings()
        self._refresh_view()
        self._tick_timer = self.set_interval(self.tick_interval, self._on_tick)

    def _on_tick(self) -> None:
        """Delete one branch, then redraw. Runs on the app's event loop."""
        failure = self.session.tick()
        if failure is not None:
            self.notify(failure.error, severity="error")

        if self.session.phase == SessionPhase.DONE:
            if self._tick_timer is not None:
                self._tick_timer.stop()
            self._finish()
            return
        self._refresh_view()

    async def action_quit(self) -> None:
        """Leave without deleting anything."""
        if self.session.quit():
            self._finish()

    def _finish(self) -> None:
        report = self.session.report()
        logger.info(
            f"Exiting: {len(report.deleted)} deleted, {len(report.failures)} failed, "
            f"cancelled={report.cancelled}"
        )
        self.exit(report)
