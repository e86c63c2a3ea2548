"""Command-line entry point for git-branch-sweeper"""

import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from git_branch_sweeper.cli.args import parse_args
from git_branch_sweeper.config import Config
from git_branch_sweeper.constants import COLUMNS
from git_branch_sweeper.core.session import SweepSession
from git_branch_sweeper.exceptions import NoBranchesError, RegistryError
from git_branch_sweeper.formatters import format_failure_lines, format_remote, pluralize
from git_branch_sweeper.logging_config import get_logger, setup_logging
from git_branch_sweeper.models.branch import Branch, SweepReport
from git_branch_sweeper.services import BranchDeletionService, BranchRegistry, GitRepositoryGateway

console = Console()
logger = get_logger(__name__)


def build_config(parsed_args) -> Config:
    """Build the runtime configuration from parsed arguments."""
    return Config(
        deletion_order=parsed_args.order,
        on_failure="abort" if parsed_args.stop_on_error else "continue",
        delete_remotes=not parsed_args.local_only,
        dry_run=parsed_args.dry_run,
        date_format=parsed_args.date_format,
        verbose=parsed_args.verbose,
        debug=parsed_args.debug,
    )


def display_branch_table(branches: List[Branch]) -> None:
    """Print the branch snapshot as a table."""
    table = Table()
    for col in COLUMNS:
        table.add_column(col.label, max_width=col.width or None, overflow="ellipsis")
    for branch in branches:
        table.add_row(
            branch.name,
            branch.title,
            branch.date,
            branch.author,
            branch.email,
            format_remote(branch),
        )
    console.print(table)


def display_report(report: SweepReport, dry_run: bool = False) -> None:
    """Print what the session did once the terminal is back to normal."""
    if report.cancelled:
        console.print("[yellow]No branches deleted[/yellow]")
        return

    verb = "Would delete" if dry_run else "Deleted"
    if report.deleted:
        console.print(f"[green]{verb} {pluralize(len(report.deleted), 'branch', 'branches')}:[/green]")
        for branch in report.deleted:
            console.print(f"  {branch.name}")
    if report.remote_deleted:
        console.print(f"[green]{verb} {pluralize(len(report.remote_deleted), 'remote branch', 'remote branches')}:[/green]")
        for remote in report.remote_deleted:
            console.print(f"  {remote}")
    if report.failures:
        console.print(f"[red]Failed to delete {pluralize(len(report.failures), 'branch', 'branches')}:[/red]")
        for line in format_failure_lines(report):
            console.print(f"  • {line}", markup=False)
    if report.pending:
        console.print(f"[yellow]Left untouched after the failure: {len(report.pending)}[/yellow]")
        for branch in report.pending:
            console.print(f"  {branch.name}")
    if not (report.deleted or report.failures):
        console.print("[yellow]No branches deleted[/yellow]")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)
        use_tui = not parsed_args.list

        log_file = setup_logging(
            verbose=parsed_args.verbose, debug=parsed_args.debug, tui_mode=use_tui
        )
        config = build_config(parsed_args)

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print(f"[dim]Log file: {log_file}[/dim]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        gateway = GitRepositoryGateway(os.getcwd(), config)
        branches = BranchRegistry(gateway).list_branches()

        if parsed_args.list:
            display_branch_table(list(branches))
            return 0

        operator_email = gateway.get_operator_email()
        if not operator_email and not parsed_args.local_only:
            logger.warning("user.email is not set, remote branches will not be deleted")

        session = SweepSession(
            branches, BranchDeletionService(gateway, config), operator_email, config
        )

        # Imported late so --list works without initializing Textual
        from git_branch_sweeper.tui import BranchSweeperApp

        app = BranchSweeperApp(session, config)
        report = app.run()
        if report is None:
            # App closed without going through the session (e.g. crashed)
            report = session.report()

        display_report(report, dry_run=config.dry_run)
        return 1 if report.has_failures else 0
    except NoBranchesError:
        console.print("[red]Error: no branches found in this repository[/red]")
        return 1
    except RegistryError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
