"""Selection and deletion state machine for one sweep session.

The session owns an immutable branch snapshot. The cursor and the selection
are indices into that snapshot, so nothing here ever holds a live reference
into the repository state.

Phases::

    BROWSING --confirm--> DELETING --tick (selection empty)--> DONE
    BROWSING --quit-----> DONE

Key handlers only act while BROWSING. Each tick in DELETING deletes exactly
one selected branch.
"""

from typing import List, Optional, Sequence, Union, TYPE_CHECKING

from git_branch_sweeper.exceptions import DeletionError, NoBranchesError, RemoteDeleteFailed
from git_branch_sweeper.logging_config import get_logger
from git_branch_sweeper.models.branch import Branch, DeletionFailure, SessionPhase, SweepReport

if TYPE_CHECKING:
    from git_branch_sweeper.config import Config
    from git_branch_sweeper.services.deletion_service import BranchDeletionService

logger = get_logger(__name__)


class SweepSession:
    """Cursor, selection and deletion progress over a branch snapshot."""

    def __init__(
        self,
        branches: Sequence[Branch],
        deletion_service: "BranchDeletionService",
        operator_email: str,
        config: Union["Config", dict],
    ):
        if not branches:
            raise NoBranchesError()
        self.branches = tuple(branches)
        self.deletion_service = deletion_service
        self.operator_email = operator_email
        self.deletion_order = config.get("deletion_order", "lifo")
        self.on_failure = config.get("on_failure", "continue")

        self.phase = SessionPhase.BROWSING
        self.cursor = 0
        self.selection: List[int] = []
        self.progress = 0.0
        self.initial_count = 0

        self.deleted: List[Branch] = []
        self.remote_deleted: List[str] = []
        self.failures: List[DeletionFailure] = []
        self.cancelled = False

    @property
    def current_branch(self) -> Branch:
        """Branch under the cursor."""
        return self.branches[self.cursor]

    @property
    def selected_branches(self) -> List[Branch]:
        """Selected branches, in selection order."""
        return [self.branches[index] for index in self.selection]

    @property
    def completed(self) -> int:
        """Number of branches processed in the current deletion pass."""
        return self.initial_count - len(self.selection)

    def is_selected(self, index: int) -> bool:
        return index in self.selection

    def _browsing(self) -> bool:
        return self.phase == SessionPhase.BROWSING

    # Browsing

    def move_down(self) -> bool:
        if not self._browsing():
            return False
        self.cursor = (self.cursor + 1) % len(self.branches)
        return True

    def move_up(self) -> bool:
        if not self._browsing():
            return False
        self.cursor = (self.cursor - 1 + len(self.branches)) % len(self.branches)
        return True

    def toggle_select(self) -> bool:
        """Add the cursor's branch to the selection, or remove it if already there."""
        if not self._browsing():
            return False
        if self.cursor in self.selection:
            self.selection.remove(self.cursor)
        else:
            self.selection.append(self.cursor)
        return True

    def select_all(self) -> bool:
        if not self._browsing():
            return False
        for index in range(len(self.branches)):
            if index not in self.selection:
                self.selection.append(index)
        return True

    def clear_selection(self) -> bool:
        if not self._browsing():
            return False
        self.selection.clear()
        return True

    def confirm(self) -> bool:
        """Start deleting the selected branches."""
        if not self._browsing():
            return False
        self.initial_count = len(self.selection)
        self.progress = 0.0
        self.phase = SessionPhase.DELETING
        logger.info(f"Deleting {self.initial_count} branches ({self.deletion_order})")
        return True

    def quit(self) -> bool:
        """Leave without deleting anything. Only possible before deletion starts."""
        if not self._browsing():
            return False
        self.cancelled = True
        self.phase = SessionPhase.DONE
        logger.info("Session cancelled")
        return True

    # Deleting

    def _next_index(self) -> int:
        if self.deletion_order == "fifo":
            return self.selection.pop(0)
        return self.selection.pop()

    def _finish(self) -> None:
        if not self.selection:
            self.progress = 1.0
        self.phase = SessionPhase.DONE
        logger.info(
            f"Deletion finished: {len(self.deleted)} deleted, {len(self.failures)} failed, "
            f"{len(self.selection)} pending"
        )

    def tick(self) -> Optional[DeletionFailure]:
        """
        Perform one deletion step.

        Returns:
            The failure of this step, or None if it succeeded or nothing was deleted
        """
        if self.phase != SessionPhase.DELETING:
            return None

        if not self.selection:
            self._finish()
            return None

        branch = self.branches[self._next_index()]
        failure = None
        try:
            if self.deletion_service.delete_branch(branch, self.operator_email):
                self.remote_deleted.append(branch.remote)
            self.deleted.append(branch)
        except DeletionError as e:
            local_deleted = isinstance(e, RemoteDeleteFailed)
            if local_deleted:
                self.deleted.append(branch)
            failure = DeletionFailure(branch=branch, error=str(e), local_deleted=local_deleted)
            self.failures.append(failure)
            logger.warning(f"Could not delete {branch.name}: {e}")

        self.progress = self.completed / self.initial_count

        if failure is not None and self.on_failure == "abort":
            logger.warning("Stopping after failure, remaining branches left untouched")
            self._finish()
        return failure

    def report(self) -> SweepReport:
        """Summarize what the session did."""
        return SweepReport(
            deleted=list(self.deleted),
            remote_deleted=list(self.remote_deleted),
            failures=list(self.failures),
            pending=[] if self.cancelled else self.selected_branches,
            cancelled=self.cancelled,
        )
