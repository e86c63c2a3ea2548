"""Branch deletion service for git-branch-sweeper."""

from typing import Union, TYPE_CHECKING

from git_branch_sweeper.exceptions import GitOperationError, LocalDeleteFailed, RemoteDeleteFailed
from git_branch_sweeper.logging_config import get_logger
from git_branch_sweeper.models.branch import Branch
from git_branch_sweeper.services.git_gateway import RepositoryGateway

if TYPE_CHECKING:
    from git_branch_sweeper.config import Config

logger = get_logger(__name__)


def normalize_email(email: str) -> str:
    """Strip whitespace and the angle brackets git puts around addresses."""
    return (email or "").strip().strip("<>").strip()


class BranchDeletionService:
    """Deletes a branch locally and, when the operator authored it, on its remote."""

    def __init__(self, gateway: RepositoryGateway, config: Union['Config', dict]):
        self.gateway = gateway
        self.config = config
        self.dry_run = config.get('dry_run', False)
        self.delete_remotes = config.get('delete_remotes', True)

    def should_delete_remote(self, branch: Branch, operator_email: str) -> bool:
        """
        Check whether the remote counterpart of a branch may be deleted.

        Only upstreams on a real remote are considered, and only when the branch
        tip was authored by the operator.

        Args:
            branch: Branch to check
            operator_email: Configured user.email of the operator

        Returns:
            True if a remote delete should be pushed
        """
        if not self.delete_remotes or not branch.has_remote:
            return False
        if branch.split_remote() is None:
            logger.debug(f"Upstream of {branch.name} is local ({branch.remote}), not pushing")
            return False
        operator = normalize_email(operator_email)
        return bool(operator) and normalize_email(branch.email) == operator

    def delete_branch(self, branch: Branch, operator_email: str) -> bool:
        """
        Force-delete a local branch and, conditionally, its remote branch.

        A failed remote delete does not restore the local branch.

        Args:
            branch: Branch to delete
            operator_email: Configured user.email of the operator

        Returns:
            True if the remote branch was deleted as well

        Raises:
            LocalDeleteFailed: If the local branch could not be deleted
            RemoteDeleteFailed: If the local branch was deleted but the remote one was not
        """
        delete_remote = self.should_delete_remote(branch, operator_email)

        if self.dry_run:
            target = f"{branch.name} and {branch.remote}" if delete_remote else branch.name
            logger.info(f"Would delete {target}")
            return delete_remote

        try:
            self.gateway.delete_local_branch(branch.name)
        except GitOperationError as e:
            logger.error(f"Error deleting local branch {branch.name}: {e}")
            raise LocalDeleteFailed(branch.name, e.message or str(e)) from e
        logger.info(f"Deleted local branch {branch.name}")

        if not delete_remote:
            return False

        remote_name, remote_branch = branch.split_remote()
        try:
            self.gateway.delete_remote_branch(remote_name, remote_branch)
        except GitOperationError as e:
            logger.error(f"Error deleting remote branch {branch.remote}: {e}")
            raise RemoteDeleteFailed(branch.name, e.message or str(e)) from e
        logger.info(f"Deleted remote branch {branch.remote}")
        return True
