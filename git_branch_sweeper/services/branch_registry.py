"""Branch registry service for git-branch-sweeper."""

from typing import Tuple

from git_branch_sweeper.exceptions import NoBranchesError
from git_branch_sweeper.logging_config import get_logger
from git_branch_sweeper.models.branch import Branch
from git_branch_sweeper.services.git_gateway import RepositoryGateway

logger = get_logger(__name__)


class BranchRegistry:
    """Produces the branch snapshot a session works on."""

    def __init__(self, gateway: RepositoryGateway):
        self.gateway = gateway

    def list_branches(self) -> Tuple[Branch, ...]:
        """
        Read the branch snapshot, most recently authored first.

        Returns:
            Immutable, non-empty sequence of branches

        Raises:
            RegistryError: If the repository query fails
            NoBranchesError: If the repository has no branches
        """
        branches = tuple(self.gateway.list_branches())
        if not branches:
            raise NoBranchesError()
        logger.info(f"Loaded {len(branches)} branches")
        return branches
