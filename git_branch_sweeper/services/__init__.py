"""Services for git-branch-sweeper."""

from .git_gateway import RepositoryGateway, GitRepositoryGateway
from .branch_registry import BranchRegistry
from .deletion_service import BranchDeletionService

__all__ = [
    "RepositoryGateway",
    "GitRepositoryGateway",
    "BranchRegistry",
    "BranchDeletionService",
]
