"""Custom exceptions for git-branch-sweeper"""

from typing import Optional


class GitBranchSweeperError(Exception):
    """Base exception for all git-branch-sweeper errors."""
    pass


class GitOperationError(GitBranchSweeperError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class RegistryError(GitBranchSweeperError):
    """Exception raised when the branch list cannot be read or decoded."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Could not list branches: {message}")


class NoBranchesError(GitBranchSweeperError):
    """Exception raised when the repository has no branches to show."""

    def __init__(self):
        super().__init__("Repository has no branches")


class DeletionError(GitBranchSweeperError):
    """Exception raised when a single branch could not be deleted."""

    reason = "deletion failed"

    def __init__(self, branch: str, message: Optional[str] = None):
        self.branch = branch
        self.message = message

        error_msg = f"{self.reason} for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class LocalDeleteFailed(DeletionError):
    """The local branch could not be deleted."""

    reason = "Local delete failed"


class RemoteDeleteFailed(DeletionError):
    """The local branch is gone but its remote counterpart could not be deleted."""

    reason = "Remote delete failed"
