"""Widgets for the git-branch-sweeper TUI."""

from .widgets import BranchTable, DeletionProgress

__all__ = ["BranchTable", "DeletionProgress"]
