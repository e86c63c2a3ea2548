"""Core session logic for git-branch-sweeper."""

from .session import SweepSession

__all__ = ["SweepSession"]
