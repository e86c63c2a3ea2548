"""Data models for git-branch-sweeper."""

from .branch import Branch, DeletionFailure, SessionPhase, SweepReport

__all__ = ["Branch", "DeletionFailure", "SessionPhase", "SweepReport"]
