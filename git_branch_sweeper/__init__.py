"""
git-branch-sweeper - Interactively pick git branches and delete them in bulk
"""

from .__version__ import __version__

__all__ = ["__version__"]
