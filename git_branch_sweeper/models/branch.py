"""Branch model and session records"""
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from git_branch_sweeper.exceptions import RegistryError

# ASCII unit separator; git emits it for "%1f" in a --format string
FIELD_SEPARATOR = "\x1f"
FIELD_COUNT = 6


class SessionPhase(Enum):
    """Phase of an interactive sweep session."""
    BROWSING = "browsing"
    DELETING = "deleting"
    DONE = "done"


@dataclass(frozen=True)
class Branch:
    """Snapshot of one branch as reported by git."""
    name: str
    title: str
    date: str
    author: str
    email: str
    remote: str = ""

    @classmethod
    def from_record(cls, line: str) -> "Branch":
        """Parse one FIELD_SEPARATOR delimited record from the branch listing."""
        sections = line.split(FIELD_SEPARATOR)
        if len(sections) != FIELD_COUNT:
            raise RegistryError(
                f"expected {FIELD_COUNT} fields, got {len(sections)} in record {line!r}"
            )
        name, title, date, author, email, remote = sections
        return cls(
            name=name,
            title=title,
            date=date,
            author=author,
            email=email,
            remote=remote,
        )

    @property
    def has_remote(self) -> bool:
        return bool(self.remote)

    def split_remote(self) -> Optional[Tuple[str, str]]:
        """Split the upstream into (remote name, remote branch).

        Returns None when there is no upstream or the upstream is another local
        branch (no "/" in it).
        """
        remote_name, sep, remote_branch = self.remote.partition("/")
        if not sep or not remote_name or not remote_branch:
            return None
        return remote_name, remote_branch


@dataclass(frozen=True)
class DeletionFailure:
    """A branch that could not be (fully) deleted."""
    branch: Branch
    error: str
    local_deleted: bool = False


@dataclass
class SweepReport:
    """Outcome of a session, handed back once the UI has exited."""
    deleted: List[Branch] = field(default_factory=list)
    remote_deleted: List[str] = field(default_factory=list)
    failures: List[DeletionFailure] = field(default_factory=list)
    pending: List[Branch] = field(default_factory=list)
    cancelled: bool = False

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)
