"""Pytest fixtures for git-branch-sweeper tests"""
import tempfile
from pathlib import Path
from typing import List, Optional

import git
import pytest

from git_branch_sweeper.config import Config
from git_branch_sweeper.exceptions import GitOperationError
from git_branch_sweeper.models.branch import Branch
from git_branch_sweeper.services.git_gateway import RepositoryGateway

OPERATOR = git.Actor("Test User", "test@example.com")
TEAMMATE = git.Actor("Team Mate", "mate@example.com")


class FakeGateway(RepositoryGateway):
    """In-memory gateway that records what would have been run."""

    def __init__(self, branches: Optional[List[Branch]] = None, email: str = "test@example.com"):
        self.branches = list(branches or [])
        self.email = email
        self.deleted_local: List[str] = []
        self.deleted_remote: List[tuple] = []
        self.failing_local: set = set()
        self.failing_remote: set = set()

    def list_branches(self) -> List[Branch]:
        return list(self.branches)

    def delete_local_branch(self, branch_name: str) -> None:
        if branch_name in self.failing_local:
            raise GitOperationError("delete_local", branch_name, "refused")
        self.deleted_local.append(branch_name)

    def delete_remote_branch(self, remote_name: str, branch_name: str) -> None:
        if branch_name in self.failing_remote:
            raise GitOperationError("delete_remote", branch_name, "rejected")
        self.deleted_remote.append((remote_name, branch_name))

    def get_operator_email(self) -> str:
        return self.email


def make_branch(name: str, date: str = "2024-01-01 10:00", email: str = "test@example.com",
                remote: str = "") -> Branch:
    return Branch(
        name=name,
        title=f"Work on {name}",
        date=date,
        author="Test User",
        email=email,
        remote=remote,
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config():
    """Default configuration with a fast tick."""
    return Config(tick_interval=0.01)


@pytest.fixture
def three_branches():
    """Branches A, B, C already sorted by author date, newest first."""
    return [
        make_branch("A", date="2024-01-03 10:00"),
        make_branch("B", date="2024-01-02 10:00"),
        make_branch("C", date="2024-01-01 10:00"),
    ]


@pytest.fixture
def fake_gateway(three_branches):
    return FakeGateway(three_branches)


def commit_file(repo: git.Repo, filename: str, message: str, author: git.Actor, date: str):
    """Write a file and commit it with a fixed author and author date."""
    path = Path(repo.working_dir) / filename
    path.write_text(f"{message}\n")
    repo.index.add([filename])
    return repo.index.commit(message, author=author, committer=author, author_date=date)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    repo.config_writer().set_value("user", "name", OPERATOR.name).release()
    repo.config_writer().set_value("user", "email", OPERATOR.email).release()

    commit_file(repo, "README.md", "Initial commit", OPERATOR, "2022-01-01T12:00:00")
    repo.git.branch("-M", "main")

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Repository with three feature branches authored on different days.

    Newest first: feature/new, feature/mid, feature/old, main.
    """
    repo = git_repo
    for name, date in [
        ("feature/old", "2023-01-01T12:00:00"),
        ("feature/mid", "2024-01-01T12:00:00"),
        ("feature/new", "2025-01-01T12:00:00"),
    ]:
        repo.git.checkout("-b", name, "main")
        commit_file(repo, f"{name.replace('/', '_')}.txt", f"Add {name}", OPERATOR, date)

    repo.git.checkout("main")
    yield repo


@pytest.fixture
def git_repo_with_remote(git_repo, temp_dir):
    """Repository with a bare origin and two pushed branches.

    feature/mine is authored by the operator, feature/theirs by a teammate.
    Both track their origin counterpart.
    """
    repo = git_repo
    remote_path = temp_dir / "remote.git"
    git.Repo.init(remote_path, bare=True)
    repo.create_remote("origin", str(remote_path))
    repo.git.push("-u", "origin", "main")

    for name, author, date in [
        ("feature/mine", OPERATOR, "2024-02-01T12:00:00"),
        ("feature/theirs", TEAMMATE, "2024-03-01T12:00:00"),
    ]:
        repo.git.checkout("-b", name, "main")
        commit_file(repo, f"{name.replace('/', '_')}.txt", f"Add {name}", author, date)
        repo.git.push("-u", "origin", name)

    repo.git.checkout("main")
    yield repo, remote_path


@pytest.fixture
def branch_factory():
    """Build Branch records with sensible defaults."""
    return make_branch


@pytest.fixture
def gateway_factory():
    """Build in-memory gateways."""
    return FakeGateway
