"""Git repository gateway"""
import git
from abc import ABC, abstractmethod
from typing import List, Union, TYPE_CHECKING

from git_branch_sweeper.exceptions import GitOperationError, RegistryError
from git_branch_sweeper.logging_config import get_logger
from git_branch_sweeper.models.branch import Branch

if TYPE_CHECKING:
    from git_branch_sweeper.config import Config

logger = get_logger(__name__)

BRANCH_FIELDS = [
    "%(refname:short)",
    "%(subject)",
    "%(authordate:format:{date_format})",
    "%(authorname)",
    "%(authoremail:trim)",
    "%(upstream:short)",
]
# The TUI owns the terminal, so git must fail instead of asking for credentials
NON_INTERACTIVE_ENV = {"GIT_TERMINAL_PROMPT": "0"}
# "%1f" makes git print the ASCII unit separator between fields
FORMAT_SEPARATOR = "%1f"


def build_branch_format(date_format: str) -> str:
    """Build the --format argument for the branch listing."""
    return FORMAT_SEPARATOR.join(BRANCH_FIELDS).replace("{date_format}", date_format)


class RepositoryGateway(ABC):
    """Narrow interface over the version control commands the sweeper needs."""

    @abstractmethod
    def list_branches(self) -> List[Branch]:
        """Return local branches, most recently authored first.

        Raises:
            RegistryError: If the listing cannot be run or decoded
        """

    @abstractmethod
    def delete_local_branch(self, branch_name: str) -> None:
        """Force-delete a local branch.

        Raises:
            GitOperationError: If git refuses or cannot run
        """

    @abstractmethod
    def delete_remote_branch(self, remote_name: str, branch_name: str) -> None:
        """Delete branch_name on remote_name.

        Raises:
            GitOperationError: If the push fails
        """

    @abstractmethod
    def get_operator_email(self) -> str:
        """Return the configured user.email, or an empty string if unset."""


class GitRepositoryGateway(RepositoryGateway):
    """RepositoryGateway backed by GitPython."""

    def __init__(self, repo_path: str, config: Union['Config', dict]):
        """Initialize the gateway.

        Args:
            repo_path: Path to the git repository (string path, not repo object)
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.config = config
        self.date_format = config.get('date_format', '%Y-%m-%d %H:%M')
        logger.debug(f"Git gateway initialized for {repo_path}")

    def _get_repo(self) -> git.Repo:
        """Open the repository.

        Opening is cheap, GitPython does not read anything up front.
        """
        return git.Repo(self.repo_path)

    def list_branches(self) -> List[Branch]:
        try:
            repo = self._get_repo()
            output = repo.git.for_each_ref(
                "--sort=-authordate",
                f"--format={build_branch_format(self.date_format)}",
                "refs/heads",
            )
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise RegistryError(f"{self.repo_path} is not a git repository ({e})") from e
        except git.exc.GitCommandError as e:
            raise RegistryError(str(e)) from e
        except UnicodeDecodeError as e:
            raise RegistryError(f"branch listing is not valid UTF-8 ({e})") from e

        # Subjects may contain form feeds or U+2028, so only "\n" ends a record
        branches = [Branch.from_record(line) for line in output.split("\n") if line]
        logger.debug(f"Listed {len(branches)} branches")
        return branches

    def delete_local_branch(self, branch_name: str) -> None:
        try:
            repo = self._get_repo()
            logger.debug(f"Running git branch -D {branch_name}")
            repo.git.branch("-D", branch_name)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise GitOperationError("delete_local", branch_name, f"not a git repository: {e}") from e
        except git.exc.GitCommandError as e:
            raise GitOperationError("delete_local", branch_name, _command_error_text(e)) from e

    def delete_remote_branch(self, remote_name: str, branch_name: str) -> None:
        try:
            repo = self._get_repo()
            logger.debug(f"Running git push {remote_name} --delete {branch_name}")
            repo.git.push(remote_name, "--delete", branch_name, env=NON_INTERACTIVE_ENV)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise GitOperationError("delete_remote", branch_name, f"not a git repository: {e}") from e
        except git.exc.GitCommandError as e:
            raise GitOperationError(
                "delete_remote", f"{remote_name}/{branch_name}", _command_error_text(e)
            ) from e

    def get_operator_email(self) -> str:
        try:
            repo = self._get_repo()
            # git resolves repository, global and system config in order
            return repo.git.config("--get", "user.email").strip()
        except git.exc.GitCommandError:
            # Exit status 1 means the key is not set
            logger.debug("user.email is not configured")
            return ""
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            logger.warning(f"Could not read user.email: {e}")
            return ""


def _command_error_text(error: git.exc.GitCommandError) -> str:
    """Return git's stderr if there is any, the whole error otherwise."""
    stderr = (error.stderr or "").strip()
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip()
    return stderr.strip("'").strip() or str(error)
