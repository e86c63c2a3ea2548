"""Tests for the command-line entry point"""
from unittest.mock import patch

import git
import pytest

from git_branch_sweeper.cli import main
from git_branch_sweeper.cli.args import parse_args
from git_branch_sweeper.cli.main import build_config
from git_branch_sweeper.models.branch import DeletionFailure, SweepReport


@pytest.fixture(autouse=True)
def isolated_home(temp_dir, monkeypatch):
    """Keep the TUI log file out of the real home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


class TestArgs:
    """Test argument to config mapping."""

    def test_defaults(self):
        config = build_config(parse_args([]))
        assert config.deletion_order == "lifo"
        assert config.on_failure == "continue"
        assert config.delete_remotes is True
        assert config.dry_run is False

    def test_flags(self):
        config = build_config(parse_args(
            ["--order", "fifo", "--stop-on-error", "--local-only", "--dry-run", "--date-format", "%c"]
        ))
        assert config.deletion_order == "fifo"
        assert config.on_failure == "abort"
        assert config.delete_remotes is False
        assert config.dry_run is True
        assert config.date_format == "%c"


class TestMain:
    """Test startup and exit codes."""

    def test_not_a_repository(self, temp_dir, monkeypatch, capsys):
        monkeypatch.chdir(temp_dir)
        assert main(["--list"]) == 1
        assert "Error" in capsys.readouterr().out

    def test_no_branches(self, temp_dir, monkeypatch, capsys):
        git.Repo.init(temp_dir / "empty")
        monkeypatch.chdir(temp_dir / "empty")
        assert main([]) == 1
        assert "no branches" in capsys.readouterr().out

    def test_list(self, git_repo_with_branches, monkeypatch, capsys):
        monkeypatch.chdir(git_repo_with_branches.working_dir)
        assert main(["--list"]) == 0
        output = capsys.readouterr().out
        assert "feature" in output
        assert "main" in output

    def test_debug_announces_log_file(self, git_repo_with_branches, monkeypatch, capsys, isolated_home):
        monkeypatch.chdir(git_repo_with_branches.working_dir)
        assert main(["--list", "--debug"]) == 0
        assert "Log file:" in capsys.readouterr().out
        assert (isolated_home / ".git-branch-sweeper" / "sweep.log").exists()

    def test_tui_success(self, git_repo_with_branches, monkeypatch, capsys, branch_factory):
        monkeypatch.chdir(git_repo_with_branches.working_dir)
        report = SweepReport(deleted=[branch_factory("feature/old")])
        with patch("git_branch_sweeper.tui.BranchSweeperApp.run", return_value=report):
            assert main([]) == 0
        assert "feature/old" in capsys.readouterr().out

    def test_tui_failure_exit_code(self, git_repo_with_branches, monkeypatch, capsys, branch_factory):
        monkeypatch.chdir(git_repo_with_branches.working_dir)
        report = SweepReport(failures=[DeletionFailure(branch=branch_factory("main"), error="checked out")])
        with patch("git_branch_sweeper.tui.BranchSweeperApp.run", return_value=report):
            assert main([]) == 1
        assert "checked out" in capsys.readouterr().out

    def test_tui_cancelled(self, git_repo_with_branches, monkeypatch, capsys):
        monkeypatch.chdir(git_repo_with_branches.working_dir)
        with patch("git_branch_sweeper.tui.BranchSweeperApp.run", return_value=SweepReport(cancelled=True)):
            assert main([]) == 0
        assert "No branches deleted" in capsys.readouterr().out
