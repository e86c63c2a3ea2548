"""Tests for the branch model"""
import dataclasses

import pytest

from git_branch_sweeper.exceptions import RegistryError
from git_branch_sweeper.models.branch import FIELD_SEPARATOR, Branch, SweepReport, DeletionFailure


def record(*fields):
    return FIELD_SEPARATOR.join(fields)


class TestBranchFromRecord:
    """Test parsing of branch listing records."""

    def test_parses_all_fields(self):
        branch = Branch.from_record(record(
            "feature/x", "Fix the thing", "2024-01-01 10:00", "Test User",
            "test@example.com", "origin/feature/x",
        ))
        assert branch.name == "feature/x"
        assert branch.title == "Fix the thing"
        assert branch.date == "2024-01-01 10:00"
        assert branch.author == "Test User"
        assert branch.email == "test@example.com"
        assert branch.remote == "origin/feature/x"

    def test_subject_may_contain_dashes(self):
        """Commit subjects often contain the old '---' style separators."""
        branch = Branch.from_record(record("b", "a --- b", "d", "n", "e", ""))
        assert branch.title == "a --- b"
        assert branch.remote == ""

    def test_wrong_field_count(self):
        with pytest.raises(RegistryError):
            Branch.from_record(record("only", "three", "fields"))


class TestBranchRemote:
    """Test upstream handling."""

    def test_split_on_first_slash(self, branch_factory):
        branch = branch_factory("feature/x", remote="origin/feature/x")
        assert branch.split_remote() == ("origin", "feature/x")

    def test_simple_remote(self, branch_factory):
        assert branch_factory("f", remote="origin/feature-x").split_remote() == ("origin", "feature-x")

    def test_no_remote(self, branch_factory):
        branch = branch_factory("f")
        assert branch.has_remote is False
        assert branch.split_remote() is None

    def test_local_upstream(self, branch_factory):
        """A branch tracking another local branch has no remote part."""
        branch = branch_factory("f", remote="main")
        assert branch.has_remote is True
        assert branch.split_remote() is None


class TestBranchEquality:
    """Branches compare by value."""

    def test_structural_equality(self, branch_factory):
        assert branch_factory("a") == branch_factory("a")
        assert branch_factory("a") != branch_factory("a", email="other@example.com")

    def test_frozen(self, branch_factory):
        with pytest.raises(dataclasses.FrozenInstanceError):
            branch_factory("a").name = "b"


def test_report_has_failures(branch_factory):
    report = SweepReport()
    assert report.has_failures is False
    report.failures.append(DeletionFailure(branch=branch_factory("a"), error="boom"))
    assert report.has_failures is True
