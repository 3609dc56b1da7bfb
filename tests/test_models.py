"""Tests for result and exit code models."""

import dataclasses

import pytest
from wtv.models import ExitCode, RevisionInfo


class TestRevisionInfo:
    def test_success(self):
        info = RevisionInfo.success(15)
        assert info.succeeded
        assert (info.revision_number, info.next_revision_number) == (15, 16)
        assert info.error is None

    def test_failure(self):
        info = RevisionInfo.failure("File contents are empty")
        assert not info.succeeded
        assert (info.revision_number, info.next_revision_number) == (0, 0)

    def test_success_str(self):
        assert str(RevisionInfo.success(15)) == "RevisionNumber: 15, NextRevisionNumber: 16"

    def test_failure_str_is_error(self):
        assert str(RevisionInfo.failure("Can't parse * to int")) == "Can't parse * to int"

    def test_immutable(self):
        info = RevisionInfo.success(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.revision_number = 2

    def test_equality(self):
        assert RevisionInfo.success(3) == RevisionInfo(3, 4)


class TestRevisionInfoInvariants:
    """A result is either a consistent success or a described failure."""

    def test_rejects_blank_error(self):
        with pytest.raises(ValueError, match="non-empty"):
            RevisionInfo.failure("   ")

    def test_rejects_numbers_on_failure(self):
        with pytest.raises(ValueError, match="no revision numbers"):
            RevisionInfo(5, 6, "broken")

    def test_rejects_inconsistent_next_number(self):
        with pytest.raises(ValueError, match="revision_number \\+ 1"):
            RevisionInfo(5, 7)


class TestExitCode:
    def test_values(self):
        assert ExitCode.SUCCESS == 0
        assert ExitCode.WRONG_NO_OF_ARGUMENTS == 1
        assert ExitCode.PROBLEM_READING_INPUT_FILE == 2
        assert ExitCode.PROBLEM_WRITING_TO_OUTPUT_FILE == 3
        assert ExitCode.PROBLEM_DOING_REPLACEMENTS == 4
        assert ExitCode.PROBLEM_GETTING_SVN_REVISION_NUMBER == 5

    def test_description(self):
        assert ExitCode.WRONG_NO_OF_ARGUMENTS.description == "WTV Wrong No Of Arguments"
