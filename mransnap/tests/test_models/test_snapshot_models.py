"""Tests for snapshot error and result types."""

import pytest

from mransnap.models.snapshot import (
    DateCheckResult,
    RepoEntry,
    SnapshotError,
    SnapshotErrorKind,
)


class TestSnapshotErrorKind:
    def test_closed_set(self):
        assert {k.value for k in SnapshotErrorKind} == {
            "INVALID_FORMAT",
            "TOO_EARLY",
            "FUTURE_DATE",
            "NOT_FOUND",
            "UNSUPPORTED_SCHEME",
            "HOST_UNREACHABLE",
        }

    def test_str_value(self):
        assert f"{SnapshotErrorKind.TOO_EARLY}" == "TOO_EARLY"


class TestDateCheckResult:
    def test_passed_does_not_raise(self):
        result = DateCheckResult("2020-01-01", True, None, "ok")
        result.raise_for_error()

    def test_failed_raises_with_kind(self):
        result = DateCheckResult(
            "2099-01-01", False, SnapshotErrorKind.FUTURE_DATE, "too late"
        )
        with pytest.raises(SnapshotError, match="too late") as exc_info:
            result.raise_for_error()
        assert exc_info.value.kind == SnapshotErrorKind.FUTURE_DATE


class TestRepoEntry:
    def test_frozen(self):
        entry = RepoEntry("CRAN", "https://x")
        with pytest.raises(AttributeError):
            entry.url = "https://y"  # type: ignore[misc]

    def test_equality(self):
        assert RepoEntry("", "https://x") == RepoEntry("", "https://x")
