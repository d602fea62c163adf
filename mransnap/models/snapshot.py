"""Snapshot error taxonomy, date check results and mirror entries."""

from dataclasses import dataclass
from enum import StrEnum


class SnapshotErrorKind(StrEnum):
    INVALID_FORMAT = "INVALID_FORMAT"
    TOO_EARLY = "TOO_EARLY"
    FUTURE_DATE = "FUTURE_DATE"
    NOT_FOUND = "NOT_FOUND"
    UNSUPPORTED_SCHEME = "UNSUPPORTED_SCHEME"
    HOST_UNREACHABLE = "HOST_UNREACHABLE"


class SnapshotError(Exception):
    """Raised when a snapshot date, URL or listing cannot be used."""

    def __init__(self, kind: SnapshotErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class DateCheckResult:
    snapshot_date: str
    passed: bool
    error_kind: SnapshotErrorKind | None
    detail: str

    def raise_for_error(self) -> None:
        if not self.passed:
            assert self.error_kind is not None
            raise SnapshotError(self.error_kind, self.detail)


@dataclass(frozen=True)
class RepoEntry:
    name: str  # "" for an unnamed mirror
    url: str
