"""Snapshot date checks: format, range, and presence on the server."""

import re
from datetime import date

from mransnap.config.defaults import FIRST_SNAPSHOT_DATE
from mransnap.ingest.mran_client import MranClient
from mransnap.models.snapshot import DateCheckResult, SnapshotErrorKind

_STRICT_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def _failed(snapshot_date: str, kind: SnapshotErrorKind, detail: str) -> DateCheckResult:
    return DateCheckResult(
        snapshot_date=snapshot_date, passed=False, error_kind=kind, detail=detail
    )


def check_date(
    snapshot_date: str,
    validate: bool = False,
    *,
    today: date | None = None,
    client: MranClient | None = None,
) -> DateCheckResult:
    """Check a YYYY-MM-DD snapshot date without raising.

    With `validate`, the date must also appear in the live snapshot
    listing. Listing failures still raise SnapshotError.
    """
    if today is None:
        today = date.today()
    try:
        parsed = date.fromisoformat(snapshot_date)
    except (TypeError, ValueError):
        return _failed(
            str(snapshot_date),
            SnapshotErrorKind.INVALID_FORMAT,
            "Invalid date, must be in the format YYYY-MM-DD",
        )
    # fromisoformat also takes 20200101 and week dates on 3.11+
    if not _STRICT_DATE_RE.fullmatch(snapshot_date):
        return _failed(
            snapshot_date,
            SnapshotErrorKind.INVALID_FORMAT,
            "Invalid date, must be in the format YYYY-MM-DD",
        )
    if parsed < FIRST_SNAPSHOT_DATE:
        return _failed(
            snapshot_date,
            SnapshotErrorKind.TOO_EARLY,
            f"Snapshots are only available after {FIRST_SNAPSHOT_DATE.isoformat()}",
        )
    if parsed > today:
        return _failed(
            snapshot_date,
            SnapshotErrorKind.FUTURE_DATE,
            "Snapshot date later than current date",
        )
    if validate:
        if client is None:
            client = MranClient()
        if snapshot_date not in client.list_snapshots():
            return _failed(
                snapshot_date,
                SnapshotErrorKind.NOT_FOUND,
                "Snapshot date does not exist on MRAN",
            )
    return DateCheckResult(
        snapshot_date=snapshot_date, passed=True, error_kind=None, detail="ok"
    )


def verify_date(
    snapshot_date: str,
    validate: bool = False,
    *,
    today: date | None = None,
    client: MranClient | None = None,
) -> str:
    """Return `snapshot_date` unchanged, or raise SnapshotError."""
    result = check_date(snapshot_date, validate, today=today, client=client)
    result.raise_for_error()
    return snapshot_date
