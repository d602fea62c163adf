"""Point the CRAN mirror at a dated MRAN snapshot."""

import logging
from datetime import date

from mransnap.config.loader import resolve_mran_url
from mransnap.ingest.mran_client import MranClient
from mransnap.mirror.store import MirrorStore, get_default_store
from mransnap.models.snapshot import RepoEntry, SnapshotError, SnapshotErrorKind
from mransnap.snapshot.dates import verify_date
from mransnap.snapshot.urls import snapshot_url

logger = logging.getLogger(__name__)

SUPPORTED_PREFIXES = ("http://", "https://", "file://")


def switch_repos(entries: list[RepoEntry], url: str) -> list[RepoEntry]:
    """Replace every unnamed and CRAN entry with a single leading CRAN entry."""
    if not any(e.name for e in entries):
        return [RepoEntry(name="CRAN", url=url)]
    kept = [e for e in entries if e.name not in ("", "CRAN")]
    return [RepoEntry(name="CRAN", url=url), *kept]


def use_snapshot(
    snapshot_date: str,
    mran_url: str | None = None,
    validate: bool = False,
    *,
    store: MirrorStore | None = None,
    client: MranClient | None = None,
    today: date | None = None,
) -> list[RepoEntry]:
    """Switch the mirror configuration to the MRAN snapshot for `snapshot_date`.

    `mran_url` defaults to the configured host, resolved at call time.
    With `validate`, the date must exist on the server at `mran_url`; a
    `client` pointed elsewhere is rebuilt for `mran_url` with its own
    timeout and user agent. Returns the new configuration; on any error the store is left untouched.
    """
    if mran_url is None:
        mran_url = client.base_url if client is not None else resolve_mran_url()
    if store is None:
        store = get_default_store()

    if validate:
        if client is None:
            client = MranClient(base_url=mran_url)
        elif client.base_url != mran_url:
            client = MranClient(
                base_url=mran_url, timeout=client.timeout, user_agent=client.user_agent
            )
    snapshot_date = verify_date(snapshot_date, validate, today=today, client=client)

    if not mran_url.startswith(SUPPORTED_PREFIXES):
        raise SnapshotError(
            SnapshotErrorKind.UNSUPPORTED_SCHEME, "Not a HTTP[S] or file URL"
        )

    url = snapshot_url(mran_url, snapshot_date)
    store.set(switch_repos(store.get(), url))
    logger.info("CRAN mirror set to %s", url)
    return store.get()
