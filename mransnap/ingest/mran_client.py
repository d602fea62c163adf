"""MRAN snapshot listing client for HTTP(S) hosts and local mirrors."""

import logging
from pathlib import Path
from urllib.parse import unquote

import httpx

from mransnap.config.defaults import DEFAULT_USER_AGENT
from mransnap.config.loader import resolve_mran_url
from mransnap.config.schema import MransnapConfig
from mransnap.ingest.listing_parser import parse_snapshot_listing
from mransnap.models.snapshot import SnapshotError, SnapshotErrorKind
from mransnap.snapshot.urls import snapshot_url

logger = logging.getLogger(__name__)


class MranClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        # Resolved at construction so env/config changes apply per client
        self.base_url = base_url or resolve_mran_url()
        self.timeout = timeout
        self.user_agent = user_agent

    @classmethod
    def from_config(cls, config: MransnapConfig, base_url: str | None = None) -> "MranClient":
        return cls(
            base_url=base_url or resolve_mran_url(config),
            timeout=config.timeout_seconds,
            user_agent=config.user_agent,
        )

    def list_snapshots(self) -> list[str]:
        """List snapshot dates published under `<base>/snapshot`.

        Order follows the server (or directory) listing and is not sorted.
        """
        if self.base_url.startswith(("http://", "https://")):
            lines = self._fetch_index_lines()
        elif self.base_url.startswith("file://"):
            lines = self._list_local_dir()
        else:
            raise SnapshotError(SnapshotErrorKind.UNSUPPORTED_SCHEME, "Invalid URL scheme")
        return parse_snapshot_listing(lines)

    def _fetch_index_lines(self) -> list[str]:
        url = snapshot_url(self.base_url)
        headers = {"User-Agent": self.user_agent}
        logger.debug("Fetching snapshot index %s", url)
        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
        except (httpx.RequestError, httpx.HTTPStatusError) as e:
            logger.error("MRAN snapshot index request failed for %s: %s", url, e)
            raise SnapshotError(
                SnapshotErrorKind.HOST_UNREACHABLE, "Unable to contact MRAN host"
            ) from e
        return resp.text.splitlines()

    def _list_local_dir(self) -> list[str]:
        # file:///abs is an absolute path, file://rel is relative to the cwd
        path = Path(unquote(snapshot_url(self.base_url).removeprefix("file://")))
        logger.debug("Listing local snapshot directory %s", path)
        if not path.is_dir():
            logger.error("Local snapshot directory not found: %s", path)
            raise SnapshotError(
                SnapshotErrorKind.HOST_UNREACHABLE,
                f"Snapshot directory not found: {path}",
            )
        return sorted(entry.name for entry in path.iterdir())


def list_snapshots(mran_url: str | None = None) -> list[str]:
    """Return the snapshot dates available on `mran_url` (default: configured host)."""
    return MranClient(base_url=mran_url).list_snapshots()
