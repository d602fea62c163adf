"""Snapshot URL construction."""


def snapshot_url(mran_url: str, snapshot_date: str | None = None) -> str:
    """Build `<base>/snapshot` or `<base>/snapshot/<date>`.

    A single trailing slash on the base is dropped. No validation is done.
    """
    base = mran_url[:-1] if mran_url.endswith("/") else mran_url
    if not snapshot_date:
        return f"{base}/snapshot"
    return f"{base}/snapshot/{snapshot_date}"
