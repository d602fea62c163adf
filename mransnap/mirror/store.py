"""In-memory mirror configuration store (R's `repos` option)."""

from mransnap.models.snapshot import RepoEntry


class MirrorStore:
    """Ordered name->URL mirror list.

    Names may repeat (several unnamed entries are common), so entries are
    kept as a list rather than a dict.
    """

    def __init__(self, entries: list[RepoEntry] | None = None):
        self._entries: list[RepoEntry] = list(entries or [])

    @classmethod
    def from_mapping(cls, repos: dict[str, str]) -> "MirrorStore":
        return cls([RepoEntry(name=name, url=url) for name, url in repos.items()])

    def get(self) -> list[RepoEntry]:
        return list(self._entries)

    def set(self, entries: list[RepoEntry]) -> None:
        self._entries = list(entries)

    def as_dict(self) -> dict[str, str]:
        """Mapping view; later duplicates overwrite earlier ones."""
        return {e.name: e.url for e in self._entries}

    def __len__(self) -> int:
        return len(self._entries)


_default_store = MirrorStore.from_mapping({"CRAN": "@CRAN@"})


def get_default_store() -> MirrorStore:
    """Return the process-wide mirror store."""
    return _default_store
