"""Shared test fixtures."""

from datetime import date
from pathlib import Path

import pytest
import yaml

from mransnap.config.defaults import MRAN_URL_ENV_VAR
from mransnap.mirror.store import MirrorStore

INDEX_HTML = """<html>
<head><title>Index of /snapshot/</title></head>
<body>
<h1>Index of /snapshot/</h1><hr><pre><a href="../">../</a>
<a href="2014-09-17/">2014-09-17/</a>                                        17-Sep-2014 00:00                   -
<a href="2014-09-18/">2014-09-18/</a>                                        18-Sep-2014 00:00                   -
<a href="2020-01-01/">2020-01-01/</a>                                        01-Jan-2020 00:00                   -
</pre><hr></body>
</html>
"""


@pytest.fixture(autouse=True)
def no_env_mran_url(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CHECKPOINT_MRAN_URL out of the tests."""
    monkeypatch.delenv(MRAN_URL_ENV_VAR, raising=False)


@pytest.fixture
def today() -> date:
    """Fixed "today" so range checks do not depend on the wall clock."""
    return date(2020, 6, 1)


@pytest.fixture
def index_html() -> str:
    return INDEX_HTML


@pytest.fixture
def store() -> MirrorStore:
    return MirrorStore.from_mapping(
        {"CRAN": "https://cran.r-project.org", "other": "https://x"}
    )


@pytest.fixture
def local_mran(tmp_path: Path) -> Path:
    """Create a file:// MRAN mirror with a few snapshot directories."""
    snapshot_dir = tmp_path / "mran" / "snapshot"
    for name in ("2020-01-01", "2014-09-17", "README"):
        (snapshot_dir / name).mkdir(parents=True)
    return tmp_path / "mran"


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "mran_url": "https://test-mran.example.com",
        "timeout_seconds": 5.0,
        "repos": {"CRAN": "https://cran.r-project.org", "BioC": "https://bioc.example.org"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f, sort_keys=False)
    return path
