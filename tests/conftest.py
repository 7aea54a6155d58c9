from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from stringlist_py.core import app_config
from stringlist_py.core.filename_policy import FilenamePolicy


@pytest.fixture()
def isolated_config(tmp_path: Path, monkeypatch) -> Iterator[None]:
    """Run every test from an empty directory with a cold config cache."""
    monkeypatch.chdir(tmp_path)
    app_config.load.cache_clear()
    yield
    app_config.load.cache_clear()


@pytest.fixture()
def sensitive_policy() -> FilenamePolicy:
    return FilenamePolicy(case_insensitive=False, glob_matching=True)


@pytest.fixture()
def insensitive_policy() -> FilenamePolicy:
    return FilenamePolicy(case_insensitive=True, glob_matching=True)


@pytest.fixture()
def write_list(tmp_path: Path) -> Callable[[str, bytes], Path]:
    def _write(name: str, payload: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(payload)
        return path

    return _write
