import os
from pathlib import Path

import pytest

from identicon.errors import PersistenceError
from identicon.utils.storage import image_path, save_image


def test_image_path_uses_raw_input() -> None:
    assert image_path("alice", "out") == os.path.join("out", "alice.png")


def test_save_image_writes_bytes(tmp_path: Path) -> None:
    path = save_image(b"payload", "alice", str(tmp_path))
    assert path == str(tmp_path / "alice.png")
    assert (tmp_path / "alice.png").read_bytes() == b"payload"
    assert sorted(os.listdir(tmp_path)) == ["alice.png"]


def test_save_image_overwrites(tmp_path: Path) -> None:
    save_image(b"old", "alice", str(tmp_path))
    save_image(b"new", "alice", str(tmp_path))
    assert (tmp_path / "alice.png").read_bytes() == b"new"


def test_save_image_missing_directory(tmp_path: Path) -> None:
    missing = tmp_path / "missing"
    with pytest.raises(PersistenceError) as excinfo:
        save_image(b"payload", "alice", str(missing))
    assert isinstance(excinfo.value.__cause__, OSError)
    assert not missing.exists()
