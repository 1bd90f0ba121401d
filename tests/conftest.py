import os
import sys
from pathlib import Path

import pytest

# Make the src/ package importable without an install.
SRC = str(Path(__file__).resolve().parents[1] / "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty project directory named demo-app, used as the cwd."""
    root = tmp_path / "demo-app"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


def _snapshot(root: Path) -> dict:
    state = {}
    for path in sorted(root.rglob("*")):
        key = str(path.relative_to(root))
        if path.is_symlink():
            state[key] = ("link", os.readlink(path))
        elif path.is_file():
            state[key] = path.read_bytes()
        else:
            state[key] = "dir"
    return state


@pytest.fixture
def snapshot():
    """Map every entry under a directory to its bytes (or symlink target)."""
    return _snapshot
