from __future__ import annotations

import os
from pathlib import Path

import pytest

from nxhuman.context import store
from nxhuman.context.store import AliasOutcome, SafeFileWriter, WriteOutcome, create_alias


def test_write_creates_missing_file(tmp_path: Path) -> None:
    target = tmp_path / ".rules"
    outcome = SafeFileWriter().write(target, "hello ✓\n")
    assert outcome is WriteOutcome.CREATED
    assert target.read_text(encoding="utf-8") == "hello ✓\n"


def test_write_creates_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / ".rules"
    assert SafeFileWriter().write(target, "x") is WriteOutcome.CREATED
    assert target.read_text() == "x"


def test_existing_file_is_left_alone_without_force(tmp_path: Path) -> None:
    target = tmp_path / ".rules"
    target.write_bytes(b"original\r\n")
    outcome = SafeFileWriter(force=False).write(target, "new")
    assert outcome is WriteOutcome.SKIPPED_EXISTS
    assert target.read_bytes() == b"original\r\n"


def test_force_replaces_existing_content(tmp_path: Path) -> None:
    target = tmp_path / ".rules"
    target.write_text("a much longer original body")
    outcome = SafeFileWriter(force=True).write(target, "short")
    assert outcome is WriteOutcome.CREATED
    assert target.read_text() == "short"


@pytest.mark.parametrize("force", [False, True])
@pytest.mark.parametrize("exists", [False, True])
def test_dry_run_never_mutates(tmp_path: Path, snapshot, force: bool, exists: bool) -> None:
    target = tmp_path / "nested" / ".rules"
    if exists:
        target.parent.mkdir()
        target.write_text("keep")
    before = snapshot(tmp_path)

    outcome = SafeFileWriter(force=force, dry_run=True).write(target, "new")

    assert outcome is WriteOutcome.SIMULATED
    assert snapshot(tmp_path) == before


def test_os_errors_propagate(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    with pytest.raises(OSError):
        SafeFileWriter().write(blocker / ".rules", "x")


def test_create_alias_makes_relative_symlink(tmp_path: Path) -> None:
    (tmp_path / ".rules").write_text("rules")
    alias = tmp_path / ".cursorrules"

    assert create_alias(".rules", alias) is AliasOutcome.CREATED
    assert alias.is_symlink()
    assert os.readlink(alias) == ".rules"
    assert alias.read_text() == "rules"


def test_create_alias_keeps_existing_file(tmp_path: Path) -> None:
    alias = tmp_path / ".cursorrules"
    alias.write_text("custom")
    assert create_alias(".rules", alias) is AliasOutcome.EXISTS
    assert alias.read_text() == "custom"


def test_create_alias_keeps_dangling_symlink(tmp_path: Path) -> None:
    alias = tmp_path / ".cursorrules"
    os.symlink("missing-target", alias)
    assert create_alias(".rules", alias) is AliasOutcome.EXISTS
    assert os.readlink(alias) == "missing-target"


def test_create_alias_reports_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def no_symlinks(*_args, **_kwargs):
        raise OSError("symlinks not supported")

    monkeypatch.setattr(store.os, "symlink", no_symlinks)
    alias = tmp_path / ".cursorrules"
    assert create_alias(".rules", alias) is AliasOutcome.FAILED
    assert not alias.exists()
