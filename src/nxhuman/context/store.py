"""Guarded writes for generated context files."""

import os
from enum import Enum
from pathlib import Path

from ..logger import get_logger

logger = get_logger("store")


class WriteOutcome(str, Enum):
    """What a write call did."""
    CREATED = "created"
    SKIPPED_EXISTS = "skipped_exists"
    SIMULATED = "simulated"


class AliasOutcome(str, Enum):
    """What an alias (symlink) request did."""
    CREATED = "created"
    EXISTS = "exists"
    FAILED = "failed"


class SafeFileWriter:
    """Writes whole files unless told to simulate or the target already exists.

    An existing target is left untouched unless ``force`` is set. In dry-run
    mode nothing is written or created, whatever ``force`` says.
    """

    def __init__(self, force: bool = False, dry_run: bool = False):
        self.force = force
        self.dry_run = dry_run

    def decide(self, path: Path) -> WriteOutcome:
        """Return the outcome a write to ``path`` would have, without writing."""
        if self.dry_run:
            return WriteOutcome.SIMULATED
        if Path(path).exists() and not self.force:
            return WriteOutcome.SKIPPED_EXISTS
        return WriteOutcome.CREATED

    def write(self, path: Path, content: str) -> WriteOutcome:
        """Write ``content`` as the full body of ``path``.

        Raises:
            OSError: If the directory or file cannot be created
        """
        path = Path(path)
        outcome = self.decide(path)

        if outcome is WriteOutcome.CREATED:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

        logger.debug(f"{path.name}: {outcome.value}")
        return outcome


def create_alias(target_name: str, alias_path: Path) -> AliasOutcome:
    """Symlink ``alias_path`` to ``target_name`` (relative to the alias' directory).

    An existing alias, including a dangling symlink, is never replaced.
    Filesystems without symlink support report FAILED instead of raising.
    """
    alias_path = Path(alias_path)
    if alias_path.exists() or alias_path.is_symlink():
        return AliasOutcome.EXISTS

    try:
        os.symlink(target_name, alias_path)
    except OSError as e:
        logger.warning(f"Symlink {alias_path.name} -> {target_name} failed: {e}")
        return AliasOutcome.FAILED

    logger.debug(f"Created symlink {alias_path.name} -> {target_name}")
    return AliasOutcome.CREATED
