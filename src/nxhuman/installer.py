"""Install sequence: rules file, decision log, optional Cursor alias."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from pydantic import BaseModel

from .context.store import AliasOutcome, SafeFileWriter, WriteOutcome, create_alias
from .context.templates import create_initial_log, generate_rules_content, utc_timestamp
from .errors import InstallError
from .logger import get_logger
from .profile import InstallOptions, Profile, RULES_FILENAME

logger = get_logger("installer")


class InstallReport(BaseModel):
    """Result of one install run."""

    project_name: str
    dry_run: bool = False
    rules: WriteOutcome
    log: WriteOutcome
    cursor: Optional[AliasOutcome] = None

    @property
    def log_preserved(self) -> bool:
        """An existing decision log was left as it was."""
        return self.log is WriteOutcome.SKIPPED_EXISTS


def _write(writer: SafeFileWriter, path, content: str) -> WriteOutcome:
    try:
        return writer.write(path, content)
    except OSError as e:
        raise InstallError(path, e) from e


def install(
    profile: Profile,
    options: InstallOptions,
    *,
    confirm: Optional[Callable[[], bool]] = None,
    now: Optional[datetime] = None,
    on_write: Optional[Callable[[str, WriteOutcome], None]] = None,
) -> InstallReport:
    """Install the engineering context into ``profile.project_root``.

    Args:
        profile: Paths and project name for the target directory
        options: force / dry-run / cursor flags
        confirm: Asked whether to create the Cursor alias when ``options.cursor`` is None
        now: Creation time (defaults to the current time)
        on_write: Called with (file name, outcome) after each file is handled

    Returns:
        InstallReport describing what happened to each file

    Raises:
        InstallError: If a file could not be written
    """
    timestamp = utc_timestamp(now)
    project_name = profile.project_name
    logger.info(f"Installing context for {project_name} (force={options.force}, dry_run={options.dry_run})")

    rules_writer = SafeFileWriter(force=options.force, dry_run=options.dry_run)
    rules = _write(rules_writer, profile.rules_file, generate_rules_content(project_name, timestamp))
    if on_write:
        on_write(profile.rules_file.name, rules)

    # The decision log is never overwritten, even with --force
    log_writer = SafeFileWriter(force=False, dry_run=options.dry_run)
    if profile.log_file.exists():
        log = WriteOutcome.SKIPPED_EXISTS
        logger.debug(f"{profile.log_file.name} exists, preserving")
    else:
        log = _write(log_writer, profile.log_file, create_initial_log(project_name, timestamp))
        if on_write:
            on_write(profile.log_file.name, log)

    cursor = None
    if not options.dry_run:
        wants_cursor = options.cursor
        if wants_cursor is None:
            wants_cursor = confirm() if confirm else False
        if wants_cursor:
            cursor = create_alias(RULES_FILENAME, profile.cursor_rules_file)

    return InstallReport(
        project_name=project_name,
        dry_run=options.dry_run,
        rules=rules,
        log=log,
        cursor=cursor,
    )
