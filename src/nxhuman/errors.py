"""Errors raised while installing and the hints shown for them."""

import errno
from pathlib import Path
from typing import Optional

PERMISSION_HINT = "Permission denied. Try running with appropriate permissions."
DISK_SPACE_HINT = "Not enough disk space available."
INVALID_PATH_HINT = "Invalid directory path."

_HINTS = {
    errno.EACCES: PERMISSION_HINT,
    errno.EPERM: PERMISSION_HINT,
    errno.ENOSPC: DISK_SPACE_HINT,
    errno.ENOTDIR: INVALID_PATH_HINT,
    errno.ENOENT: INVALID_PATH_HINT,
    errno.EINVAL: INVALID_PATH_HINT,
    errno.EISDIR: INVALID_PATH_HINT,
    errno.ENAMETOOLONG: INVALID_PATH_HINT,
}


class InstallError(Exception):
    """A generated file could not be written."""

    def __init__(self, path: Path, error: OSError):
        self.path = Path(path)
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(f"{reason}: {self.path.name}")


def describe_os_error(exc: BaseException) -> Optional[str]:
    """Return a short hint for a recognised OS error, or None."""
    if isinstance(exc, InstallError):
        exc = exc.error
    if not isinstance(exc, OSError):
        return None
    return _HINTS.get(exc.errno)
