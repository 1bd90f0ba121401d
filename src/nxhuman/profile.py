"""Profile of the project directory nxhuman installs into."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

RULES_FILENAME = ".rules"
LOG_FILENAME = ".nxlogs"
CURSOR_RULES_FILENAME = ".cursorrules"


class Profile:
    """Resolves every path nxhuman touches inside a project.

    The project root is the directory nxhuman was invoked from. Building a
    profile never touches the filesystem.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """Initialize profile for the given root or the current directory.

        Args:
            project_root: Directory to install into. If None, uses the cwd.
        """
        self._project_root = Path(project_root) if project_root is not None else Path.cwd()

    @property
    def project_root(self) -> Path:
        """Directory the generated files are written to."""
        return self._project_root

    @property
    def project_name(self) -> str:
        """Project name shown in generated content (the directory's basename)."""
        return self._project_root.name

    @property
    def rules_file(self) -> Path:
        """Path to the generated rules file."""
        return self._project_root / RULES_FILENAME

    @property
    def log_file(self) -> Path:
        """Path to the decision log."""
        return self._project_root / LOG_FILENAME

    @property
    def cursor_rules_file(self) -> Path:
        """Path to the optional Cursor alias of the rules file."""
        return self._project_root / CURSOR_RULES_FILENAME

    @classmethod
    def current(cls) -> "Profile":
        """Get the profile for the current working directory."""
        return cls()

    def __str__(self) -> str:
        return f"Profile({self.project_name})"

    def __repr__(self) -> str:
        return f"Profile(project_root={self._project_root!s})"


@dataclass(frozen=True)
class InstallOptions:
    """Flags controlling a single install run."""

    force: bool = False
    dry_run: bool = False
    # None means "ask the user"
    cursor: Optional[bool] = None
