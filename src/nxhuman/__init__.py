"""nxHuman - IDE-agnostic AI context installer."""

__version__ = "1.1.0"

from .context import SafeFileWriter, WriteOutcome, create_initial_log, generate_rules_content
from .errors import InstallError
from .installer import InstallReport, install
from .profile import InstallOptions, Profile

__all__ = [
    # Install sequence
    "install",
    "InstallOptions",
    "InstallReport",
    "Profile",

    # Content and writing
    "generate_rules_content",
    "create_initial_log",
    "SafeFileWriter",
    "WriteOutcome",

    # Errors
    "InstallError",
]
