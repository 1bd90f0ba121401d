"""Interactive questions asked during install."""

from typing import Optional

from rich.console import Console
from rich.prompt import Confirm

from .logger import get_logger

logger = get_logger("prompts")

CURSOR_QUESTION = "Create .cursorrules symlink for Cursor IDE?"


class LenientConfirm(Confirm):
    """Yes/no prompt where any answer starting with "y" is yes and anything else is no."""

    def process_response(self, value: str) -> bool:
        return value.strip().lower().startswith("y")


def confirm_cursor_alias(console: Optional[Console] = None) -> bool:
    """Ask whether to alias .rules as .cursorrules. Defaults to no.

    Closed stdin (EOF) counts as no.
    """
    try:
        return LenientConfirm.ask(CURSOR_QUESTION, default=False, console=console)
    except EOFError:
        logger.debug("No input available for cursor prompt, assuming no")
        return False
