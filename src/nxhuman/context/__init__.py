"""Content generation and guarded file writing for nxhuman."""

from .builder import ContextBuilder
from .content import AI_CONTEXT
from .store import AliasOutcome, SafeFileWriter, WriteOutcome, create_alias
from .templates import create_initial_log, format_log_entry, generate_rules_content, utc_timestamp

__all__ = [
    "AI_CONTEXT",
    "AliasOutcome",
    "ContextBuilder",
    "SafeFileWriter",
    "WriteOutcome",
    "create_alias",
    "create_initial_log",
    "format_log_entry",
    "generate_rules_content",
    "utc_timestamp",
]
