"""Content generation for the rules file and the decision log.

Both generators are pure: they take the project name and a timestamp and
return text. Nothing here touches the filesystem or the clock unless
``utc_timestamp`` is called without an explicit time.
"""

from datetime import datetime, timezone
from typing import Optional

from .. import __version__
from .builder import ContextBuilder
from .content import PRINCIPLES, SUCCESS_CRITERIA, section

RULES_TITLE = "# nxHuman Engineering Rules"
LOG_TITLE = "# nxHuman Decision Log"
LOG_TRAILER = "# Append new decisions below this line"

# (section key, display label) pairs, in output order
QUALITY_LABELS = (
    ("types", "Types"),
    ("components", "Components"),
    ("apis", "APIs"),
    ("functions", "Functions"),
    ("tests", "Tests"),
)
FLOW_LABELS = (("feature", "Feature"), ("debugging", "Debugging"), ("refactor", "Refactor"))
IDE_LABELS = (("search", "Search"), ("context", "Context"), ("files", "Files"))
ARCHITECTURE_LABELS = (
    ("separation", "Separation"),
    ("state_management", "State"),
    ("data_flow", "Data Flow"),
    ("error_handling", "Errors"),
    ("performance", "Performance"),
)
WORKFLOW_LABELS = (
    ("branching", "Branching"),
    ("testing", "Testing"),
    ("deployment", "Deployment"),
    ("monitoring", "Monitoring"),
)
DECISION_LABELS = (
    ("complexity", "Complexity"),
    ("optimization", "Optimization"),
    ("features", "Features"),
    ("debugging", "Debugging"),
)
UNKNOWN_LABELS = (
    ("package_manager", "Package Manager"),
    ("styling", "Styling System"),
    ("database", "Database"),
    ("orm", "ORM"),
    ("auth", "Authentication"),
    ("deployment", "Deployment"),
    ("state_management", "State Management"),
    ("api_pattern", "API Pattern"),
    ("component_library", "Component Library"),
    ("testing", "Testing Framework"),
)
STACK_LABELS = (("core", "Core"), ("ui", "UI"), ("deployment", "Deployment"), ("focus", "Focus"), ("philosophy", "Philosophy"))


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Format ``now`` (default: current time) as ISO-8601 UTC, e.g. ``2025-01-01T00:00:00.000Z``."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def format_log_entry(timestamp: str, category: str, message: str) -> str:
    """Format a single decision log line: ``[TIMESTAMP] [CATEGORY] message``."""
    return f"[{timestamp}] [{category.upper()}] {message}"


def _labelled(section_name: str, labels):
    values = section(section_name)
    return [(label, values[key]) for key, label in labels]


def generate_rules_content(project_name: str, timestamp: str) -> str:
    """Build the full ``.rules`` document.

    Args:
        project_name: Name shown under Project Context
        timestamp: ISO-8601 creation time shown under Project Context

    Returns:
        The rules document. Section order is fixed.
    """
    loop = section("loop")
    stack = section("startup_stack")

    builder = ContextBuilder()
    builder.add(RULES_TITLE)
    builder.add(PRINCIPLES, "Core Principles")
    builder.add_numbered(
        "Development Loop",
        [(key.upper(), loop[key]) for key in ("measure", "plan", "execute", "validate")],
    )
    builder.add_items("Quality Standards", _labelled("quality_standards", QUALITY_LABELS))
    builder.add_items("Development Flow", _labelled("development_flow", FLOW_LABELS))
    builder.add_items("IDE Integration", _labelled("ide_capabilities", IDE_LABELS))
    builder.add_bullets("Specialists", section("specialists").values())
    builder.add_items("Architectural Principles", _labelled("architectural_principles", ARCHITECTURE_LABELS))
    builder.add_items("Workflow Principles", _labelled("workflow_principles", WORKFLOW_LABELS))
    builder.add_items("Decision Framework", _labelled("decision_framework", DECISION_LABELS))
    builder.add_items("Project Context", [("Project", project_name), ("Created", timestamp)])
    builder.add(
        "When encountering architectural decisions, track resolution:\n"
        + "\n".join(f"- {label}: {text}" for label, text in _labelled("unknowns", UNKNOWN_LABELS)),
        "UNKNOWNS (Resolved through usage)",
    )
    builder.add(
        stack["description"] + "\n"
        + "\n".join(f"- {label}: {text}" for label, text in _labelled("startup_stack", STACK_LABELS)),
        "Startup Stack (When building NextJS webapps)",
    )
    builder.add("All major decisions are logged to .nxlogs for tracking and learning.", "Decision Logging")
    builder.add_bullets("Success Criteria", SUCCESS_CRITERIA)

    return builder.build()


def create_initial_log(project_name: str, timestamp: str, version: str = __version__) -> str:
    """Build the seed content of ``.nxlogs``.

    The log is append-only after this point; new entries go after the trailer.
    """
    entries = [
        format_log_entry(timestamp, "init", f"nxHuman v{version} initialized"),
        format_log_entry(timestamp, "context", f"Project: {project_name}"),
    ]
    history = "\n".join(entries)
    example = format_log_entry("2024-01-01T00:00:00Z", "package_manager", "npm -> selected (first use)")

    return f"""{LOG_TITLE}
# Project: {project_name}
# Created: {timestamp}
# Format: [TIMESTAMP] [CATEGORY] [DECISION] [CONTEXT]

## UNKNOWNS Resolution Tracking
# When an UNKNOWN is resolved, it gets logged here
# Example: {example}

## Decision History
{history}

## Learning Pattern
# The system learns your preferences through usage:
# - First use of a tool sets the default
# - Consistent patterns become conventions
# - Deviations are logged as experiments

---
{LOG_TRAILER}
"""
