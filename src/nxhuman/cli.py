"""nxHuman CLI: installs an AI engineering context into the current directory."""

import typer
from typing import Optional, Annotated
from rich.console import Console
from rich.markup import escape

from . import __version__
from .context.store import AliasOutcome, WriteOutcome
from .errors import describe_os_error
from .installer import InstallReport, install
from .logger import configure_logging, get_logger
from .profile import InstallOptions, Profile
from .prompts import confirm_cursor_alias

logger = get_logger("cli")
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

# Constants
VERSION = __version__
APP_NAME = "nxHuman"

app = typer.Typer(
    help=f"{APP_NAME} v{VERSION} - AI Engineering Context",
    epilog=(
        "Creates .rules (universal AI context file), .nxlogs (decision log) "
        "and optionally .cursorrules (Cursor symlink). "
        "Examples: nxhuman | nxhuman --force --dry-run"
    ),
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"{APP_NAME} v{VERSION}")
        raise typer.Exit()


def _report_write(name: str, outcome: WriteOutcome) -> None:
    """Print one line per handled file."""
    if outcome is WriteOutcome.SIMULATED:
        console.print(escape(f"[DRY-RUN] Would create: {name}"))
    elif outcome is WriteOutcome.SKIPPED_EXISTS:
        console.print(f"⚠️  [yellow]File exists: {name} (use --force to overwrite)[/yellow]")
    else:
        console.print(f"✅ Created: {name}")


def _print_summary(report: InstallReport) -> None:
    if report.dry_run:
        if report.log_preserved:
            console.print("   • .nxlogs - Decision tracking log (existing, would be preserved)")
        console.print("\n🎯 DRY-RUN COMPLETE: No files were actually created.")
        return

    if report.cursor is AliasOutcome.CREATED:
        console.print("✅ Created: .cursorrules (symlink)")
    elif report.cursor is AliasOutcome.EXISTS:
        console.print("⚠️  .cursorrules already exists, skipping")
    elif report.cursor is AliasOutcome.FAILED:
        console.print("⚠️  Symlink failed, manually rename .rules to .cursorrules")

    console.print("\n🎉 [bold green]Engineering context installed![/bold green]")
    console.print("\n📋 Created files:")
    console.print("   • .rules - AI context and principles")
    if report.cursor is AliasOutcome.CREATED:
        console.print("   • .cursorrules - Cursor symlink")
    if report.log_preserved:
        console.print("   • .nxlogs - Decision tracking log (existing, preserved)")
    else:
        console.print("   • .nxlogs - Decision tracking log (new)")

    console.print("\n🚀 Ready to build:")
    console.print("   1. Open your AI-powered IDE (Cursor, Zed, Windsurf, Cline, etc.)")
    console.print("   2. The AI will track decisions and learn your preferences")
    console.print("   3. Start building with evidence-based engineering")
    console.print("\n💡 Philosophy: Evidence > Assumptions, Ship > Polish")


@app.command()
def main(
    force: Annotated[bool, typer.Option("--force", help="Overwrite existing .rules file")] = False,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be created without writing files")] = False,
    cursor: Annotated[Optional[bool], typer.Option(
        "--cursor/--no-cursor", help="Create (or skip) the .cursorrules symlink without asking"
    )] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Show debug logging on stderr")] = False,
    version: Annotated[Optional[bool], typer.Option(
        "--version", "-v", callback=_version_callback, is_eager=True, help="Show version information"
    )] = None,
):
    """Install .rules and .nxlogs for AI-powered IDEs.

    Philosophy: Evidence > Assumptions • Code > Documentation • Efficiency > Verbosity
    """
    configure_logging(verbose)

    profile = Profile.current()
    options = InstallOptions(force=force, dry_run=dry_run, cursor=cursor)

    console.print(f"\n🤖 {APP_NAME} - AI Engineering Context")
    console.print(f"📁 Project: {escape(profile.project_name)}")
    console.print("⚙️  Mode: Full configuration")
    if dry_run:
        console.print("🔍 DRY-RUN: Showing what would be created...\n")
    console.print("\n📝 Installing engineering context...")

    try:
        report = install(
            profile,
            options,
            confirm=lambda: confirm_cursor_alias(console),
            on_write=_report_write,
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Installation interrupted[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        logger.opt(exception=e).debug(f"Install failed: {e}")
        err_console.print(f"\n❌ [red]Error: {escape(str(e))}[/red]")
        hint = describe_os_error(e)
        if hint:
            err_console.print(f"   {hint}")
        raise typer.Exit(1)

    _print_summary(report)


if __name__ == "__main__":
    app()
