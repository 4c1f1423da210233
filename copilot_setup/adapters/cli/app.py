"""
Main CLI application
"""
import typer
from pathlib import Path
from typing import Optional

from ... import __version__
from ...core.logging import setup_logging, get_logger, get_stdout_console
from .setup import register_setup_command

logger = get_logger(__name__)
console = get_stdout_console()

# Create main app
app = typer.Typer(
    name="copilot-setup",
    add_completion=False,
    help="Sync editor agent assets and settings from a remote repository",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

register_setup_command(app)


@app.command(name="version")
def version():
    """Show the installed version"""
    console.print(f"copilot-setup {__version__}")


@app.callback()
def main(
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Log file path",
    ),
):
    """
    copilot-setup - editor agent asset installer
    
    Use subcommands to perform different operations:
    - setup: Fetch assets, sync them and merge settings
    - version: Show the installed version
    """
    setup_logging(level=log_level, log_file=log_file)


def run():
    """CLI entry point"""
    app()


if __name__ == "__main__":
    run()
