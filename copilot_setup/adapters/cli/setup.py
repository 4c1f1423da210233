"""
Setup CLI command
"""
import typer
from pathlib import Path
from typing import Optional

from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ...core.exceptions import (
    ConfigError,
    FetchError,
    PreconditionError,
    SetupError,
)
from ...core.system import EditorChannel
from ...domain.setup import SetupService
from ...domain.sync import SyncReport
from ..config.loader import ConfigLoader
from ..config.setup_parser import parse_setup_options
from ..editor import EditorVersionProbe
from ..vcs import GitFetcher

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()


def register_setup_command(app: typer.Typer) -> None:
    """Register setup command directly on the main app"""
    app.command(name="setup")(setup_run)


def _print_category(name: str, changed: int, dry_run: bool) -> None:
    if changed == 0:
        stdout_console.print(f"[green]✓[/green] {name}: no changes")
    elif dry_run:
        stdout_console.print(f"[cyan]ℹ[/cyan] {name}: {changed} file(s) would be updated")
    else:
        stdout_console.print(f"[green]✓[/green] {name}: {changed} file(s) updated")


def _print_complete(report: SyncReport, dry_run: bool) -> None:
    suffix = " (dry run, nothing written)" if dry_run else ""
    stdout_console.print(
        f"[green]✓[/green] Setup completed: {report.total} file(s) changed{suffix}"
    )


def setup_run(
    repo: Optional[str] = typer.Option(
        None, "--repo", "-r", help="Remote asset repository URL"
    ),
    branch: Optional[str] = typer.Option(
        None, "--branch", "-b", help="Branch or ref to fetch"
    ),
    channel: Optional[EditorChannel] = typer.Option(
        None, "--channel", "-c", help="Editor channel whose user directory is configured"
    ),
    keep_temp: bool = typer.Option(
        False, "--keep-temp", help="Keep the fetched temporary directory"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "--what-if", help="Show what would change without writing anything"
    ),
    skip_settings: bool = typer.Option(
        False, "--skip-settings", help="Do not merge editor settings"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Configuration file path (TOML)"
    ),
):
    """
    Fetch assets, sync them into the editor user directories and merge settings
    
    Examples:
        copilot-setup setup
        copilot-setup setup --channel insiders --dry-run
        copilot-setup setup --repo https://github.com/me/assets.git --branch dev
    """
    try:
        config_loader = ConfigLoader()
        cfg = config_loader.load(
            toml_path=config_path.expanduser() if config_path else None,
            cli_overrides={
                "repo": repo,
                "branch": branch,
                "channel": channel.value if channel else None,
                "keep_temp": True if keep_temp else None,
                "dry_run": True if dry_run else None,
                "skip_settings": True if skip_settings else None,
            },
        )
        options = parse_setup_options(cfg)
        
        if options.dry_run:
            stdout_console.print("[yellow]⚠[/yellow] Dry run: no files will be written")
        
        service = SetupService(
            fetcher=GitFetcher(),
            version_probe=EditorVersionProbe(),
            on_version_checked=lambda raw: stdout_console.print(
                f"[green]✓[/green] Editor version: [cyan]{raw}[/cyan]"
            ) if raw else None,
            on_fetched=lambda url, ref: stdout_console.print(
                f"[green]✓[/green] Fetched [cyan]{url}[/cyan] ({ref})"
            ),
            on_category_synced=_print_category,
            on_settings_merged=lambda path, is_dry: stdout_console.print(
                f"[cyan]ℹ[/cyan] Settings would be written to {path}" if is_dry
                else f"[green]✓[/green] Settings merged into {path}"
            ),
            on_complete=_print_complete,
        )
        service.run(options)
    
    except ConfigError as e:
        stderr_console.print(f"[red]Config Error:[/red] {e}")
        raise typer.Exit(1)
    except PreconditionError as e:
        stderr_console.print(f"[red]Precondition Failed:[/red] {e}")
        raise typer.Exit(1)
    except FetchError as e:
        stderr_console.print(f"[red]Fetch Error:[/red] {e}")
        raise typer.Exit(1)
    except SetupError as e:
        stderr_console.print(f"[red]Setup Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Failed to run setup")
        stderr_console.print(f"[red]Error:[/red] Failed to run setup: {e}")
        raise typer.Exit(1)
