"""gitstage CLI — Typer application with ui, status, and init commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console

from gitstage import __version__

app = typer.Typer(
    name="gitstage",
    help="Stage, unstage and discard working tree changes from the terminal.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def setup_logging(level: str, log_file: str = "", *, to_stderr: bool = True) -> None:
    """Replace loguru's default sink with the configured ones."""
    logger.remove()
    if to_stderr:
        logger.add(
            sys.stderr,
            level=level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>",
            colorize=True,
        )
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="1 MB",
        )


def _log_level(cfg_level: str, verbose: bool, debug: bool) -> str:
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return cfg_level


def _resolve_repository():
    """Find the git repo, exit 2 on failure."""
    from gitstage.errors import RepositoryError
    from gitstage.git.repository import GitRepository

    try:
        return GitRepository.discover()
    except RepositoryError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load_config(repo_root: Path, config: Optional[str]):
    from gitstage.config.loader import ConfigError, load_config

    try:
        return load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── ui ────────────────────────────────────────────────────────────────────────


@app.command()
def ui(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitstage.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log INFO to the log file"),
    debug: bool = typer.Option(False, "--debug", help="Log DEBUG to the log file"),
) -> None:
    """Browse unstaged and staged changes interactively."""
    from gitstage.config.loader import ConfigError
    from gitstage.errors import RepositoryError
    from gitstage.git.executor import GitCommandExecutor
    from gitstage.status.controller import ViewController
    from gitstage.tui import app as tui_app
    from gitstage.tui.keys import KeyMap

    repository = _resolve_repository()
    cfg = _load_config(repository.root, config)
    # The terminal belongs to curses; only the file sink is allowed.
    setup_logging(_log_level(cfg.log.level, verbose, debug), cfg.log.file, to_stderr=False)

    try:
        keymap = KeyMap(cfg.keys)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    try:
        controller = ViewController(repository, GitCommandExecutor(repository.root))
    except RepositoryError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    logger.info("starting ui in {}", repository.root)
    tui_app.run(controller, cfg, keymap)
    raise typer.Exit(code=0)


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitstage.toml"),
    staged_only: bool = typer.Option(False, "--staged", help="Only show staged changes"),
    unstaged_only: bool = typer.Option(False, "--unstaged", help="Only show unstaged changes"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Print unstaged and staged changes once and exit."""
    from gitstage.errors import RepositoryError
    from gitstage.output import terminal
    from gitstage.status.controller import View, load_entries

    if staged_only and unstaged_only:
        console.print("[bold red]Error:[/bold red] --staged and --unstaged are mutually exclusive")
        raise typer.Exit(code=2)

    repository = _resolve_repository()
    cfg = _load_config(repository.root, config)
    setup_logging(_log_level(cfg.log.level, verbose, debug), cfg.log.file)

    views = [View.UNSTAGED, View.STAGED]
    if staged_only:
        views = [View.STAGED]
    elif unstaged_only:
        views = [View.UNSTAGED]

    try:
        sections = [(view.title, load_entries(repository, view.origin)) for view in views]
    except RepositoryError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    terminal.render(sections, console=Console())
    raise typer.Exit(code=0)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gitstage.toml in the repo root."""
    from gitstage.config.defaults import DEFAULT_TOML
    from gitstage.config.loader import CONFIG_FILENAME

    repository = _resolve_repository()
    config_path = repository.root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitstage {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """gitstage — stage, unstage and discard changes from the terminal."""
