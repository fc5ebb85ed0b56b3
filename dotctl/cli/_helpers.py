"""Shared utilities for the dotctl CLI."""

import logging
import os

import typer
from rich.console import Console

from dotctl.config import ConfigError, expand, load_config

console = Console()
err_console = Console(stderr=True)

# Set by the top-level callback (--config)
_state = {"config_path": None}


def set_config_path(path) -> None:
    _state["config_path"] = path


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose or DOTCTL_DEBUG is set."""
    debug = verbose or os.environ.get("DOTCTL_DEBUG", "") not in ("", "0")
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def load_config_safe():
    """Load and return the merged config, or exit on error."""
    try:
        return load_config(_state["config_path"])
    except ConfigError as e:
        console.print(f"[red]Error loading config:[/red] {e}")
        raise typer.Exit(1) from None


def dotfiles_dir(config):
    return expand(config["dotfiles_dir"])


def fail(message: str, code: int = 1):
    """Print an error and exit."""
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code)
