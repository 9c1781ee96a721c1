"""Output formatting utilities for CLI commands."""

import json
from typing import Any

import click


def error(message: str) -> None:
    """Print an error message in red."""
    click.secho(f"✗ {message}", fg="red", err=True)


def warning(message: str) -> None:
    """Print a warning message in yellow."""
    click.secho(f"⚠ {message}", fg="yellow", err=True)


def info(message: str) -> None:
    """Print an info message in blue."""
    click.secho(f"ℹ {message}", fg="blue", err=True)


def echo_json(data: Any, indent: int | None = None) -> None:
    """Print data as JSON on stdout."""
    click.echo(json.dumps(data, indent=indent, ensure_ascii=False, default=str))
