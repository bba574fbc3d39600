"""Display functions for CLI output."""

import json
import typing as t
from collections.abc import Mapping

import typer

from ...domain.environments import Environment


def display_environment(env: Environment) -> None:
    """Print the resolved environment name on its own line."""
    typer.echo(env.value)


def display_mapping(mapping: Mapping[str, t.Any]) -> None:
    """Print a flag set or config as indented JSON.

    Args:
        mapping: Flags or config to print
    """
    typer.echo(json.dumps(dict(mapping), indent=2))


def display_error(error: Exception) -> None:
    """Print a configuration failure in red.

    Args:
        error: The failure to report
    """
    typer.secho(f"✗ {error}", fg=typer.colors.RED, err=True)
