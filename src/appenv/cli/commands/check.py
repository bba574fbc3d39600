"""Check command implementation."""

import json
import typing as t
from pathlib import Path
from typing import List, Optional

import typer

from ...domain.exceptions import EnvConfigError
from ..output.display import display_error, display_mapping
from ..state import CLIState
from .resolve import parse_networks


def load_rules(rules_file: Path) -> dict[str, t.Any]:
    """Read a JSON rules file.

    The file maps each key to its rule, e.g.
    ``{"PORT": {"required": true, "type": "Number"}}``.

    Raises:
        typer.Exit: If the file isn't valid JSON or isn't an object of objects
    """
    try:
        rules = json.loads(rules_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        typer.secho(f"✗ Invalid rules file {rules_file}: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if not isinstance(rules, dict) or not all(
        isinstance(rule, dict) for rule in rules.values()
    ):
        typer.secho(
            f"✗ Invalid rules file {rules_file}: expected an object of rule objects",
            fg=typer.colors.RED,
        )
        raise typer.Exit(code=1)

    return rules


def check(
    ctx: typer.Context,
    rules_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON file mapping var names to rules",
    ),
    env: Optional[str] = typer.Option(
        None, "--env", "-e", help="Explicit environment (defaults to $APP_ENV)"
    ),
    network: Optional[List[str]] = typer.Option(
        None, "--network", "-n", help="Network mapping as '<cidr>=<env>'"
    ),
) -> None:
    """Build the config from the current environment and print it.

    Fails with exit code 1 when a var is missing or has the wrong type.

    Examples:
        appenv check rules.json
        appenv check rules.json --env live
        appenv check rules.json -n 10.117.0.0/16=live
    """
    state: CLIState = ctx.obj
    rules = load_rules(rules_file)
    networks = parse_networks(network)

    source = dict(state.source)
    if env is not None:
        source[state.settings.env_key] = env

    try:
        config = state.create_app().load_config(rules, networks, source)
    except EnvConfigError as e:
        display_error(e)
        raise typer.Exit(code=1)

    display_mapping(config)
