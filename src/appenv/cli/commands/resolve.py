"""Environment commands: ip, resolve and flags."""

from typing import List, Optional

import typer

from ...domain.environments import Environment, NetworkRange
from ...domain.exceptions import EnvConfigError
from ...merging.flags import build_app_flags
from ...resolution.resolver import EnvironmentResolver
from ..output.display import display_environment, display_error, display_mapping
from ..state import CLIState


def parse_networks(options: list[str] | None) -> list[NetworkRange]:
    """Parse '<cidr>=<env>' options into network ranges.

    Raises:
        typer.Exit: If an option is malformed or the CIDR is invalid
    """
    networks = []
    for option in options or []:
        try:
            networks.append(NetworkRange.from_option(option))
        except ValueError as e:
            typer.secho(f"✗ Invalid network: {option}", fg=typer.colors.RED, err=True)
            typer.secho(f"  {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
    return networks


def supplied_env(state: CLIState, env: Optional[str]) -> Optional[str]:
    """Explicit --env value, falling back to the source's env key."""
    if env is not None:
        return env
    return state.source.get(state.settings.env_key)


def ip(ctx: typer.Context) -> None:
    """Print the IPv4 address used to match networks."""
    state: CLIState = ctx.obj
    typer.echo(state.ip_provider())


def resolve(
    ctx: typer.Context,
    env: Optional[str] = typer.Option(
        None, "--env", "-e", help="Explicit environment (defaults to $APP_ENV)"
    ),
    network: Optional[List[str]] = typer.Option(
        None, "--network", "-n", help="Network mapping as '<cidr>=<env>'"
    ),
) -> None:
    """Resolve the environment for this server.

    Examples:
        appenv resolve
        appenv resolve --env staging
        appenv resolve -n 10.117.0.0/16=live -n 10.118.0.0/16=staging
    """
    state: CLIState = ctx.obj
    resolver = EnvironmentResolver(
        parse_networks(network), ip_provider=state.ip_provider
    )

    try:
        resolved = resolver.resolve(supplied_env(state, env))
    except EnvConfigError as e:
        display_error(e)
        raise typer.Exit(code=1)

    display_environment(resolved)


def flags(
    env: str = typer.Argument(..., help="Environment to build flags for"),
) -> None:
    """Print the IN_* flags for an environment.

    Examples:
        appenv flags staging
    """
    resolved = Environment.from_name(env)
    if resolved is None:
        supported = ", ".join(e.value for e in Environment)
        typer.secho(
            f"✗ Unsupported environment '{env}' (expected one of: {supported})",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    display_mapping(build_app_flags(resolved))
