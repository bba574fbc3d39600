"""CLI application factory."""

import typer

from ..config.settings import LogLevel, Settings, build_settings
from ..infrastructure.logging import setup_logging
from .commands.check import check
from .commands.resolve import flags, ip, resolve
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None,
    state: CLIState | None = None,
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing
        state: Optional CLIState override (takes precedence over settings)

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="appenv",
        help="Resolve the deployment environment and check app config",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Show resolution and merge decisions (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            resolved_state = state
        else:
            resolved_settings = settings or build_settings(
                log_level=LogLevel.DEBUG if verbose else None,
                diagnostics=True if verbose else None,
            )
            resolved_state = CLIState(resolved_settings)

        setup_logging(resolved_state.settings)
        ctx.obj = resolved_state

    app.command()(ip)
    app.command()(resolve)
    app.command()(flags)
    app.command()(check)

    return app
