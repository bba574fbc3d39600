"""Tests for CLI app factory and context wiring."""

import typer

from appenv.cli.state import CLIState
from appenv.config.settings import LogLevel
from appenv.infrastructure.logging import diagnostics_enabled


class TestCLIAppFactory:
    """Test create_cli_app factory."""

    def test_returns_typer_app(self, default_app):
        """create_cli_app returns a Typer instance."""
        assert isinstance(default_app, typer.Typer)
        assert default_app.info.name == "appenv"

    def test_no_args_shows_help(self, cli_runner, cli_app):
        result = cli_runner.invoke(cli_app, [])

        assert "resolve" in result.output
        assert "check" in result.output


class TestContextInjection:
    """Test our context injection and state wiring."""

    def test_commands_receive_cli_state(self, cli_runner, default_app: typer.Typer):
        """Commands receive CLIState via context."""
        captured_state = None

        @default_app.command()
        def test_cmd(ctx: typer.Context):
            nonlocal captured_state
            captured_state = ctx.obj

        result = cli_runner.invoke(default_app, ["test-cmd"])

        assert result.exit_code == 0
        assert isinstance(captured_state, CLIState)

    def test_injected_state_available_in_context(
        self, cli_runner, cli_app, cli_state
    ):
        """Injected state is used as-is by commands."""
        captured_state = None

        @cli_app.command()
        def test_cmd(ctx: typer.Context):
            nonlocal captured_state
            captured_state = ctx.obj

        result = cli_runner.invoke(cli_app, ["test-cmd"])

        assert result.exit_code == 0
        assert captured_state is cli_state


class TestGlobalOptions:
    """Test global CLI flag handling."""

    def test_verbose_flag_enables_diagnostics(self, cli_runner, default_app):
        """--verbose sets DEBUG level and turns on diagnostics."""
        captured_state = None

        @default_app.command()
        def test_cmd(ctx: typer.Context):
            nonlocal captured_state
            captured_state = ctx.obj

        result = cli_runner.invoke(default_app, ["--verbose", "test-cmd"])

        assert result.exit_code == 0
        assert captured_state.settings.log_level == LogLevel.DEBUG
        assert captured_state.settings.diagnostics is True
        assert diagnostics_enabled()

    def test_default_is_quiet(self, cli_runner, default_app):
        captured_state = None

        @default_app.command()
        def test_cmd(ctx: typer.Context):
            nonlocal captured_state
            captured_state = ctx.obj

        result = cli_runner.invoke(default_app, ["test-cmd"])

        assert result.exit_code == 0
        assert captured_state.settings.diagnostics is False
        assert not diagnostics_enabled()
