"""Pytest configuration and fixtures for appenv tests."""

import loguru
import pytest
from typer.testing import CliRunner

from appenv.app import App
from appenv.cli.app import create_cli_app
from appenv.cli.state import CLIState
from appenv.config.settings import LogLevel, Settings
from appenv.domain import NetworkRange
from appenv.infrastructure.logging import reset_logging
from tests.support import LIVE_IP, WORKSTATION_IP, fixed_ip


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(log_level=LogLevel.CRITICAL)


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def networks():
    """A network table with one block per deployed environment."""
    return [
        NetworkRange(cidr="10.117.0.0/16", env="live"),
        NetworkRange(cidr="10.118.0.0/16", env="staging"),
        NetworkRange(cidr="10.119.0.0/16", env="testing"),
    ]


@pytest.fixture
def live_ip_provider(mocker):
    """IP provider mock for a host inside the live block."""
    return mocker.Mock(return_value=LIVE_IP)


@pytest.fixture
def test_app(test_settings):
    """Provide an App whose server sits in the live block."""
    return App(settings=test_settings, ip_provider=fixed_ip(LIVE_IP))


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_state(test_settings):
    """CLIState with a fixed server IP and an empty variable source."""
    return CLIState(test_settings, ip_provider=fixed_ip(WORKSTATION_IP), source={})


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
