"""Shared fixtures for CLI tests."""

import json

import pytest

from appenv.cli.app import create_cli_app
from appenv.cli.state import CLIState
from tests.support import LIVE_IP, fixed_ip


@pytest.fixture
def cli_app(cli_state):
    """CLI app bound to a workstation IP and an empty source."""
    return create_cli_app(state=cli_state)


@pytest.fixture
def make_cli_app(test_settings):
    """Build a CLI app for a given server IP and variable source."""

    def _make(ip: str = LIVE_IP, source: dict[str, str] | None = None):
        state = CLIState(test_settings, ip_provider=fixed_ip(ip), source=source or {})
        return create_cli_app(state=state)

    return _make


@pytest.fixture
def rules_file(tmp_path):
    """Write a rules JSON file and return its path."""
    path = tmp_path / "rules.json"
    path.write_text(
        json.dumps(
            {
                "PORT": {"required": True, "type": "Number"},
                "DEBUG": {"default": False, "type": "Boolean"},
            }
        )
    )
    return path
