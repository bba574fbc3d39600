#!/usr/bin/env python3
"""
01_load_config.py - Build an app config from environment variables

Demonstrates: load_config with required, defaulted and typed vars
Run with e.g.: PORT=3000 APP_ENV=staging python examples/01_load_config.py
"""
import sys

from appenv import EnvConfigError, load_config

RULES = {
    "PORT": {"required": True, "type": "Number"},
    "DEBUG": {"default": False, "type": "Boolean"},
    "SITE_NAME": {"default": "example"},
}

NETWORKS = [
    {"cidr": "10.117.0.0/16", "env": "live"},
    {"cidr": "10.118.0.0/16", "env": "staging"},
]


def main() -> None:
    """Load the config and print the interesting parts."""
    try:
        config = load_config(RULES, NETWORKS)
    except EnvConfigError as e:
        # Never start with a partial config
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Environment: {config.environment}")
    print(f"Port:        {config['PORT']}")
    print(f"Debug:       {config['DEBUG']}")
    print(f"Production:  {config['IN_PRODUCTION']}")


if __name__ == "__main__":
    main()
