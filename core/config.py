"""Configuration management and 1Password integration.

This module handles:
- The ApiConfig value handed to SmartThingsClient
- Loading/saving the user configuration file
- 1Password CLI availability check
"""

import json
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

from core.errors import ConfigurationError

# Configuration file paths
USER_CONFIG_FILE = Path.home() / '.smartthings_cli' / 'config.json'

DEFAULT_API_URL = 'https://api.smartthings.com/v1'
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_WORKERS = 8


@dataclass(frozen=True)
class ApiConfig:
    """Settings for one CLI invocation, injected into the API client."""
    token: str
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self):
        if not self.token:
            raise ConfigurationError("A SmartThings personal access token is required.")
        if self.max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1.")
        # Normalise so paths can be appended without doubling slashes
        object.__setattr__(self, 'api_url', self.api_url.rstrip('/'))

    def __repr__(self) -> str:
        return (f"ApiConfig(token='***', api_url={self.api_url!r}, "
                f"timeout={self.timeout!r}, max_workers={self.max_workers!r})")


def is_op_available() -> bool:
    """Check if 1Password CLI is available."""
    try:
        result = subprocess.run(['op', '--version'],
                              capture_output=True,
                              timeout=2)
        return result.returncode == 0
    except (subprocess.TimeoutExpired, FileNotFoundError):
        return False


def load_config() -> dict:
    """Load the user configuration file.

    Returns:
        Dict of stored settings, empty if the file doesn't exist
    """
    if USER_CONFIG_FILE.exists():
        with open(USER_CONFIG_FILE, 'r') as f:
            return json.load(f)
    return {}


def save_config(config: dict):
    """Save configuration to file with user-only permissions.

    Args:
        config: Configuration dict to save
    """
    USER_CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

    with open(USER_CONFIG_FILE, 'w') as f:
        json.dump(config, f, indent=2)

    os.chmod(USER_CONFIG_FILE, 0o600)
