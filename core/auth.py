"""
Authentication module for the SmartThings API.

Handles personal access token lookup from multiple sources
(command line / environment, 1Password, local config file).
"""

import json
import os
import subprocess

import click

from core.config import USER_CONFIG_FILE, is_op_available, load_config, save_config
from models.types import TokenCredentials

TOKEN_URL = 'https://account.smartthings.com/tokens'


def onepassword_location() -> tuple[str, str]:
    """Return the (vault, item) 1Password names, overridable by environment."""
    vault = os.getenv('SMARTTHINGS_1PASSWORD_VAULT', 'Private')
    item = os.getenv('SMARTTHINGS_1PASSWORD_ITEM', 'SmartThings')
    return vault, item


def load_auth_from_user_config() -> TokenCredentials | None:
    """Load the API token from the user config file.

    Returns:
        Dict with 'token' and 'source', or None if not found
    """
    try:
        config = load_config()
    except (json.JSONDecodeError, IOError) as e:
        click.echo(f"Warning: Failed to load config from {USER_CONFIG_FILE}: {e}", err=True)
        return None

    token = config.get('token')
    if token and isinstance(token, str):
        return {'token': token, 'source': str(USER_CONFIG_FILE)}
    return None


def save_auth_to_user_config(token: str) -> bool:
    """Save the API token to the user config file (mode 600).

    Other keys already in the file are kept.

    Args:
        token: SmartThings personal access token

    Returns:
        True if saved successfully, False otherwise
    """
    try:
        try:
            config = load_config()
        except (json.JSONDecodeError, IOError):
            # Corrupt file, start fresh
            config = {}

        config['token'] = token
        save_config(config)
        return True

    except (IOError, OSError) as e:
        click.echo(f"Error: Failed to save config to {USER_CONFIG_FILE}: {e}", err=True)
        return False


def load_auth_from_1password() -> TokenCredentials | None:
    """Load the API token from a 1Password item's 'token' field.

    Returns:
        Dict with 'token' and 'source', or None if not available
    """
    if not is_op_available():
        return None

    vault, item = onepassword_location()

    try:
        result = subprocess.run(
            ['op', 'item', 'get', item,
             '--vault', vault,
             '--fields', 'token',
             '--reveal'],
            capture_output=True,
            text=True,
            timeout=10
        )
    except subprocess.TimeoutExpired as e:
        click.echo(f"Warning: Failed to load from 1Password: {e}", err=True)
        return None

    if result.returncode == 0:
        token = result.stdout.strip()
        if token:
            return {'token': token, 'source': f"1Password ({vault}/{item})"}
    return None


def get_auth_credentials(token: str | None = None) -> TokenCredentials | None:
    """Get the API token using priority system.

    Priority order:
    1. Explicit token (--token option or SMARTTHINGS_CLI_TOKEN)
    2. 1Password (if available and configured)
    3. Local config file (~/.smartthings_cli/config.json)

    Returns:
        Dict with 'token' and 'source', or None if all methods fail
    """
    if token:
        return {'token': token, 'source': 'command line / environment'}

    credentials = load_auth_from_1password()
    if credentials:
        return credentials

    return load_auth_from_user_config()
