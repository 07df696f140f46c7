"""Utility functions for the SmartThings CLI.

This module contains helper functions used across the commands:
- get_controller: Build a SmartThingsController from the CLI context
- report_results: Print per-device results and count failures
- format_status: Render a status payload for the terminal
- similarity_score: Fuzzy matching used for typo suggestions
"""

import json

import click


def get_controller(ctx: click.Context):
    """Build a controller from the options stored on the root command.

    Returns:
        A SmartThingsController, or None if no token could be found
    """
    from core.auth import get_auth_credentials
    from core.client import SmartThingsClient
    from core.config import ApiConfig
    from core.controller import SmartThingsController

    options = ctx.find_root().obj or {}
    credentials = get_auth_credentials(token=options.get('token'))
    if not credentials:
        click.secho("Error: No SmartThings token found.", fg='red', err=True)
        click.echo("Set SMARTTHINGS_CLI_TOKEN, pass --token, or run 'sthelper configure'.", err=True)
        return None

    config_kwargs = {k: options[k] for k in ('api_url', 'timeout', 'max_workers') if options.get(k)}
    config = ApiConfig(token=credentials['token'], **config_kwargs)
    return SmartThingsController(SmartThingsClient(config), max_workers=config.max_workers)


def report_results(results) -> int:
    """Print one line per result and return the number of failures.

    Accepts CommandResult, StatusResult and NotFound entries (anything with
    `ok` and `message`).
    """
    failures = 0
    for result in results:
        if result.ok:
            click.secho(f"✓ {result.message}", fg='green')
        else:
            failures += 1
            click.secho(f"✗ {result.message}", fg='red', err=True)
    return failures


def format_status(status: dict) -> str:
    """Render a device status payload as indented JSON."""
    return json.dumps(status, indent=2, sort_keys=True)


def similarity_score(s1: str, s2: str) -> int:
    """Calculate similarity score between two strings.

    Args:
        s1: First string to compare
        s2: Second string to compare

    Returns:
        Similarity score:
        - 100: Exact match (case-insensitive)
        - 80: Prefix match
        - 60: Substring match
        - 0-50: Character sequence match (proportional to matching characters)
        - 0: No match
    """
    s1_lower = s1.lower()
    s2_lower = s2.lower()

    if s1_lower == s2_lower:
        return 100

    if s2_lower.startswith(s1_lower) or s1_lower.startswith(s2_lower):
        return 80

    if s1_lower in s2_lower or s2_lower in s1_lower:
        return 60

    matches = 0
    j = 0
    for char in s1_lower:
        while j < len(s2_lower):
            if s2_lower[j] == char:
                matches += 1
                j += 1
                break
            j += 1

    if matches > 0:
        score = int((matches / max(len(s1_lower), len(s2_lower))) * 50)
        return score if score > 20 else 0

    return 0

