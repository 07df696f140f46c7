#!/usr/bin/env python3
"""
SmartThings CLI
List SmartThings devices, show their status, and switch them on or off.
"""

import click

from core.config import DEFAULT_API_URL

from commands.setup import ColouredGroup, setup_command, configure_command
from commands.devices import list_command, status_command
from commands.control import turnon_command, turnoff_command


@click.group(
    cls=ColouredGroup,
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 120
    }
)
@click.version_option(version='0.1.0', prog_name='sthelper')
@click.option('--token', envvar='SMARTTHINGS_CLI_TOKEN', help='SmartThings personal access token')
@click.option('--api-url', envvar='SMARTTHINGS_API_URL', default=DEFAULT_API_URL, show_default=True,
              help='SmartThings API base URL')
@click.option('--timeout', type=click.FloatRange(min=0, min_open=True), default=None,
              help='Request timeout in seconds (default: 10)')
@click.option('--workers', 'max_workers', type=click.IntRange(min=1), default=None,
              help='Devices to contact in parallel (default: 8)')
@click.pass_context
def cli(ctx, token, api_url, timeout, max_workers):
    """SmartThings CLI - list, inspect and switch your SmartThings devices.

Authentication: --token / SMARTTHINGS_CLI_TOKEN → 1Password → Local config (~/.smartthings_cli/config.json)
Run 'configure' to save a token or 'setup' to check configuration.

Use 'COMMAND -h' or 'COMMAND --help' for detailed help on a specific command."""
    ctx.obj = {
        'token': token,
        'api_url': api_url,
        'timeout': timeout,
        'max_workers': max_workers,
    }


# Register setup commands
cli.add_command(setup_command, name='setup')
cli.add_command(configure_command, name='configure')

# Register inspection commands
cli.add_command(list_command)  # Uses 'list' name defined in decorator
cli.add_command(status_command, name='status')

# Register control commands
cli.add_command(turnon_command, name='turnon')
cli.add_command(turnoff_command, name='turnoff')


if __name__ == '__main__':
    cli()
