"""
Setup commands for the SmartThings CLI.

Contains custom Click group class for coloured help output and typo suggestions,
plus the setup (check) and configure (token entry) commands.
"""

import click

from core.config import USER_CONFIG_FILE
from core.errors import SmartThingsError
from models.utils import similarity_score


class ColouredGroup(click.Group):
    """Custom Group class that adds colour to help output and suggests similar commands."""

    def resolve_command(self, ctx, args):
        """Resolve command with suggestions for typos."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if 'No such command' in str(e):
                cmd_name = args[0] if args else ''
                suggestions = self._get_suggestions(ctx, cmd_name)

                if suggestions:
                    error_msg = f"No such command '{cmd_name}'.\n\n"
                    error_msg += click.style("Did you mean one of these?\n", fg='yellow')
                    for suggestion in suggestions:
                        error_msg += click.style(f"  • {suggestion}\n", fg='green')
                    raise click.UsageError(error_msg, ctx)
            raise

    def _get_suggestions(self, ctx, cmd_name, max_suggestions=3):
        """Get command suggestions based on similarity."""
        if not cmd_name:
            return []

        suggestions = []
        for command in self.list_commands(ctx):
            cmd_obj = self.get_command(ctx, command)
            if cmd_obj and not cmd_obj.hidden:
                score = similarity_score(cmd_name, command)
                if score > 0:
                    suggestions.append((score, command))

        suggestions.sort(reverse=True, key=lambda x: x[0])
        return [cmd for score, cmd in suggestions[:max_suggestions]]

    def format_usage(self, ctx, formatter):
        """Format the usage line with colour."""
        formatter.write_paragraph()
        formatter.write_text(
            click.style('Usage: ', fg='cyan', bold=True) +
            click.style(f'{ctx.command_path} [OPTIONS] COMMAND [ARGS]...', fg='white')
        )

    def format_commands(self, ctx, formatter):
        """Format commands with colour."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd.get_short_help_str(limit=500)))

        if commands:
            formatter.write_paragraph()
            formatter.write_text(click.style('Commands:', fg='yellow', bold=True))

            max_len = max(max(len(cmd[0]) for cmd in commands), 12)

            with formatter.indentation():
                for subcommand, help_text in commands:
                    formatter.write_text(
                        click.style(subcommand.ljust(max_len), fg='green') + '  ' +
                        click.style(help_text, fg='white', dim=True)
                    )


@click.command()
@click.option('--reconfigure', is_flag=True, help='Replace the saved token even if one exists')
def configure_command(reconfigure):
    """Save a SmartThings personal access token to the local config file.

    Create a token at https://account.smartthings.com/tokens with the
    Devices scopes, then paste it when prompted.
    """
    from core.auth import TOKEN_URL, load_auth_from_user_config, save_auth_to_user_config

    click.echo()
    click.secho("=== SmartThings Configuration ===", fg='cyan', bold=True)
    click.echo()

    if not reconfigure:
        existing = load_auth_from_user_config()
        if existing:
            click.echo(f"✓ A token is already saved in {USER_CONFIG_FILE}")
            click.echo()
            if not click.confirm("Replace it?", default=False):
                click.echo()
                return
            click.echo()

    click.echo(f"Create a personal access token at {click.style(TOKEN_URL, fg='cyan')}")
    click.echo("Required scopes: Devices (list, see, control).")
    click.echo()

    token = click.prompt("Token", hide_input=True, default='', show_default=False).strip()
    if not token:
        click.echo("Configuration cancelled.")
        click.echo()
        return

    if save_auth_to_user_config(token):
        click.secho(f"✓ Configuration saved to {USER_CONFIG_FILE}", fg='green')
    else:
        click.secho(f"✗ Failed to save to {USER_CONFIG_FILE}", fg='red')
        click.get_current_context().exit(1)
    click.echo()


@click.command()
@click.pass_context
def setup_command(ctx):
    """Show where the API token comes from and test the connection.

    Token sources (priority order):
    1. --token option or SMARTTHINGS_CLI_TOKEN
    2. 1Password (env: SMARTTHINGS_1PASSWORD_VAULT, SMARTTHINGS_1PASSWORD_ITEM)
    3. Local config file (~/.smartthings_cli/config.json)
    """
    from core.auth import load_auth_from_1password, load_auth_from_user_config, onepassword_location
    from core.config import is_op_available
    from models.utils import get_controller

    options = ctx.find_root().obj or {}

    click.echo()
    click.secho("=== SmartThings Configuration ===", fg='cyan', bold=True)
    click.echo()

    click.echo(click.style("1. Command line / environment", fg='cyan', bold=True))
    if options.get('token'):
        click.echo(f"   Status:      {click.style('✓ Token provided', fg='green')}")
    else:
        click.echo(f"   Status:      {click.style('✗ Not set', fg='yellow')}")
    click.echo()

    click.echo(click.style("2. 1Password", fg='cyan', bold=True))
    vault, item = onepassword_location()
    op_creds = None
    if not is_op_available():
        click.echo(f"   Status:      {click.style('✗ CLI not installed', fg='yellow')}")
    else:
        op_creds = load_auth_from_1password()
        if op_creds:
            click.echo(f"   Status:      {click.style('✓ Configured', fg='green')}")
        else:
            click.echo(f"   Status:      {click.style('⚠ CLI available, token not found', fg='yellow')}")
        click.echo(f"   Vault:       {vault}")
        click.echo(f"   Item:        {item} (field 'token')")
    click.echo()

    click.echo(click.style("3. Local Configuration", fg='cyan', bold=True))
    local_creds = load_auth_from_user_config()
    if local_creds:
        click.echo(f"   Status:      {click.style('✓ Available', fg='green')}")
    else:
        click.echo(f"   Status:      {click.style('✗ Not configured', fg='yellow')}")
    click.echo(f"   Path:        {USER_CONFIG_FILE}")
    click.echo()

    if not (options.get('token') or op_creds or local_creds):
        click.secho("⚠ No token configured", fg='yellow', bold=True)
        click.echo("Run " + click.style("sthelper configure", fg='green', bold=True) + " to set one up.")
        click.echo()
        ctx.exit(1)

    click.echo(click.style("Connection Test", fg='cyan', bold=True))
    controller = get_controller(ctx)
    if not controller:
        ctx.exit(1)

    try:
        devices = controller.list_devices()
    except SmartThingsError as e:
        click.secho(f"✗ Connection failed: {e}", fg='red', bold=True)
        ctx.exit(1)

    click.secho(f"✓ Connected, {len(devices)} device(s) visible", fg='green', bold=True)
    click.echo()
