"""
Inspection commands: list devices and show device status.
"""

import click

from core.errors import SmartThingsError
from models.utils import format_status, get_controller, report_results


@click.command(name='list')
@click.option('--capability', '-c', help='Only list devices with this capability (e.g. switch)')
@click.pass_context
def list_command(ctx, capability: str | None):
    """List all devices.

    \b
    Examples:
      sthelper list
      sthelper list -c switchLevel
    """
    controller = get_controller(ctx)
    if not controller:
        ctx.exit(1)

    try:
        devices = controller.list_devices(capability)
    except SmartThingsError as e:
        click.secho(f"Error getting devices: {e}", fg='red', err=True)
        ctx.exit(1)

    if not devices:
        click.echo("No devices found.")
        return

    id_width = max(len(d.id) for d in devices)
    for device in devices:
        click.echo(f"{click.style(device.id.ljust(id_width), fg='cyan')}  {device.name}")


@click.command()
@click.argument('names', nargs=-1)
@click.pass_context
def status_command(ctx, names: tuple[str, ...]):
    """Get the status of devices.

    Specify one or more device names (quote names containing spaces), or
    omit them to show every device.

    \b
    Examples:
      sthelper status
      sthelper status "Kitchen Light" "Desk Lamp"
    """
    controller = get_controller(ctx)
    if not controller:
        ctx.exit(1)

    try:
        results = controller.get_status(list(names))
    except SmartThingsError as e:
        click.secho(f"Error getting devices: {e}", fg='red', err=True)
        ctx.exit(1)

    if not results:
        click.echo("No devices found.")
        return

    failures = 0
    for result in results:
        if result.ok:
            click.secho(f"\n{result.device.name}:", fg='cyan', bold=True)
            click.echo(format_status(result.status))
        else:
            failures += report_results([result])

    if failures:
        ctx.exit(1)
