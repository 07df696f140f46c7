"""
Control commands for switching devices on and off.

Includes turnon (with optional level and colour) and turnoff.
"""

import click

from core.errors import SmartThingsError
from models.colors import COLOR_TABLE
from models.utils import get_controller, report_results


def _finish(ctx: click.Context, action):
    """Run a controller action, print its results and set the exit status."""
    try:
        results = action()
    except SmartThingsError as e:
        click.secho(f"Error getting switches: {e}", fg='red', err=True)
        ctx.exit(1)

    if not results:
        click.echo("No switch devices found.")
        return

    if report_results(results):
        ctx.exit(1)


@click.command()
@click.argument('names', nargs=-1)
@click.option('--level', '-l', type=click.IntRange(0, 100), help='Set the brightness level (0-100)')
@click.option('--color', '-c', help=f"Set the colour ({', '.join(COLOR_TABLE)})")
@click.pass_context
def turnon_command(ctx, names: tuple[str, ...], level: int | None, color: str | None):
    """Turn on switch devices.

    Specify one or more switch names (quote names containing spaces), or
    omit them to turn on every switch.

    \b
    Examples:
      sthelper turnon
      sthelper turnon "Desk Lamp" -l 50 -c blue
    """
    controller = get_controller(ctx)
    if not controller:
        ctx.exit(1)

    _finish(ctx, lambda: controller.turn_on(list(names), level=level, color=color))


@click.command()
@click.argument('names', nargs=-1)
@click.pass_context
def turnoff_command(ctx, names: tuple[str, ...]):
    """Turn off switch devices.

    Specify one or more switch names (quote names containing spaces), or
    omit them to turn off every switch.

    \b
    Examples:
      sthelper turnoff
      sthelper turnoff "my device 1" "my device 2"
    """
    controller = get_controller(ctx)
    if not controller:
        ctx.exit(1)

    _finish(ctx, lambda: controller.turn_off(list(names)))
