"""SmartThingsController class tying the directory, dispatcher and reporter together.

This is the interface the CLI commands use. Every call fetches the device
directory once, resolves each requested name independently and returns one
entry per name (or per device when no names are given).
"""

from core.config import DEFAULT_MAX_WORKERS
from core.directory import fetch_devices, resolve
from core.dispatch import dispatch, report_status
from models.colors import map_color
from models.types import (
    Command,
    CommandResult,
    Device,
    NotFound,
    SingleMatch,
    StatusResult,
)

SWITCH = 'switch'
SWITCH_LEVEL = 'switchLevel'
COLOR_CONTROL = 'colorControl'

OFF_COMMANDS = [Command('off', SWITCH)]


def build_on_commands(level: int | None = None, color: str | None = None) -> list[Command]:
    """Build the ordered turn-on command list: on, then level, then colour.

    Args:
        level: Brightness 0-100, or None to leave unchanged
        color: Colour name (see models.colors), or None to leave unchanged
    """
    commands = [Command('on', SWITCH)]
    if level is not None:
        if not 0 <= level <= 100:
            raise ValueError(f"Level must be between 0 and 100, got {level}")
        commands.append(Command('setLevel', SWITCH_LEVEL, arguments=(level,)))
    if color:
        commands.append(Command('setColor', COLOR_CONTROL, arguments=(map_color(color),)))
    return commands


class SmartThingsController:
    """Lists, inspects and actuates devices through a SmartThingsClient."""

    def __init__(self, client, max_workers: int = DEFAULT_MAX_WORKERS):
        self.client = client
        self.max_workers = max_workers

    def list_devices(self, capability: str | None = None) -> list[Device]:
        """Get the full device directory, optionally filtered by capability."""
        return fetch_devices(self.client, capability)

    def _resolve_names(self, directory: list[Device], names) -> list[SingleMatch | NotFound]:
        return [resolve(directory, name) for name in names]

    def _run(self, capability: str | None, names, action):
        """Resolve names (or take every device) and run action on the matches.

        NotFound entries are kept in the position of their name so the caller
        can report every name.
        """
        directory = self.list_devices(capability)
        if not names:
            return action(directory)

        resolutions = self._resolve_names(directory, names)
        matched = [r.device for r in resolutions if isinstance(r, SingleMatch)]
        results = iter(action(matched))
        return [r if isinstance(r, NotFound) else next(results) for r in resolutions]

    def get_status(self, names=None) -> list[StatusResult | NotFound]:
        """Get the status of the named devices, or of every device."""
        return self._run(
            None,
            names,
            lambda devices: report_status(self.client, devices, self.max_workers),
        )

    def send(self, commands: list[Command], names=None) -> list[CommandResult | NotFound]:
        """Send commands to the named switch devices, or to every switch."""
        return self._run(
            SWITCH,
            names,
            lambda devices: dispatch(self.client, devices, commands, self.max_workers),
        )

    def turn_off(self, names=None) -> list[CommandResult | NotFound]:
        """Turn off the named switches, or every switch."""
        return self.send(OFF_COMMANDS, names)

    def turn_on(self, names=None, level: int | None = None,
                color: str | None = None) -> list[CommandResult | NotFound]:
        """Turn on the named switches (or every switch) with optional level and colour."""
        return self.send(build_on_commands(level, color), names)
