"""Per-device command dispatch and status reporting.

Each device is handled independently on a thread pool. Results come back in
the order of the target devices, and an error on one device is recorded
as a Failure for that device instead of being raised.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, TypeVar

from core.config import DEFAULT_MAX_WORKERS
from models.types import (
    AllDevices,
    Command,
    CommandResult,
    Device,
    Failure,
    SingleMatch,
    StatusResult,
    Success,
)

T = TypeVar('T')

Target = SingleMatch | AllDevices | Iterable[Device]


def target_devices(target: Target) -> list[Device]:
    """Flatten a resolution (or plain iterable of devices) into a device list."""
    if isinstance(target, (SingleMatch, AllDevices)):
        return list(target.devices)
    return list(target)


def format_commands(commands: Iterable[Command]) -> str:
    return ', '.join(f"'{c.command}'" for c in commands)


def _for_each_device(devices: list[Device], action: Callable[[Device], T],
                     max_workers: int) -> list[T]:
    """Run action for every device concurrently, keeping input order."""
    if not devices:
        return []
    if len(devices) == 1:
        return [action(devices[0])]

    workers = min(max_workers, len(devices))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(action, devices))


def send_commands(client, device: Device, commands: list[Command]) -> CommandResult:
    """POST the ordered command list to one device."""
    names = tuple(c.command for c in commands)
    body = {'commands': [c.to_dict() for c in commands]}

    try:
        client.request('POST', f"/devices/{device.id}/commands", body=body)
    except Exception as e:
        return CommandResult(
            device,
            Failure(f"Error executing commands {format_commands(commands)} "
                    f"on device with ID {device.id}: {e}"),
            names,
        )

    return CommandResult(
        device,
        Success(f"Successfully sent commands {format_commands(commands)} to device {device.name}"),
        names,
    )


def fetch_status(client, device: Device) -> StatusResult:
    """GET the full status payload of one device."""
    try:
        status = client.request('GET', f"/devices/{device.id}/status")
    except Exception as e:
        return StatusResult(
            device,
            Failure(f"Error getting device status for device {device.name} "
                    f"with device ID {device.id}: {e}"),
        )
    return StatusResult(device, status)


def dispatch(client, target: Target, commands: list[Command],
             max_workers: int = DEFAULT_MAX_WORKERS) -> list[CommandResult]:
    """Send the same ordered commands to every targeted device.

    Returns:
        One CommandResult per device, in target order
    """
    if not commands:
        raise ValueError("At least one command is required")
    commands = list(commands)
    return _for_each_device(
        target_devices(target),
        lambda device: send_commands(client, device, commands),
        max_workers,
    )


def report_status(client, target: Target,
                  max_workers: int = DEFAULT_MAX_WORKERS) -> list[StatusResult]:
    """Fetch the status of every targeted device.

    Returns:
        One StatusResult per device, in target order
    """
    return _for_each_device(
        target_devices(target),
        lambda device: fetch_status(client, device),
        max_workers,
    )
