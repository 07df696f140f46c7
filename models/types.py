"""Type definitions for the SmartThings CLI.

This module provides the structured data types passed between the directory
fetcher, resolver, dispatcher and the CLI commands.
"""

from dataclasses import dataclass, field
from typing import Any, TypedDict

from core.errors import NotFoundError


class ColorMap(TypedDict):
    """Argument of the colorControl setColor command."""
    hue: int
    saturation: int


class TokenCredentials(TypedDict):
    """Credentials for the SmartThings API."""
    token: str
    source: str


@dataclass(frozen=True)
class Device:
    """A device from the directory, addressed by its SmartThings device ID."""
    id: str
    name: str

    @classmethod
    def from_item(cls, item: dict) -> 'Device':
        """Build a Device from a /devices list entry (label wins over name)."""
        return cls(id=item['deviceId'], name=item.get('label') or item.get('name') or '')


@dataclass(frozen=True)
class Command:
    """A single capability command sent to a device component."""
    command: str
    capability: str
    component: str = 'main'
    arguments: tuple = ()

    def to_dict(self) -> dict:
        return {
            'command': self.command,
            'capability': self.capability,
            'component': self.component,
            'arguments': list(self.arguments),
        }


@dataclass(frozen=True)
class Success:
    message: str


@dataclass(frozen=True)
class Failure:
    detail: str


@dataclass(frozen=True)
class CommandResult:
    """Outcome of sending one ordered command list to one device."""
    device: Device
    outcome: Success | Failure
    commands: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Success)

    @property
    def message(self) -> str:
        if isinstance(self.outcome, Success):
            return self.outcome.message
        return self.outcome.detail


@dataclass(frozen=True)
class StatusResult:
    """Status payload of one device, or the failure that prevented reading it."""
    device: Device
    status: dict[str, Any] | Failure

    @property
    def ok(self) -> bool:
        return not isinstance(self.status, Failure)

    @property
    def message(self) -> str:
        if isinstance(self.status, Failure):
            return self.status.detail
        return f"Status for device {self.device.name}"


@dataclass(frozen=True)
class SingleMatch:
    device: Device

    @property
    def devices(self) -> tuple[Device, ...]:
        return (self.device,)


@dataclass(frozen=True)
class AllDevices:
    devices: tuple[Device, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class NotFound:
    """A name that did not resolve to any device."""
    name: str

    ok = False

    @property
    def message(self) -> str:
        return str(NotFoundError(self.name))


Resolution = SingleMatch | AllDevices | NotFound
