"""Device directory: paginated fetch and name resolution."""

from core.errors import ApiError, PaginationError
from models.types import AllDevices, Device, NotFound, Resolution, SingleMatch

DEVICES_PATH = '/devices'


def _next_link(page: dict) -> str | None:
    """Extract the next-page href from a list response, if any."""
    links = page.get('_links') or {}
    next_link = links.get('next') or {}
    return next_link.get('href') or None


def fetch_devices(client, capability: str | None = None) -> list[Device]:
    """Fetch every page of the device list.

    Pages are requested one after another by following `_links.next.href`.
    The result keeps page order and drops repeated device IDs.

    Args:
        client: Object with request() and url_for() (SmartThingsClient)
        capability: Optional capability ID to filter by (e.g. 'switch')

    Returns:
        List of Device

    Raises:
        PaginationError: a next link points at a page already fetched
        ApiError: a device entry has no deviceId, or propagated from the client
    """
    query = {'capability': capability} if capability else None

    visited = {client.url_for(DEVICES_PATH, query)}
    page = client.request('GET', DEVICES_PATH, query=query)

    devices: list[Device] = []
    seen_ids: set[str] = set()

    while True:
        for item in page.get('items') or []:
            if not isinstance(item, dict) or not item.get('deviceId'):
                raise ApiError(f"Malformed device entry in device list: {item!r}")
            device = Device.from_item(item)
            if device.id in seen_ids:
                continue
            seen_ids.add(device.id)
            devices.append(device)

        link = _next_link(page)
        if not link:
            return devices
        link = client.url_for(link)
        if link in visited:
            raise PaginationError(link)
        visited.add(link)
        page = client.request('GET', link)


def resolve(directory: list[Device], name: str | None = None) -> Resolution:
    """Resolve a device name against the directory (case-insensitive).

    No name means every device. If several devices share a name, the first
    one in directory order is returned.
    """
    if name is None:
        return AllDevices(tuple(directory))

    wanted = name.casefold()
    for device in directory:
        if device.name.casefold() == wanted:
            return SingleMatch(device)
    return NotFound(name)

