"""Pytest configuration and fixtures for SmartThings CLI tests."""

import threading
from pathlib import Path

import pytest

from core.errors import NetworkError


class FakeClient:
    """In-memory stand-in for SmartThingsClient.

    `routes` maps (method, path-or-url) to either a response value or an
    exception instance to raise. Every call is recorded in `calls`.
    """

    base = 'https://api.example.test/v1'

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self._lock = threading.Lock()

    def url_for(self, path, query=None):
        url = path if path.startswith('http') else f"{self.base}{path}"
        if query:
            url += '?' + '&'.join(f"{k}={v}" for k, v in query.items())
        return url

    def request(self, method, path, query=None, body=None):
        with self._lock:
            self.calls.append((method, path, query, body))
        key = (method, path)
        if key not in self.routes:
            raise NetworkError(f"no route for {method} {path}")
        value = self.routes[key]
        if isinstance(value, Exception):
            raise value
        return value


def device_item(device_id, name=None, label=None):
    """Build a /devices list entry."""
    item = {'deviceId': device_id}
    if name is not None:
        item['name'] = name
    if label is not None:
        item['label'] = label
    return item


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def fake_client():
    """Return a factory for FakeClient instances."""
    return FakeClient


@pytest.fixture
def lamp_and_fan_client():
    """Client whose switch directory is Lamp (1) and Fan (2)."""
    page = {'items': [device_item('1', label='Lamp'), device_item('2', label='Fan')], '_links': {}}
    return FakeClient({
        ('GET', '/devices'): page,
        ('POST', '/devices/1/commands'): {'results': [{'status': 'ACCEPTED'}]},
        ('POST', '/devices/2/commands'): {'results': [{'status': 'ACCEPTED'}]},
        ('GET', '/devices/1/status'): {'components': {'main': {'switch': {'switch': {'value': 'on'}}}}},
        ('GET', '/devices/2/status'): {'components': {'main': {'switch': {'switch': {'value': 'off'}}}}},
    })
