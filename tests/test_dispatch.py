"""Tests for concurrent dispatch and status reporting in core/dispatch.py"""

import threading

import pytest

from conftest import FakeClient
from core.dispatch import dispatch, format_commands, report_status, target_devices
from core.errors import HttpStatusError, NetworkError
from models.types import AllDevices, Command, Device, Failure, SingleMatch, Success

DEVICES = (Device('1', 'Lamp'), Device('2', 'Fan'), Device('3', 'Heater'))
ON = [Command('on', 'switch')]


class TestTargetDevices:

    def test_single_match(self):
        assert target_devices(SingleMatch(DEVICES[0])) == [DEVICES[0]]

    def test_all_devices(self):
        assert target_devices(AllDevices(DEVICES)) == list(DEVICES)

    def test_plain_list(self):
        assert target_devices(list(DEVICES[:2])) == list(DEVICES[:2])


class TestDispatch:

    def test_single_device_gets_ordered_commands_in_one_request(self):
        client = FakeClient({('POST', '/devices/1/commands'): {}})
        commands = [
            Command('on', 'switch'),
            Command('setLevel', 'switchLevel', arguments=(50,)),
        ]

        results = dispatch(client, SingleMatch(DEVICES[0]), commands)

        assert len(client.calls) == 1
        body = client.calls[0][3]
        assert [c['command'] for c in body['commands']] == ['on', 'setLevel']
        assert body['commands'][1] == {
            'command': 'setLevel',
            'capability': 'switchLevel',
            'component': 'main',
            'arguments': [50],
        }
        assert len(results) == 1
        assert results[0].ok
        assert results[0].commands == ('on', 'setLevel')

    def test_middle_failure_keeps_order_and_count(self):
        client = FakeClient({
            ('POST', '/devices/1/commands'): {},
            ('POST', '/devices/2/commands'): HttpStatusError(500, 'boom'),
            ('POST', '/devices/3/commands'): {},
        })

        results = dispatch(client, AllDevices(DEVICES), ON)

        assert [r.device for r in results] == list(DEVICES)
        assert [type(r.outcome) for r in results] == [Success, Failure, Success]

    def test_success_and_failure_messages(self):
        client = FakeClient({
            ('POST', '/devices/1/commands'): {},
            ('POST', '/devices/2/commands'): NetworkError('timed out'),
        })
        commands = [Command('on', 'switch'), Command('setLevel', 'switchLevel', arguments=(10,))]

        ok, failed = dispatch(client, DEVICES[:2], commands)

        assert ok.message == "Successfully sent commands 'on', 'setLevel' to device Lamp"
        assert "'on', 'setLevel'" in failed.message
        assert 'ID 2' in failed.message
        assert 'timed out' in failed.message

    def test_results_in_input_order_when_completion_is_reversed(self):
        """The first device finishes last; results must still follow input order."""
        release_first = threading.Event()

        class SlowFirstClient(FakeClient):
            def request(self, method, path, query=None, body=None):
                if path == '/devices/1/commands':
                    release_first.wait(timeout=5)
                else:
                    release_first.set()
                return super().request(method, path, query, body)

        client = SlowFirstClient({
            ('POST', '/devices/1/commands'): {},
            ('POST', '/devices/2/commands'): {},
        })

        results = dispatch(client, DEVICES[:2], ON, max_workers=2)

        assert [r.device.id for r in results] == ['1', '2']

    def test_empty_target(self):
        assert dispatch(FakeClient(), AllDevices(()), ON) == []

    def test_no_commands_rejected(self):
        with pytest.raises(ValueError):
            dispatch(FakeClient(), DEVICES, [])

    def test_format_commands(self):
        assert format_commands(ON) == "'on'"


class TestReportStatus:

    def test_status_per_device_with_failure(self):
        client = FakeClient({
            ('GET', '/devices/1/status'): {'components': {'main': {}}},
            ('GET', '/devices/2/status'): NetworkError('unreachable'),
            ('GET', '/devices/3/status'): {'components': {}},
        })

        results = report_status(client, AllDevices(DEVICES))

        assert [r.device.id for r in results] == ['1', '2', '3']
        assert [r.ok for r in results] == [True, False, True]
        assert results[0].status == {'components': {'main': {}}}
        assert isinstance(results[1].status, Failure)
        assert 'Fan' in results[1].message
        assert 'device ID 2' in results[1].message

    def test_unexpected_exception_on_one_device(self):
        client = FakeClient({
            ('GET', '/devices/1/status'): {},
            ('GET', '/devices/2/status'): KeyError('x'),
            ('GET', '/devices/3/status'): {},
        })

        results = report_status(client, AllDevices(DEVICES))

        assert [r.ok for r in results] == [True, False, True]
        assert 'device ID 2' in results[1].message


class TestDispatchUnexpectedErrors:

    def test_non_api_exception_becomes_failure(self):
        client = FakeClient({
            ('POST', '/devices/1/commands'): {},
            ('POST', '/devices/2/commands'): RuntimeError('driver bug'),
            ('POST', '/devices/3/commands'): {},
        })

        results = dispatch(client, AllDevices(DEVICES), ON)

        assert [r.device.id for r in results] == ['1', '2', '3']
        assert [r.ok for r in results] == [True, False, True]
        assert 'driver bug' in results[1].message
