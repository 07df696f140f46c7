"""Tests for SmartThingsClient in core/client.py (session mocked, no network)."""

from unittest.mock import MagicMock

import pytest
import requests

from core.client import SmartThingsClient
from core.config import ApiConfig
from core.errors import AuthError, HttpStatusError, NetworkError


def make_response(status=200, payload=None, content=b'{}'):
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 300
    response.content = content
    response.text = content.decode()
    response.json.return_value = payload if payload is not None else {}
    return response


@pytest.fixture
def session():
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def client(session):
    return SmartThingsClient(ApiConfig(token='secret', api_url='https://api.example.test/v1/', timeout=3),
                             session=session)


class TestHeadersAndUrls:

    def test_bearer_header(self, client, session):
        assert session.headers['Authorization'] == 'Bearer secret'

    def test_relative_path(self, client):
        assert client.url_for('/devices') == 'https://api.example.test/v1/devices'

    def test_query(self, client):
        assert client.url_for('/devices', {'capability': 'switch'}) == \
            'https://api.example.test/v1/devices?capability=switch'

    def test_absolute_url_passes_through(self, client):
        url = 'https://api.example.test/v1/devices?page=2'
        assert client.url_for(url) == url


class TestRequest:

    def test_returns_json(self, client, session):
        session.request.return_value = make_response(payload={'items': []})

        result = client.request('GET', '/devices', query={'capability': 'switch'})

        assert result == {'items': []}
        session.request.assert_called_once_with(
            'GET',
            'https://api.example.test/v1/devices',
            params={'capability': 'switch'},
            json=None,
            timeout=3,
        )

    def test_posts_body(self, client, session):
        session.request.return_value = make_response()
        body = {'commands': []}

        client.request('POST', '/devices/1/commands', body=body)

        assert session.request.call_args.kwargs['json'] == body

    def test_empty_body_is_empty_dict(self, client, session):
        session.request.return_value = make_response(content=b'')
        assert client.request('POST', '/devices/1/commands') == {}

    @pytest.mark.parametrize('status', [401, 403])
    def test_auth_error(self, client, session, status):
        session.request.return_value = make_response(status=status, content=b'denied')

        with pytest.raises(AuthError) as exc_info:
            client.request('GET', '/devices')

        assert exc_info.value.status_code == status

    def test_http_status_error(self, client, session):
        session.request.return_value = make_response(status=500, content=b'oops')

        with pytest.raises(HttpStatusError) as exc_info:
            client.request('GET', '/devices')

        assert exc_info.value.status_code == 500
        assert 'oops' in str(exc_info.value)

    def test_connection_error(self, client, session):
        session.request.side_effect = requests.exceptions.ConnectionError('refused')

        with pytest.raises(NetworkError):
            client.request('GET', '/devices')

    def test_timeout(self, client, session):
        session.request.side_effect = requests.exceptions.Timeout('slow')

        with pytest.raises(NetworkError):
            client.request('GET', '/devices')

    def test_invalid_json(self, client, session):
        response = make_response(content=b'<html>')
        response.json.side_effect = ValueError('not json')
        session.request.return_value = response

        with pytest.raises(NetworkError):
            client.request('GET', '/devices')
