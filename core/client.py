"""SmartThingsClient class for talking to the SmartThings REST API.

A thin wrapper over a requests.Session: injects the bearer token, resolves
paths against the configured API URL and turns transport problems into the
exception types in core.errors.
"""

from urllib.parse import urlencode

import requests

from core.config import ApiConfig
from core.errors import AuthError, HttpStatusError, NetworkError

USER_AGENT = 'sthelper/0.1.0'


class SmartThingsClient:
    """Makes authenticated requests to the SmartThings API."""

    def __init__(self, config: ApiConfig, session: requests.Session | None = None):
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({
            'Authorization': f"Bearer {config.token}",
            'Accept': 'application/json',
            'User-Agent': USER_AGENT,
        })

    def url_for(self, path: str, query: dict | None = None) -> str:
        """Return the full URL for a path (absolute URLs pass through)."""
        if path.startswith(('http://', 'https://')):
            url = path
        else:
            url = f"{self.config.api_url}/{path.lstrip('/')}"
        if query:
            url = f"{url}?{urlencode(query)}"
        return url

    def request(self, method: str, path: str, query: dict | None = None,
                body: dict | list | None = None):
        """Make a request and return the decoded JSON body.

        Args:
            method: HTTP method ('GET', 'POST', ...)
            path: Path relative to the API URL, or an absolute URL
            query: Optional query string parameters
            body: Optional JSON body

        Returns:
            Parsed JSON, or {} when the response has no body

        Raises:
            AuthError: 401/403 response
            HttpStatusError: any other non-2xx response
            NetworkError: connection error, timeout, or invalid JSON
        """
        url = self.url_for(path)

        try:
            response = self.session.request(
                method,
                url,
                params=query or None,
                json=body,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"{method} {url} failed: {e}") from e

        if response.status_code in (401, 403):
            raise AuthError(response.status_code, response.text)
        if not response.ok:
            raise HttpStatusError(response.status_code, response.text)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(f"Invalid JSON from {method} {url}: {e}") from e
