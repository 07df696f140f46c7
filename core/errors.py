"""Exception types raised by the SmartThings core."""


class SmartThingsError(Exception):
    """Base class for every error the CLI reports to the user."""


class ConfigurationError(SmartThingsError):
    """No usable API token or settings."""


class ApiError(SmartThingsError):
    """A request to the SmartThings API failed."""


class NetworkError(ApiError):
    """Connection failure, timeout, or an unreadable response body."""


class AuthError(ApiError):
    """The API rejected the token (401/403)."""

    def __init__(self, status_code: int, body: str = ''):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Authentication failed (HTTP {status_code}). Check your SmartThings token.")


class HttpStatusError(ApiError):
    """Any other non-2xx response."""

    def __init__(self, status_code: int, body: str = ''):
        self.status_code = status_code
        self.body = body
        message = f"HTTP {status_code}"
        if body:
            message += f": {body[:200]}"
        super().__init__(message)


class PaginationError(SmartThingsError):
    """The device list repeated a page link."""

    def __init__(self, link: str):
        self.link = link
        super().__init__(f"Pagination loop detected: link {link} was already visited")


class NotFoundError(SmartThingsError):
    """A device name did not match anything in the directory."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'No device found with name "{name}"')
