"""Exception hierarchy for gcs-tools."""


class GcsToolsError(Exception):
    """Base exception for all gcs-tools errors."""

    pass


class ValidationError(GcsToolsError):
    """Raised when caller input fails validation."""

    pass


class AuthorizationError(GcsToolsError):
    """Raised when an access token cannot be obtained."""

    pass


class TransportError(GcsToolsError):
    """Raised when the HTTP request itself fails (connection, timeout)."""

    pass


class RemoteStatusError(GcsToolsError):
    """Raised when the storage API answers with a non-success status."""

    def __init__(self, status_code: int, body: str, url: str = ""):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(f"HTTP {status_code} from {url or 'storage API'}: {body}")


class DecodeError(GcsToolsError):
    """Raised when a response body does not match the expected schema."""

    pass
