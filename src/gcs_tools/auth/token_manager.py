"""Bearer token acquisition for the storage API.

A ``TokenSource`` knows how to obtain a fresh access token. The
``TokenManager`` wraps one source per client, caches the current token and
makes sure only one refresh runs at a time, no matter how many buckets or
threads share the client.

Token Sources:
    1. StaticTokenSource: a fixed token string (tests, short-lived scripts)
    2. GoogleCredentialsTokenSource: google-auth application default
       credentials, or a service account key file
"""

import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol, Sequence

from gcs_tools.core import get_logger
from gcs_tools.core.exceptions import AuthorizationError

logger = get_logger(__name__)

STORAGE_SCOPES = ("https://www.googleapis.com/auth/devstorage.read_write",)
EXPIRY_SKEW = timedelta(seconds=60)


@dataclass(frozen=True)
class AccessToken:
    """An access token and the moment it stops being valid (if known)."""

    token: str
    expires_at: Optional[datetime] = None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        now = now or datetime.now(timezone.utc)
        return now + EXPIRY_SKEW >= self.expires_at


class TokenSource(Protocol):
    """Protocol for anything that can produce a fresh access token."""

    def fetch_token(self) -> AccessToken:
        """Fetch a new access token."""
        ...


class StaticTokenSource:
    """Token source that always returns the same token."""

    def __init__(self, token: str):
        if not token:
            raise AuthorizationError("Static token must not be empty")
        self._token = token

    def fetch_token(self) -> AccessToken:
        return AccessToken(token=self._token)


class GoogleCredentialsTokenSource:
    """Token source backed by google-auth credentials.

    When ``credentials_path`` is given the service account key file is loaded,
    otherwise the application default credential chain is used
    (``GOOGLE_APPLICATION_CREDENTIALS``, gcloud user credentials, metadata
    server).
    """

    def __init__(
        self,
        credentials_path: Optional[str] = None,
        scopes: Sequence[str] = STORAGE_SCOPES,
    ):
        self.credentials_path = credentials_path
        self.scopes = list(scopes)
        self._credentials = None

    def _load_credentials(self):
        if self.credentials_path:
            from google.oauth2 import service_account

            logger.info(
                "Loading service account credentials",
                credentials_path=self.credentials_path,
            )
            return service_account.Credentials.from_service_account_file(
                self.credentials_path, scopes=self.scopes
            )

        import google.auth

        credentials, project = google.auth.default(scopes=self.scopes)
        logger.info("Loaded application default credentials", project=project)
        return credentials

    def fetch_token(self) -> AccessToken:
        from google.auth.transport.requests import Request

        if self._credentials is None:
            self._credentials = self._load_credentials()

        self._credentials.refresh(Request())

        expiry = self._credentials.expiry
        # google-auth reports expiry as a naive UTC datetime
        if expiry is not None and expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=timezone.utc)

        return AccessToken(token=self._credentials.token, expires_at=expiry)


class TokenManager:
    """Serialized accessor for the bearer token shared by one client."""

    def __init__(self, source: TokenSource):
        self.source = source
        self._lock = threading.Lock()
        self._current: Optional[AccessToken] = None

    def token(self) -> str:
        """Return the ``authorization`` header value, refreshing if needed.

        Raises:
            AuthorizationError: If the token source fails
        """
        with self._lock:
            if self._current is None or self._current.is_expired():
                self._current = self._refresh()
            return f"Bearer {self._current.token}"

    def invalidate(self) -> None:
        """Drop the cached token so the next call fetches a new one."""
        with self._lock:
            self._current = None

    def _refresh(self) -> AccessToken:
        logger.debug("Refreshing access token", source=type(self.source).__name__)
        try:
            token = self.source.fetch_token()
        except AuthorizationError:
            raise
        except Exception as e:
            error_msg = f"Failed to obtain access token: {e}"
            logger.error(error_msg, error=str(e))
            raise AuthorizationError(error_msg) from e

        if not token.token:
            raise AuthorizationError("Token source returned an empty token")
        return token
