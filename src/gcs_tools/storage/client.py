"""Storage API client configuration and request plumbing.

The ``Client`` owns the HTTP connection pool and the token manager. Buckets
and objects created from it share both, so every operation goes through the
same serialized token accessor and the same transport settings.

Every remote call follows one shape:
    1. Build the URL, percent-encoding bucket and object names
    2. Acquire the bearer token from the token manager
    3. Issue exactly one HTTP request
    4. Turn a non-success status into ``RemoteStatusError``
    5. Decode the JSON body into the expected resource model
"""

from typing import Any, Optional, TypeVar

import httpx
import pydantic
from pydantic import BaseModel, ConfigDict, Field

from gcs_tools.auth import TokenManager, TokenSource
from gcs_tools.core import get_logger, get_tracer, settings
from gcs_tools.core.exceptions import (
    DecodeError,
    RemoteStatusError,
    TransportError,
    ValidationError,
)

from .bucket import Bucket

logger = get_logger(__name__)
tracer = get_tracer(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ClientConfig(BaseModel):
    """Endpoints and transport settings for a storage client."""

    model_config = ConfigDict(extra="forbid")

    api_endpoint: str = Field(
        default_factory=lambda: settings.api_endpoint,
        description="Base URL of the JSON API",
    )
    upload_endpoint: str = Field(
        default_factory=lambda: settings.upload_endpoint,
        description="Base URL for media uploads",
    )
    timeout: float = Field(
        default_factory=lambda: settings.timeout,
        description="Transport timeout in seconds",
    )


class Client:
    """Entry point for storage operations."""

    def __init__(
        self,
        token_source: TokenSource,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize storage client.

        Args:
            token_source: Source of bearer tokens
            config: Endpoint and timeout configuration
            transport: Optional httpx transport (used to fake the API in tests)
        """
        self.config = config or ClientConfig()
        self.token_manager = TokenManager(token_source)
        self._http = httpx.Client(timeout=self.config.timeout, transport=transport)
        logger.info("Storage client initialized", api_endpoint=self.config.api_endpoint)

    def bucket(self, name: str) -> Bucket:
        """Get a handle on a bucket. No request is made."""
        if not name:
            raise ValidationError("Bucket name must not be empty")
        return Bucket(self, name)

    def api_url(self, *segments: str) -> str:
        return self._join(self.config.api_endpoint, segments)

    def upload_url(self, *segments: str) -> str:
        return self._join(self.config.upload_endpoint, segments)

    @staticmethod
    def _join(base: str, segments: tuple[str, ...]) -> str:
        return "/".join([base.rstrip("/"), *segments])

    def request(
        self,
        operation: str,
        method: str,
        url: str,
        authorization: str,
        params: Optional[list[tuple[str, str]]] = None,
        headers: Optional[dict[str, str]] = None,
        content: Optional[bytes] = None,
    ) -> httpx.Response:
        """Send one request and return the successful response.

        Raises:
            TransportError: If the request could not be completed
            RemoteStatusError: If the API answered with a non-2xx status
        """
        request_headers = {"authorization": authorization}
        if headers:
            request_headers.update(headers)

        with tracer.start_as_current_span(f"gcs.{operation}") as span:
            span.set_attribute("http.request.method", method)
            try:
                response = self._http.request(
                    method,
                    url,
                    params=params,
                    headers=request_headers,
                    content=content,
                )
            except httpx.HTTPError as e:
                error_msg = f"{method} {url} failed: {e}"
                logger.error(error_msg, operation=operation, error=str(e))
                raise TransportError(error_msg) from e

            span.set_attribute("http.response.status_code", response.status_code)

        if not response.is_success:
            logger.error(
                "Storage API returned an error status",
                operation=operation,
                status_code=response.status_code,
            )
            raise RemoteStatusError(response.status_code, response.text, url)

        return response

    @staticmethod
    def decode(response: httpx.Response, model: type[ModelT]) -> ModelT:
        """Decode a JSON response body into ``model``.

        Raises:
            DecodeError: If the body is not valid JSON for the model
        """
        try:
            return model.model_validate_json(response.content)
        except pydantic.ValidationError as e:
            raise DecodeError(
                f"Response body is not a valid {model.__name__}: {e}"
            ) from e

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
