"""A small client library and CLI for Google Cloud Storage.

This package talks to the Cloud Storage JSON API over HTTP with a bearer
token on every request. It covers the handful of operations needed by
tooling: creating and fetching objects, deleting buckets and listing the
contents of a folder.

Key Features:
    - Media uploads and object metadata lookups
    - Folder-style listing that follows page tokens to the end
    - One serialized token manager per client, shared by every bucket
    - Structured logging and optional OpenTelemetry spans
    - CLI interface

Recommended Usage:
    >>> from gcs_tools import Client, StaticTokenSource
    >>> with Client(StaticTokenSource("ya29.token")) as client:
    ...     bucket = client.bucket("my-bucket")
    ...     names = bucket.list_files("data/")
"""

__version__ = "0.1.0"

from .auth import (
    AccessToken,
    GoogleCredentialsTokenSource,
    StaticTokenSource,
    TokenManager,
    TokenSource,
)
from .core.exceptions import (
    AuthorizationError,
    DecodeError,
    GcsToolsError,
    RemoteStatusError,
    TransportError,
    ValidationError,
)
from .storage import (
    Bucket,
    Client,
    ClientConfig,
    Object,
    ObjectFolderList,
    ObjectResource,
    encode_path_segment,
    parse_gcs_path,
)

__all__ = [
    # Client surface
    "Bucket",
    "Client",
    "ClientConfig",
    "Object",
    "ObjectFolderList",
    "ObjectResource",
    "encode_path_segment",
    "parse_gcs_path",
    # Authorization
    "AccessToken",
    "GoogleCredentialsTokenSource",
    "StaticTokenSource",
    "TokenManager",
    "TokenSource",
    # Errors
    "AuthorizationError",
    "DecodeError",
    "GcsToolsError",
    "RemoteStatusError",
    "TransportError",
    "ValidationError",
]
