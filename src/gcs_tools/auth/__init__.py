"""Access token sources and the per-client token manager."""

from .token_manager import (
    AccessToken,
    GoogleCredentialsTokenSource,
    StaticTokenSource,
    TokenManager,
    TokenSource,
)

__all__ = [
    "AccessToken",
    "GoogleCredentialsTokenSource",
    "StaticTokenSource",
    "TokenManager",
    "TokenSource",
]
