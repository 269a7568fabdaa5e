"""Core utilities and shared components for gcs-tools."""

from .config import settings
from .exceptions import GcsToolsError, ValidationError
from .observability import get_logger, get_tracer

__all__ = ["settings", "GcsToolsError", "ValidationError", "get_logger", "get_tracer"]
