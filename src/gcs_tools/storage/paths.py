"""URL path helpers for bucket and object names."""

from urllib.parse import urlparse

from gcs_tools.core.exceptions import ValidationError


def encode_path_segment(value: str) -> str:
    """Percent-encode every byte of ``value`` that is not an ASCII letter or digit."""
    return "".join(
        chr(byte) if chr(byte).isascii() and chr(byte).isalnum() else f"%{byte:02X}"
        for byte in value.encode("utf-8")
    )


def parse_gcs_path(gcs_path: str) -> tuple[str, str]:
    """Parse a ``gs://bucket/name`` path into bucket and object/prefix parts.

    Raises:
        ValidationError: If path format is invalid
    """
    if not gcs_path.startswith("gs://"):
        raise ValidationError(f"GCS path must start with 'gs://': {gcs_path}")

    parsed = urlparse(gcs_path)
    bucket = parsed.netloc
    if not bucket:
        raise ValidationError(f"Invalid GCS path, missing bucket: {gcs_path}")

    return bucket, parsed.path.lstrip("/")
