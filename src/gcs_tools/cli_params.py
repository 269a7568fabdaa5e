"""Shared CLI parameter definitions.

Reusable Typer annotations so that every command exposes the same
authorization and endpoint options with the same names and help text.

Usage:
    @app.command()
    def my_command(
        path: GcsPathArgument,
        token: TokenOption = None,
        credentials: CredentialsOption = None,
    ):
        pass
"""

from typing import Annotated, Optional

import typer

GcsPathArgument = Annotated[
    str, typer.Argument(help="Cloud Storage path, e.g. gs://bucket/prefix")
]

# Authorization
TokenOption = Annotated[
    Optional[str],
    typer.Option(
        "--token",
        envvar="GCS_TOOLS_TOKEN",
        help="Static bearer token (skips credential lookup)",
    ),
]
CredentialsOption = Annotated[
    Optional[str],
    typer.Option(
        "--credentials",
        help="Path to a service account JSON key (default: application credentials)",
    ),
]

# Endpoints and transport
ApiEndpointOption = Annotated[
    Optional[str],
    typer.Option("--api-endpoint", help="Override the JSON API base URL"),
]
UploadEndpointOption = Annotated[
    Optional[str],
    typer.Option("--upload-endpoint", help="Override the upload base URL"),
]
TimeoutOption = Annotated[
    Optional[float],
    typer.Option("--timeout", help="Request timeout in seconds"),
]
