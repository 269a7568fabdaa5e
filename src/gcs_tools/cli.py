"""Command-line interface for gcs-tools.

Commands:
    - list: List files and folders under a gs:// prefix
    - get: Show metadata for a single object
    - put: Upload a local file as an object
    - delete-bucket: Delete a bucket

Authorization uses --token when given, otherwise a service account key from
--credentials, otherwise application default credentials.
"""

import mimetypes
from pathlib import Path
from typing import Annotated, Optional

import typer

from . import __version__
from .auth import GoogleCredentialsTokenSource, StaticTokenSource, TokenSource
from .cli_params import (
    ApiEndpointOption,
    CredentialsOption,
    GcsPathArgument,
    TimeoutOption,
    TokenOption,
    UploadEndpointOption,
)
from .core import settings
from .core.exceptions import ValidationError
from .storage import Client, ClientConfig, parse_gcs_path

app = typer.Typer(
    name="gcs-tools",
    help="Cloud Storage object operations from the command line.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"gcs-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    GCS-Tools: list, fetch, upload and delete in Google Cloud Storage.
    """
    pass


def _create_client(
    token: Optional[str] = None,
    credentials: Optional[str] = None,
    api_endpoint: Optional[str] = None,
    upload_endpoint: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Client:
    """Create a storage client from CLI options, falling back to settings."""
    source: TokenSource
    if token:
        source = StaticTokenSource(token)
    else:
        source = GoogleCredentialsTokenSource(
            credentials_path=credentials or settings.credentials_path
        )

    overrides = {
        "api_endpoint": api_endpoint,
        "upload_endpoint": upload_endpoint,
        "timeout": timeout,
    }
    config = ClientConfig(**{k: v for k, v in overrides.items() if v is not None})
    return Client(source, config=config)


@app.command("list")
def list_cmd(
    path: GcsPathArgument,
    token: TokenOption = None,
    credentials: CredentialsOption = None,
    api_endpoint: ApiEndpointOption = None,
    upload_endpoint: UploadEndpointOption = None,
    timeout: TimeoutOption = None,
) -> None:
    """
    List files and folders directly under a prefix.

    Examples:
        gcs-tools list gs://bucket/
        gcs-tools list gs://bucket/data/ --credentials key.json
    """
    try:
        bucket_name, prefix = parse_gcs_path(path)
        with _create_client(
            token, credentials, api_endpoint, upload_endpoint, timeout
        ) as client:
            items = client.bucket(bucket_name).list_files(prefix)

        if items:
            typer.echo(f"Found {len(items)} entries:")
            for item in items:
                typer.echo(f"  {item}")
        else:
            typer.echo("No entries found.")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("get")
def get_cmd(
    path: GcsPathArgument,
    token: TokenOption = None,
    credentials: CredentialsOption = None,
    api_endpoint: ApiEndpointOption = None,
    upload_endpoint: UploadEndpointOption = None,
    timeout: TimeoutOption = None,
) -> None:
    """
    Show metadata for one object.

    Example:
        gcs-tools get gs://bucket/data/file.txt
    """
    try:
        bucket_name, name = parse_gcs_path(path)
        if not name:
            raise ValidationError(f"GCS path has no object name: {path}")

        with _create_client(
            token, credentials, api_endpoint, upload_endpoint, timeout
        ) as client:
            obj = client.bucket(bucket_name).object(name)

        typer.echo(f"Object: {obj.uri}")
        if obj.resource is not None:
            if obj.resource.size is not None:
                typer.echo(f"Size: {obj.resource.size:,} bytes")
            if obj.resource.content_type:
                typer.echo(f"Content type: {obj.resource.content_type}")
            if obj.resource.updated:
                typer.echo(f"Updated: {obj.resource.updated}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("put")
def put_cmd(
    path: GcsPathArgument,
    source: Annotated[
        Path,
        typer.Argument(
            help="Local file to upload", exists=True, dir_okay=False, readable=True
        ),
    ],
    content_type: Annotated[
        Optional[str],
        typer.Option(
            "--content-type", help="MIME type (default: guessed from file name)"
        ),
    ] = None,
    token: TokenOption = None,
    credentials: CredentialsOption = None,
    api_endpoint: ApiEndpointOption = None,
    upload_endpoint: UploadEndpointOption = None,
    timeout: TimeoutOption = None,
) -> None:
    """
    Upload a local file.

    Example:
        gcs-tools put gs://bucket/data/report.csv ./report.csv
    """
    try:
        bucket_name, name = parse_gcs_path(path)
        if not name:
            raise ValidationError(f"GCS path has no object name: {path}")

        mime_type = (
            content_type
            or mimetypes.guess_type(source.name)[0]
            or "application/octet-stream"
        )
        data = source.read_bytes()

        with _create_client(
            token, credentials, api_endpoint, upload_endpoint, timeout
        ) as client:
            obj = client.bucket(bucket_name).create_object(name, data, mime_type)

        typer.echo(f"Uploaded {len(data):,} bytes to {obj.uri}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("delete-bucket")
def delete_bucket_cmd(
    path: GcsPathArgument,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")
    ] = False,
    token: TokenOption = None,
    credentials: CredentialsOption = None,
    api_endpoint: ApiEndpointOption = None,
    upload_endpoint: UploadEndpointOption = None,
    timeout: TimeoutOption = None,
) -> None:
    """
    Delete a bucket. The bucket must already be empty.

    Example:
        gcs-tools delete-bucket gs://old-bucket --yes
    """
    try:
        bucket_name, _ = parse_gcs_path(path)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not yes:
        typer.confirm(f"Delete bucket {bucket_name}?", abort=True)

    try:
        with _create_client(
            token, credentials, api_endpoint, upload_endpoint, timeout
        ) as client:
            client.bucket(bucket_name).delete()

        typer.echo(f"✓ Deleted bucket {bucket_name}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
