"""Command-line interface for bucket-lister.

Commands:
    - serve: Run the HTTP listing service
    - list: Fetch one page of a bucket listing and print it as JSON
    - verify-access: Verify the bucket can be listed

Settings come from BUCKET_LISTER_* environment variables; the options below
override them for a single invocation.
"""

from typing import Annotated, Any, Optional

import typer
import uvicorn

from . import __version__
from .api import build_coordinator, create_app
from .core import Settings, settings
from .core.exceptions import BucketListerError
from .objectstorage import S3ClientManager
from .schemas import ListingRequest

app = typer.Typer(
    name="bucket-lister",
    help="Paginated read-only listing of objects in an S3-compatible bucket.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"bucket-lister {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    Bucket-Lister: numbered pages over token-based bucket listings.
    """
    pass


BucketOption = Annotated[
    Optional[str],
    typer.Option(
        "--bucket", help="Bucket to list, as s3://bucket or s3://bucket/prefix"
    ),
]
RegionOption = Annotated[
    Optional[str], typer.Option("--region", help="AWS region name")
]
EndpointUrlOption = Annotated[
    Optional[str], typer.Option("--endpoint-url", help="Custom S3 endpoint URL")
]
AwsProfileOption = Annotated[
    Optional[str], typer.Option("--aws-profile", help="AWS CLI profile name")
]


def _effective_settings(
    bucket: Optional[str] = None,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    aws_profile: Optional[str] = None,
) -> Settings:
    """Apply command-line overrides on top of the environment settings."""
    overrides: dict[str, Any] = {}
    if bucket:
        bucket_name, prefix = S3ClientManager.parse_s3_path(bucket)
        overrides.update({"bucket_name": bucket_name, "prefix": prefix})
    if region_name:
        overrides["region_name"] = region_name
    if endpoint_url:
        overrides["endpoint_url"] = endpoint_url
    if aws_profile:
        overrides["aws_profile"] = aws_profile
    return settings.model_copy(update=overrides)


@app.command("serve")
def serve_cmd(
    host: Annotated[
        Optional[str], typer.Option("--host", help="Interface to bind")
    ] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="Port to bind")] = None,
    bucket: BucketOption = None,
    region_name: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: AwsProfileOption = None,
) -> None:
    """
    Run the HTTP listing service.

    Example:
        bucket-lister serve --bucket s3://my-bucket --port 8080
    """
    try:
        effective = _effective_settings(bucket, region_name, endpoint_url, aws_profile)
    except BucketListerError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    uvicorn.run(
        create_app(settings=effective),
        host=host or effective.host,
        port=port or effective.port,
        log_config=None,
    )


@app.command("list")
def list_cmd(
    page: Annotated[int, typer.Option("--page", help="1-based page number")] = 1,
    limit: Annotated[
        Optional[int], typer.Option("--limit", help="Entries per page")
    ] = None,
    page_token: Annotated[
        Optional[str],
        typer.Option("--page-token", help="Continuation token for this page"),
    ] = None,
    bucket: BucketOption = None,
    region_name: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: AwsProfileOption = None,
) -> None:
    """
    Fetch one page of the bucket listing and print it as JSON.

    Examples:
        bucket-lister list --bucket s3://my-bucket/data --limit 5
        bucket-lister list --page 2 --limit 5 --page-token <token>
    """
    try:
        effective = _effective_settings(bucket, region_name, endpoint_url, aws_profile)
        coordinator = build_coordinator(effective)
        request = ListingRequest.from_query(
            limit=None if limit is None else str(limit),
            page=str(page),
            page_token=page_token,
            default_limit=effective.default_limit,
        )
        response = coordinator.list_page(request)
    except BucketListerError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(response.model_dump_json(indent=2))


@app.command("verify-access")
def verify_access_cmd(
    bucket: BucketOption = None,
    region_name: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    aws_profile: AwsProfileOption = None,
) -> None:
    """
    Verify the configured bucket can be listed.

    Example:
        bucket-lister verify-access --bucket s3://my-bucket --aws-profile myprofile
    """
    try:
        effective = _effective_settings(bucket, region_name, endpoint_url, aws_profile)
        coordinator = build_coordinator(effective)
        coordinator.check_access()
    except BucketListerError as e:
        typer.echo(f"✗ Access denied: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(
        f"✓ Access verified: list permission granted for {effective.bucket_name}"
    )


if __name__ == "__main__":
    app()
