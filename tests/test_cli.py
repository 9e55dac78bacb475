"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from bucket_lister import __version__
from bucket_lister.cli import app
from bucket_lister.core import Settings

from .conftest import TEST_BUCKET

runner = CliRunner()


@pytest.fixture
def cli_settings(monkeypatch):
    """Point the CLI at the mocked bucket with test credentials."""
    settings = Settings(
        bucket_name=TEST_BUCKET,
        access_key_id="test_key",
        secret_access_key="test_secret",
        region_name="us-east-1",
    )
    monkeypatch.setattr("bucket_lister.cli.settings", settings)
    return settings


class TestCLI:
    """Test CLI commands against a mocked bucket."""

    def test_version(self):
        """--version prints the package version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"bucket-lister {__version__}" in result.stdout

    def test_list_first_page(self, s3_bucket, cli_settings):
        """list prints the first page as JSON."""
        result = runner.invoke(
            app, ["list", "--bucket", f"s3://{TEST_BUCKET}/data/", "--limit", "2"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["page"] == 1
        assert data["limit"] == 2
        assert data["total"] == 2
        assert data["prev_page"] is None
        assert data["next_page"] is not None

    def test_list_uses_default_limit(self, s3_bucket, cli_settings):
        """Without --limit the default of 10 is used."""
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["limit"] == 10
        assert data["total"] == 6

    def test_list_missing_bucket(self, s3_bucket, cli_settings):
        """Backend failures exit non-zero with the error message."""
        result = runner.invoke(app, ["list", "--bucket", "s3://no-such-bucket"])

        assert result.exit_code == 1
        assert "NoSuchBucket" in result.output

    def test_list_invalid_bucket_path(self, cli_settings):
        """A malformed --bucket value is rejected."""
        result = runner.invoke(app, ["list", "--bucket", "not-an-s3-path"])

        assert result.exit_code == 1
        assert "must start with 's3://'" in result.output

    def test_verify_access(self, s3_bucket, cli_settings):
        """verify-access succeeds for an existing bucket."""
        result = runner.invoke(app, ["verify-access"])

        assert result.exit_code == 0
        assert "Access verified" in result.stdout

    def test_verify_access_denied(self, s3_bucket, cli_settings):
        """verify-access fails for a missing bucket."""
        result = runner.invoke(
            app, ["verify-access", "--bucket", "s3://no-such-bucket"]
        )

        assert result.exit_code == 1
        assert "Access denied" in result.output

    @patch("bucket_lister.cli.uvicorn.run")
    def test_serve(self, mock_run, cli_settings):
        """serve starts uvicorn with the configured host and port overrides."""
        result = runner.invoke(app, ["serve", "--port", "9090"])

        assert result.exit_code == 0
        mock_run.assert_called_once()
        _, kwargs = mock_run.call_args
        assert kwargs["host"] == cli_settings.host
        assert kwargs["port"] == 9090
