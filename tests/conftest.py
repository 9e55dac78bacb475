"""Test configuration and fixtures for bucket-lister."""

from typing import Optional

import boto3
import pytest
from moto import mock_aws

from bucket_lister.core.exceptions import UpstreamListingError
from bucket_lister.objectstorage import S3ClientConfig
from bucket_lister.pagination import PageTokenStore, PaginationCoordinator
from bucket_lister.schemas import ListedPage, ObjectEntry

TEST_BUCKET = "test-bucket"


class FakeBackend:
    """In-memory listing backend keyed by continuation token."""

    def __init__(
        self,
        pages: Optional[dict[str, ListedPage]] = None,
        error: Optional[Exception] = None,
    ):
        self.pages = pages or {}
        self.error = error
        self.calls: list[tuple[str, str, int, str]] = []

    def list_page(
        self, bucket: str, prefix: str, limit: int, continuation_token: str
    ) -> ListedPage:
        self.calls.append((bucket, prefix, limit, continuation_token))
        if self.error is not None:
            raise self.error
        return self.pages.get(continuation_token, ListedPage())

    def check_access(self, bucket: str, prefix: str) -> bool:
        if self.error is not None:
            raise self.error
        return True


def make_page(names: list[str], next_token: str = "") -> ListedPage:
    """Build a backend page from object names."""
    return ListedPage(
        entries=[ObjectEntry(name=name) for name in names],
        next_continuation_token=next_token,
    )


@pytest.fixture
def token_store():
    """An isolated token store per test."""
    return PageTokenStore()


@pytest.fixture
def fake_backend():
    """A three-page backend: T1 leads to page 2, T2 to page 3."""
    return FakeBackend(
        pages={
            "": make_page(["a.txt", "b.txt"], next_token="T1"),
            "T1": make_page(["c.txt", "d.txt"], next_token="T2"),
            "T2": make_page(["e.txt"]),
        }
    )


@pytest.fixture
def failing_backend():
    """A backend whose every call fails."""
    return FakeBackend(error=UpstreamListingError("Failed to list objects: boom"))


@pytest.fixture
def coordinator(fake_backend, token_store):
    """Coordinator over the fake backend."""
    return PaginationCoordinator(
        backend=fake_backend,
        bucket=TEST_BUCKET,
        token_store=token_store,
    )


@pytest.fixture
def aws_credentials(monkeypatch, tmp_path):
    """Isolate boto3 from any real AWS configuration."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test_key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test_secret")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws_config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws_creds"))


@pytest.fixture
def s3_config():
    """Explicit test credentials for the mocked S3."""
    return S3ClientConfig(
        access_key_id="test_key",
        secret_access_key="test_secret",
        region_name="us-east-1",
    )


@pytest.fixture
def s3_bucket(aws_credentials):
    """A mocked S3 bucket holding five objects under data/."""
    with mock_aws():
        s3_client = boto3.client("s3", region_name="us-east-1")
        s3_client.create_bucket(Bucket=TEST_BUCKET)
        for i in range(1, 6):
            s3_client.put_object(
                Bucket=TEST_BUCKET, Key=f"data/file{i}.txt", Body=b"content"
            )
        s3_client.put_object(Bucket=TEST_BUCKET, Key="other/readme.md", Body=b"x")
        yield s3_client
