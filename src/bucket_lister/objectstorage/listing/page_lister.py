"""Single-page S3 object listing."""

from bucket_lister.core import get_logger, get_tracer
from bucket_lister.core.exceptions import BucketListerError, UpstreamListingError
from bucket_lister.objectstorage.clients import S3ClientConfig, S3ClientManager
from bucket_lister.schemas import ListedPage, ObjectEntry

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class S3PageLister:
    """Lists bucket objects one page at a time via ``list_objects_v2``."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 page lister.

        Args:
            config: S3 client configuration
        """
        self.client_manager = S3ClientManager(config)
        logger.info("S3 page lister initialized")

    def list_page(
        self, bucket: str, prefix: str, limit: int, continuation_token: str
    ) -> ListedPage:
        """List a single page of objects.

        Exactly one ``list_objects_v2`` call is made; short pages are returned
        as they are.

        Args:
            bucket: Bucket name
            prefix: Key prefix to list under
            limit: Maximum number of objects in the page
            continuation_token: Token from the previous page, empty for the first

        Returns:
            ListedPage with the entries in backend order and the next token

        Raises:
            ConfigurationError: If the S3 client cannot be created
            UpstreamListingError: If the listing call fails
        """
        logger.info(
            "Listing S3 page",
            bucket=bucket,
            prefix=prefix,
            limit=limit,
            has_token=bool(continuation_token),
        )

        with tracer.start_as_current_span("s3.list_page") as span:
            span.set_attribute("s3.bucket", bucket)
            span.set_attribute("s3.prefix", prefix)
            span.set_attribute("s3.max_keys", limit)

            try:
                client = self.client_manager.client

                kwargs = {"Bucket": bucket, "Prefix": prefix, "MaxKeys": limit}
                if continuation_token:
                    kwargs["ContinuationToken"] = continuation_token

                response = client.list_objects_v2(**kwargs)

                entries = [
                    ObjectEntry(name=obj["Key"]) for obj in response.get("Contents", [])
                ]
                next_token = response.get("NextContinuationToken") or ""

            except BucketListerError:
                raise
            except Exception as e:
                error_msg = f"Failed to list objects in bucket '{bucket}': {e}"
                logger.error(error_msg, error=str(e))
                raise UpstreamListingError(error_msg)

            span.set_attribute("s3.object_count", len(entries))

        logger.info(
            "S3 page listed",
            bucket=bucket,
            prefix=prefix,
            object_count=len(entries),
            has_next=bool(next_token),
        )
        return ListedPage(entries=entries, next_continuation_token=next_token)

    def check_access(self, bucket: str, prefix: str = "") -> bool:
        """Verify the bucket can be listed.

        Returns:
            True if a one-key listing succeeds

        Raises:
            ConfigurationError: If the S3 client cannot be created
            UpstreamListingError: If the listing call fails
        """
        logger.info("Verifying S3 list access", bucket=bucket, prefix=prefix)

        try:
            client = self.client_manager.client
            client.list_objects_v2(Bucket=bucket, Prefix=prefix, MaxKeys=1)
        except BucketListerError:
            raise
        except Exception as e:
            error_msg = f"S3 list access verification failed for bucket '{bucket}': {e}"
            logger.warning(error_msg)
            raise UpstreamListingError(error_msg)

        logger.info("S3 list access verified", bucket=bucket)
        return True
