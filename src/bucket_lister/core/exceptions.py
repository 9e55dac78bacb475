"""Exception hierarchy for bucket-lister."""


class BucketListerError(Exception):
    """Base exception for all bucket-lister errors."""

    pass


class ValidationError(BucketListerError):
    """Raised when validation fails."""

    pass


class ConfigurationError(BucketListerError):
    """Raised when the storage client cannot be constructed."""

    pass


class UpstreamListingError(BucketListerError):
    """Raised when the storage backend fails to list a page."""

    pass
