"""Request and response schemas for bucket listing."""

import re
from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

DEFAULT_LIMIT = 10
FIRST_PAGE = 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _parse_positive_int(value: Optional[str], default: int) -> int:
    """Parse a query value as a positive integer, falling back to ``default``.

    Only plain ASCII decimal digits with an optional sign are accepted; digit
    separators, surrounding whitespace and non-ASCII digits are not numbers.
    """
    if value is None or not _INTEGER_RE.fullmatch(value):
        return default
    parsed = int(value)
    return parsed if parsed > 0 else default


class ObjectEntry(BaseModel):
    """A single listed object."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Object key")


@dataclass(frozen=True)
class ListedPage:
    """One page as returned by the storage backend."""

    entries: list[ObjectEntry] = field(default_factory=list)
    next_continuation_token: str = ""


class ListingRequest(BaseModel):
    """A normalized request for one page of the listing."""

    page: int = Field(FIRST_PAGE, ge=1, description="1-based page number")
    limit: int = Field(DEFAULT_LIMIT, gt=0, description="Maximum entries per page")
    continuation_token: str = Field(
        "", description="Backend continuation token; empty for the first page"
    )

    @classmethod
    def from_query(
        cls,
        limit: Optional[str] = None,
        page: Optional[str] = None,
        page_token: Optional[str] = None,
        default_limit: int = DEFAULT_LIMIT,
    ) -> "ListingRequest":
        """Build a request from raw query-string values.

        Malformed or non-positive numbers are replaced with their defaults
        instead of being rejected.
        """
        return cls(
            page=_parse_positive_int(page, FIRST_PAGE),
            limit=_parse_positive_int(limit, default_limit),
            continuation_token=page_token or "",
        )


class ListingResponse(BaseModel):
    """One page of results with navigation links."""

    limit: int
    next_page: Optional[str] = None
    page: int
    prev_page: Optional[str] = None
    results: list[ObjectEntry] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        """Number of entries in this page."""
        return len(self.results)
