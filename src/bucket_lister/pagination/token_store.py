"""Thread-safe mapping from page number to the token for the following page."""

import threading
from typing import Optional


class PageTokenStore:
    """Remembers, for each page served, the token that produced the next page.

    The entry for page ``p`` is the continuation token that fetches page
    ``p + 1``. Entries are overwritten on every request for that page and are
    never evicted.
    """

    def __init__(self) -> None:
        self._tokens: dict[int, str] = {}
        self._lock = threading.Lock()

    def put(self, page_number: int, token: str) -> None:
        with self._lock:
            self._tokens[page_number] = token

    def get(self, page_number: int) -> Optional[str]:
        with self._lock:
            return self._tokens.get(page_number)

    def __contains__(self, page_number: object) -> bool:
        with self._lock:
            return page_number in self._tokens

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)
