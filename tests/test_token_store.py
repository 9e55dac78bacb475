"""Tests for the page token store."""

import threading

from bucket_lister.pagination import PageTokenStore


class TestPageTokenStore:
    """Test storing and retrieving page tokens."""

    def test_get_missing_page(self):
        """Unknown pages return None."""
        store = PageTokenStore()
        assert store.get(1) is None
        assert 1 not in store
        assert len(store) == 0

    def test_put_and_get(self):
        """Stored tokens are returned for their page."""
        store = PageTokenStore()
        store.put(1, "T1")
        store.put(2, "T2")

        assert store.get(1) == "T1"
        assert store.get(2) == "T2"
        assert len(store) == 2

    def test_put_overwrites(self):
        """A later request for the same page replaces its token."""
        store = PageTokenStore()
        store.put(3, "old")
        store.put(3, "new")

        assert store.get(3) == "new"
        assert len(store) == 1

    def test_empty_token_is_stored(self):
        """The last page records an empty token."""
        store = PageTokenStore()
        store.put(4, "")

        assert 4 in store
        assert store.get(4) == ""

    def test_stores_are_isolated(self):
        """Separate instances share no state."""
        first = PageTokenStore()
        second = PageTokenStore()
        first.put(1, "T1")

        assert second.get(1) is None

    def test_concurrent_writers(self):
        """Concurrent writes to distinct pages are all kept."""
        store = PageTokenStore()

        def writer(offset: int) -> None:
            for i in range(200):
                page = offset * 1000 + i
                store.put(page, f"token-{page}")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store) == 8 * 200
        assert store.get(7199) == "token-7199"
