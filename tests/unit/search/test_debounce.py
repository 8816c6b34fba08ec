"""Tests for search.debounce module."""

import threading
from unittest.mock import Mock

from search.debounce import SearchDebouncer


class TestSearchDebouncer:
    def test_only_last_query_searched(self) -> None:
        done = threading.Event()
        delivered = []

        def on_results(query: str, results: list) -> None:
            delivered.append((query, results))
            done.set()

        search = Mock(side_effect=lambda q: [q.upper()])
        debouncer = SearchDebouncer(search, on_results, delay=0.05)
        for query in ("t", "tr", "tri"):
            debouncer.submit(query)

        assert done.wait(2)
        search.assert_called_once_with("tri")
        assert delivered == [("tri", ["TRI"])]

    def test_blank_query_clears_immediately(self) -> None:
        search = Mock()
        on_results = Mock()
        debouncer = SearchDebouncer(search, on_results, delay=10)
        debouncer.submit("tri")
        debouncer.submit("  ")
        on_results.assert_called_once_with("  ", [])
        search.assert_not_called()

    def test_failed_search_delivers_empty(self) -> None:
        done = threading.Event()
        on_results = Mock(side_effect=lambda q, r: done.set())
        debouncer = SearchDebouncer(Mock(side_effect=RuntimeError("down")), on_results, delay=0.01)
        debouncer.submit("tri")
        assert done.wait(2)
        on_results.assert_called_once_with("tri", [])

    def test_cancel(self) -> None:
        search = Mock()
        debouncer = SearchDebouncer(search, Mock(), delay=0.05)
        debouncer.submit("tri")
        debouncer.cancel()
        threading.Event().wait(0.15)
        search.assert_not_called()
