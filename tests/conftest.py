"""Shared pytest fixtures for route resolver tests."""

from unittest.mock import Mock

import pytest

from route_resolver.matching import PathMatcher, PatternCache
from route_resolver.tree import Location


class MemoryHistory:
    """In-memory history backend that notifies listeners synchronously."""

    def __init__(self, path: str = "/"):
        self.location = Location.from_path(path)
        self.listeners: list = []
        self.unlisten_calls = 0

    def listen(self, listener):
        self.listeners.append(listener)

        def unlisten():
            self.unlisten_calls += 1
            if listener in self.listeners:
                self.listeners.remove(listener)

        return unlisten

    def push(self, path: str) -> Location:
        self.location = Location.from_path(path)
        for listener in list(self.listeners):
            listener(self.location)
        return self.location


@pytest.fixture
def make_history():
    """Factory for additional in-memory histories"""
    return MemoryHistory


@pytest.fixture
def history():
    """Create an in-memory history positioned at "/".

    Returns:
        MemoryHistory: History backend double
    """
    return MemoryHistory()


@pytest.fixture
def cache():
    """Create an empty pattern cache with the default limit."""
    return PatternCache()


@pytest.fixture
def matcher(cache):
    """Create a path matcher backed by a fresh cache.

    Returns:
        PathMatcher: Matcher isolated from the process-wide default
    """
    return PathMatcher(cache=cache)


@pytest.fixture
def mock_logger(monkeypatch):
    """Mock the tree loggers to capture warnings.

    Returns:
        Mock: Mocked logger shared by route, switch and controller modules
    """
    mock_log = Mock()
    monkeypatch.setattr("route_resolver.tree.route.logger", mock_log)
    monkeypatch.setattr("route_resolver.tree.switch.logger", mock_log)
    monkeypatch.setattr("route_resolver.tree.controller.logger", mock_log)
    return mock_log
