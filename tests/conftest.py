#!/usr/bin/env python3
"""Pytest fixtures for relayclip tests.

Provides a relay configuration, a fresh dedup state and an in-memory
clipboard that records writes.
"""

import json

import pytest

from relayclip.config import RelayConfig
from relayclip.dedup import DedupFilter
from relayclip.dedup_state import DedupState


class FakeClipboard:
    """In-memory clipboard source and sink."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.writes: list[str] = []
        self.read_error: Exception | None = None
        self.write_error: Exception | None = None

    def read_text(self) -> str:
        if self.read_error is not None:
            raise self.read_error
        return self.text

    def write_text(self, text: str) -> None:
        if self.write_error is not None:
            raise self.write_error
        self.writes.append(text)
        self.text = text


def make_frame(title: str, message: str, event: str = "message") -> str:
    """Build an ntfy subscription frame."""
    return json.dumps({"id": "abc", "event": event, "topic": "t", "title": title, "message": message})


@pytest.fixture
def relay_config() -> RelayConfig:
    """Configuration for client "A" on topic "t" without a token."""
    return RelayConfig(client_name="A", url_base="ntfy.example", url_topic="t")


@pytest.fixture
def dedup_state() -> DedupState:
    """Create a fresh DedupState instance for testing."""
    return DedupState()


@pytest.fixture
def dedup_filter(relay_config: RelayConfig, dedup_state: DedupState) -> DedupFilter:
    """DedupFilter for client "A" bound to the dedup_state fixture."""
    return DedupFilter(relay_config.client_name, dedup_state)


@pytest.fixture
def clipboard() -> FakeClipboard:
    """Empty in-memory clipboard."""
    return FakeClipboard()
