"""Shared fixtures for crud unit tests"""

import itertools
from datetime import datetime, timedelta, timezone

import pytest

from docstore.crud.memory_repo import DocumentStore


START = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeClock:
    """Returns START, then advances one hour per call."""

    def __init__(self):
        self.now = START

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(hours=1)
        return current


@pytest.fixture(name="clock")
def clock_fixture():
    return FakeClock()


@pytest.fixture(name="store")
def store_fixture(clock):
    """Store with sequential ids (doc-1, doc-2, ...) and a one-hour-step clock."""
    counter = itertools.count(1)
    return DocumentStore(id_factory=lambda: f"doc-{next(counter)}", clock=clock)
