"""
Shared pytest fixtures and configuration for slicepage tests.

This module provides the record collections used across the unit tests:
plain dicts, pydantic models and attribute objects.
"""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel


class Article(BaseModel):
    slug: str
    title: str


@dataclass
class Event:
    event_id: str
    kind: str


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with no external dependencies")


@pytest.fixture
def records() -> list[dict[str, str]]:
    """Five dict records with ids "1".."5", in order."""
    return [{"id": str(i)} for i in range(1, 6)]


@pytest.fixture
def long_records() -> list[dict[str, str]]:
    """Twelve dict records with zero-padded ids so string order matches list order."""
    return [{"id": f"{i:02d}", "name": f"user-{i}"} for i in range(1, 13)]


@pytest.fixture
def articles() -> list[Article]:
    """Pydantic records keyed by slug."""
    return [Article(slug=f"post-{c}", title=f"Post {c.upper()}") for c in "abcdef"]


@pytest.fixture
def events() -> list[Event]:
    """Dataclass records keyed by event_id."""
    return [Event(event_id=f"evt-{i}", kind="click") for i in range(1, 8)]


def ids(page) -> list[str]:
    """Helper returning the ids of a page of dict records."""
    return [record["id"] for record in page.data]
