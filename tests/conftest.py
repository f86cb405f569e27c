"""Shared pytest fixtures for the full embednorm test suite."""

from __future__ import annotations

import pytest

from tests.fakes import FakeClipboard, RecordingNotifier


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    """Provide a fresh in-memory clipboard."""

    return FakeClipboard()


@pytest.fixture
def notifier() -> RecordingNotifier:
    """Provide a fresh recording notifier."""

    return RecordingNotifier()
