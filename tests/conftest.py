"""Shared pytest fixtures for sqlparts unit and integration tests."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from sqlparts.config import RenderConfig

FIXED_NOW = datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc)


@pytest.fixture()
def fixed_now() -> datetime:
    """A stable "current time" for clock-dependent helpers."""
    return FIXED_NOW


@pytest.fixture()
def clock(fixed_now: datetime):
    """Clock callable returning :func:`fixed_now` and counting calls."""

    class _Clock:
        calls = 0

        def __call__(self) -> datetime:
            self.calls += 1
            return fixed_now

    return _Clock()


@pytest.fixture(scope="session")
def format_config() -> RenderConfig:
    """Render config for format-paramstyle drivers (``%s`` markers)."""
    return RenderConfig(placeholder="%s")
