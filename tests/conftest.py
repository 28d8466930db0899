"""Shared pytest fixtures for date range validation tests."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterator

import pytest

from date_range_validation.config import get_settings

_SETTINGS_ENV_VARS = (
    "DRV_LOG_LEVEL",
    "DRV_LOG_JSON",
    "DRV_FIRST_ALLOWED_DATE",
    "DRV_LAST_ALLOWED_DATE",
    "DRV_FORMAT_SCOPE",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop DRV_* variables from the environment and reset the settings cache."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def first_allowed_date() -> datetime:
    return datetime(2022, 1, 1)


@pytest.fixture
def last_allowed_date() -> datetime:
    today = date.today()
    return datetime(today.year, today.month, today.day)
